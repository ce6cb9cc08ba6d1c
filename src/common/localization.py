"""
Localized API Messages

Message catalog for the languages served by the API. Routes pick the
language from the ``Accept-Language`` header and resolve messages through
``get_message``:

    get_message('validation_error', 'it')
    get_message('risk_transition_invalid', 'en', status='resolved')

Unknown languages fall back to English and unknown keys return the key itself.

Author: Flask Enterprise Template
License: MIT
"""

import logging
from typing import Dict

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = 'en'

MESSAGES: Dict[str, Dict[str, str]] = {
    'en': {
        # Generic
        'validation_error': 'Validation failed',
        'internal_server_error': 'Internal server error',
        'request_body_required': 'Request body is required',
        'default_error': 'Something went wrong, please try again later',

        # Health
        'health_system_healthy': 'System is healthy',
        'health_check_failed': 'System health check failed',
        'health_detailed_success': 'Detailed health check completed',
        'health_detailed_failed': 'Detailed health check failed',
        'health_summary_success': 'Health summary retrieved successfully',
        'health_summary_failed': 'Health summary failed',
        'app_health_check_failed': 'Application health check failed: {error}',
        'performance_metrics_failed': 'Performance metrics collection failed: {error}',
        'secret_key_not_configured': 'SECRET_KEY is not configured',
        'configuration_healthy': 'Configuration is valid',

        # Event finance
        'event_variance_success': 'Variance calculated successfully',
        'event_cogs_success': 'COGS calculated successfully',
        'event_summary_success': 'Event financial summary calculated successfully',
        'event_roi_success': 'Event ROI calculated successfully',

        # Financial models
        'cash_flow_success': 'Cash flow projection generated successfully',
        'financial_analysis_success': 'Financial analysis completed successfully',
        'scenario_analysis_success': 'Scenario analysis completed successfully',
        'break_even_success': 'Break-even point calculated successfully',
        'financial_model_empty': 'A financial model needs at least one revenue stream or cost item',
        'irr_not_converged': 'IRR did not converge; the last estimate is reported',

        # Risks
        'risk_score_success': 'Risk score calculated successfully',
        'risk_summary_success': 'Risk summary calculated successfully',
        'risk_transition_success': 'Risk status updated to {status}',
        'risk_transition_invalid': 'Cannot move risk to status {status}',
    },
    'it': {
        # Generic
        'validation_error': 'Validazione non riuscita',
        'internal_server_error': 'Errore interno del server',
        'request_body_required': 'Il corpo della richiesta è obbligatorio',
        'default_error': 'Si è verificato un errore, riprova più tardi',

        # Health
        'health_system_healthy': 'Il sistema è operativo',
        'health_check_failed': 'Controllo di stato del sistema non riuscito',
        'health_detailed_success': 'Controllo di stato dettagliato completato',
        'health_detailed_failed': 'Controllo di stato dettagliato non riuscito',
        'health_summary_success': 'Riepilogo dello stato recuperato con successo',
        'health_summary_failed': 'Riepilogo dello stato non riuscito',
        'app_health_check_failed': 'Controllo applicazione non riuscito: {error}',
        'performance_metrics_failed': 'Raccolta metriche di performance non riuscita: {error}',
        'secret_key_not_configured': 'SECRET_KEY non configurata',
        'configuration_healthy': 'Configurazione valida',

        # Event finance
        'event_variance_success': 'Scostamento calcolato con successo',
        'event_cogs_success': 'Costo del venduto calcolato con successo',
        'event_summary_success': "Riepilogo finanziario dell'evento calcolato con successo",
        'event_roi_success': "ROI dell'evento calcolato con successo",

        # Financial models
        'cash_flow_success': 'Proiezione dei flussi di cassa generata con successo',
        'financial_analysis_success': 'Analisi finanziaria completata con successo',
        'scenario_analysis_success': 'Analisi degli scenari completata con successo',
        'break_even_success': 'Punto di pareggio calcolato con successo',
        'financial_model_empty': 'Un modello finanziario richiede almeno un ricavo o un costo',
        'irr_not_converged': "L'IRR non converge; viene riportata l'ultima stima",

        # Risks
        'risk_score_success': 'Punteggio di rischio calcolato con successo',
        'risk_summary_success': 'Riepilogo dei rischi calcolato con successo',
        'risk_transition_success': 'Stato del rischio aggiornato a {status}',
        'risk_transition_invalid': 'Impossibile portare il rischio allo stato {status}',
    },
}


def normalize_locale(locale: str = None) -> str:
    """
    Reduce an Accept-Language value to a supported language code.

    'it-IT,it;q=0.9,en;q=0.8' -> 'it'
    """
    if not locale:
        return DEFAULT_LOCALE
    primary = locale.split(',')[0].split(';')[0].strip().lower()
    language = primary.split('-')[0].split('_')[0]
    return language if language in MESSAGES else DEFAULT_LOCALE


def get_message(key: str, locale: str = None, **kwargs) -> str:
    """
    Resolve a localized message.

    Args:
        key: Message key
        locale: Accept-Language value or language code
        **kwargs: Placeholder values for the message template

    Returns:
        str: The formatted message
    """
    catalog = MESSAGES[normalize_locale(locale)]
    template = catalog.get(key) or MESSAGES[DEFAULT_LOCALE].get(key)
    if template is None:
        logger.debug(f"Missing localization key: {key}")
        return key

    if not kwargs:
        return template
    try:
        return template.format(**kwargs)
    except KeyError as e:
        logger.warning(f"Missing placeholder {e} for localization key: {key}")
        return template
