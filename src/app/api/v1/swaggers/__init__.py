"""
Swagger Documentation Package - Tab-based Organization

This package contains Swagger documentation organized by tabs:
1. Health Tab - Health check operations
2. Events Tab - Special event forecast and actual financials
3. Financial Models Tab - Cash flow projection and scenario analysis
4. Risks Tab - Risk scoring and register summaries

Author: Flask Enterprise Template
License: MIT
"""

# Import from individual tab files
from .common.health_tab import (
    health_ns,
    basic_health_response_model,
    detailed_health_response_model,
    health_summary_response_model,
    EXAMPLE_BASIC_HEALTH,
    EXAMPLE_HEALTH_SUMMARY
)

from .special_events.event_finance_tab import (
    events_ns,
    forecast_record_model,
    actual_record_model,
    variance_request_model,
    cogs_request_model,
    event_records_model,
    variance_response_model,
    cogs_response_model,
    event_summary_response_model,
    event_roi_response_model,
    events_validation_error_model,
    events_internal_error_model,
    EXAMPLE_VARIANCE,
    EXAMPLE_EVENT_ROI
)

from .special_events.financial_model_tab import (
    financial_models_ns,
    revenue_stream_model,
    cost_item_model,
    growth_model_model,
    scenario_modifiers_model,
    financial_model_request_model,
    break_even_request_model,
    cash_flow_response_model,
    financial_metrics_model,
    analysis_response_model,
    scenarios_response_model,
    break_even_response_model,
    financial_models_validation_error_model,
    financial_models_error_model,
    EXAMPLE_BREAK_EVEN
)

from .special_events.risk_tab import (
    risks_ns,
    risk_model,
    risk_summary_request_model,
    risk_transition_request_model,
    risk_score_response_model,
    risk_summary_response_model,
    risk_transition_response_model,
    risks_validation_error_model,
    EXAMPLE_RISK_SCORE
)

__all__ = [
    # Namespaces
    'health_ns',
    'events_ns',
    'financial_models_ns',
    'risks_ns',

    # Health Models
    'basic_health_response_model',
    'detailed_health_response_model',
    'health_summary_response_model',

    # Event Finance Models
    'forecast_record_model',
    'actual_record_model',
    'variance_request_model',
    'cogs_request_model',
    'event_records_model',
    'variance_response_model',
    'cogs_response_model',
    'event_summary_response_model',
    'event_roi_response_model',
    'events_validation_error_model',
    'events_internal_error_model',

    # Financial Model Models
    'revenue_stream_model',
    'cost_item_model',
    'growth_model_model',
    'scenario_modifiers_model',
    'financial_model_request_model',
    'break_even_request_model',
    'cash_flow_response_model',
    'financial_metrics_model',
    'analysis_response_model',
    'scenarios_response_model',
    'break_even_response_model',
    'financial_models_validation_error_model',
    'financial_models_error_model',

    # Risk Models
    'risk_model',
    'risk_summary_request_model',
    'risk_transition_request_model',
    'risk_score_response_model',
    'risk_summary_response_model',
    'risk_transition_response_model',
    'risks_validation_error_model',

    # Example Responses
    'EXAMPLE_BASIC_HEALTH',
    'EXAMPLE_HEALTH_SUMMARY',
    'EXAMPLE_VARIANCE',
    'EXAMPLE_EVENT_ROI',
    'EXAMPLE_BREAK_EVEN',
    'EXAMPLE_RISK_SCORE'
]
