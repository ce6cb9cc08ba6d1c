"""
Tests for localized messages and configuration helpers
"""
import pytest

from src.common.localization import MESSAGES, get_message, normalize_locale
from src.config import TestingConfig, get_config, get_finance_defaults, validate_config


class TestLocalization:
    """get_message and normalize_locale"""

    @pytest.mark.parametrize('header,expected', [
        ('it-IT,it;q=0.9,en;q=0.8', 'it'),
        ('en-US', 'en'),
        ('IT', 'it'),
        ('fr-FR', 'en'),
        ('', 'en'),
        (None, 'en'),
    ])
    def test_normalize_locale(self, header, expected):
        assert normalize_locale(header) == expected

    def test_message_with_placeholder(self):
        assert get_message('risk_transition_success', 'en', status='resolved') == 'Risk status updated to resolved'

    def test_italian_message(self):
        assert get_message('validation_error', 'it') == 'Validazione non riuscita'

    def test_unknown_key_returns_key(self):
        assert get_message('no_such_message', 'en') == 'no_such_message'

    def test_missing_placeholder_returns_template(self):
        assert get_message('risk_transition_invalid', 'en') == 'Cannot move risk to status {status}'

    def test_catalogs_have_the_same_keys(self):
        assert set(MESSAGES['en']) == set(MESSAGES['it'])


class TestConfig:
    """Configuration helpers"""

    def test_get_config(self):
        assert get_config('testing') is TestingConfig
        assert get_config('unknown').__name__ == 'DevelopmentConfig'

    def test_validate_config(self):
        assert validate_config('testing') == (True, 'Configuration valid')

    def test_finance_defaults_from_app(self, app):
        defaults = get_finance_defaults(app.config)
        assert defaults == {
            'periods': 36,
            'max_periods': 120,
            'discount_rate': 0.1,
            'fnb_cogs_pct': 30.0,
            'merch_cogs_pct': 50.0,
        }

    def test_finance_defaults_from_mapping(self):
        defaults = get_finance_defaults({'DEFAULT_PROJECTION_PERIODS': 24})
        assert defaults['periods'] == 24
        assert defaults['discount_rate'] == 0.1

    def test_testing_config(self, app):
        assert app.config['TESTING'] is True
        assert app.config['RATELIMIT_ENABLED'] is False
        assert app.config['CACHE_TYPE'] == 'NullCache'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
