"""
Pytest Configuration
Provides the application, client and payload fixtures shared by the test suite
"""
import os
import copy
import pytest

# Set test environment before the app is imported
os.environ['FLASK_ENV'] = 'testing'

from src.app import create_app


# ============================================================================
# App and Client Fixtures
# ============================================================================

@pytest.fixture(scope='session')
def app():
    """Create Flask app for testing session"""
    app = create_app('testing')

    with app.app_context():
        yield app


@pytest.fixture(scope='function')
def client(app):
    """Create test client for making requests"""
    return app.test_client()


# ============================================================================
# Payload Fixtures
# ============================================================================

FORECAST_RECORD = {
    'forecast_ticket_sales': 25000,
    'forecast_fnb_revenue': 8000,
    'forecast_merch_revenue': 3000,
    'forecast_sponsorship_income': 10000,
    'forecast_other_income': 0,
    'forecast_staffing_costs': 6000,
    'forecast_venue_costs': 9000,
    'forecast_vendor_costs': 2000,
    'forecast_marketing_costs': 4000,
    'forecast_production_costs': 5000,
    'forecast_other_costs': 0,
    'estimated_attendance': 1000,
    'ticket_price': 25,
    'marketing_email_budget': 500,
    'marketing_social_budget': 1500,
    'marketing_influencer_budget': 1000,
    'marketing_paid_ads_budget': 800,
    'marketing_content_budget': 200,
}

ACTUAL_RECORD = {
    'actual_ticket_sales': 27500,
    'actual_fnb_revenue': 9000,
    'actual_merch_revenue': 2000,
    'actual_sponsorship_income': 10000,
    'actual_other_income': 500,
    'actual_staffing_costs': 6500,
    'actual_venue_costs': 9000,
    'actual_vendor_costs': 2500,
    'actual_marketing_costs': 3500,
    'actual_production_costs': 5500,
    'actual_other_costs': 0,
    'use_forecast_fnb_cogs_pct': True,
    'use_forecast_merch_cogs_pct': False,
    'manual_merch_cogs': 900,
    'actual_attendance': 1100,
    'average_ticket_price': 25,
    'success_rating': 8,
}

FINANCIAL_MODEL = {
    'name': 'Summer Festival',
    'revenue_streams': [
        {'name': 'Tickets', 'value': 1000, 'frequency': 'monthly'},
    ],
    'cost_items': [
        {'name': 'Venue', 'value': 400},
    ],
    'periods': 12,
    'discount_rate': 0.1,
}


@pytest.fixture
def forecast_record():
    """Forecast record payload"""
    return copy.deepcopy(FORECAST_RECORD)


@pytest.fixture
def actual_record():
    """Actual record payload"""
    return copy.deepcopy(ACTUAL_RECORD)


@pytest.fixture
def financial_model_payload():
    """Flat financial model payload: one monthly stream, one cost, no growth"""
    return copy.deepcopy(FINANCIAL_MODEL)


@pytest.fixture
def risk_payload():
    """Risk entry payload"""
    return {
        'title': 'Low ticket sales',
        'category': 'revenue',
        'priority': 'high',
        'status': 'identified',
        'probability': 60,
        'impact_score': 80,
    }
