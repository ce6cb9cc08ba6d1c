"""
Special Events Swagger Tabs

- Events Tab - Forecast vs actual financials
- Financial Models Tab - Cash flow and scenario analysis
- Risks Tab - Risk register
"""

from .event_finance_tab import events_ns
from .financial_model_tab import financial_models_ns
from .risk_tab import risks_ns

__all__ = [
    'events_ns',
    'financial_models_ns',
    'risks_ns',
]
