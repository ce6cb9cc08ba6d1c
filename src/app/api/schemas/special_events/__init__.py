"""
Special Events Schemas Package

Contains Marshmallow schemas for the special events finance endpoints:
- Forecast and actual records
- Financial models and scenarios
- Risk register
"""

from .event_finance_schemas import (
    ForecastRecordSchema,
    ActualRecordSchema,
    VarianceRequestSchema,
    CogsRequestSchema,
    EventRecordsSchema,
    variance_request_schema,
    cogs_request_schema,
    event_records_schema,
)

from .financial_model_schemas import (
    RevenueStreamSchema,
    CostItemSchema,
    GrowthModelSchema,
    ScenarioModifiersSchema,
    FinancialModelRequestSchema,
    BreakEvenRequestSchema,
    financial_model_request_schema,
    break_even_request_schema,
)

from .risk_schemas import (
    RiskSchema,
    RiskSummaryRequestSchema,
    RiskTransitionRequestSchema,
    risk_schema,
    risk_summary_request_schema,
    risk_transition_request_schema,
)

__all__ = [
    # Event finance
    'ForecastRecordSchema',
    'ActualRecordSchema',
    'VarianceRequestSchema',
    'CogsRequestSchema',
    'EventRecordsSchema',
    'variance_request_schema',
    'cogs_request_schema',
    'event_records_schema',

    # Financial models
    'RevenueStreamSchema',
    'CostItemSchema',
    'GrowthModelSchema',
    'ScenarioModifiersSchema',
    'FinancialModelRequestSchema',
    'BreakEvenRequestSchema',
    'financial_model_request_schema',
    'break_even_request_schema',

    # Risks
    'RiskSchema',
    'RiskSummaryRequestSchema',
    'RiskTransitionRequestSchema',
    'risk_schema',
    'risk_summary_request_schema',
    'risk_transition_request_schema',
]
