"""
Financial Models Tab Swagger Documentation

Contains the financial model API documentation including:
- Cash flow projection
- Time value analysis under a scenario
- Scenario comparison and sensitivity sweep
- Break-even point
"""

from flask_restx import Namespace, fields

# Create Financial Models Namespace
financial_models_ns = Namespace('financial-models', description='Cash flow projection and scenario analysis')

# Model Input Models
revenue_stream_model = financial_models_ns.model('RevenueStream', {
    'name': fields.String(description='Stream name', example='Tickets'),
    'value': fields.Float(required=True, description='Base value per period', example=1000),
    'type': fields.String(description='Stream type'),
    'frequency': fields.String(
        description='Nominal frequency (monthly when omitted)',
        enum=['weekly', 'monthly', 'quarterly', 'annually', 'one-time']
    )
})

cost_item_model = financial_models_ns.model('CostItem', {
    'name': fields.String(description='Cost name', example='Venue'),
    'value': fields.Float(required=True, description='Cost value per period', example=400),
    'type': fields.String(description='Cost type'),
    'category': fields.String(description='Cost category')
})

growth_model_model = financial_models_ns.model('GrowthModel', {
    'type': fields.String(required=True, description='Growth curve', enum=['linear', 'exponential', 'logarithmic']),
    'rate': fields.Float(description='Growth rate per period as a fraction', example=0.02),
    'seasonality': fields.List(fields.Float, description='12 monthly or 4 quarterly multipliers')
})

scenario_modifiers_model = financial_models_ns.model('ScenarioModifiers', {
    'name': fields.String(description='Scenario name', example='Custom'),
    'description': fields.String(description='Scenario description'),
    'revenue_multiplier': fields.Float(description='Multiplier applied to every revenue stream', example=1.1),
    'cost_multiplier': fields.Float(description='Multiplier applied to every cost item', example=0.95)
})

financial_model_request_model = financial_models_ns.model('FinancialModelRequest', {
    'name': fields.String(description='Model name', example='Summer Festival'),
    'revenue_streams': fields.List(fields.Nested(revenue_stream_model), description='Revenue streams'),
    'cost_items': fields.List(fields.Nested(cost_item_model), description='Cost items'),
    'growth_model': fields.Nested(growth_model_model, description='Growth model'),
    'assumptions': fields.Raw(description='Saved planner assumptions (revenue, costs, growthModel)'),
    'periods': fields.Integer(description='Number of periods (configured default when omitted)', example=12),
    'discount_rate': fields.Float(description='Discount rate per period as a fraction', example=0.1),
    'is_weekly': fields.Boolean(description='Project weekly periods', default=False),
    'scenario': fields.String(
        description='Scenario applied by the analysis endpoint',
        enum=['base', 'best_case', 'worst_case', 'custom'],
        default='base'
    ),
    'modifiers': fields.Nested(scenario_modifiers_model, description='Multipliers for a custom scenario')
})

break_even_request_model = financial_models_ns.model('BreakEvenRequest', {
    'fixed_costs': fields.Float(required=True, description='Fixed costs', example=1000),
    'variable_cost_per_unit': fields.Float(required=True, description='Variable cost per unit', example=5),
    'price_per_unit': fields.Float(required=True, description='Price per unit', example=15)
})

# Response Models
cash_flow_period_model = financial_models_ns.model('CashFlowPeriod', {
    'period': fields.Integer(description='1-based period index'),
    'period_name': fields.String(description='Period label (Month 1, Week 1)'),
    'revenue': fields.Float(description='Revenue'),
    'costs': fields.Float(description='Costs'),
    'net_income': fields.Float(description='Net income'),
    'operating_cash_flow': fields.Float(description='Operating cash flow'),
    'investing_cash_flow': fields.Float(description='Investing cash flow'),
    'financing_cash_flow': fields.Float(description='Financing cash flow'),
    'net_cash_flow': fields.Float(description='Net cash flow'),
    'cumulative_cash_flow': fields.Float(description='Cumulative cash flow')
})

cash_flow_data_model = financial_models_ns.model('CashFlowData', {
    'model': fields.String(description='Model name'),
    'periods': fields.Integer(description='Number of periods'),
    'is_weekly': fields.Boolean(description='Weekly periods'),
    'cash_flows': fields.List(fields.Nested(cash_flow_period_model), description='Projected periods'),
    'totals': fields.Raw(description='Revenue, costs, net income and ending cash')
})

cash_flow_response_model = financial_models_ns.model('CashFlowResponse', {
    'success': fields.Boolean(description='Operation success status'),
    'message': fields.String(description='Response message'),
    'data': fields.Nested(cash_flow_data_model, description='Projection')
})

financial_metrics_model = financial_models_ns.model('FinancialMetrics', {
    'npv': fields.Float(description='Net present value'),
    'irr': fields.Float(description='Internal rate of return (percent)'),
    'irr_converged': fields.Boolean(description='Whether the IRR search converged'),
    'payback_period': fields.Float(description='Payback period in periods'),
    'roi': fields.Float(description='Return on investment (percent)'),
    'total_revenue': fields.Float(description='Total revenue'),
    'total_costs': fields.Float(description='Total costs'),
    'total_profit': fields.Float(description='Total profit'),
    'profit_margin': fields.Float(description='Profit margin (percent)'),
    'break_even_units': fields.Float(description='Break-even units (null when unreachable)'),
    'break_even_revenue': fields.Float(description='Break-even revenue (null when unreachable)')
})

analysis_response_model = financial_models_ns.model('FinancialAnalysisResponse', {
    'success': fields.Boolean(description='Operation success status'),
    'message': fields.String(description='Response message'),
    'data': fields.Raw(description='Model name, scenario, modifiers, metrics and warnings')
})

scenarios_response_model = financial_models_ns.model('ScenarioAnalysisResponse', {
    'success': fields.Boolean(description='Operation success status'),
    'message': fields.String(description='Response message'),
    'data': fields.Raw(description='Base, best and worst case metrics with the sensitivity sweep')
})

break_even_response_model = financial_models_ns.model('BreakEvenResponse', {
    'success': fields.Boolean(description='Operation success status'),
    'message': fields.String(description='Response message'),
    'data': fields.Raw(description='Contribution margin, break-even units and revenue')
})

# Error Response Models
financial_models_validation_error_model = financial_models_ns.model('FinancialModelsValidationError', {
    'success': fields.Boolean(description='Always false'),
    'message': fields.String(description='Error message'),
    'data': fields.Raw(description='Validation error details')
})

financial_models_error_model = financial_models_ns.model('FinancialModelsError', {
    'success': fields.Boolean(description='Always false'),
    'message': fields.String(description='Error message'),
    'data': fields.Raw(description='Error code and details')
})

# Example Responses
EXAMPLE_BREAK_EVEN = {
    "success": True,
    "message": "Break-even point calculated successfully",
    "data": {
        "fixed_costs": 1000,
        "variable_cost_per_unit": 5,
        "price_per_unit": 15,
        "contribution_margin": 10,
        "units": 100,
        "revenue": 1500,
        "reachable": True
    }
}
