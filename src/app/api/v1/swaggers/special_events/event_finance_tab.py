"""
Event Finance Tab Swagger Documentation

Contains the special event finance API documentation including:
- Forecast vs actual variance
- COGS calculation
- Event financial summary
- Event ROI
"""

from flask_restx import Namespace, fields

# Create Events Namespace
events_ns = Namespace('events', description='Special event forecast and actual financials')

# Record Models
forecast_record_model = events_ns.model('ForecastRecord', {
    'forecast_ticket_sales': fields.Float(description='Ticket sales', example=25000),
    'forecast_fnb_revenue': fields.Float(description='Food & beverage revenue', example=8000),
    'forecast_merch_revenue': fields.Float(description='Merchandise revenue', example=3000),
    'forecast_sponsorship_income': fields.Float(description='Sponsorship income', example=10000),
    'forecast_other_income': fields.Float(description='Other income', example=500),
    'forecast_staffing_costs': fields.Float(description='Staffing costs', example=6000),
    'forecast_venue_costs': fields.Float(description='Venue costs', example=9000),
    'forecast_vendor_costs': fields.Float(description='Vendor costs', example=2500),
    'forecast_marketing_costs': fields.Float(description='Marketing costs', example=4000),
    'forecast_production_costs': fields.Float(description='Production costs', example=7000),
    'forecast_other_costs': fields.Float(description='Other costs', example=500),
    'forecast_fnb_cogs_pct': fields.Float(description='F&B COGS percentage (default 30)'),
    'forecast_merch_cogs_pct': fields.Float(description='Merchandise COGS percentage (default 50)'),
    'estimated_attendance': fields.Float(description='Estimated attendance', example=1000),
    'ticket_price': fields.Float(description='Ticket price', example=25),
    'marketing_email_budget': fields.Float(description='Email marketing budget'),
    'marketing_social_budget': fields.Float(description='Social media budget'),
    'marketing_influencer_budget': fields.Float(description='Influencer budget'),
    'marketing_paid_ads_budget': fields.Float(description='Paid ads budget'),
    'marketing_content_budget': fields.Float(description='Content budget'),
    'marketing_strategy': fields.String(description='Marketing strategy'),
    'notes': fields.String(description='Notes')
})

actual_record_model = events_ns.model('ActualRecord', {
    'actual_ticket_sales': fields.Float(description='Ticket sales', example=27000),
    'actual_fnb_revenue': fields.Float(description='Food & beverage revenue', example=9000),
    'actual_merch_revenue': fields.Float(description='Merchandise revenue', example=2500),
    'actual_sponsorship_income': fields.Float(description='Sponsorship income', example=10000),
    'actual_other_income': fields.Float(description='Other income'),
    'actual_staffing_costs': fields.Float(description='Staffing costs', example=6500),
    'actual_venue_costs': fields.Float(description='Venue costs', example=9000),
    'actual_vendor_costs': fields.Float(description='Vendor costs'),
    'actual_marketing_costs': fields.Float(description='Marketing costs', example=3500),
    'actual_production_costs': fields.Float(description='Production costs'),
    'actual_other_costs': fields.Float(description='Other costs'),
    'use_forecast_fnb_cogs_pct': fields.Boolean(description='Derive F&B COGS from the forecast percentage', default=True),
    'use_forecast_merch_cogs_pct': fields.Boolean(description='Derive merchandise COGS from the forecast percentage', default=True),
    'manual_fnb_cogs': fields.Float(description='Manual F&B COGS amount'),
    'manual_merch_cogs': fields.Float(description='Manual merchandise COGS amount'),
    'actual_attendance': fields.Float(description='Actual attendance', example=1100),
    'average_ticket_price': fields.Float(description='Average ticket price'),
    'success_rating': fields.Integer(description='Success rating (1-10)', min=1, max=10),
    'lessons_learned': fields.String(description='Lessons learned'),
    'general_notes': fields.String(description='General notes')
})

# Request Models
variance_request_model = events_ns.model('VarianceRequest', {
    'actual': fields.Float(required=True, description='Actual value', example=120),
    'forecast': fields.Float(required=True, description='Forecast value', example=100)
})

cogs_request_model = events_ns.model('CogsRequest', {
    'revenue': fields.Float(required=True, description='Product line revenue', example=10000),
    'use_forecast_pct': fields.Boolean(description='Apply a percentage instead of the manual amount', default=False),
    'forecast_pct': fields.Float(description='Percentage to apply (product default when omitted or 0)'),
    'manual_override': fields.Float(description='Manual COGS amount', default=0),
    'product': fields.String(description='Product line', enum=['fnb', 'merch'], default='fnb')
})

event_records_model = events_ns.model('EventRecordsRequest', {
    'forecast': fields.Nested(forecast_record_model, required=True, description='Forecast record'),
    'actual': fields.Nested(actual_record_model, description='Actual record'),
    'actuals': fields.List(fields.Nested(actual_record_model), description='Actual records (first entry is used)')
})

# Response Models
variance_model = events_ns.model('Variance', {
    'actual': fields.Float(description='Actual value'),
    'forecast': fields.Float(description='Forecast value'),
    'amount': fields.Float(description='Actual minus forecast'),
    'percentage': fields.Float(description='Variance percentage (0 when forecast is 0)')
})

variance_response_model = events_ns.model('VarianceResponse', {
    'success': fields.Boolean(description='Operation success status'),
    'message': fields.String(description='Response message'),
    'data': fields.Nested(variance_model, description='Variance')
})

cogs_response_model = events_ns.model('CogsResponse', {
    'success': fields.Boolean(description='Operation success status'),
    'message': fields.String(description='Response message'),
    'data': fields.Raw(description='COGS, percentage applied, gross profit and gross margin')
})

event_summary_response_model = events_ns.model('EventSummaryResponse', {
    'success': fields.Boolean(description='Operation success status'),
    'message': fields.String(description='Response message'),
    'data': fields.Raw(description='Forecast summary, actual summary, comparison, marketing efficiency and ROI')
})

event_roi_response_model = events_ns.model('EventROIResponse', {
    'success': fields.Boolean(description='Operation success status'),
    'message': fields.String(description='Response message'),
    'data': fields.Raw(description='Revenue, costs, profit, their variances and ROI')
})

# Error Response Models
events_validation_error_model = events_ns.model('EventsValidationError', {
    'success': fields.Boolean(description='Always false'),
    'message': fields.String(description='Error message'),
    'data': fields.Raw(description='Validation error details')
})

events_internal_error_model = events_ns.model('EventsInternalError', {
    'success': fields.Boolean(description='Always false'),
    'message': fields.String(description='Error message'),
    'data': fields.Raw(description='Error details')
})

# Example Responses
EXAMPLE_VARIANCE = {
    "success": True,
    "message": "Variance calculated successfully",
    "data": {"actual": 120, "forecast": 100, "amount": 20, "percentage": 20.0}
}

EXAMPLE_EVENT_ROI = {
    "success": True,
    "message": "Event ROI calculated successfully",
    "data": {
        "forecast_revenue": 1000,
        "actual_revenue": 1200,
        "forecast_costs": 800,
        "actual_costs": 600,
        "forecast_profit": 200,
        "actual_profit": 600,
        "revenue_variance": 20.0,
        "cost_variance": -25.0,
        "profit_variance": 200.0,
        "roi_percent": 100.0
    }
}
