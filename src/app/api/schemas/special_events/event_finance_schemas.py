"""
Special Events Finance Marshmallow Schemas

Handles validation for forecast and actual records and the event
calculation requests. Monetary fields are optional: a missing value is
treated as 0 by the computation layer.
"""

from marshmallow import Schema, fields, validate, EXCLUDE


def _money(**kwargs):
    return fields.Float(
        allow_none=True,
        error_messages={'invalid': 'Must be a number'},
        **kwargs
    )


def _text(max_length=5000):
    return fields.String(allow_none=True, validate=validate.Length(max=max_length))


class ForecastRecordSchema(Schema):
    """
    Schema for a forecast record
    Note: unknown keys (ids, timestamps) are ignored
    """

    class Meta:
        unknown = EXCLUDE

    # Revenue
    forecast_ticket_sales = _money()
    forecast_fnb_revenue = _money()
    forecast_merch_revenue = _money()
    forecast_sponsorship_income = _money()
    forecast_other_income = _money()

    # Costs
    forecast_staffing_costs = _money()
    forecast_venue_costs = _money()
    forecast_vendor_costs = _money()
    forecast_marketing_costs = _money()
    forecast_production_costs = _money()
    forecast_other_costs = _money()

    # COGS percentages, product defaults apply when null
    forecast_fnb_cogs_pct = fields.Float(
        allow_none=True,
        error_messages={'invalid': 'F&B COGS percentage must be a number'}
    )
    forecast_merch_cogs_pct = fields.Float(
        allow_none=True,
        error_messages={'invalid': 'Merchandise COGS percentage must be a number'}
    )

    estimated_attendance = _money(validate=validate.Range(min=0, error='Estimated attendance cannot be negative'))
    ticket_price = _money(validate=validate.Range(min=0, error='Ticket price cannot be negative'))

    # Marketing budget per channel
    marketing_email_budget = _money()
    marketing_social_budget = _money()
    marketing_influencer_budget = _money()
    marketing_paid_ads_budget = _money()
    marketing_content_budget = _money()

    marketing_strategy = _text()
    notes = _text()


class ActualRecordSchema(Schema):
    """
    Schema for an actual record
    Note: unknown keys (ids, timestamps) are ignored
    """

    class Meta:
        unknown = EXCLUDE

    # Revenue
    actual_ticket_sales = _money()
    actual_fnb_revenue = _money()
    actual_merch_revenue = _money()
    actual_sponsorship_income = _money()
    actual_other_income = _money()

    # Costs
    actual_staffing_costs = _money()
    actual_venue_costs = _money()
    actual_vendor_costs = _money()
    actual_marketing_costs = _money()
    actual_production_costs = _money()
    actual_other_costs = _money()

    # COGS
    use_forecast_fnb_cogs_pct = fields.Boolean(load_default=True, allow_none=True)
    use_forecast_merch_cogs_pct = fields.Boolean(load_default=True, allow_none=True)
    manual_fnb_cogs = _money()
    manual_merch_cogs = _money()

    actual_attendance = _money(validate=validate.Range(min=0, error='Actual attendance cannot be negative'))
    average_ticket_price = _money(validate=validate.Range(min=0, error='Average ticket price cannot be negative'))

    success_rating = fields.Integer(
        allow_none=True,
        validate=validate.Range(min=1, max=10),
        error_messages={'invalid': 'Success rating must be an integer between 1 and 10'}
    )

    # Post-event review
    key_success_factors = _text()
    challenges_faced = _text()
    lessons_learned = _text()
    recommendations_future = _text()
    customer_feedback_summary = _text()
    team_feedback = _text()
    vendor_feedback = _text()
    marketing_roi_notes = _text()
    revenue_variance_notes = _text()
    cost_variance_notes = _text()
    general_notes = _text()


class VarianceRequestSchema(Schema):
    """Schema for a single variance calculation"""
    actual = fields.Float(
        required=True,
        error_messages={'required': 'Actual value is required', 'invalid': 'Actual value must be a number'}
    )
    forecast = fields.Float(
        required=True,
        error_messages={'required': 'Forecast value is required', 'invalid': 'Forecast value must be a number'}
    )


class CogsRequestSchema(Schema):
    """Schema for a COGS calculation"""
    revenue = fields.Float(
        required=True,
        error_messages={'required': 'Revenue is required', 'invalid': 'Revenue must be a number'}
    )
    use_forecast_pct = fields.Boolean(load_default=False)
    forecast_pct = fields.Float(allow_none=True, load_default=None)
    manual_override = fields.Float(load_default=0.0)
    product = fields.String(
        load_default='fnb',
        validate=validate.OneOf(['fnb', 'merch'], error='Product must be one of: fnb, merch')
    )


class EventRecordsSchema(Schema):
    """
    Schema for requests carrying a forecast and its actuals.
    Either ``actual`` (one record) or ``actuals`` (list, first entry wins) may be sent.
    """
    forecast = fields.Nested(
        ForecastRecordSchema,
        required=True,
        error_messages={'required': 'Forecast record is required'}
    )
    actual = fields.Nested(ActualRecordSchema, allow_none=True, load_default=None)
    actuals = fields.List(fields.Nested(ActualRecordSchema), allow_none=True, load_default=None)


# Create schema instances
variance_request_schema = VarianceRequestSchema()
cogs_request_schema = CogsRequestSchema()
event_records_schema = EventRecordsSchema()
