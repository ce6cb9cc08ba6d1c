"""
Financial Model Marshmallow Schemas

Handles validation for financial model payloads (revenue streams, cost
items, growth model), run options and break-even requests.
"""

from flask import current_app, has_app_context
from marshmallow import Schema, fields, validate, validates, validates_schema, ValidationError, EXCLUDE

FREQUENCIES = ['weekly', 'monthly', 'quarterly', 'annually', 'one-time']
GROWTH_TYPES = ['linear', 'exponential', 'logarithmic']
SCENARIO_TYPES = ['base', 'best_case', 'worst_case', 'custom']

DEFAULT_MAX_PERIODS = 120


class RevenueStreamSchema(Schema):
    """Schema for a revenue stream"""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(load_default='', validate=validate.Length(max=255))
    value = fields.Float(
        required=True,
        error_messages={'required': 'Revenue value is required', 'invalid': 'Revenue value must be a number'}
    )
    type = fields.String(allow_none=True, load_default=None)
    frequency = fields.String(
        allow_none=True,
        load_default=None,
        validate=validate.OneOf(FREQUENCIES, error='Frequency must be one of: ' + ', '.join(FREQUENCIES))
    )


class CostItemSchema(Schema):
    """Schema for a cost item"""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(load_default='', validate=validate.Length(max=255))
    value = fields.Float(
        required=True,
        error_messages={'required': 'Cost value is required', 'invalid': 'Cost value must be a number'}
    )
    type = fields.String(allow_none=True, load_default=None)
    category = fields.String(allow_none=True, load_default=None)


class GrowthModelSchema(Schema):
    """Schema for the growth model"""

    class Meta:
        unknown = EXCLUDE

    type = fields.String(
        required=True,
        validate=validate.OneOf(GROWTH_TYPES, error='Growth type must be one of: ' + ', '.join(GROWTH_TYPES)),
        error_messages={'required': 'Growth type is required'}
    )
    rate = fields.Float(load_default=0.0, error_messages={'invalid': 'Growth rate must be a number'})
    seasonality = fields.List(fields.Float(), allow_none=True, load_default=None)

    @validates('seasonality')
    def validate_seasonality(self, value, **kwargs):
        """Seasonality holds 12 monthly or 4 quarterly multipliers"""
        if value and len(value) not in (4, 12):
            raise ValidationError('Seasonality must have 12 monthly or 4 quarterly multipliers')


class ScenarioModifiersSchema(Schema):
    """Schema for custom scenario multipliers"""
    name = fields.String(load_default='Custom', validate=validate.Length(max=100))
    description = fields.String(load_default='', validate=validate.Length(max=500))
    revenue_multiplier = fields.Float(
        load_default=1.0,
        validate=validate.Range(min=0, error='Revenue multiplier cannot be negative')
    )
    cost_multiplier = fields.Float(
        load_default=1.0,
        validate=validate.Range(min=0, error='Cost multiplier cannot be negative')
    )


class FinancialModelRequestSchema(Schema):
    """
    Schema for financial model requests.

    The model is given either flat (``revenue_streams``, ``cost_items``,
    ``growth_model``) or as the ``assumptions`` object saved by the planner.
    """

    class Meta:
        unknown = EXCLUDE

    name = fields.String(load_default='Financial Model', validate=validate.Length(min=1, max=255))
    revenue_streams = fields.List(fields.Nested(RevenueStreamSchema), allow_none=True, load_default=None)
    cost_items = fields.List(fields.Nested(CostItemSchema), allow_none=True, load_default=None)
    growth_model = fields.Nested(GrowthModelSchema, allow_none=True, load_default=None)
    assumptions = fields.Dict(allow_none=True, load_default=None)

    # Run options, configured defaults apply when missing
    periods = fields.Integer(
        allow_none=True,
        load_default=None,
        validate=validate.Range(min=1, error='Periods must be at least 1'),
        error_messages={'invalid': 'Periods must be an integer'}
    )
    discount_rate = fields.Float(
        allow_none=True,
        load_default=None,
        validate=validate.Range(min=-1, min_inclusive=False, error='Discount rate must be greater than -1'),
        error_messages={'invalid': 'Discount rate must be a number'}
    )
    is_weekly = fields.Boolean(load_default=False)

    scenario = fields.String(
        load_default='base',
        validate=validate.OneOf(SCENARIO_TYPES, error='Scenario must be one of: ' + ', '.join(SCENARIO_TYPES))
    )
    modifiers = fields.Nested(ScenarioModifiersSchema, allow_none=True, load_default=None)

    @validates('periods')
    def validate_periods(self, value, **kwargs):
        """Cap the projection horizon"""
        if value is None:
            return
        max_periods = DEFAULT_MAX_PERIODS
        if has_app_context():
            max_periods = current_app.config.get('MAX_PROJECTION_PERIODS', DEFAULT_MAX_PERIODS)
        if value > max_periods:
            raise ValidationError(f'Periods cannot exceed {max_periods}')

    @validates_schema
    def validate_custom_scenario(self, data, **kwargs):
        """Custom scenarios need their modifiers"""
        if data.get('scenario') == 'custom' and not data.get('modifiers'):
            raise ValidationError('Modifiers are required for a custom scenario', field_name='modifiers')


class BreakEvenRequestSchema(Schema):
    """Schema for a break-even calculation"""
    fixed_costs = fields.Float(
        required=True,
        validate=validate.Range(min=0, error='Fixed costs cannot be negative'),
        error_messages={'required': 'Fixed costs are required', 'invalid': 'Fixed costs must be a number'}
    )
    variable_cost_per_unit = fields.Float(
        required=True,
        validate=validate.Range(min=0, error='Variable cost cannot be negative'),
        error_messages={'required': 'Variable cost per unit is required', 'invalid': 'Variable cost must be a number'}
    )
    price_per_unit = fields.Float(
        required=True,
        validate=validate.Range(min=0, error='Price cannot be negative'),
        error_messages={'required': 'Price per unit is required', 'invalid': 'Price must be a number'}
    )


# Create schema instances
financial_model_request_schema = FinancialModelRequestSchema()
break_even_request_schema = BreakEvenRequestSchema()
