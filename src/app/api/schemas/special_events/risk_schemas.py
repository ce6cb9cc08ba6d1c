"""
Risk Marshmallow Schemas

Handles validation for risk entries and risk register requests.
"""

from marshmallow import Schema, fields, validate, EXCLUDE

RISK_CATEGORIES = ['customer', 'revenue', 'timeline', 'resources', 'market']
RISK_PRIORITIES = ['low', 'medium', 'high', 'critical']
RISK_STATUSES = ['identified', 'monitoring', 'mitigating', 'resolved']


class RiskSchema(Schema):
    """
    Schema for a risk entry
    Note: unknown keys (ids, timestamps) are ignored
    """

    class Meta:
        unknown = EXCLUDE

    title = fields.String(
        required=True,
        validate=validate.Length(min=1, max=255),
        error_messages={'required': 'Risk title is required'}
    )
    description = fields.String(allow_none=True, load_default=None)
    category = fields.String(
        load_default='market',
        validate=validate.OneOf(RISK_CATEGORIES, error='Category must be one of: ' + ', '.join(RISK_CATEGORIES))
    )
    priority = fields.String(
        load_default='medium',
        validate=validate.OneOf(RISK_PRIORITIES, error='Priority must be one of: ' + ', '.join(RISK_PRIORITIES))
    )
    status = fields.String(
        load_default='identified',
        validate=validate.OneOf(RISK_STATUSES, error='Status must be one of: ' + ', '.join(RISK_STATUSES))
    )
    probability = fields.Float(
        load_default=50.0,
        validate=validate.Range(min=0, max=100, error='Probability must be between 0 and 100')
    )
    impact_score = fields.Float(
        load_default=50.0,
        validate=validate.Range(min=0, max=100, error='Impact score must be between 0 and 100')
    )
    mitigation_plan = fields.String(allow_none=True, load_default=None)
    owner = fields.String(allow_none=True, load_default=None, validate=validate.Length(max=255))


class RiskSummaryRequestSchema(Schema):
    """Schema for a risk register summary"""
    risks = fields.List(
        fields.Nested(RiskSchema),
        required=True,
        error_messages={'required': 'Risks list is required'}
    )


class RiskTransitionRequestSchema(Schema):
    """
    Schema for a risk status change
    Note: the target status is checked by the risk model
    """
    risk = fields.Nested(RiskSchema, required=True, error_messages={'required': 'Risk is required'})
    status = fields.String(
        required=True,
        validate=validate.Length(min=1, max=50),
        error_messages={'required': 'Target status is required'}
    )


# Create schema instances
risk_schema = RiskSchema()
risk_summary_request_schema = RiskSummaryRequestSchema()
risk_transition_request_schema = RiskTransitionRequestSchema()
