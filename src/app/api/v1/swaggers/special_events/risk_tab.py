"""
Risks Tab Swagger Documentation

Contains the risk register API documentation including:
- Risk scoring
- Risk register summary
- Risk status transitions
"""

from flask_restx import Namespace, fields

# Create Risks Namespace
risks_ns = Namespace('risks', description='Risk scoring and risk register summaries')

RISK_CATEGORY_ENUM = ['customer', 'revenue', 'timeline', 'resources', 'market']
RISK_PRIORITY_ENUM = ['low', 'medium', 'high', 'critical']
RISK_STATUS_ENUM = ['identified', 'monitoring', 'mitigating', 'resolved']

# Risk Models
risk_model = risks_ns.model('Risk', {
    'title': fields.String(required=True, description='Risk title', example='Low ticket sales'),
    'description': fields.String(description='Risk description'),
    'category': fields.String(description='Risk category', enum=RISK_CATEGORY_ENUM, default='market'),
    'priority': fields.String(description='Risk priority', enum=RISK_PRIORITY_ENUM, default='medium'),
    'status': fields.String(description='Risk status', enum=RISK_STATUS_ENUM, default='identified'),
    'probability': fields.Float(description='Probability (0-100)', min=0, max=100, example=60),
    'impact_score': fields.Float(description='Impact (0-100)', min=0, max=100, example=80),
    'mitigation_plan': fields.String(description='Mitigation plan'),
    'owner': fields.String(description='Risk owner')
})

risk_summary_request_model = risks_ns.model('RiskSummaryRequest', {
    'risks': fields.List(fields.Nested(risk_model), required=True, description='Risk register')
})

risk_transition_request_model = risks_ns.model('RiskTransitionRequest', {
    'risk': fields.Nested(risk_model, required=True, description='Risk to update'),
    'status': fields.String(required=True, description='Target status', enum=RISK_STATUS_ENUM)
})

# Response Models
risk_score_response_model = risks_ns.model('RiskScoreResponse', {
    'success': fields.Boolean(description='Operation success status'),
    'message': fields.String(description='Response message'),
    'data': fields.Raw(description='Risk with its score, level and weighted score')
})

risk_summary_response_model = risks_ns.model('RiskSummaryResponse', {
    'success': fields.Boolean(description='Operation success status'),
    'message': fields.String(description='Response message'),
    'data': fields.Raw(description='Counts by priority and status, overall level and urgent actions')
})

risk_transition_response_model = risks_ns.model('RiskTransitionResponse', {
    'success': fields.Boolean(description='Operation success status'),
    'message': fields.String(description='Response message'),
    'data': fields.Raw(description='Previous status and the updated risk')
})

# Error Response Models
risks_validation_error_model = risks_ns.model('RisksValidationError', {
    'success': fields.Boolean(description='Always false'),
    'message': fields.String(description='Error message'),
    'data': fields.Raw(description='Validation error details')
})

# Example Responses
EXAMPLE_RISK_SCORE = {
    "success": True,
    "message": "Risk score calculated successfully",
    "data": {
        "risk_score": 48,
        "risk_level": "medium",
        "weighted_score": 18
    }
}
