"""
Risk Routes

Contains API endpoints for the risk register:
- POST /api/v1/risks/score - Score a single risk
- POST /api/v1/risks/summary - Summarize a risk register
- POST /api/v1/risks/transition - Move a risk to a new status
"""

from flask import current_app, request
from flask_restx import Resource
from marshmallow import ValidationError

from src.app.api.schemas import (
    risk_schema,
    risk_summary_request_schema,
    risk_transition_request_schema,
)
from src.app.services.special_events.risk_service import RiskService
from src.common.exceptions import RiskValidationError
from src.common.response_utils import (
    success_response, error_response, validation_error_response, internal_error_response
)
from src.common.localization import get_message
from src.app.api.v1.swaggers import (
    risks_ns,
    risk_model,
    risk_summary_request_model,
    risk_transition_request_model,
    risk_score_response_model,
    risk_summary_response_model,
    risk_transition_response_model,
    risks_validation_error_model,
)


@risks_ns.route('/score')
class RiskScore(Resource):
    """Risk scoring"""

    @risks_ns.expect(risk_model)
    @risks_ns.doc('score_risk', responses={
        200: ('Risk scored', risk_score_response_model),
        400: ('Validation error', risks_validation_error_model)
    })
    def post(self):
        """
        Score a risk

        risk_score = round(probability x impact / 100); the weighted score
        uses the 1-5 scale and the priority multiplier, clamped to 1-25.
        """
        locale = request.headers.get('Accept-Language', 'en')
        try:
            try:
                validated_data = risk_schema.load(request.get_json(silent=True) or {})
            except ValidationError as err:
                return validation_error_response(
                    validation_errors=err.messages,
                    message=get_message('validation_error', locale)
                )

            result = RiskService.score_risk(validated_data)
            return success_response(
                message=get_message('risk_score_success', locale),
                data=result
            )
        except RiskValidationError as e:
            return error_response(
                message=e.message,
                data={'error_code': e.error_code, 'details': e.details},
                status_code=e.status_code
            )
        except Exception as e:
            current_app.logger.error(f"Risk scoring error: {str(e)}")
            return internal_error_response(
                message=get_message('internal_server_error', locale),
                error_details=str(e)
            )


@risks_ns.route('/summary')
class RiskSummary(Resource):
    """Risk register summary"""

    @risks_ns.expect(risk_summary_request_model)
    @risks_ns.doc('summarize_risks', responses={
        200: ('Risk register summarized', risk_summary_response_model),
        400: ('Validation error', risks_validation_error_model)
    })
    def post(self):
        """Summarize a risk register: counts, overall level and urgent actions"""
        locale = request.headers.get('Accept-Language', 'en')
        try:
            try:
                validated_data = risk_summary_request_schema.load(request.get_json(silent=True) or {})
            except ValidationError as err:
                return validation_error_response(
                    validation_errors=err.messages,
                    message=get_message('validation_error', locale)
                )

            result = RiskService.summarize_risks(validated_data['risks'])
            return success_response(
                message=get_message('risk_summary_success', locale),
                data=result
            )
        except RiskValidationError as e:
            return error_response(
                message=e.message,
                data={'error_code': e.error_code, 'details': e.details},
                status_code=e.status_code
            )
        except Exception as e:
            current_app.logger.error(f"Risk summary error: {str(e)}")
            return internal_error_response(
                message=get_message('internal_server_error', locale),
                error_details=str(e)
            )


@risks_ns.route('/transition')
class RiskTransition(Resource):
    """Risk status change"""

    @risks_ns.expect(risk_transition_request_model)
    @risks_ns.doc('transition_risk', responses={
        200: ('Risk status updated', risk_transition_response_model),
        400: ('Validation error or unknown status', risks_validation_error_model)
    })
    def post(self):
        """Move a risk to a new status (identified, monitoring, mitigating, resolved)"""
        locale = request.headers.get('Accept-Language', 'en')
        try:
            try:
                validated_data = risk_transition_request_schema.load(request.get_json(silent=True) or {})
            except ValidationError as err:
                return validation_error_response(
                    validation_errors=err.messages,
                    message=get_message('validation_error', locale)
                )

            status = validated_data['status']
            result = RiskService.transition_risk(validated_data['risk'], status)
            return success_response(
                message=get_message('risk_transition_success', locale, status=status),
                data=result
            )
        except RiskValidationError as e:
            return error_response(
                message=get_message('risk_transition_invalid', locale, status=validated_data['status']),
                data={'error_code': e.error_code, 'details': e.details},
                status_code=e.status_code
            )
        except Exception as e:
            current_app.logger.error(f"Risk transition error: {str(e)}")
            return internal_error_response(
                message=get_message('internal_server_error', locale),
                error_details=str(e)
            )
