"""
Financial Model Routes

Contains API endpoints for financial model evaluation:
- POST /api/v1/financial-models/cash-flow - Period by period cash flow projection
- POST /api/v1/financial-models/analysis - NPV, IRR, payback, ROI and break-even under a scenario
- POST /api/v1/financial-models/scenarios - Base, best and worst case with sensitivity sweep
- POST /api/v1/financial-models/break-even - Break-even units and revenue
"""

from flask import current_app, request
from flask_restx import Resource
from marshmallow import ValidationError

from src.app.api.schemas import (
    financial_model_request_schema,
    break_even_request_schema,
)
from src.app.services.special_events.financial_model_service import FinancialModelService
from src.common.exceptions import FinancialModelError
from src.common.response_utils import (
    success_response, error_response, validation_error_response, internal_error_response
)
from src.common.localization import get_message
from src.extensions import limiter
from src.app.api.v1.swaggers import (
    financial_models_ns,
    financial_model_request_model,
    break_even_request_model,
    cash_flow_response_model,
    analysis_response_model,
    scenarios_response_model,
    break_even_response_model,
    financial_models_validation_error_model,
    financial_models_error_model,
)


def _model_error_response(error):
    return error_response(
        message=error.message,
        data={'error_code': error.error_code, 'details': error.details},
        status_code=error.status_code
    )


def _scenario_rate_limit():
    return current_app.config.get('SCENARIO_RATE_LIMIT', '30 per minute')


# -----------------------------------------------------------------------------
# Cash flow projection
# -----------------------------------------------------------------------------
@financial_models_ns.route('/cash-flow')
class CashFlowProjection(Resource):
    """Cash flow projection"""

    @financial_models_ns.expect(financial_model_request_model)
    @financial_models_ns.doc('project_cash_flow', responses={
        200: ('Projection generated', cash_flow_response_model),
        400: ('Validation error', financial_models_validation_error_model),
        422: ('Model cannot be projected', financial_models_error_model),
        500: ('Internal server error', financial_models_error_model)
    })
    def post(self):
        """
        Project revenue, costs and cash flow per period

        Growth and seasonality from the growth model are applied to revenue;
        costs grow at 70% of the revenue growth.
        """
        locale = request.headers.get('Accept-Language', 'en')
        try:
            try:
                validated_data = financial_model_request_schema.load(request.get_json(silent=True) or {})
            except ValidationError as err:
                return validation_error_response(
                    validation_errors=err.messages,
                    message=get_message('validation_error', locale)
                )

            result = FinancialModelService.project_cash_flow(validated_data, locale)
            return success_response(
                message=get_message('cash_flow_success', locale),
                data=result
            )
        except FinancialModelError as e:
            return _model_error_response(e)
        except Exception as e:
            current_app.logger.error(f"Cash flow projection error: {str(e)}")
            return internal_error_response(
                message=get_message('internal_server_error', locale),
                error_details=str(e)
            )


# -----------------------------------------------------------------------------
# Financial analysis
# -----------------------------------------------------------------------------
@financial_models_ns.route('/analysis')
class FinancialAnalysis(Resource):
    """Time value analysis"""

    @financial_models_ns.expect(financial_model_request_model)
    @financial_models_ns.doc('analyze_financial_model', responses={
        200: ('Analysis completed', analysis_response_model),
        400: ('Validation error', financial_models_validation_error_model),
        422: ('Model cannot be projected', financial_models_error_model),
        500: ('Internal server error', financial_models_error_model)
    })
    def post(self):
        """
        Calculate NPV, IRR, payback period, ROI and break-even of a model

        The scenario field selects base, best_case, worst_case or custom
        (custom requires modifiers).
        """
        locale = request.headers.get('Accept-Language', 'en')
        try:
            try:
                validated_data = financial_model_request_schema.load(request.get_json(silent=True) or {})
            except ValidationError as err:
                return validation_error_response(
                    validation_errors=err.messages,
                    message=get_message('validation_error', locale)
                )

            result = FinancialModelService.analyze(validated_data, locale)
            return success_response(
                message=get_message('financial_analysis_success', locale),
                data=result
            )
        except FinancialModelError as e:
            return _model_error_response(e)
        except Exception as e:
            current_app.logger.error(f"Financial analysis error: {str(e)}")
            return internal_error_response(
                message=get_message('internal_server_error', locale),
                error_details=str(e)
            )


# -----------------------------------------------------------------------------
# Scenario analysis
# -----------------------------------------------------------------------------
@financial_models_ns.route('/scenarios')
class ScenarioAnalysis(Resource):
    """Scenario comparison and sensitivity"""

    decorators = [limiter.limit(_scenario_rate_limit)]

    @financial_models_ns.expect(financial_model_request_model)
    @financial_models_ns.doc('analyze_scenarios', responses={
        200: ('Scenario analysis completed', scenarios_response_model),
        400: ('Validation error', financial_models_validation_error_model),
        422: ('Model cannot be projected', financial_models_error_model),
        429: 'Rate limit exceeded',
        500: ('Internal server error', financial_models_error_model)
    })
    def post(self):
        """
        Compare base, best and worst case and sweep revenue and cost changes

        Best case: revenue +20%, costs -10%. Worst case: revenue -20%, costs +15%.
        Sensitivity reports the NPV change in percent of the base NPV.
        """
        locale = request.headers.get('Accept-Language', 'en')
        try:
            try:
                validated_data = financial_model_request_schema.load(request.get_json(silent=True) or {})
            except ValidationError as err:
                return validation_error_response(
                    validation_errors=err.messages,
                    message=get_message('validation_error', locale)
                )

            result = FinancialModelService.analyze_scenarios(validated_data, locale)
            return success_response(
                message=get_message('scenario_analysis_success', locale),
                data=result
            )
        except FinancialModelError as e:
            return _model_error_response(e)
        except Exception as e:
            current_app.logger.error(f"Scenario analysis error: {str(e)}")
            return internal_error_response(
                message=get_message('internal_server_error', locale),
                error_details=str(e)
            )


# -----------------------------------------------------------------------------
# Break-even
# -----------------------------------------------------------------------------
@financial_models_ns.route('/break-even')
class BreakEven(Resource):
    """Break-even point"""

    @financial_models_ns.expect(break_even_request_model)
    @financial_models_ns.doc('break_even', responses={
        200: ('Break-even calculated', break_even_response_model),
        400: ('Validation error', financial_models_validation_error_model),
        500: ('Internal server error', financial_models_error_model)
    })
    def post(self):
        """
        Calculate break-even units and revenue

        Units and revenue are null when price does not exceed the variable cost.
        """
        locale = request.headers.get('Accept-Language', 'en')
        try:
            try:
                validated_data = break_even_request_schema.load(request.get_json(silent=True) or {})
            except ValidationError as err:
                return validation_error_response(
                    validation_errors=err.messages,
                    message=get_message('validation_error', locale)
                )

            result = FinancialModelService.calculate_break_even(
                validated_data['fixed_costs'],
                validated_data['variable_cost_per_unit'],
                validated_data['price_per_unit']
            )
            return success_response(
                message=get_message('break_even_success', locale),
                data=result
            )
        except Exception as e:
            current_app.logger.error(f"Break-even calculation error: {str(e)}")
            return internal_error_response(
                message=get_message('internal_server_error', locale),
                error_details=str(e)
            )
