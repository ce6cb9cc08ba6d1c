"""
Special Event Finance Routes

Contains API endpoints for special event financials:
- POST /api/v1/events/variance - Variance between an actual and a forecast value
- POST /api/v1/events/cogs - COGS and gross margin of a product line
- POST /api/v1/events/summary - Forecast, actual and comparison summary
- POST /api/v1/events/roi - Event ROI
"""

from flask import current_app, request
from flask_restx import Resource
from marshmallow import ValidationError

from src.app.api.schemas import (
    variance_request_schema,
    cogs_request_schema,
    event_records_schema,
)
from src.app.services.special_events.event_finance_service import EventFinanceService
from src.common.response_utils import (
    success_response, validation_error_response, internal_error_response
)
from src.common.localization import get_message
from src.app.api.v1.swaggers import (
    events_ns,
    variance_request_model,
    cogs_request_model,
    event_records_model,
    variance_response_model,
    cogs_response_model,
    event_summary_response_model,
    event_roi_response_model,
    events_validation_error_model,
    events_internal_error_model,
)


def _actuals(validated_data):
    """Single actual record or the list form, as sent"""
    if validated_data.get('actual') is not None:
        return validated_data['actual']
    return validated_data.get('actuals')


# -----------------------------------------------------------------------------
# Variance
# -----------------------------------------------------------------------------
@events_ns.route('/variance')
class EventVariance(Resource):
    """Forecast vs actual variance"""

    @events_ns.expect(variance_request_model)
    @events_ns.doc('event_variance', responses={
        200: ('Variance calculated', variance_response_model),
        400: ('Validation error', events_validation_error_model),
        500: ('Internal server error', events_internal_error_model)
    })
    def post(self):
        """
        Calculate the variance between an actual and a forecast value

        The percentage is 0 when the forecast is 0.
        """
        locale = request.headers.get('Accept-Language', 'en')
        try:
            try:
                validated_data = variance_request_schema.load(request.get_json(silent=True) or {})
            except ValidationError as err:
                return validation_error_response(
                    validation_errors=err.messages,
                    message=get_message('validation_error', locale)
                )

            result = EventFinanceService.calculate_variance(
                validated_data['actual'],
                validated_data['forecast']
            )
            return success_response(
                message=get_message('event_variance_success', locale),
                data=result
            )
        except Exception as e:
            current_app.logger.error(f"Variance calculation error: {str(e)}")
            return internal_error_response(
                message=get_message('internal_server_error', locale),
                error_details=str(e)
            )


# -----------------------------------------------------------------------------
# COGS
# -----------------------------------------------------------------------------
@events_ns.route('/cogs')
class EventCogs(Resource):
    """Cost of goods sold"""

    @events_ns.expect(cogs_request_model)
    @events_ns.doc('event_cogs', responses={
        200: ('COGS calculated', cogs_response_model),
        400: ('Validation error', events_validation_error_model),
        500: ('Internal server error', events_internal_error_model)
    })
    def post(self):
        """
        Calculate COGS for F&B or merchandise revenue

        With use_forecast_pct the percentage (or the product default: 30% F&B,
        50% merchandise) is applied to revenue, otherwise the manual amount is used.
        """
        locale = request.headers.get('Accept-Language', 'en')
        try:
            try:
                validated_data = cogs_request_schema.load(request.get_json(silent=True) or {})
            except ValidationError as err:
                return validation_error_response(
                    validation_errors=err.messages,
                    message=get_message('validation_error', locale)
                )

            result = EventFinanceService.calculate_cogs(
                validated_data['revenue'],
                validated_data['use_forecast_pct'],
                forecast_pct=validated_data.get('forecast_pct'),
                manual_override=validated_data.get('manual_override', 0.0),
                product=validated_data['product']
            )
            return success_response(
                message=get_message('event_cogs_success', locale),
                data=result
            )
        except Exception as e:
            current_app.logger.error(f"COGS calculation error: {str(e)}")
            return internal_error_response(
                message=get_message('internal_server_error', locale),
                error_details=str(e)
            )


# -----------------------------------------------------------------------------
# Summary
# -----------------------------------------------------------------------------
@events_ns.route('/summary')
class EventSummary(Resource):
    """Event financial summary"""

    @events_ns.expect(event_records_model)
    @events_ns.doc('event_summary', responses={
        200: ('Summary calculated', event_summary_response_model),
        400: ('Validation error', events_validation_error_model),
        500: ('Internal server error', events_internal_error_model)
    })
    def post(self):
        """
        Summarize the forecast and, when present, the actuals of an event

        Includes totals, COGS, per-attendee metrics, variances, marketing
        efficiency and ROI.
        """
        locale = request.headers.get('Accept-Language', 'en')
        try:
            try:
                validated_data = event_records_schema.load(request.get_json(silent=True) or {})
            except ValidationError as err:
                return validation_error_response(
                    validation_errors=err.messages,
                    message=get_message('validation_error', locale)
                )

            result = EventFinanceService.summarize_event(
                validated_data['forecast'],
                _actuals(validated_data)
            )
            return success_response(
                message=get_message('event_summary_success', locale),
                data=result
            )
        except Exception as e:
            current_app.logger.error(f"Event summary error: {str(e)}")
            return internal_error_response(
                message=get_message('internal_server_error', locale),
                error_details=str(e)
            )


# -----------------------------------------------------------------------------
# ROI
# -----------------------------------------------------------------------------
@events_ns.route('/roi')
class EventROI(Resource):
    """Event ROI"""

    @events_ns.expect(event_records_model)
    @events_ns.doc('event_roi', responses={
        200: ('ROI calculated', event_roi_response_model),
        400: ('Validation error', events_validation_error_model),
        500: ('Internal server error', events_internal_error_model)
    })
    def post(self):
        """Calculate the event ROI; missing actuals count as zero"""
        locale = request.headers.get('Accept-Language', 'en')
        try:
            try:
                validated_data = event_records_schema.load(request.get_json(silent=True) or {})
            except ValidationError as err:
                return validation_error_response(
                    validation_errors=err.messages,
                    message=get_message('validation_error', locale)
                )

            result = EventFinanceService.calculate_event_roi(
                validated_data['forecast'],
                _actuals(validated_data)
            )
            return success_response(
                message=get_message('event_roi_success', locale),
                data=result
            )
        except Exception as e:
            current_app.logger.error(f"Event ROI error: {str(e)}")
            return internal_error_response(
                message=get_message('internal_server_error', locale),
                error_details=str(e)
            )
