"""
Standardized API Response Utilities

Every endpoint answers with the same envelope:
{
    "success": true/false,
    "message": "Related message",
    "data": { ... }
}
"""

from typing import Any, Dict, Optional, Union


# ---------------------------------------------------------------------
# Create a standardized API response
# ---------------------------------------------------------------------
def create_response(
    success: bool,
    message: str,
    data: Optional[Dict[str, Any]] = None,
    status_code: int = 200
) -> tuple:
    """
    Create a standardized API response

    Args:
        success (bool): Whether the operation was successful
        message (str): Response message
        data (Optional[Dict]): Response data
        status_code (int): HTTP status code

    Returns:
        tuple: (response body, status code)
    """
    response_data = {
        "success": success,
        "message": message,
        "data": data or {}
    }
    return response_data, status_code


# ---------------------------------------------------------------------
# Success response
# ---------------------------------------------------------------------
def success_response(
    message: str = "Operation completed successfully",
    data: Optional[Dict[str, Any]] = None,
    status_code: int = 200
) -> tuple:
    """Create a success response"""
    return create_response(
        success=True,
        message=message,
        data=data,
        status_code=status_code
    )


# ---------------------------------------------------------------------
# Error response
# ---------------------------------------------------------------------
def error_response(
    message: str = "An error occurred",
    data: Optional[Dict[str, Any]] = None,
    status_code: int = 400,
    error_details: Optional[str] = None
) -> tuple:
    """
    Create an error response

    Args:
        message (str): Error message
        data (Optional[Dict]): Additional error data
        status_code (int): HTTP status code
        error_details (Optional[str]): Detailed error information

    Returns:
        tuple: Error response with status code
    """
    error_data = data or {}
    if error_details:
        error_data["error_details"] = error_details

    return create_response(
        success=False,
        message=message,
        data=error_data,
        status_code=status_code
    )


# ---------------------------------------------------------------------
# Validation error response
# ---------------------------------------------------------------------
def validation_error_response(
    validation_errors: Union[str, Dict],
    message: str = "Validation failed"
) -> tuple:
    """
    Create a validation error response

    Args:
        validation_errors: Validation error details (marshmallow messages)
        message (str): Error message

    Returns:
        tuple: Validation error response
    """
    return error_response(
        message=message,
        data={"validation_errors": validation_errors},
        status_code=400
    )


# ---------------------------------------------------------------------
# Internal error response
# ---------------------------------------------------------------------
def internal_error_response(
    message: str = "Internal server error",
    error_details: str = None
) -> tuple:
    """Create an internal server error response"""
    return error_response(
        message=message,
        data={"error_details": error_details} if error_details else {},
        status_code=500
    )
