#!/usr/bin/env python3
"""
Error handlers for the web application.

The exception types live in core.exceptions; this module maps them onto
HTTP responses with a consistent JSON body.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.exceptions import (
    AgentError,
    CareerPilotError,
    InvalidTrackingStatusError,
    InvalidTransitionError,
    JobNotFoundError,
    ServiceException,
    TrackedJobNotFoundError,
)

logger = logging.getLogger(__name__)


def _error_body(message: str, error_type: str) -> dict:
    return {
        "success": False,
        "error": message,
        "type": error_type
    }


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.
    
    Args:
        request: The FastAPI request.
        exc: The service exception.
    
    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, (JobNotFoundError, TrackedJobNotFoundError)):
        status_code = 404
    elif isinstance(exc, (InvalidTransitionError, InvalidTrackingStatusError)):
        status_code = 400

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Rejected request to {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content=_error_body(str(exc), exc.__class__.__name__)
    )


async def career_pilot_exception_handler(
    request: Request,
    exc: CareerPilotError
) -> JSONResponse:
    """
    Handle errors outside the service family, agent failures in particular.
    
    Args:
        request: The FastAPI request.
        exc: The error.
    
    Returns:
        JSONResponse with error details (502 for agent failures).
    """
    logger.error(f"Error in {request.url.path}: {exc}", exc_info=True)
    status_code = 502 if isinstance(exc, AgentError) else 500
    return JSONResponse(
        status_code=status_code,
        content=_error_body(str(exc), exc.__class__.__name__)
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    
    Args:
        request: The FastAPI request.
        exc: The HTTP exception.
    
    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail, "HTTPException")
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    
    Args:
        request: The FastAPI request.
        exc: The exception.
    
    Returns:
        JSONResponse with error details.
    """
    logger.exception(f"Unexpected error in {request.url.path}")
    
    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", "InternalError")
    )


def register_exception_handlers(app) -> None:
    """Register all handlers on a FastAPI app, most specific first."""
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(CareerPilotError, career_pilot_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
