# elearning/core/errors.py
"""
Typed request errors and the single place they become HTTP responses.

Clients written against the portal expect errors as HTTP 200 with either
``{"error": ...}`` (GET) or ``{"success": false, "message": ...}`` (everything
else). ``STRICT_HTTP_STATUS`` keeps those bodies but switches to real status codes.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Coroutine, Dict, List

from fastapi import HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

log = logging.getLogger(__name__)


class PortalError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(PortalError):
    status_code = 400


class InvalidCredentials(PortalError):
    status_code = 401

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


class DuplicateUsername(PortalError):
    status_code = 409

    def __init__(self, message: str = "Username already exists"):
        super().__init__(message)


class OperationFailed(PortalError):
    status_code = 500


class RequestTimedOut(PortalError):
    status_code = 504

    def __init__(self, message: str = "Request timed out"):
        super().__init__(message)


def _describe_validation(errors: List[Dict[str, Any]]) -> str:
    parts: List[str] = []
    for err in errors:
        if err.get("type") == "json_invalid":
            return "Invalid JSON body"
        loc = [str(p) for p in err.get("loc", ())[1:]]
        where = ".".join(loc) if loc else str((err.get("loc") or ("body",))[0])
        parts.append(f"{where}: {err.get('msg', 'invalid')}")
    return "; ".join(parts) or "Invalid request"


def render_error(request: Request, message: str, status_code: int) -> JSONResponse:
    settings = request.app.state.settings
    if request.method == "GET":
        body: Dict[str, Any] = {"error": message}
    else:
        body = {"success": False, "message": message}
    return JSONResponse(body, status_code=status_code if settings.STRICT_HTTP_STATUS else 200)


async def portal_error_handler(request: Request, exc: PortalError) -> JSONResponse:
    return render_error(request, exc.message, exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation(exc.errors())
    log.info("[HTTP] %s %s rejected: %s", request.method, request.url.path, message)
    return render_error(request, message, 422)


class EnvelopeRoute(APIRoute):
    """Route class that turns any unexpected exception into OperationFailed."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original = super().get_route_handler()

        async def handler(request: Request) -> Response:
            try:
                return await original(request)
            except (PortalError, RequestValidationError, HTTPException):
                raise
            except Exception as e:
                log.exception("[HTTP] %s %s failed", request.method, request.url.path)
                raise OperationFailed(str(e)) from e

        return handler
