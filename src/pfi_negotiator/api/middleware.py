"""FastAPI middleware for request tracing, error handling, and CORS.

Middleware stack (applied bottom-up):
    1. RequestIDMiddleware: injects X-Request-ID into every request/response
    2. ErrorHandlerMiddleware: domain exceptions -> structured JSON errors
    3. CORSMiddleware: the wallet front-end calls from the browser
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

import structlog
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from pfi_negotiator.domain.exceptions import (
    CredentialDecodeError,
    EmptyExchangeError,
    FetchError,
    InvalidAmountError,
    IssuerRequestError,
    MissingCredentialError,
    MissingPrimaryMessageError,
    NegotiatorError,
    PfiNotConfiguredError,
)

if TYPE_CHECKING:
    from fastapi import FastAPI, Request, Response

logger = structlog.get_logger(__name__)

# Caller sent something the core cannot work with
_UNPROCESSABLE = (
    CredentialDecodeError,
    MissingCredentialError,
    EmptyExchangeError,
    MissingPrimaryMessageError,
    InvalidAmountError,
)


# ---------------------------------------------------------------------------
# 1. Request ID Middleware
# ---------------------------------------------------------------------------
class RequestIDMiddleware(BaseHTTPMiddleware):
    """Inject a unique X-Request-ID into every request for log correlation."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


# ---------------------------------------------------------------------------
# 2. Error Handler Middleware
# ---------------------------------------------------------------------------
def _error_response(status_code: int, exc: NegotiatorError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Catch domain exceptions and return structured JSON error responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except _UNPROCESSABLE as exc:
            logger.warning("request.unprocessable", code=exc.code, error=exc.message)
            return _error_response(422, exc)
        except FetchError as exc:
            cause = exc.__cause__
            if isinstance(cause, PfiNotConfiguredError):
                logger.warning("pfi.not_configured", pfi_did=cause.pfi_did)
                return _error_response(404, exc)
            logger.error("upstream.pfi_error", code=exc.code, error=exc.message)
            return _error_response(502, exc)
        except IssuerRequestError as exc:
            logger.error("upstream.issuer_error", error=exc.message)
            return _error_response(502, exc)
        except NegotiatorError as exc:
            logger.error("domain.error", error=exc.message, code=exc.code)
            return _error_response(400, exc)
        except Exception as exc:
            logger.exception("unhandled.error", error=str(exc))
            return JSONResponse(
                status_code=500,
                content={
                    "error": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                },
            )


# ---------------------------------------------------------------------------
# Setup function
# ---------------------------------------------------------------------------
def setup_middleware(app: FastAPI) -> None:
    """Register all middleware on the FastAPI application.

    Middleware is applied bottom-up, so the last added runs first.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(ErrorHandlerMiddleware)

    # outermost
    app.add_middleware(RequestIDMiddleware)
