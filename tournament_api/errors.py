"""
Error taxonomy and the Flask handlers that turn errors into JSON responses.

Every handled failure is an ``ApiError`` carrying its own status code and
user-facing message. Anything else that escapes a view is logged with its
stack trace and answered with a generic 500.
"""
import logging
from typing import Iterable, Optional

from flask import Flask, current_app, jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = 'Error interno del servidor'


class ApiError(Exception):
    """Base class for failures that map to an HTTP status."""

    status_code = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_dict(self, expose_detail: bool = True) -> dict:
        body = {'message': self.message}
        if self.detail is not None and expose_detail:
            body['error'] = self.detail
        return body


class ValidationError(ApiError):
    status_code = 400


class MissingToken(ApiError):
    status_code = 401


class InvalidToken(ApiError):
    # 403 rather than 401; clients already depend on it
    status_code = 403


class AccessDenied(ApiError):
    status_code = 403


class AccountNotFound(ApiError):
    status_code = 404


class CredentialMismatch(ApiError):
    status_code = 401


class StoreError(ApiError):
    status_code = 500


class StoreUnavailable(RuntimeError):
    """Raised at start-up when the store cannot be reached."""


class ConfigurationError(RuntimeError):
    """Raised at start-up when required settings are missing."""


def require_fields(data: dict, fields: Iterable[str], message: str) -> None:
    """Raise ValidationError unless every field is present and non-empty."""
    if not isinstance(data, dict) or any(not data.get(field) for field in fields):
        raise ValidationError(message)


def register_error_handlers(app: Flask):
    """Register the ApiError renderer and the catch-all responder."""

    @app.errorhandler(ApiError)
    def handle_api_error(error: ApiError):
        body = error.to_dict(expose_detail=current_app.config.get('EXPOSE_ERROR_DETAIL', True))
        return jsonify(body), error.status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        # Unknown routes, bad methods and friends keep their own status
        if isinstance(error, HTTPException):
            return error

        logger.exception(f"Unhandled error: {error}")
        body = {'message': INTERNAL_ERROR_MESSAGE}
        if current_app.config.get('EXPOSE_ERROR_DETAIL', True):
            body['error'] = str(error)
        return jsonify(body), 500
