"""
Exception hierarchy for the openai_tools library.

Every error raised by the library derives from ``OpenAIToolError`` so callers
can catch a single base class. The subclasses separate problems detected
locally (missing configuration, invalid arguments) from problems on the wire
(transport failures, unexpected payloads, and structured errors returned by
the service).
"""

import json
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ValidationError

from openai_tools.config.constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


class OpenAIToolError(Exception):
    """Base class for all library errors."""


class MissingConfigurationError(OpenAIToolError):
    """A credential or a required request field is not set."""


class InvalidArgumentError(OpenAIToolError):
    """
    A value is outside the set the library or the service accepts.

    Not a ValueError subclass, so pydantic validators raising it let it
    propagate unchanged instead of folding it into a ValidationError.
    """


class SchemaShapeMismatchError(InvalidArgumentError):
    """A schema operation was applied to an envelope that cannot hold it."""


class TransportError(OpenAIToolError):
    """Network failure, timeout, or a dropped connection."""


class ResponseShapeError(OpenAIToolError):
    """The service returned a payload that does not match the expected model."""


class RemoteError(OpenAIToolError):
    """
    The service returned a structured error.

    Attributes:
        message: Human readable message from the service
        status: HTTP status code, when the error came from an HTTP call
        code: Machine readable error code, if provided
        error_type: Error category, if provided
        param: Offending request parameter, if provided
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[str] = None,
        error_type: Optional[str] = None,
        param: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.error_type = error_type
        self.param = param

    def __str__(self) -> str:
        if self.code:
            return f"{self.message} (code: {self.code})"
        return self.message


class ErrorDetail(BaseModel):
    """Error body returned by the service."""
    message: str
    type: Optional[str] = None
    param: Optional[str] = None
    code: Optional[str] = None


class ErrorResponse(BaseModel):
    """Envelope wrapping an ErrorDetail."""
    error: ErrorDetail


def error_from_response(status: int, content: str) -> RemoteError:
    """
    Build a RemoteError from a non-2xx response body.

    Falls back to a generic message carrying the raw body when the payload is
    not a recognised error envelope.
    """
    try:
        detail = ErrorResponse.model_validate_json(content).error
    except ValidationError:
        logger.debug(f"Error body is not a structured error: {content[:200]}")
        return RemoteError(f"API error ({status}): {content}", status=status)
    return RemoteError(
        detail.message,
        status=status,
        code=detail.code,
        error_type=detail.type,
        param=detail.param,
    )


def parse_model(model_cls, content, context: str = ""):
    """
    Parse a JSON string or dict into ``model_cls``.

    Raises:
        ResponseShapeError: If the payload does not validate
    """
    try:
        if isinstance(content, (str, bytes)):
            return model_cls.model_validate_json(content)
        return model_cls.model_validate(content)
    except ValidationError as e:
        label = context or model_cls.__name__
        logger.error(f"Unexpected payload shape for {label}: {e}")
        raise ResponseShapeError(f"Failed to parse {label}: {e}") from e


def loads_json(content: str) -> Dict[str, Any]:
    """Decode a JSON object, raising ResponseShapeError for malformed text."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ResponseShapeError(f"Invalid JSON payload: {e}") from e
    if not isinstance(data, dict):
        raise ResponseShapeError(f"Expected a JSON object, got {type(data).__name__}")
    return data
