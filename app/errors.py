# app/errors.py
from enum import Enum
from typing import Optional

from fastapi.responses import JSONResponse, PlainTextResponse, Response

class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    MALFORMED_BODY = "malformed_body"
    MISSING_PARAMETER = "missing_parameter"
    UNAUTHORIZED = "unauthorized"
    INTERNAL = "internal"

class ApiError(Exception):
    """A tagged error raised by pipeline stages and route handlers.

    The pipeline middleware is the only place that turns one into a response.
    """

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or _DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"ApiError({self.kind.value!r}, {self.message!r})"

_DEFAULT_MESSAGES = {
    ErrorKind.NOT_FOUND: "Product not found",
    ErrorKind.VALIDATION: "Invalid product data",
    ErrorKind.MALFORMED_BODY: "Invalid JSON",
    ErrorKind.MISSING_PARAMETER: "Missing required parameter",
    ErrorKind.UNAUTHORIZED: "Unauthorized: Invalid API Key",
    ErrorKind.INTERNAL: "Internal Server Error",
}

_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.MALFORMED_BODY: 400,
    ErrorKind.MISSING_PARAMETER: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.INTERNAL: 500,
}

# everything else goes out as plain text
_JSON_KINDS = {ErrorKind.NOT_FOUND, ErrorKind.VALIDATION, ErrorKind.INTERNAL}

def translate(error: ApiError) -> Response:
    status_code = _STATUS_CODES[error.kind]
    if error.kind is ErrorKind.INTERNAL:
        # never echo internals to the caller
        return JSONResponse(status_code=status_code, content={"error": _DEFAULT_MESSAGES[ErrorKind.INTERNAL]})
    if error.kind in _JSON_KINDS:
        return JSONResponse(status_code=status_code, content={"error": error.message})
    return PlainTextResponse(error.message, status_code=status_code)
