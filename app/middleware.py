"""
Request pipeline: logging, body decoding, API-key auth, product validation.

Every request passes through the stages in PIPELINE_STAGES, in order, before it
reaches a route. A stage short-circuits by raising ApiError. The middleware
installed by install_pipeline() is the one place where errors (from stages or
from route handlers) become responses.
"""

import json
import logging
import math
import secrets
import time
from typing import Any, Awaitable, Callable, Sequence

from fastapi import FastAPI, Request
from pydantic import ValidationError

from .config import Settings
from .core import ProductIn, _make_product_dict
from .errors import ApiError, ErrorKind, translate

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"
PRODUCTS_PATH = "/api/products"

Stage = Callable[[Request, Settings], Awaitable[None]]

# ---------------------------
# Stages
# ---------------------------
def _is_json(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")

def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")

def _parse_finite_float(raw: str) -> float:
    # 1e400 overflows to inf, which can't be rendered back out
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"{raw} is out of range")
    return value

async def decode_body(request: Request, settings: Settings) -> None:
    request.state.payload = None
    if not _is_json(request):
        return
    body = await request.body()
    if not body.strip():
        return
    try:
        request.state.payload = json.loads(body, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except (ValueError, RecursionError):
        # UnicodeDecodeError is a ValueError too; RecursionError comes from very deep nesting
        raise ApiError(ErrorKind.MALFORMED_BODY)

async def authenticate(request: Request, settings: Settings) -> None:
    api_key = request.headers.get(API_KEY_HEADER)
    if not api_key or not secrets.compare_digest(api_key.encode(), settings.api_key.encode()):
        raise ApiError(ErrorKind.UNAUTHORIZED)

def _writes_product(request: Request) -> bool:
    path = request.url.path
    if request.method == "POST":
        return path == PRODUCTS_PATH
    if request.method == "PUT":
        item = path[len(PRODUCTS_PATH) + 1:]
        return path.startswith(PRODUCTS_PATH + "/") and bool(item) and "/" not in item
    return False

async def validate_product(request: Request, settings: Settings) -> None:
    if not _writes_product(request):
        return
    payload = request.state.payload
    if not isinstance(payload, dict):
        raise ApiError(ErrorKind.VALIDATION)
    try:
        ProductIn.model_validate(payload)
    except ValidationError as e:
        logger.debug("product payload rejected: %s", e.errors())
        raise ApiError(ErrorKind.VALIDATION)
    request.state.product_fields = _make_product_dict(payload)

# auth must reject before validation ever looks at the body
PIPELINE_STAGES: Sequence[Stage] = (decode_body, authenticate, validate_product)

# ---------------------------
# Middleware
# ---------------------------
def install_pipeline(app: FastAPI, settings: Settings, stages: Sequence[Stage] = PIPELINE_STAGES) -> None:
    @app.middleware("http")
    async def request_pipeline(request: Request, call_next):
        start = time.perf_counter()
        response = None
        try:
            for stage in stages:
                await stage(request, settings)
            response = await call_next(request)
        except ApiError as e:
            response = translate(e)
        except Exception:
            logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
            response = translate(ApiError(ErrorKind.INTERNAL))
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            target = request.url.path
            if request.url.query:
                target = f"{target}?{request.url.query}"
            status = response.status_code if response is not None else "-"
            logger.info("%s %s - %.0fms status=%s", request.method, target, duration_ms, status)
        return response
