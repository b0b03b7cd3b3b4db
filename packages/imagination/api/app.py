"""HTTP API for prompt-to-image generation.

Endpoints:
- GET  /api/health    liveness check
- POST /api/generate  generate images (provider first, local fallback)

The image provider is injected into the app at construction time and kept on
``app.state``; nothing about it is module-global.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
import uuid

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, ConfigDict

from imagination.core.config import AppConfig, load_app_config
from imagination.core.generation import InvalidPromptError, run_generation
from imagination.core.providers import ImageProvider, build_image_provider
from imagination.core.utils.logging import get_logger

logger = logging.getLogger(__name__)

_UNSET: Any = object()

REQUEST_ID_HEADER = "x-request-id"


class GenerateRequestBody(BaseModel):
    """Body of ``POST /api/generate``.

    Fields are untyped on purpose: bad sizes and counts are normalized, and a
    non-string prompt is treated as missing.
    """

    model_config = ConfigDict(extra="ignore")

    prompt: Any = None
    size: Any = None
    n: Any = None


class GenerateResponseBody(BaseModel):
    images: list[str]
    provider: str


def get_image_provider(request: Request) -> ImageProvider | None:
    """Dependency returning the provider configured on the app."""
    return request.app.state.image_provider


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(
    config: AppConfig | None = None,
    provider: ImageProvider | None = _UNSET,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: App config (loaded from file/environment if None).
        provider: Image provider to use. Pass None to force fallback-only;
            omit to build one from ``config.provider``.

    Returns:
        Configured FastAPI app.
    """
    if config is None:
        config = load_app_config()
    if provider is _UNSET:
        provider = build_image_provider(config.provider)

    app = FastAPI(title="Imagination-to-Image API")
    app.state.config = config
    app.state.image_provider = provider

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(_request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected request body: %s", exc.errors())
        return _error(400, "Invalid request body.")

    @app.exception_handler(Exception)
    async def _unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unexpected error: %s", exc, exc_info=exc)
        return _error(500, "Unexpected server error.")

    @app.get("/api/health")
    async def health() -> dict[str, bool]:
        return {"ok": True}

    @app.post("/api/generate", response_model=GenerateResponseBody)
    async def generate(
        request: Request,
        body: GenerateRequestBody | None = None,
        image_provider: ImageProvider | None = Depends(get_image_provider),
    ) -> Any:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request_logger = get_logger(__name__, request_id=request_id)
        body = body or GenerateRequestBody()
        try:
            result = await run_generation(body.prompt, body.size, body.n, image_provider)
        except InvalidPromptError as e:
            return _error(400, e.message)
        except Exception:
            request_logger.exception("Unhandled error in /api/generate")
            return _error(500, "Internal server error.")

        request_logger.info("Generated %d image(s) via %s", len(result.images), result.provider)
        return GenerateResponseBody(images=result.images, provider=result.provider)

    static_dir = config.server.static_dir
    if static_dir and Path(static_dir).is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    elif static_dir:
        logger.debug("Static directory %s not found; not serving static files", static_dir)

    return app
