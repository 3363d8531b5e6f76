"""Response Middleware: cross-origin headers on every response.

Invariants:
    - Every response carries Allow-Origin, Allow-Methods and Allow-Headers,
      with or without an Origin request header
    - Unexpected exceptions become the 500 envelope here, so they get headers too
    - Preflight (OPTIONS) answering stays with CORSMiddleware, which runs inside this
"""

from fastapi import FastAPI, Request

from nexuscore.api.error_handlers import internal_error_response
from nexuscore.config import Settings


def allowed_origin(origins: list[str], request_origin: str | None) -> str | None:
    """Value for Access-Control-Allow-Origin, or None when the origin is refused."""
    if "*" in origins:
        return "*"
    if request_origin in origins:
        return request_origin
    return None


def register_cors_headers(app: FastAPI, settings: Settings) -> None:
    """Register the outermost HTTP middleware. Call after add_middleware(CORSMiddleware)."""
    allow_methods = ", ".join(settings.cors_methods)
    allow_headers = ", ".join(settings.cors_headers)

    @app.middleware("http")
    async def cors_headers(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception as exc:
            response = internal_error_response(request, exc)

        origin = allowed_origin(settings.cors_origins, request.headers.get("origin"))
        if origin is not None:
            response.headers["Access-Control-Allow-Origin"] = origin
            if origin != "*":
                response.headers.add_vary_header("Origin")
        response.headers["Access-Control-Allow-Methods"] = allow_methods
        response.headers["Access-Control-Allow-Headers"] = allow_headers
        return response
