from __future__ import annotations

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers

from receipt_bridge import __version__
from receipt_bridge.config import Settings, configure_logging, get_settings
from receipt_bridge.services import PrintService
from receipt_bridge.views import pages_router, print_router


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """CORS middleware answering accepted preflights with an empty 200."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response

        headers = {
            key: value for key, value in response.headers.items() if key not in ("content-length", "content-type")
        }
        return Response(status_code=200, headers=headers)


def create_app(*, settings: Settings | None = None, print_service: PrintService | None = None) -> FastAPI:
    settings = settings or get_settings()

    # Configure logging first
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Receipt Printer Bridge",
        version=__version__,
        description="Renders text and barcode print jobs into ESC/POS and writes them to a parallel-port receipt printer.",
    )

    app.state.settings = settings
    app.state.print_service = print_service or PrintService.from_settings(settings)

    # Configure CORS
    cors_env = settings.cors_allowed_origins
    if cors_env.strip() == "*" or cors_env.strip() == "":
        allowed_origins = ["*"]
    else:
        allowed_origins = [o.strip() for o in cors_env.split(",") if o.strip()]

    app.add_middleware(
        EmptyPreflightCORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(pages_router)
    app.include_router(print_router)

    return app


app = create_app()
