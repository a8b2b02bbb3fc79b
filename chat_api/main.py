"""FastAPI-Einstiegspunkt für den Chat-Responder."""
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chat_api.core.config import Settings, settings
from chat_api.core.logging_setup import setup_logging
from chat_api.core.models import ErrorResponse
from chat_api.core.responder import VALIDATION_ERROR_MESSAGE, InvalidMessageError
from chat_api.routers import chat as chat_router

UNEXPECTED_ERROR_MESSAGE = "An unexpected server error occurred."

logger = logging.getLogger(__name__)


def _error_body(request: Request, error: str, exc: Optional[Exception] = None) -> dict:
    body = ErrorResponse(error=error)
    if exc is not None and request.app.state.settings.expose_error_details:
        body.details = str(exc)
    return body.model_dump(exclude_none=True)


async def invalid_message_handler(request: Request, exc: InvalidMessageError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(request, exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body, der kein JSON-Objekt ist -> 400; nicht dekodierbares JSON -> 500."""
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        logger.error("Malformed JSON body: %s", exc.errors())
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(request, UNEXPECTED_ERROR_MESSAGE, exc),
        )

    logger.info("Validation Error: %s", VALIDATION_ERROR_MESSAGE)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(request, VALIDATION_ERROR_MESSAGE),
    )


async def catch_unhandled_errors(request: Request, call_next):
    """Fängt alle übrigen Fehler innerhalb der CORS-Middleware ab, damit auch
    500-Antworten die CORS-Header tragen."""
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("Unhandled Server Error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(request, UNEXPECTED_ERROR_MESSAGE, exc),
        )


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Baut die App: Fehlerbehandlung, CORS und Chat-Router unter dem Basis-Pfad."""
    app = FastAPI(
        title="Chat Responder",
        version="1.0.0",
        description="Single-route chat endpoint answering with a fixed set of phrase rules.",
    )
    app.state.settings = app_settings

    app.add_exception_handler(InvalidMessageError, invalid_message_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Reihenfolge: zuletzt hinzugefügte Middleware liegt außen, CORS umschließt die Fehlerbehandlung.
    app.middleware("http")(catch_unhandled_errors)
    # CORS: Standard ist allow-all; in Produktion per CORS_ALLOW_ORIGINS einschränken.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    def startup_event() -> None:
        logger.info("Chat Responder ist initialisiert (Pfad: %s/).", app_settings.api_base_path.rstrip("/"))
        if app_settings.expose_error_details:
            logger.info("Development-Modus: Fehlerdetails werden an den Client gegeben.")

    # Router registrieren
    app.include_router(chat_router.router, prefix=app_settings.api_base_path.rstrip("/"))
    return app


# Setup Logging (File + Console)
setup_logging()

app = create_app()


def run() -> None:
    """Startet den Server via uvicorn (Host/Port aus den Settings)."""
    uvicorn.run("chat_api.main:app", host=settings.host, port=settings.service_port, reload=False)
