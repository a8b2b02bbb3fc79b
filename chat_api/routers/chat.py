"""Chat-Router stellt den einzigen Endpunkt des Chat-Responders bereit."""
import logging

from fastapi import APIRouter, status

from chat_api.core.models import ChatRequest, ChatResponse, ErrorResponse
from chat_api.core.responder import InvalidMessageError, respond

router = APIRouter(tags=["Chat"])
logger = logging.getLogger(__name__)


@router.post(
    "/",
    response_model=ChatResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def handle_message(payload: ChatRequest) -> ChatResponse:
    """Beantwortet eine Nutzernachricht.

    Pipeline:
    1) Validierung der Nachricht (Existenz, Typ, nicht leer nach Trim).
    2) Regelabgleich ("hello", "how are you?") oder Echo der Originalnachricht.
    3) Antwort mit ISO-8601-Zeitstempel.

    Ungültige Nachrichten werfen ``InvalidMessageError``; der Handler in
    ``chat_api.main`` macht daraus ein 400.
    """
    logger.info("Received POST request to /chat")
    logger.info("Request Body: %r", payload.model_dump())

    try:
        response = respond(payload.message)
    except InvalidMessageError as exc:
        logger.info("Validation Error: %s", exc.message)
        raise

    logger.info('User message: "%s"', payload.message)
    logger.info('Bot response: "%s"', response.bot_response)
    return response
