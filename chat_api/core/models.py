"""API-Modelle für den Chat-Responder: eingehende Nachricht, Bot-Antwort
mit Zeitstempel und Fehlerobjekt."""
from typing import Any, Optional

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Eingehende Anfrage. `message` ist untypisiert; die
    Prüfung auf Existenz, Typ und Inhalt übernimmt der Responder."""

    message: Any = None

    class Config:
        extra = "ignore"


class ChatResponse(BaseModel):
    """Antwort des Bots inkl. ISO-8601-Zeitstempel der Erzeugung."""

    bot_response: str = Field(alias="botResponse")
    timestamp: str

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
