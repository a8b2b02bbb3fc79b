from datetime import datetime, timezone

import pytest

from chat_api.core.responder import (
    VALIDATION_ERROR_MESSAGE,
    InvalidMessageError,
    is_valid_message,
    make_timestamp,
    match_reply,
    respond,
)


def _parse(timestamp: str) -> datetime:
    return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))


@pytest.mark.parametrize("message", ["hello", "Hello", " HELLO ", "HeLLo", "\thello\n"])
def test_greeting_is_case_and_whitespace_insensitive(message):
    assert respond(message).bot_response == "Hi there!"


@pytest.mark.parametrize("message", ["how are you?", "How Are You?", "  HOW ARE YOU?  "])
def test_how_are_you_phrase(message):
    assert respond(message).bot_response == "I'm just a bot, but I'm doing great!"


def test_echo_keeps_original_message_verbatim():
    assert respond("  Hello World  ").bot_response == "You said:   Hello World  "
    assert respond("What's the weather?").bot_response == "You said: What's the weather?"


def test_near_misses_fall_through_to_echo():
    # Only exact matches after normalisation count
    assert match_reply("hello!") == "You said: hello!"
    assert match_reply("how are you") == "You said: how are you"
    assert match_reply("hello there") == "You said: hello there"


@pytest.mark.parametrize("value", [None, 0, 42, 1.5, True, False, [], ["hello"], {}, {"text": "hello"}])
def test_non_string_values_are_rejected(value):
    assert is_valid_message(value) is False
    with pytest.raises(InvalidMessageError) as exc_info:
        respond(value)
    assert str(exc_info.value) == VALIDATION_ERROR_MESSAGE


@pytest.mark.parametrize("value", ["", " ", "   ", "\n\t  "])
def test_blank_strings_are_rejected(value):
    with pytest.raises(InvalidMessageError) as exc_info:
        respond(value)
    assert exc_info.value.message == VALIDATION_ERROR_MESSAGE


def test_validation_error_is_stable_across_calls():
    messages = []
    for _ in range(3):
        with pytest.raises(InvalidMessageError) as exc_info:
            respond("   ")
        messages.append(exc_info.value.message)
    assert messages == [VALIDATION_ERROR_MESSAGE] * 3


def test_timestamp_is_iso8601_and_taken_at_call_time():
    before = datetime.now(timezone.utc)
    response = respond("hello")
    after = datetime.now(timezone.utc)

    stamp = _parse(response.timestamp)
    assert stamp.tzinfo is not None
    assert stamp >= before
    assert stamp <= after


def test_make_timestamp_format():
    moment = datetime(2024, 1, 2, 3, 4, 5, 678900, tzinfo=timezone.utc)
    assert make_timestamp(moment) == "2024-01-02T03:04:05.678900Z"


def test_response_serializes_with_camel_case_alias():
    body = respond("hello").model_dump(by_alias=True)
    assert set(body) == {"botResponse", "timestamp"}
    assert body["botResponse"] == "Hi there!"


def test_timestamp_never_precedes_call():
    for _ in range(200):
        before = datetime.now(timezone.utc)
        assert _parse(respond("hello").timestamp) >= before


@pytest.mark.parametrize("value", ["\ufeff", "\u00a0", " \u3000\u2028 ", "\ufeff\t\ufeff"])
def test_unicode_whitespace_counts_as_blank(value):
    with pytest.raises(InvalidMessageError):
        respond(value)


def test_unicode_whitespace_is_trimmed_for_matching():
    assert respond("\ufeffhello\u00a0").bot_response == "Hi there!"


def test_control_separators_are_not_whitespace():
    # str.isspace() kennt \x1c; JavaScript-trim() nicht
    assert is_valid_message("\x1c") is True
    assert respond("\x1c").bot_response == "You said: \x1c"
