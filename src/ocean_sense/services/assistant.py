"""
"Neritic" assistant: a passthrough to a chat-completion endpoint.

Sends the user's question with a fixed system prompt to an OpenAI-compatible
``/chat/completions`` URL and returns the first choice's text. There is no
conversation state and no post-processing; failures turn into canned replies.

Example:
    from ocean_sense.services import assistant
    reply = assistant.ask("Why do post-monsoon cyclones hit the Bay of Bengal?")
    print(reply.reply)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import requests
from pydantic import BaseModel

from ocean_sense.config import get_settings
from ocean_sense.services.http import session

if TYPE_CHECKING:
    from ocean_sense.config import Settings

SYSTEM_PROMPT = (
    "You are Neritic, an AI assistant focused on coastal oceanography, marine biology, "
    "and weather science. Provide concise, factual, and engaging answers."
)

EMPTY_QUESTION_REPLY = "Please ask a valid question."
NO_ANSWER_REPLY = "Sorry, I couldn't process that."
UNAVAILABLE_REPLY = "Neritic is experiencing technical issues. Please try again later."


class AssistantReply(BaseModel):
    """Reply text plus whether the upstream call succeeded."""

    reply: str
    ok: bool = True


def build_payload(message: str, model: str) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": message},
        ],
    }


def _first_choice_text(body: dict[str, Any]) -> str | None:
    choices = body.get("choices") or []
    if not choices:
        return None
    content = (choices[0].get("message") or {}).get("content")
    return content or None


def ask(message: str, settings: Settings | None = None) -> AssistantReply:
    """Forward one question to the completion endpoint."""
    if not message or not message.strip():
        return AssistantReply(reply=EMPTY_QUESTION_REPLY, ok=False)

    settings = settings or get_settings()
    headers = {"Content-Type": "application/json"}
    if settings.assistant_api_key:
        headers["Authorization"] = f"Bearer {settings.assistant_api_key}"

    try:
        resp = session.post(
            settings.assistant_url,
            json=build_payload(message.strip(), settings.assistant_model),
            headers=headers,
        )
        resp.raise_for_status()
        body: dict[str, Any] = resp.json()
    except requests.RequestException as exc:
        print(f"Assistant request failed: {exc}")
        return AssistantReply(reply=UNAVAILABLE_REPLY, ok=False)

    text = _first_choice_text(body)
    if text is None:
        return AssistantReply(reply=NO_ANSWER_REPLY, ok=False)
    return AssistantReply(reply=text)
