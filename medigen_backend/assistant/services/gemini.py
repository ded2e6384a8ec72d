# assistant/services/gemini.py
from __future__ import annotations

import json
import logging
from http.client import HTTPException
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from django.conf import settings

logger = logging.getLogger(__name__)

GEMINI_BASE = "https://generativelanguage.googleapis.com/v1beta"

MISSING_KEY_REPLY = "AI service unavailable (Missing Key)."
FAILURE_REPLY = "Server connection failed."
EMPTY_REPLY = "No response generated."

SYSTEM_PROMPT = """You are 'UpcharSahayak', a strict and precise Indian healthcare assistant.

CORE INSTRUCTION: Provide ONLY the essential information requested. Do not use filler sentences, pleasantries, or long explanations unless asked.

GUIDELINES:
1. DIRECT ANSWERS: Start directly with the answer. No "Here is the information", "Namaste", or "I can help with that".
2. FORMAT: Use bullet points for readability.
3. CONTENT: For medicines, provide ONLY:
   - Primary Use
   - Key Dosage (Adults)
   - Major Side Effects
   - Approx Generic Price (₹)
4. RESTRICTIONS:
   - NO Medical Diagnosis.
   - NO conversational filler.
   - If unsafe, simply say: "Consult a doctor immediately."
5. AUDIENCE: Simple English for Indian users. Keep it short.
"""


class AssistantUnavailable(RuntimeError):
    pass


def _assistant_cfg() -> dict:
    cfg = getattr(settings, "ASSISTANT", {}) or {}
    return cfg if isinstance(cfg, dict) else {}


def _api_key() -> str:
    return (_assistant_cfg().get("GEMINI_API_KEY") or "").strip()


def _request_json(url: str, *, body: dict, timeout: int) -> dict[str, Any]:
    req = Request(
        url,
        data=json.dumps(body, ensure_ascii=False).encode("utf-8"),
        headers={
            "Content-Type": "application/json",
            "Accept": "application/json",
            "x-goog-api-key": _api_key(),
        },
        method="POST",
    )

    try:
        with urlopen(req, timeout=timeout) as resp:
            raw = resp.read().decode("utf-8", errors="replace")
    except HTTPError as e:
        raise AssistantUnavailable(f"Gemini HTTPError: {e.code}") from e
    except URLError as e:
        raise AssistantUnavailable(f"Gemini URLError: {e}") from e
    except (OSError, HTTPException) as e:
        # read timeouts and dropped connections surface here
        raise AssistantUnavailable(f"Gemini connection error: {e!r}") from e

    try:
        parsed = json.loads(raw)
    except ValueError as e:
        raise AssistantUnavailable("Gemini returned non-JSON body") from e

    if not isinstance(parsed, dict):
        raise AssistantUnavailable("Gemini returned unexpected payload")
    return parsed


def _extract_text(payload: dict) -> str:
    parts = []
    for candidate in payload.get("candidates") or []:
        content = (candidate or {}).get("content") or {}
        for part in content.get("parts") or []:
            text = (part or {}).get("text")
            if text:
                parts.append(text)
        if parts:
            break
    return "".join(parts).strip()


def generate_content(user_text: str) -> str:
    """
    One-shot generateContent call with the fixed system prompt.
    Raises AssistantUnavailable on any transport / payload failure.
    """
    cfg = _assistant_cfg()
    model = quote((cfg.get("GEMINI_MODEL") or "").strip(), safe="-._")
    timeout = int(cfg.get("TIMEOUT") or 20)

    body = {
        "systemInstruction": {"parts": [{"text": SYSTEM_PROMPT}]},
        "contents": [{"role": "user", "parts": [{"text": user_text}]}],
    }
    payload = _request_json(
        f"{GEMINI_BASE}/models/{model}:generateContent",
        body=body,
        timeout=timeout,
    )
    return _extract_text(payload)


def ask_assistant(user_text: str) -> str:
    """
    Always returns display text; failures become fixed fallback replies.
    """
    if not _api_key():
        return MISSING_KEY_REPLY

    try:
        text = generate_content(user_text)
    except AssistantUnavailable:
        logger.exception("Assistant call failed")
        return FAILURE_REPLY

    return text or EMPTY_REPLY
