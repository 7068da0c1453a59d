"""Async OpenAI client wrapper for generating reading text."""

from __future__ import annotations

import os
from typing import Optional

from openai import AsyncOpenAI


class LLMUnavailableError(RuntimeError):
    """Raised when the OpenAI client cannot be initialized or the call fails."""


def _client() -> AsyncOpenAI:
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise LLMUnavailableError("OPENAI_API_KEY is not configured")

    timeout = float(os.getenv("OPENAI_TIMEOUT", "60"))
    return AsyncOpenAI(api_key=api_key, timeout=timeout)


async def generate_text(
    system_prompt: str,
    user_prompt: str,
    temperature: float = 0.8,
    model: Optional[str] = None,
) -> str:
    """Run one chat completion and return the stripped message text."""

    client = _client()
    model_name = model or os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    try:
        result = await client.chat.completions.create(
            model=model_name,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=temperature,
        )
    except Exception as exc:  # pragma: no cover - network interaction
        error_msg = str(exc)
        if "rate_limit" in error_msg.lower():
            raise LLMUnavailableError(f"OpenAI rate limit exceeded: {error_msg}") from exc
        if "invalid_api_key" in error_msg.lower() or "authentication" in error_msg.lower():
            raise LLMUnavailableError(f"Invalid OpenAI API key: {error_msg}") from exc
        raise LLMUnavailableError(f"OpenAI API error: {error_msg}") from exc

    content = result.choices[0].message.content if result.choices else ""
    return (content or "").strip()
