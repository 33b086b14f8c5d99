# Transcript Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""
Low-level LLM API wrapper.

This module encapsulates the direct OpenAI SDK calls used by the analysis step.

Environment variables:
    - `LLM_OPENAI_API_KEY`: API key for the OpenAI-compatible endpoint
    - `LLM_OPENAI_MODEL`: Model identifier
    - `LLM_OPENAI_BASE_URL`: Optional base URL (defaults to the OpenAI API)
"""

import json
import os

from typing import Any, TypeAlias, cast

from openai import AsyncOpenAI
from openai.types.chat import ChatCompletionMessageParam

JsonValue: TypeAlias = (
    dict[str, "JsonValue"]
    | list["JsonValue"]
    | str
    | int
    | float
    | bool
    | None
)


class MissingCredentialsError(RuntimeError):
    """Raised when a required LLM environment variable is not set."""

    pass


def require_env(name: str) -> str:
    """
    Get a required environment variable.

    Args:
        name:
            Environment variable name.

    Returns:
        The environment variable value.

    Raises:
        MissingCredentialsError:
            If the variable is missing or blank.
    """

    value = os.environ.get(name)
    if not value or not value.strip():
        raise MissingCredentialsError(f"Missing required environment variable: {name}")
    return value.strip()


def _client() -> AsyncOpenAI:
    base_url = os.environ.get("LLM_OPENAI_BASE_URL")
    return AsyncOpenAI(
        api_key=require_env("LLM_OPENAI_API_KEY"),
        base_url=base_url.rstrip("/") if base_url else None,
    )


def _parse_json_content(content: str) -> JsonValue:
    """
    Parse JSON content from the model response.

    Models occasionally wrap JSON in a Markdown code fence even in JSON mode;
    the fence is removed before parsing.

    Returns:
        Parsed JSON value. Returns None for empty responses.
    """

    text = content.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        text = text.rsplit("```", 1)[0]

    if not text.strip():
        return None
    return cast(JsonValue, json.loads(text))


async def ai_conversation_json(
    messages: list[ChatCompletionMessageParam],
    *,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> JsonValue:
    """
    Run a chat completion call in JSON mode.

    Args:
        messages:
            OpenAI chat message list. At least one message must mention JSON.
        temperature:
            Optional sampling temperature.
        max_tokens:
            Optional response length limit.

    Returns:
        Parsed JSON result. API and parsing errors are returned as objects with
        `_error` and `_raw` fields.

    Raises:
        MissingCredentialsError:
            If the API key or model is not configured.
    """

    client = _client()
    model = require_env("LLM_OPENAI_MODEL")

    completion_kwargs: dict[str, Any] = {"response_format": {"type": "json_object"}}
    if temperature is not None:
        completion_kwargs["temperature"] = temperature
    if max_tokens is not None:
        completion_kwargs["max_tokens"] = max_tokens

    try:
        response = await client.chat.completions.create(
            model=model,
            messages=messages,
            **completion_kwargs,
        )
    except Exception as error:  # noqa: BLE001
        return {
            "_error": f"Error calling the OpenAI API: {error}",
            "_raw": None,
        }

    if not response.choices:
        return {"_error": "No response received from the OpenAI API", "_raw": None}

    content = response.choices[0].message.content or ""
    if not content.strip():
        return {"_error": "Empty response from the OpenAI API", "_raw": content}

    try:
        return _parse_json_content(content)
    except json.JSONDecodeError as error:
        return {
            "_error": f"Invalid JSON response: {error}",
            "_raw": content,
        }
