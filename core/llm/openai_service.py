"""
OpenAI Service - LLM implementation over any OpenAI-compatible endpoint.

Provides structured data extraction and conversational replies. The default
endpoint is Gemini's OpenAI-compatible API; Ollama or OpenAI work the same way.
"""
from typing import Dict, Any, List, Optional, Tuple
import json
import logging
import copy
import re

import openai
from openai import AsyncOpenAI
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity import RetryCallState
from core.llm.interfaces import LLMProvider

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_MODEL = "gemini-2.5-flash"

RETRYABLE_ERRORS = (
    openai.RateLimitError,
    openai.APITimeoutError,
    openai.APIConnectionError,
    openai.InternalServerError,
)


# ---------------------------------------------------------------------------
# Retry helpers
# ---------------------------------------------------------------------------

def _log_retry(retry_state: RetryCallState) -> None:
    """Log a warning before each retry sleep."""
    exc = retry_state.outcome.exception()
    wait = retry_state.next_action.sleep if retry_state.next_action else 0
    if isinstance(exc, openai.RateLimitError):
        logger.warning(
            "Rate limit hit (attempt %s). Waiting %.1fs before retry. Details: %s",
            retry_state.attempt_number, wait, exc,
        )
    else:
        logger.warning(
            "Transient API error (attempt %s). Waiting %.1fs before retry. Details: %s",
            retry_state.attempt_number, wait, exc,
        )


def _parse_retry_after(value: str) -> float:
    """Parse a reset-timer header value like '7', '1s', '500ms', '1m30s' into seconds."""
    value = (value or "").strip()
    if not value:
        return 0.0
    try:
        return float(value)
    except ValueError:
        pass
    total = 0.0
    for amount, unit in re.findall(r"([\d.]+)(ms|s|m|h)", value):
        a = float(amount)
        if unit == "ms":
            total += a / 1000
        elif unit == "s":
            total += a
        elif unit == "m":
            total += a * 60
        else:  # h
            total += a * 3600
    return total


def _wait_respecting_retry_after(retry_state: RetryCallState) -> float:
    """Return how long tenacity should sleep before the next attempt.

    For ``RateLimitError``: honours the server's ``retry-after`` header.
    For all other retryable errors: capped exponential backoff.
    """
    exc = retry_state.outcome.exception()
    if isinstance(exc, openai.RateLimitError):
        try:
            wait = _parse_retry_after(exc.response.headers.get("retry-after", ""))
        except AttributeError:
            wait = 0.0
        if wait > 0:
            return min(wait, 60)

    exp = wait_exponential(multiplier=1, min=1, max=30)
    return exp(retry_state)


def _unwrap_schema_spec(spec: Dict[str, Any]) -> Tuple[str, bool, Dict[str, Any]]:
    """Unwrap a schema spec to extract name, strict flag, and raw JSON schema.

    Args:
        spec: Either a wrapped spec {'name': str, 'strict': bool, 'schema': {...}}
              or a raw JSON schema dict

    Returns:
        Tuple of (name, strict, raw_schema)
    """
    if isinstance(spec, dict) and "schema" in spec and "name" in spec:
        return spec.get("name", "structured_response"), bool(spec.get("strict", False)), spec["schema"]
    return "structured_response", False, spec


class OpenAIService(LLMProvider):
    """
    OpenAI-compatible LLM Service.

    Structured requests use JSON Schema mode; chat requests return plain text.
    Transient transport errors are retried up to ``max_attempts`` times.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = DEFAULT_BASE_URL,
        model_config: Optional[Dict[str, Any]] = None,
    ):
        self.model_config = model_config or {}
        self.model = self.model_config.get('model', DEFAULT_MODEL)
        self.temperature = self.model_config.get('temperature', 0.7)
        self.max_attempts = int(self.model_config.get('max_attempts', 3))

        client_kwargs: Dict[str, Any] = {}
        if api_key:
            client_kwargs['api_key'] = api_key
        if base_url:
            client_kwargs['base_url'] = base_url
        if self.model_config.get('request_timeout_seconds'):
            client_kwargs['timeout'] = float(self.model_config['request_timeout_seconds'])

        self.client = AsyncOpenAI(**client_kwargs)

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            wait=_wait_respecting_retry_after,
            stop=stop_after_attempt(max(1, self.max_attempts)),
            before_sleep=_log_retry,
            reraise=True,
        )

    async def extract_structured_data(
        self,
        schema_spec: Dict,
        system_prompt: str,
        user_message: str,
    ) -> Dict[str, Any]:
        """Run a JSON Schema mode request and parse the reply.

        Raises:
            ValueError: If schema_spec is not an object schema.
            json.JSONDecodeError: If the reply is not JSON.
            openai.OpenAIError: On transport failure after retries.
        """
        name, strict, raw_schema = _unwrap_schema_spec(schema_spec)
        runtime_schema = copy.deepcopy(raw_schema)

        if runtime_schema.get("type") != "object" or "properties" not in runtime_schema:
            raise ValueError(f"Not a valid JSON Schema object. Top-level keys: {list(runtime_schema.keys())}")

        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_message},
        ]

        async for attempt in self._retrying():
            with attempt:
                response = await self.client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=self.temperature,
                    response_format={
                        "type": "json_schema",
                        "json_schema": {
                            "name": name,
                            "schema": runtime_schema,
                            "strict": strict,
                        },
                    },
                )

        try:
            content = response.choices[0].message.content
            data = json.loads(content)
        except (json.JSONDecodeError, TypeError, IndexError, AttributeError) as e:
            logger.error(f"Failed to parse structured response for {name}: {e}")
            raise

        if not isinstance(data, dict):
            raise ValueError(f"Structured response for {name} is not a JSON object")

        logger.debug("Structured response %s (keys: %s)", name, list(data.keys())[:10])
        return data

    async def generate_reply(self, system_prompt: str, messages: List[Dict[str, str]]) -> str:
        """Run one chat turn and return the reply text ('' when the model sends nothing)."""
        payload = [{"role": "system", "content": system_prompt}, *messages]

        async for attempt in self._retrying():
            with attempt:
                response = await self.client.chat.completions.create(
                    model=self.model,
                    messages=payload,
                    temperature=self.temperature,
                )

        try:
            return (response.choices[0].message.content or "").strip()
        except (IndexError, AttributeError) as e:
            logger.error(f"Failed to read chat response: {e}")
            raise
