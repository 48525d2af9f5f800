"""
LLM provider abstraction and response parsing utilities.

Provides a provider interface for chat-completion calls against OpenRouter
(OpenAI-compatible API) and a bounded parser for JSON objects embedded in
model replies.
"""

import json
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import openai
from dotenv import load_dotenv

from tailor.exceptions import MatchServiceError, MissingCredentialError, ResponseParseError

load_dotenv()

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "anthropic/claude-sonnet-4"

# None means the transport default; set OPENROUTER_TIMEOUT to enforce a deadline in seconds
_timeout_env = os.getenv("OPENROUTER_TIMEOUT")
REQUEST_TIMEOUT: Optional[float] = float(_timeout_env) if _timeout_env else None


@dataclass
class LLMResponse:
    """Response from an LLM provider."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int


class LLMProvider(ABC):
    """
    Abstract base for LLM providers.

    Subclasses must:
    - Set _provider_prefix class attribute (e.g., "openrouter")
    - Implement _call_api() for the actual API call
    - Call update_model(model) in __init__ to set model and name
    """

    _provider_prefix: str

    name: str
    model: str

    def update_model(self, model: str):
        """Update the model and refresh the provider name."""
        self.model = model
        self.name = f"{self._provider_prefix}/{model}"

    @abstractmethod
    def _call_api(self, user_prompt: str, system_prompt: Optional[str] = None) -> LLMResponse:
        """Make a single API call."""
        pass

    def generate(self, user_prompt: str, system_prompt: Optional[str] = None) -> LLMResponse:
        """Generate a response with a single synchronous request (no retries)."""
        return self._call_api(user_prompt, system_prompt)


class OpenRouterProvider(LLMProvider):
    """OpenRouter chat completions through the OpenAI SDK."""

    _provider_prefix = "openrouter"

    def __init__(
        self,
        model: Optional[str] = None,
        timeout: Optional[float] = REQUEST_TIMEOUT,
        client: Any = None,
    ):
        api_key = os.getenv("OPENROUTER_API_KEY")
        if not api_key:
            raise MissingCredentialError("OPENROUTER_API_KEY environment variable not set")

        if client is None:
            client_kwargs = {"api_key": api_key, "base_url": OPENROUTER_BASE_URL, "max_retries": 0}
            if timeout is not None:
                client_kwargs["timeout"] = timeout
            client = openai.OpenAI(**client_kwargs)

        self.client = client
        self.update_model(model or os.getenv("OPENROUTER_MODEL") or DEFAULT_MODEL)

    def _call_api(self, user_prompt: str, system_prompt: Optional[str] = None) -> LLMResponse:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})

        try:
            response = self.client.chat.completions.create(model=self.model, messages=messages)
        except openai.APIStatusError as e:
            raise MatchServiceError(
                f"API request failed with status {e.status_code}: {e.response.text}"
            ) from e
        except openai.APIConnectionError as e:
            raise MatchServiceError(f"failed to make request: {e}") from e

        if not response.choices:
            raise MatchServiceError("no response choices returned")

        usage = response.usage
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self.model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )


def get_provider(model: Optional[str] = None) -> LLMProvider:
    """
    Get the configured LLM provider.

    Args:
        model: Model name (default: OPENROUTER_MODEL env var, then DEFAULT_MODEL)

    Raises:
        MissingCredentialError: If OPENROUTER_API_KEY is not set
    """
    return OpenRouterProvider(model=model)


# --- Response Parsing Utilities ---


def strip_code_fences(text: str) -> str:
    """
    Remove a markdown code fence wrapping a model reply.

    Handles an opening ```json or ``` fence and a closing ``` fence.
    """
    text = text.strip()
    if text.startswith("```json"):
        text = text[len("```json") :]
    if text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def extract_json_object(text: str, strip_fences: bool = False) -> Dict[str, Any]:
    """
    Parse the JSON object spanning the first "{" to the last "}" of a reply.

    Succeeds only when that span is one well-formed JSON object. Prose around
    the object is ignored; nothing else is repaired.

    Args:
        text: LLM response text
        strip_fences: Remove markdown code fences before scanning

    Returns:
        Parsed JSON object

    Raises:
        ResponseParseError: If no object is found or it is not valid JSON
    """
    if strip_fences:
        text = strip_code_fences(text)

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or start >= end:
        raise ResponseParseError("no JSON object found in response")

    try:
        result = json.loads(text[start : end + 1])
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"failed to parse JSON: {e}") from e

    if not isinstance(result, dict):
        raise ResponseParseError("response JSON is not an object")

    return result
