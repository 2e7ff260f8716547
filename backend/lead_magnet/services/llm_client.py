"""Structured-output LLM client: prompt in, schema-validated object out."""

import json
import logging
from typing import TypeVar

import anthropic
import openai
from pydantic import BaseModel, ValidationError

from lead_magnet.config import Settings
from lead_magnet.exceptions import LLMError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

SCHEMA_INSTRUCTIONS = """

## Output format
Return ONLY a JSON object, no markdown code fences, that validates against this JSON Schema:
{schema}"""


class LLMClient:
    """Calls the configured LLM provider and validates replies against a pydantic schema.

    One instance is built per process and shared across requests. Failures of
    any kind (transport, HTTP status, empty replies, unparseable or mismatched
    JSON) raise ``LLMError``; calls are never retried here.
    """

    def __init__(self, settings: Settings, openai_client=None, anthropic_client=None):
        self.settings = settings
        self._openai_client = openai_client
        self._anthropic_client = anthropic_client

    def _get_openai_client(self):
        """Lazy load OpenAI client."""
        if self._openai_client is None:
            if not self.settings.openai_api_key:
                raise LLMError("OpenAI API key is not configured")
            self._openai_client = openai.OpenAI(
                api_key=self.settings.openai_api_key,
                timeout=self.settings.llm_timeout_seconds,
                max_retries=0,
            )
        return self._openai_client

    def _get_anthropic_client(self):
        """Lazy load Anthropic client."""
        if self._anthropic_client is None:
            if not self.settings.anthropic_api_key:
                raise LLMError("Anthropic API key is not configured")
            self._anthropic_client = anthropic.Anthropic(
                api_key=self.settings.anthropic_api_key,
                timeout=self.settings.llm_timeout_seconds,
                max_retries=0,
            )
        return self._anthropic_client

    def _temperature(self, model: str) -> float:
        # Reasoning models only accept the default temperature
        return 1.0 if model.startswith("o") else self.settings.llm_temperature

    def _call_openai(self, system_prompt: str, user_prompt: str, model: str) -> str:
        client = self._get_openai_client()

        response = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=self._temperature(model),
            response_format={"type": "json_object"},
        )

        if not response.choices:
            raise LLMError("Invalid response", "OpenAI reply has no choices")
        return response.choices[0].message.content or ""

    def _call_anthropic(self, system_prompt: str, user_prompt: str, model: str) -> str:
        client = self._get_anthropic_client()

        response = client.messages.create(
            model=model,
            max_tokens=4096,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
            temperature=self._temperature(model),
        )

        text = getattr(response.content[0], "text", None) if response.content else None
        if not isinstance(text, str):
            raise LLMError("Invalid response", "Anthropic reply has no text block")
        return text

    def _call_llm(self, system_prompt: str, user_prompt: str) -> str:
        """Call configured LLM provider, translating SDK errors into ``LLMError``."""
        provider = self.settings.llm_provider
        model = self.settings.llm_model

        logger.info(f"Calling {provider} {model}...")

        try:
            if provider == "openai":
                return self._call_openai(system_prompt, user_prompt, model)
            elif provider == "anthropic":
                return self._call_anthropic(system_prompt, user_prompt, model)
            else:
                raise LLMError(f"Unknown LLM provider: {provider}")
        except LLMError:
            raise
        except (openai.APITimeoutError, anthropic.APITimeoutError) as e:
            raise LLMError("Request timed out", str(e)) from e
        except (openai.APIStatusError, anthropic.APIStatusError) as e:
            raise LLMError(_status_reason(e.status_code), str(e)) from e
        except (openai.APIConnectionError, anthropic.APIConnectionError) as e:
            raise LLMError("LLM service unavailable", str(e)) from e
        except (openai.APIError, anthropic.APIError) as e:
            raise LLMError("Invalid response", str(e)) from e

    def _parse_json(self, response: str) -> dict:
        """Parse JSON from LLM response, handling code fences."""
        content = response.strip()

        # Remove markdown code fences if present
        if content.startswith("```"):
            first_newline = content.find("\n")
            if first_newline != -1:
                content = content[first_newline + 1:]
            if content.endswith("```"):
                content = content[:-3].rstrip()

        return json.loads(content)

    def query(self, system_prompt: str, user_prompt: str, schema: type[T]) -> T:
        """Run a prompt and validate the JSON reply against ``schema``.

        Args:
            system_prompt: Instructions for the model; the JSON schema is appended
            user_prompt: Request-specific content
            schema: Pydantic model the reply must validate against

        Returns:
            Validated ``schema`` instance

        Raises:
            LLMError: On transport failure or when the reply does not match the schema
        """
        schema_json = json.dumps(schema.model_json_schema(), indent=2)
        full_system_prompt = system_prompt + SCHEMA_INSTRUCTIONS.format(schema=schema_json)

        response = self._call_llm(full_system_prompt, user_prompt)

        try:
            data = self._parse_json(response)
            return schema.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"LLM reply did not match {schema.__name__}: {e}")
            raise LLMError("Invalid response", str(e)) from e


def _status_reason(status_code: int) -> str:
    """Short, stable description of an HTTP error from the LLM provider."""
    if status_code == 429:
        return "Rate limit exceeded. Please try again later."
    if status_code in (401, 403):
        return "Invalid API key or authentication error"
    if status_code >= 500:
        return "LLM service error"
    return f"LLM request failed with HTTP {status_code}"
