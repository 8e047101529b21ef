from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol, Type

import httpx
from openai import OpenAI, OpenAIError
from pydantic import BaseModel, ValidationError

from article_summarizer.config import PipelineConfig, settings
from article_summarizer.llm_schema import StructuredSummary, ensure_summary_schema

log = logging.getLogger("article_summarizer.llm")

TEMPERATURE = 0.2
TOP_P = 0.9


class StructuredBackend(Protocol):
    """
    Anything that turns a chat-style message list into a record of `schema`.
    Implementations raise on any failure; the extractor decides what to do.
    """

    def complete(
        self,
        *,
        model: str,
        messages: List[Dict[str, str]],
        max_tokens: int,
        temperature: float,
        top_p: float,
        options: Dict[str, Any],
        schema: Type[BaseModel],
    ) -> Any:
        ...


class OpenAIStructuredBackend:
    """
    Structured-output backend over the OpenAI SDK.

    Points at OpenAI or any OpenAI-compatible server (Ollama serves one at
    http://localhost:11434/v1). SDK retries are disabled: one request per call.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
    ) -> None:
        self._client = OpenAI(
            api_key=api_key or settings.openai_api_key,
            base_url=base_url or settings.openai_base_url,
            timeout=httpx.Timeout(timeout_s or settings.request_timeout_s),
            max_retries=0,
        )

    def complete(
        self,
        *,
        model: str,
        messages: List[Dict[str, str]],
        max_tokens: int,
        temperature: float,
        top_p: float,
        options: Dict[str, Any],
        schema: Type[BaseModel],
    ) -> BaseModel:
        log.debug("Sending %d messages to %s (max_tokens=%d)", len(messages), model, max_tokens)

        completion = self._client.chat.completions.parse(
            model=model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
            top_p=top_p,
            response_format=schema,
            # Server-specific knobs such as Ollama's num_ctx travel in the body
            extra_body={"options": options} if options else None,
        )

        if not completion.choices:
            raise RuntimeError("LLM response contained no choices")

        message = completion.choices[0].message
        if getattr(message, "refusal", None):
            raise RuntimeError(f"LLM refused the request: {message.refusal}")
        if message.parsed is None:
            raise RuntimeError("LLM response did not contain a parsed payload")

        return message.parsed


class StructuredExtractor:
    """
    Single-attempt structured extraction.
    Every failure is logged and turned into None; nothing propagates.
    """

    def __init__(
        self,
        backend: StructuredBackend,
        config: PipelineConfig,
        schema: Type[BaseModel] = StructuredSummary,
    ) -> None:
        self._backend = backend
        self._config = config
        self._schema = ensure_summary_schema(schema)

    @property
    def schema(self) -> Type[BaseModel]:
        return self._schema

    def extract(self, messages: List[Dict[str, str]], *, label: str = "") -> Optional[BaseModel]:
        try:
            raw = self._backend.complete(
                model=self._config.model,
                messages=messages,
                max_tokens=self._config.max_summary_length,
                temperature=TEMPERATURE,
                top_p=TOP_P,
                options={"num_ctx": self._config.context_window_size},
                schema=self._schema,
            )
            return self._schema.model_validate(raw)

        except ValidationError as e:
            log.error("Structured output failed validation for %r: %s", label, e)
            return None

        except OpenAIError as e:
            log.error("LLM backend error for %r: %s: %s", label, type(e).__name__, e)
            return None

        except Exception:
            log.exception("Unexpected error summarizing %r", label)
            return None
