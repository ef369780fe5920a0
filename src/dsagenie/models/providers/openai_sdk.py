from __future__ import annotations
from typing import Dict, Optional
import time
import logging
from os import getenv

from openai import OpenAI
from openai import APIError, APITimeoutError

from .base import ModelProvider, ChatRequest, ModelResponse, ModelError, ModelTimeout

logger = logging.getLogger(__name__)


class OpenAIProvider(ModelProvider):
    """Chat completions over any OpenAI-compatible endpoint (Groq, OpenRouter, OpenAI)."""

    def __init__(self, base_url: Optional[str] = None, api_key: Optional[str] = None, api_key_env: str = "OPENAI_API_KEY", label: str = "OpenAI", default_headers: Optional[Dict[str, str]] = None, timeout: float = 60.0, **kwargs):
        self.base_url = base_url
        self.timeout = timeout
        self.api_key_env = api_key_env
        self.label = label

        api_key = api_key or getenv(api_key_env)
        if api_key:
            self.client = OpenAI(
                base_url=base_url,
                api_key=api_key,
                default_headers=default_headers or {},
                timeout=timeout,
                max_retries=0,
                **kwargs
            )
        else:
            # a missing key is reported per request, not at startup
            self.client = None

    def missing_credential(self) -> Optional[str]:
        return None if self.client is not None else self.api_key_env

    def chat(self, req: ChatRequest) -> ModelResponse:
        if self.client is None:
            raise ModelError(f"{self.api_key_env} not set. Add it to the backend .env file or the deployment environment.")

        params = dict(req.params or {})
        completion_params = {
            "model": req.model,
            "messages": req.messages,
            **params
        }

        # upstream messages are raised unchanged so clients see them as is
        t0 = time.perf_counter()
        try:
            response = self.client.chat.completions.create(**completion_params)
        except APITimeoutError as e:
            logger.debug(f"{self.label} timeout for {req.model}")
            raise ModelTimeout(e.message) from e
        except APIError as e:
            logger.debug(f"{self.label} API error for {req.model}: {type(e).__name__}")
            raise ModelError(e.message) from e
        except Exception as e:
            raise ModelError(str(e)) from e

        dt = time.perf_counter() - t0
        logger.debug(f"{self.label} completion for {req.model} in {dt:.2f}s")

        try:
            content = response.choices[0].message.content or ""
        except (IndexError, AttributeError) as e:
            raise ModelError(f"Invalid response structure from {self.label} API: {e}") from e

        meta = {
            "provider": "openai",
            "model": getattr(response, 'model', req.model),
            "latency": dt,
            "base_url": self.base_url or "https://api.openai.com/v1",
        }

        if getattr(response, 'usage', None):
            try:
                meta["usage"] = response.usage.model_dump()
            except AttributeError:
                meta["usage"] = {
                    "prompt_tokens": getattr(response.usage, 'prompt_tokens', None),
                    "completion_tokens": getattr(response.usage, 'completion_tokens', None),
                    "total_tokens": getattr(response.usage, 'total_tokens', None)
                }

        meta["finish_reason"] = getattr(response.choices[0], 'finish_reason', None)
        if hasattr(response, 'id'):
            meta["id"] = response.id

        return ModelResponse(content=content, raw=response, meta=meta)

    def cleanup(self):
        if self.client is not None:
            self.client.close()

    def health_check(self) -> bool:
        """SYNCHRONOUS health check - blocks until complete"""
        if self.client is None:
            return False
        try:
            _ = self.client.models.list()
            return True
        except Exception:
            return False
