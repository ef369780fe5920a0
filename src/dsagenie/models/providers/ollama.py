from __future__ import annotations
from typing import Any, Dict
import time
import httpx
from ollama import Client, ResponseError
from .base import ModelProvider, ChatRequest, ModelResponse, ModelError, ModelTimeout

class OllamaProvider(ModelProvider):
    """Local models through an Ollama server, handy for offline development."""

    def __init__(self, host: str = "http://localhost:11434", request_timeout_s: float = 300, keep_alive: str = "5m", label: str = "Ollama"):
        self.client = Client(host=host, timeout=request_timeout_s)
        self.keep_alive = keep_alive
        self.host = host
        self.request_timeout_s = request_timeout_s
        self.label = label

    def chat(self, req: ChatRequest) -> ModelResponse:
        options = dict(req.params or {})
        keep_alive = options.pop('keep_alive', self.keep_alive)
        # ollama calls it num_predict
        if 'max_tokens' in options:
            options['num_predict'] = options.pop('max_tokens')

        t0 = time.perf_counter()
        try:
            response = self.client.chat(
                model=req.model,
                messages=req.messages,
                options=options,
                keep_alive=keep_alive
            )
        except httpx.TimeoutException as e:
            raise ModelTimeout(f"{self.label} timeout after {self.request_timeout_s}s: {e}") from e
        except ResponseError as e:
            raise ModelError(f"{self.label} API error: {e}") from e
        except Exception as e:
            raise ModelError(f"{self.label} request failed: {e}") from e

        dt = time.perf_counter() - t0

        # the client returns either a dict or a response object depending on version
        raw_response_dict: Dict[str, Any] = {}
        if isinstance(response, dict):
            raw_response_dict = response
            message = response.get('message') or {}
            content = message.get('content', '') if isinstance(message, dict) else ''
            model_name = response.get('model', req.model)
        elif hasattr(response, 'message') and hasattr(response.message, 'content'):
            content = response.message.content or ''
            model_name = getattr(response, 'model', req.model)
            raw_response_dict = {
                key: getattr(response, key) for key in ('total_duration', 'eval_count')
                if isinstance(getattr(response, key, None), int)
            }
        else:
            raise ModelError(f"Received unexpected response structure from {self.label}: {response}")

        meta = {"provider": "ollama", "model": model_name, "latency": dt}
        for key in ['total_duration', 'eval_count']:
            if key in raw_response_dict:
                meta[key] = raw_response_dict[key]

        return ModelResponse(content=content, raw=response, meta=meta)

    def health_check(self) -> bool:
        try:
            self.client.list()
            return True
        except Exception:
            return False
