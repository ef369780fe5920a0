from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, List

#unified model errors
class ModelError(RuntimeError): ...
class ModelTimeout(ModelError): ...
class EmptyResponseError(ModelError): ...

@dataclass(frozen=True)
class ChatRequest:
    model: str
    messages: List[Dict[str, Any]]
    params: Dict[str, Any] | None = None

@dataclass(frozen=True)
class ModelResponse:
    content: str
    raw: Any #provider-native response obj/dict
    meta: Dict[str, Any] #timings, token counts, model, created_at, etc.

class ModelProvider(ABC):
    #human readable name used in error messages
    label: str = "model provider"

    @abstractmethod
    def chat(self, req: ChatRequest) -> ModelResponse:
        raise NotImplementedError

    @abstractmethod
    def health_check(self) -> bool:
        raise NotImplementedError

    def missing_credential(self) -> str | None:
        """Name of the env var the provider needs but could not find."""
        return None
