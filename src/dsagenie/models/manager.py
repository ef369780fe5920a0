from __future__ import annotations
from typing import Optional, Dict, Any, List, Union
from pathlib import Path
from dataclasses import dataclass
from enum import Enum
from os import getenv
import yaml
import time
import logging
import threading
from contextlib import contextmanager

from .prompts import PromptManager
from .providers.base import ChatRequest, ModelProvider, ModelResponse, ModelError
from .providers.ollama import OllamaProvider
from .providers.openai_sdk import OpenAIProvider
from .services.youtube import YouTubeService

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "config.yaml"
DEFAULT_PROMPTS_DIR = PACKAGE_ROOT / "prompts"


def config_path_from_env() -> Path:
    return Path(getenv("DSAGENIE_CONFIG") or DEFAULT_CONFIG_PATH)


def read_config(config_path: Union[Path, str, None] = None) -> Dict[str, Any]:
    config_path = Path(config_path) if config_path else config_path_from_env()
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")
    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Provider(Enum):
    OLLAMA = "ollama"
    OPENAI = "openai"

class Service(Enum):
    YOUTUBE = "youtube"

@dataclass(frozen=True)
class TaskConfig:
    provider: str
    model: str
    params: Dict[str, Any]

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "TaskConfig":
        model = raw["model"]
        # e.g. GROQ_MODEL swaps the model without touching the yaml
        if raw.get("model_env"):
            model = getenv(raw["model_env"]) or model
        return cls(provider=raw["provider"], model=model, params=dict(raw.get("params") or {}))


class ModelManager:
    def __init__(self, config_path: Union[Path, str, None] = None, prompts_dir: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else config_path_from_env()
        self.config = self._load_config()
        self._providers: Dict[str, ModelProvider] = {}
        self._stats: Dict[str, Dict[str, float]] = {} #performance tracking
        self._stats_lock = threading.Lock() #calls arrive from the request threadpool
        self.prompts = PromptManager(prompts_dir or DEFAULT_PROMPTS_DIR)
        self._youtube = None #lazy load youtube service

    def _load_config(self) -> Dict:
        config = read_config(self.config_path)

        if 'providers' not in config:
            raise ValueError("Config missing 'providers'")
        if 'tasks' not in config:
            raise ValueError("Config missing 'tasks'")
        
        for task_name, task_cfg in config['tasks'].items():
            if 'provider' not in task_cfg:
                raise ValueError(f"Task '{task_name}' missing provider")
            if 'model' not in task_cfg:
                raise ValueError(f"Task '{task_name}' missing model")
            if task_cfg['provider'] not in config['providers']:
                raise ValueError(f"Task '{task_name}' references unknown provider '{task_cfg['provider']}'")

        for provider_name, provider_cfg in config['providers'].items():
            if provider_cfg.get('type') not in {p.value for p in Provider}:
                raise ValueError(f"Provider '{provider_name}' has unknown type '{provider_cfg.get('type')}'")
        
        return config

    @property
    def youtube(self) -> YouTubeService:
        """Access the playlist service directly"""
        if self._youtube is None:
            services = self.config.get('services') or {}
            youtube_config = services.get(Service.YOUTUBE.value) or {}
            settings = youtube_config.get('settings')
            if not isinstance(settings, dict):
                settings = {}
            self._youtube = YouTubeService(**settings)
        return self._youtube

    def _get_provider(self, provider_name: str) -> ModelProvider:
        if provider_name in self._providers:
            return self._providers[provider_name]
        if provider_name not in self.config['providers']:
            raise ValueError(f"Unknown provider: {provider_name}")
        
        provider_cfg = self.config["providers"][provider_name]
        provider_type = Provider(provider_cfg["type"])
        settings = provider_cfg.get("settings") or {}

        if provider_type is Provider.OLLAMA:
            provider = OllamaProvider(**settings)
        else:
            provider = OpenAIProvider(**settings)
        self._providers[provider_name] = provider
        logger.info(f"initialized provider: {provider_name}")
        return provider

    def provider_for(self, task: str) -> ModelProvider:
        return self._get_provider(self.task_config(task).provider)

    def task_config(self, task: str) -> TaskConfig:
        if task not in self.config["tasks"]:
            raise ValueError(f"Unknown task: {task}")
        return TaskConfig.from_dict(self.config["tasks"][task])

    def missing_credentials(self) -> List[str]:
        """Env vars that tasks depend on but are not set, in task order."""
        missing: List[str] = []
        for task in self.config["tasks"]:
            name = self.provider_for(task).missing_credential()
            if name and name not in missing:
                missing.append(name)
        return missing

    def call(self, task: str, prompt_ref: str, variables: Dict[str, Any], **params_override) -> ModelResponse:
        start_time = time.perf_counter()
        task_cfg = self.task_config(task)

        prompt = self.prompts.load_prompt(prompt_ref)
        rendered = self.prompts.render(prompt_ref, variables)

        params = {**task_cfg.params, **params_override}
        if prompt.stop_sequences:
            params.setdefault("stop", list(prompt.stop_sequences))

        request = ChatRequest(
            model=task_cfg.model,
            messages=rendered,
            params=params,
        )
        
        provider = self._get_provider(task_cfg.provider)
        try:
            response = provider.chat(request)
        except ModelError:
            elapsed_ms = (time.perf_counter() - start_time) * 1000
            self._track_stats(task, elapsed_ms, success=False)
            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        self._track_stats(task, elapsed_ms, success=True)
        return response

    def _track_stats(self, task: str, latency_ms: float, success: bool):
        with self._stats_lock:
            stats = self._stats.setdefault(task, {
                'total_calls': 0,
                'successful_calls': 0,
                'total_latency_ms': 0
            })
            stats['total_calls'] += 1
            if success:
                stats['successful_calls'] += 1
                stats['total_latency_ms'] += latency_ms

    def get_stats(self, task: Optional[str] = None) -> Dict:
        """Snapshot of the call statistics, for one task or all of them."""
        with self._stats_lock:
            if task:
                return dict(self._stats.get(task, {}))
            return {name: dict(stats) for name, stats in self._stats.items()}
    
    def cleanup(self):
        for name, provider in self._providers.items():
            if hasattr(provider, 'cleanup'):
                try:
                    provider.cleanup()
                    logger.info(f"Cleaned up provider: {name}")
                except Exception as e:
                    logger.error(f"Cleanup failed for {name}: {e}")
        
        self._providers.clear()
        if self._youtube is not None:
            self._youtube.close()
            self._youtube = None
    
    @contextmanager
    def session(self):
        try:
            yield self
        finally:
            self.cleanup()
