import pytest
import httpx
from unittest.mock import Mock, patch

from ollama import ResponseError

from dsagenie.models.providers.ollama import OllamaProvider
from dsagenie.models.providers.base import ChatRequest, ModelError, ModelTimeout


class TestOllamaProvider:
    """Test suite for OllamaProvider functionality"""

    @pytest.fixture
    def provider(self):
        """Create a test OllamaProvider instance"""
        with patch('dsagenie.models.providers.ollama.Client'):
            return OllamaProvider(host="http://localhost:11434", request_timeout_s=30)

    @pytest.fixture
    def mock_client(self, provider):
        return provider.client

    @pytest.fixture
    def request_(self):
        return ChatRequest(
            model="qwen2.5-coder:7b",
            messages=[{"role": "user", "content": "Pseudocode for two-sum"}],
            params={"temperature": 0.2, "max_tokens": 2048},
        )

    def test_initialization_defaults(self):
        with patch('dsagenie.models.providers.ollama.Client') as mock_client_class:
            provider = OllamaProvider()

        assert provider.host == "http://localhost:11434"
        assert provider.keep_alive == "5m"
        assert provider.label == "Ollama"
        assert provider.missing_credential() is None
        mock_client_class.assert_called_once_with(host="http://localhost:11434", timeout=300)

    def test_chat_with_object_response(self, provider, mock_client, request_):
        mock_response = Mock()
        mock_response.message.content = "for i in nums: ..."
        mock_response.model = "qwen2.5-coder:7b"
        mock_response.total_duration = 1000000000
        mock_response.eval_count = 10
        mock_client.chat.return_value = mock_response

        response = provider.chat(request_)

        assert response.content == "for i in nums: ..."
        assert response.meta["provider"] == "ollama"
        assert response.meta["model"] == "qwen2.5-coder:7b"
        assert response.meta["total_duration"] == 1000000000
        assert response.meta["eval_count"] == 10

        call_kwargs = mock_client.chat.call_args[1]
        assert call_kwargs["model"] == "qwen2.5-coder:7b"
        assert call_kwargs["options"] == {"temperature": 0.2, "num_predict": 2048}
        assert call_kwargs["keep_alive"] == "5m"

    def test_chat_with_dict_response(self, provider, mock_client, request_):
        mock_client.chat.return_value = {
            "model": "qwen2.5-coder:7b",
            "message": {"role": "assistant", "content": "pseudocode"},
            "eval_count": 3,
        }

        response = provider.chat(request_)

        assert response.content == "pseudocode"
        assert response.meta["eval_count"] == 3

    def test_keep_alive_override(self, provider, mock_client):
        mock_client.chat.return_value = {"message": {"content": "ok"}}

        provider.chat(ChatRequest(model="m", messages=[], params={"keep_alive": "1h"}))

        call_kwargs = mock_client.chat.call_args[1]
        assert call_kwargs["keep_alive"] == "1h"
        assert "keep_alive" not in call_kwargs["options"]

    def test_unexpected_response_structure(self, provider, mock_client, request_):
        mock_client.chat.return_value = "not a response"

        with pytest.raises(ModelError, match="unexpected response structure"):
            provider.chat(request_)

    def test_timeout(self, provider, mock_client, request_):
        mock_client.chat.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(ModelTimeout, match="Ollama timeout after 30s"):
            provider.chat(request_)

    def test_response_error(self, provider, mock_client, request_):
        mock_client.chat.side_effect = ResponseError("model not found", 404)

        with pytest.raises(ModelError, match="Ollama API error"):
            provider.chat(request_)

        assert mock_client.chat.call_count == 1

    def test_connection_failure(self, provider, mock_client, request_):
        mock_client.chat.side_effect = ConnectionError("refused")

        with pytest.raises(ModelError, match="Ollama request failed: refused"):
            provider.chat(request_)

    def test_health_check(self, provider, mock_client):
        assert provider.health_check() is True

        mock_client.list.side_effect = ConnectionError("down")
        assert provider.health_check() is False
