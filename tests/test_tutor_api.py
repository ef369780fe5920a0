"""
Tests for the explanation, pseudocode and code endpoints.

Tests the FastAPI tutor endpoints including:
- Request/response shape
- Slug and language resolution
- Error envelope for every failure
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock

from dsagenie.api.main import create_app
from dsagenie.api.dependencies.managers import get_model_manager
from dsagenie.models.manager import ModelManager
from dsagenie.models.providers.base import ModelResponse, ModelError


@pytest.fixture
def model_manager():
    manager = Mock(spec=ModelManager)
    manager.call.return_value = ModelResponse(content="  generated text\n", raw=None, meta={"model": "llama-3.3-70b-versatile"})
    manager.provider_for.return_value.label = "Groq"
    return manager


@pytest.fixture
def client(model_manager):
    """Test client for the FastAPI app."""
    app = create_app()
    app.dependency_overrides[get_model_manager] = lambda: model_manager
    return TestClient(app)


@pytest.fixture
def sample_problem_request():
    return {
        "problemSlug": "two-sum",
        "title": "1. Two Sum",
        "url": "https://leetcode.com/problems/two-sum/description/",
        "problemDescription": "Given an array of integers nums and an integer target, return indices of the two numbers.",
    }


class TestExplanationAPI:
    def test_explanation_success(self, client, model_manager, sample_problem_request):
        response = client.post("/api/explanation", json=sample_problem_request)

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"explanation": "generated text"}}

        call = model_manager.call.call_args[1]
        assert call["task"] == "explanation"
        assert call["variables"]["problem_name"] == "1. Two Sum"
        assert call["variables"]["problem_statement"].startswith("Given an array of integers")

    def test_slug_taken_from_url(self, client, model_manager):
        response = client.post("/api/explanation", json={"url": "https://leetcode.com/problems/valid-parentheses/"})

        assert response.status_code == 200
        variables = model_manager.call.call_args[1]["variables"]
        assert variables["problem_name"] == "valid-parentheses"
        assert variables["problem_statement"] == "LeetCode problem: valid-parentheses"

    def test_missing_body(self, client, model_manager):
        response = client.post("/api/explanation")

        assert response.status_code == 200
        assert model_manager.call.call_args[1]["variables"]["problem_name"] == "unknown"

    def test_long_description_is_truncated(self, client, model_manager):
        client.post("/api/explanation", json={"problemSlug": "two-sum", "problemDescription": "a" * 10000})

        assert len(model_manager.call.call_args[1]["variables"]["problem_statement"]) == 6000

    def test_numeric_slug_is_used_as_text(self, client, model_manager):
        response = client.post("/api/explanation", json={"problemSlug": 1})

        assert response.status_code == 200
        assert model_manager.call.call_args[1]["variables"]["problem_name"] == "1"

    def test_non_text_fields_count_as_absent(self, client, model_manager):
        response = client.post(
            "/api/explanation",
            json={"problemSlug": "two-sum", "title": ["1. Two Sum"], "url": {"href": "x"}, "problemDescription": False},
        )

        assert response.status_code == 200
        variables = model_manager.call.call_args[1]["variables"]
        assert variables["problem_name"] == "two-sum"
        assert variables["problem_statement"] == "LeetCode problem: two-sum"


class TestPseudocodeAPI:
    def test_pseudocode_success(self, client, model_manager, sample_problem_request):
        response = client.post("/api/pseudocode", json=sample_problem_request)

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"pseudocode": "generated text"}}
        assert model_manager.call.call_args[1]["prompt_ref"] == "tutor/pseudocode@v1"


class TestCodeAPI:
    @pytest.mark.parametrize("language", ["cpp", "java", "python"])
    def test_code_success(self, client, model_manager, sample_problem_request, language):
        response = client.post("/api/code", json={**sample_problem_request, "language": language})

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"code": "generated text", "language": language}}
        assert model_manager.call.call_args[1]["task"] == "code"

    @pytest.mark.parametrize("language", ["rust", "Java", ""])
    def test_unknown_language_defaults_to_cpp(self, client, model_manager, sample_problem_request, language):
        response = client.post("/api/code", json={**sample_problem_request, "language": language})

        assert response.status_code == 200
        assert response.json()["data"]["language"] == "cpp"
        assert model_manager.call.call_args[1]["variables"]["language_name"] == "C++"

    def test_language_omitted(self, client, sample_problem_request):
        response = client.post("/api/code", json=sample_problem_request)

        assert response.json()["data"]["language"] == "cpp"

    @pytest.mark.parametrize("language", [5, ["java"], True, {"x": 1}])
    def test_non_string_language_defaults_to_cpp(self, client, model_manager, sample_problem_request, language):
        response = client.post("/api/code", json={**sample_problem_request, "language": language})

        assert response.status_code == 200
        assert response.json()["data"]["language"] == "cpp"
        assert model_manager.call.call_args[1]["variables"]["language_name"] == "C++"


class TestTutorErrors:
    @pytest.mark.parametrize("path", ["/api/explanation", "/api/pseudocode", "/api/code"])
    def test_model_error(self, client, model_manager, path):
        model_manager.call.side_effect = ModelError("Connection error.")

        response = client.post(path, json={"problemSlug": "two-sum"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Connection error."}

    @pytest.mark.parametrize("path", ["/api/explanation", "/api/pseudocode", "/api/code"])
    def test_empty_model_response(self, client, model_manager, path):
        model_manager.call.return_value = ModelResponse(content="   ", raw=None, meta={})

        response = client.post(path, json={"problemSlug": "two-sum"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Empty response from Groq"}

    def test_unexpected_error_message_passed_through(self, client, model_manager):
        model_manager.call.side_effect = RuntimeError("network down")

        response = client.post("/api/explanation", json={})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "network down"}

    def test_non_object_body_uses_error_envelope(self, client, model_manager):
        response = client.post("/api/explanation", json=["two-sum"])

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        model_manager.call.assert_not_called()


class TestMissingCredential:
    """With GROQ_API_KEY unset every model-backed endpoint fails with a descriptive error."""

    @pytest.fixture
    def client(self, monkeypatch):
        app = create_app()
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        manager = ModelManager()
        app.dependency_overrides[get_model_manager] = lambda: manager
        return TestClient(app)

    @pytest.mark.parametrize("path", ["/api/explanation", "/api/pseudocode", "/api/code"])
    def test_endpoint_reports_missing_key(self, client, path):
        response = client.post(path, json={"problemSlug": "two-sum", "language": "java"})

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "GROQ_API_KEY not set. Add it to the backend .env file or the deployment environment."
