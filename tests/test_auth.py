"""Tests for the OpenAI and Azure authentication providers."""

import pytest

from openai_tools.common.auth import AuthProvider, AzureAuth, OpenAIAuth
from openai_tools.common.errors import MissingConfigurationError


def test_openai_from_env(api_key):
    auth = AuthProvider.from_env()
    assert isinstance(auth, OpenAIAuth)
    assert auth.is_openai and not auth.is_azure
    assert auth.endpoint("chat/completions") == "https://api.openai.com/v1/chat/completions"
    assert auth.headers() == {"Authorization": "Bearer sk-test"}


def test_missing_key_raises():
    with pytest.raises(MissingConfigurationError):
        AuthProvider.from_env()


def test_empty_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "  ")
    with pytest.raises(MissingConfigurationError):
        AuthProvider.openai_from_env()


def test_base_url_override(monkeypatch, api_key):
    monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:8080/v1/")
    auth = AuthProvider.openai_from_env()
    assert auth.endpoint("/models") == "http://localhost:8080/v1/models"
    assert auth.realtime_url("gpt-4o-realtime-preview") == (
        "ws://localhost:8080/v1/realtime?model=gpt-4o-realtime-preview"
    )


def test_openai_realtime_url():
    auth = OpenAIAuth("sk-test")
    assert auth.realtime_url("gpt-4o-realtime-preview") == (
        "wss://api.openai.com/v1/realtime?model=gpt-4o-realtime-preview"
    )


def test_repr_hides_key():
    assert "sk-secret" not in repr(OpenAIAuth("sk-secret"))


def test_env_loaded_from_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("OPENAI_API_KEY=sk-from-dotenv\n")
    auth = AuthProvider.from_env()
    assert auth.api_key == "sk-from-dotenv"


def test_from_env_prefers_azure(monkeypatch, api_key):
    monkeypatch.setenv("AZURE_OPENAI_API_KEY", "az-key")
    monkeypatch.setenv("AZURE_OPENAI_DEPLOYMENT_NAME", "gpt4o")
    monkeypatch.setenv("AZURE_OPENAI_RESOURCE_NAME", "myres")
    auth = AuthProvider.from_env()
    assert isinstance(auth, AzureAuth)
    assert auth.headers() == {"api-key": "az-key"}
    assert auth.endpoint("chat/completions") == (
        "https://myres.openai.azure.com/openai/deployments/gpt4o/chat/completions"
        "?api-version=2024-08-01-preview"
    )


def test_azure_entra_token(monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_TOKEN", "entra-token")
    monkeypatch.setenv("AZURE_OPENAI_DEPLOYMENT_NAME", "gpt4o")
    monkeypatch.setenv("AZURE_OPENAI_ENDPOINT", "https://myres.openai.azure.com")
    auth = AuthProvider.azure_from_env()
    assert auth.use_entra_id
    assert auth.headers() == {"Authorization": "Bearer entra-token"}


def test_azure_requires_deployment(monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_API_KEY", "az-key")
    monkeypatch.setenv("AZURE_OPENAI_RESOURCE_NAME", "myres")
    with pytest.raises(MissingConfigurationError):
        AuthProvider.azure_from_env()


def test_azure_requires_endpoint_or_resource(monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_API_KEY", "az-key")
    monkeypatch.setenv("AZURE_OPENAI_DEPLOYMENT_NAME", "gpt4o")
    with pytest.raises(MissingConfigurationError):
        AuthProvider.azure_from_env()


def test_azure_static_url_inserts_path_before_query():
    auth = AzureAuth(
        "az-key",
        deployment_name="gpt4o",
        endpoint="https://proxy.example.com/openai?api-version=2025-01-01",
        static_url=True,
    )
    assert auth.endpoint("embeddings") == (
        "https://proxy.example.com/openai/embeddings?api-version=2025-01-01"
    )


def test_azure_realtime_url():
    auth = AzureAuth("az-key", deployment_name="rt", resource_name="myres", api_version="2024-10-01")
    assert auth.realtime_url("ignored") == (
        "wss://myres.openai.azure.com/openai/realtime?api-version=2024-10-01&deployment=rt"
    )


def test_from_url_detects_azure(monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_DEPLOYMENT_NAME", "gpt4o")
    auth = AuthProvider.from_url("https://myres.openai.azure.com", api_key="az-key")
    assert isinstance(auth, AzureAuth)
    assert auth.deployment_name == "gpt4o"


def test_from_url_openai_compatible():
    auth = AuthProvider.from_url("http://localhost:11434/v1", api_key="local")
    assert isinstance(auth, OpenAIAuth)
    assert auth.endpoint("chat/completions") == "http://localhost:11434/v1/chat/completions"
