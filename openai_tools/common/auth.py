"""
Authentication providers for OpenAI and Azure OpenAI.

A provider knows two things: how to turn an API path into a full URL, and
which headers authenticate a request. Endpoint clients hold one provider and
never look at credentials directly.
"""

import logging
from typing import Dict, Optional

from openai_tools.common.errors import MissingConfigurationError
from openai_tools.config.constants import (
    AZURE_HOST_MARKER,
    DEFAULT_AZURE_API_VERSION,
    DEFAULT_BASE_URL,
    ENV_AZURE_API_KEY,
    ENV_AZURE_API_VERSION,
    ENV_AZURE_DEPLOYMENT,
    ENV_AZURE_ENDPOINT,
    ENV_AZURE_RESOURCE,
    ENV_AZURE_TOKEN,
    ENV_OPENAI_API_KEY,
    ENV_OPENAI_BASE_URL,
    LOGGER_NAME,
)
from openai_tools.config.environment import get_env, load_environment

logger = logging.getLogger(LOGGER_NAME)


class AuthProvider:
    """
    Base class for authentication providers.

    Subclasses implement ``endpoint`` and ``headers``. The class methods are
    the usual entry points: ``from_env`` picks Azure when Azure credentials
    are present and OpenAI otherwise.
    """

    is_azure = False

    def __init__(self, api_key: str):
        if not api_key:
            raise MissingConfigurationError("API key is empty")
        self._api_key = api_key

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def is_openai(self) -> bool:
        return not self.is_azure

    def endpoint(self, path: str) -> str:
        raise NotImplementedError

    def headers(self) -> Dict[str, str]:
        raise NotImplementedError

    def realtime_url(self, model: str) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_key=[API_KEY_HIDDEN])"

    @classmethod
    def openai_from_env(cls) -> "OpenAIAuth":
        """Build an OpenAI provider from OPENAI_API_KEY (and OPENAI_BASE_URL)."""
        load_environment()
        api_key = get_env(ENV_OPENAI_API_KEY)
        if api_key is None:
            raise MissingConfigurationError(f"{ENV_OPENAI_API_KEY} environment variable not set")
        return OpenAIAuth(api_key, base_url=get_env(ENV_OPENAI_BASE_URL))

    @classmethod
    def azure_from_env(cls) -> "AzureAuth":
        """Build an Azure provider from the AZURE_OPENAI_* variables."""
        load_environment()
        api_key = get_env(ENV_AZURE_API_KEY)
        use_entra_id = False
        if api_key is None:
            api_key = get_env(ENV_AZURE_TOKEN)
            use_entra_id = True
        if api_key is None:
            raise MissingConfigurationError(
                f"Neither {ENV_AZURE_API_KEY} nor {ENV_AZURE_TOKEN} environment variable is set"
            )

        deployment = get_env(ENV_AZURE_DEPLOYMENT)
        if deployment is None:
            raise MissingConfigurationError(f"{ENV_AZURE_DEPLOYMENT} environment variable not set")

        endpoint = get_env(ENV_AZURE_ENDPOINT)
        resource = get_env(ENV_AZURE_RESOURCE)
        if endpoint is None and resource is None:
            raise MissingConfigurationError(
                f"Neither {ENV_AZURE_ENDPOINT} nor {ENV_AZURE_RESOURCE} environment variable is set"
            )

        return AzureAuth(
            api_key,
            deployment_name=deployment,
            resource_name=resource,
            endpoint=endpoint,
            api_version=get_env(ENV_AZURE_API_VERSION) or DEFAULT_AZURE_API_VERSION,
            use_entra_id=use_entra_id,
        )

    @classmethod
    def from_env(cls) -> "AuthProvider":
        """Prefer Azure when its credentials are set, otherwise use OpenAI."""
        load_environment()
        if get_env(ENV_AZURE_API_KEY) or get_env(ENV_AZURE_TOKEN):
            logger.debug("Azure credentials found in environment")
            return cls.azure_from_env()
        return cls.openai_from_env()

    @classmethod
    def from_url(cls, url: str, api_key: Optional[str] = None,
                 deployment_name: Optional[str] = None) -> "AuthProvider":
        """
        Build a provider for an explicit base URL.

        URLs on an Azure host produce an AzureAuth; anything else is treated
        as an OpenAI compatible API. Missing credentials are read from the
        environment of the detected provider.
        """
        load_environment()
        if AZURE_HOST_MARKER in url:
            use_entra_id = False
            if api_key is None:
                api_key = get_env(ENV_AZURE_API_KEY)
                if api_key is None:
                    api_key = get_env(ENV_AZURE_TOKEN)
                    use_entra_id = api_key is not None
            if api_key is None:
                raise MissingConfigurationError(
                    f"Azure URL detected but neither {ENV_AZURE_API_KEY} nor {ENV_AZURE_TOKEN} is set"
                )
            deployment_name = deployment_name or get_env(ENV_AZURE_DEPLOYMENT)
            if deployment_name is None:
                raise MissingConfigurationError(
                    f"Azure URL detected but {ENV_AZURE_DEPLOYMENT} is not set"
                )
            return AzureAuth(api_key, deployment_name=deployment_name, endpoint=url,
                             use_entra_id=use_entra_id)

        if api_key is None:
            api_key = get_env(ENV_OPENAI_API_KEY)
        if api_key is None:
            raise MissingConfigurationError(f"{ENV_OPENAI_API_KEY} environment variable not set")
        return OpenAIAuth(api_key, base_url=url)


class OpenAIAuth(AuthProvider):
    """Bearer token authentication against api.openai.com or a compatible server."""

    def __init__(self, api_key: str, base_url: Optional[str] = None):
        super().__init__(api_key)
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")

    def endpoint(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}

    def realtime_url(self, model: str) -> str:
        return f"{_to_websocket_scheme(self.base_url)}/realtime?model={model}"


class AzureAuth(AuthProvider):
    """
    Azure OpenAI authentication.

    Two URL modes exist. With a resource name, or an endpoint that is only a
    host, URLs are built as
    ``{base}/openai/deployments/{deployment}/{path}?api-version={version}``.
    With ``static_url=True`` the endpoint is used as given and the path is
    inserted before any query string it carries.
    """

    is_azure = True

    def __init__(
        self,
        api_key: str,
        deployment_name: str,
        resource_name: Optional[str] = None,
        endpoint: Optional[str] = None,
        api_version: str = DEFAULT_AZURE_API_VERSION,
        use_entra_id: bool = False,
        static_url: bool = False,
    ):
        super().__init__(api_key)
        if not endpoint and not resource_name:
            raise MissingConfigurationError("Azure auth needs a resource name or an endpoint")
        self.deployment_name = deployment_name
        self.resource_name = resource_name
        self.base_url = endpoint.rstrip("/") if endpoint else None
        self.api_version = api_version
        self.use_entra_id = use_entra_id
        self.static_url = static_url

    def _dynamic_base(self) -> str:
        if self.base_url:
            return self.base_url
        return f"https://{self.resource_name}{AZURE_HOST_MARKER}"

    def endpoint(self, path: str) -> str:
        path = path.lstrip("/")
        if self.static_url and self.base_url:
            base, sep, query = self.base_url.partition("?")
            return f"{base.rstrip('/')}/{path}{sep}{query}"
        return (
            f"{self._dynamic_base()}/openai/deployments/{self.deployment_name}/"
            f"{path}?api-version={self.api_version}"
        )

    def headers(self) -> Dict[str, str]:
        if self.use_entra_id:
            return {"Authorization": f"Bearer {self._api_key}"}
        return {"api-key": self._api_key}

    def realtime_url(self, model: str) -> str:
        base = _to_websocket_scheme(self._dynamic_base())
        if self.static_url:
            return base
        return (
            f"{base}/openai/realtime?api-version={self.api_version}"
            f"&deployment={self.deployment_name}"
        )


def _to_websocket_scheme(url: str) -> str:
    if url.startswith("https://"):
        return "wss://" + url[len("https://"):]
    if url.startswith("http://"):
        return "ws://" + url[len("http://"):]
    return url
