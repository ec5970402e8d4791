"""HTTP client for the server registry."""

from urllib.parse import quote

import requests  # type: ignore
from pydantic import ValidationError

from ...utils.verbose import verbose
from .RegistryError import RegistryError, ServerNotFoundError
from .ServerDetails import ServerDetails


class RegistryClient:
    """Thin wrapper around the registry REST API."""

    def __init__(self, base_url: str, api_key: str | None = None, timeout: float = 10.0, session=None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config, api_key: str | None = None) -> "RegistryClient":
        """Build a client from McpctlConfig."""
        return cls(config.registry.url, api_key=api_key, timeout=config.registry.timeout)

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def get_server(self, qualified_name: str) -> ServerDetails:
        """Fetch server metadata.

        Raises:
            ServerNotFoundError: If the registry answers 404
            RegistryError: On network errors, other HTTP errors, or malformed payloads
        """
        url = f"{self.base_url}/servers/{quote(qualified_name, safe='@/')}"
        verbose(f"Resolving {qualified_name} from {url}")
        try:
            response = self.session.get(url, headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as e:
            raise RegistryError(f"Failed to reach registry at {self.base_url}: {e}") from e

        if response.status_code == 404:
            raise ServerNotFoundError(qualified_name)
        if response.status_code in (401, 403):
            raise RegistryError("Registry rejected the API key")
        if response.status_code >= 400:
            raise RegistryError(f"Registry error {response.status_code}: {response.text.strip()[:200]}")

        try:
            payload = response.json()
        except ValueError as e:
            raise RegistryError(f"Registry returned invalid JSON for {qualified_name}") from e

        try:
            server = ServerDetails.model_validate(payload)
        except ValidationError as e:
            raise RegistryError(f"Unexpected registry payload for {qualified_name}: {e}") from e
        verbose(f"Resolved {server.qualified_name} with {len(server.connections)} connection(s)")
        return server

    def validate_api_key(self) -> bool:
        """Return True if the registry accepts the configured key."""
        if not self.api_key:
            return False
        try:
            response = self.session.get(
                f"{self.base_url}/servers",
                headers=self._headers(),
                params={"pageSize": 1},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise RegistryError(f"Failed to reach registry at {self.base_url}: {e}") from e
        return response.status_code < 400
