"""Repository inventory sources."""

from abc import ABC, abstractmethod

import httpx
import structlog
from pydantic import ValidationError

from resvn.auth.credentials import cached_credentials
from resvn.core.exceptions import CredentialsError, SourceUnavailableError
from resvn.core.models.config import Credentials
from resvn.core.models.repository import InventoryResponse

logger = structlog.get_logger(__name__)

API_VERSION = "1"
API_URL_ROOT = f"csvn/api/{API_VERSION}"
API_FORMAT = "json"


class InventorySource(ABC):
    """Supplies the names of all repositories known to a server."""

    @abstractmethod
    def fetch(self, credentials: Credentials | None = None) -> list[str]:
        """Return repository names in server order."""
        ...


class RestInventorySource(InventorySource):
    """Queries the Subversion Edge REST API for its repositories."""

    def __init__(
        self,
        api_url: str,
        transport: httpx.BaseTransport | None = None,
        retries: int = 3,
    ) -> None:
        self._api_url = f"{api_url.strip().rstrip('/')}/{API_URL_ROOT}"
        self._transport = transport or httpx.HTTPTransport(retries=retries)

    @property
    def api_url(self) -> str:
        return self._api_url

    def _resolve_auth(self, credentials: Credentials | None) -> httpx.BasicAuth | None:
        if credentials is None or credentials.is_empty:
            try:
                credentials = cached_credentials()
            except CredentialsError as e:
                raise SourceUnavailableError(e.message, details=e.details) from e
        if credentials.agent_cached:
            return None
        return httpx.BasicAuth(credentials.username, credentials.password)

    def fetch(self, credentials: Credentials | None = None) -> list[str]:
        auth = self._resolve_auth(credentials)
        try:
            with httpx.Client(base_url=self._api_url, transport=self._transport) as client:
                response = client.get(
                    "/repository",
                    params={"format": API_FORMAT},
                    headers={"Accept": f"application/{API_FORMAT}"},
                    auth=auth,
                )
                response.raise_for_status()
                body = InventoryResponse.model_validate(response.json())
        except httpx.HTTPError as e:
            raise SourceUnavailableError(
                f"failed to fetch repositories: {e}",
                details={"url": self._api_url},
            ) from e
        except (ValueError, ValidationError) as e:
            raise SourceUnavailableError(
                f"malformed repository listing: {e}",
                details={"url": self._api_url},
            ) from e

        names = [repo.name for repo in body.repositories]
        logger.info("received repositories", count=len(names))
        return names
