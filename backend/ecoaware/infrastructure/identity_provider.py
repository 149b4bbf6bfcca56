"""Identity Provider Client: exchanges a provider session id for user claims.

Invariants:
    - One GET per login: {base_url}/session-data with header X-Session-ID
    - Provider 4xx -> AuthenticationError (bad/expired session id)
    - Provider 5xx, timeouts, transport errors, malformed bodies -> IdentityProviderError
    - The subject is read from "sub" (OIDC) or "id"

Design Decisions:
    - No retries: login is user-driven, the browser simply retries the flow
    - httpx.AsyncClient injectable for tests (transport=httpx.MockTransport)
"""

import logging
from dataclasses import dataclass, field

import httpx

from ecoaware.core.errors import AuthenticationError, IdentityProviderError

logger = logging.getLogger(__name__)


@dataclass
class ProviderIdentity:
    """Claims returned by the identity provider for one login."""
    sub: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    raw: dict = field(default_factory=dict)

    @classmethod
    def from_claims(cls, claims: dict) -> "ProviderIdentity":
        sub = claims.get("sub") or claims.get("id")
        if not sub:
            raise IdentityProviderError("session data has no subject")
        return cls(
            sub=str(sub),
            email=claims.get("email"),
            first_name=claims.get("first_name"),
            last_name=claims.get("last_name"),
            profile_image_url=claims.get("profile_image_url"),
            raw=claims,
        )


class IdentityProviderClient:
    """Thin async client for the external identity provider."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._http_client = http_client

    async def fetch_identity(self, session_id: str) -> ProviderIdentity:
        """Resolve a provider session id into the user's claims."""
        url = f"{self.base_url}/session-data"
        try:
            if self._http_client is not None:
                response = await self._http_client.get(
                    url, headers={"X-Session-ID": session_id},
                    timeout=self.timeout_seconds,
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                    response = await client.get(
                        url, headers={"X-Session-ID": session_id},
                    )
        except httpx.TimeoutException as e:
            logger.error(f"Identity provider timeout: {e}")
            raise IdentityProviderError("timeout")
        except httpx.HTTPError as e:
            logger.error(f"Identity provider transport error: {e}")
            raise IdentityProviderError("unreachable")

        if 400 <= response.status_code < 500:
            logger.warning(
                f"Identity provider rejected session ({response.status_code})",
            )
            raise AuthenticationError("Invalid session ID")
        if response.status_code >= 500:
            logger.error(
                f"Identity provider failed ({response.status_code})",
            )
            raise IdentityProviderError(f"status {response.status_code}")

        try:
            claims = response.json()
        except ValueError:
            raise IdentityProviderError("malformed session data")
        if not isinstance(claims, dict):
            raise IdentityProviderError("malformed session data")
        return ProviderIdentity.from_claims(claims)
