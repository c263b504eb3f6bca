"""Bearer-token authentication against an external identity provider.

The provider (Auth0 or any OIDC issuer publishing a JWKS) is the source of
truth for who the caller is: we verify the RS256 signature with PyJWT and
hand DRF an ``ExternalIdentity`` whose ``sub`` becomes the order owner.

Security decisions
------------------
* **Fail Closed**: any decode / validation error returns 401.
* ``algorithms`` is fixed by configuration, never read from the token.
* Audience **and** issuer are always validated.
* Tokens from another issuer are ignored (``None``) so the local SimpleJWT
  backend can authenticate them.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional, Tuple

import jwt as pyjwt
import structlog
from django.conf import settings
from jwt import PyJWKClient
from jwt.exceptions import PyJWTError
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

logger = structlog.get_logger(__name__)


def _issuer() -> str:
    domain = getattr(settings, "AUTH0_DOMAIN", "")
    return f"https://{domain}/" if domain else ""


def _provider_enabled() -> bool:
    return bool(_issuer() and getattr(settings, "AUTH0_AUDIENCE", ""))


@lru_cache(maxsize=4)
def _jwks_client(jwks_url: str) -> PyJWKClient:
    # PyJWKClient caches the key set itself (300 s lifespan).
    return PyJWKClient(jwks_url, cache_jwk_set=True, lifespan=300)


class ExternalIdentity:
    """Principal authenticated by the external provider.

    No local ``User`` row exists for it; ``sub`` is the stable identity.
    """

    is_authenticated = True
    is_active = True

    def __init__(self, payload: dict) -> None:
        self.payload = payload
        self.sub: str = payload.get("sub", "")
        self.permissions: list[str] = payload.get("permissions", [])

    @property
    def pk(self) -> str:
        return self.sub

    def __str__(self) -> str:  # pragma: no cover
        return self.sub


class ExternalJWTAuthentication(BaseAuthentication):
    """DRF authentication class for provider-issued Bearer tokens."""

    keyword = "Bearer"

    def authenticate(self, request) -> Optional[Tuple[ExternalIdentity, str]]:
        header = request.META.get("HTTP_AUTHORIZATION", "")
        if not header:
            return None

        token = self._extract_token(header)
        if not _provider_enabled() or not self._issued_by_provider(token):
            return None

        payload = self._decode_token(token)
        identity = ExternalIdentity(payload)
        logger.info("auth.external_token_accepted", sub=identity.sub)
        return (identity, token)

    def authenticate_header(self, request) -> str:
        return f'{self.keyword} realm="api"'

    @staticmethod
    def _extract_token(header: str) -> str:
        parts = header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise AuthenticationFailed("Invalid Authorization header format.")
        return parts[1]

    @staticmethod
    def _issued_by_provider(token: str) -> bool:
        try:
            claims = pyjwt.decode(token, options={"verify_signature": False})
        except PyJWTError:
            return False
        return claims.get("iss") == _issuer()

    @staticmethod
    def _decode_token(token: str) -> dict:
        issuer = _issuer()
        client = _jwks_client(f"{issuer}.well-known/jwks.json")
        try:
            signing_key = client.get_signing_key_from_jwt(token)
            return pyjwt.decode(
                token,
                signing_key.key,
                algorithms=[settings.AUTH0_ALGORITHM],
                audience=settings.AUTH0_AUDIENCE,
                issuer=issuer,
            )
        except PyJWTError as exc:
            logger.warning("auth.external_token_rejected", error=str(exc))
            raise AuthenticationFailed(f"Token validation failed: {exc}") from exc
