"""Auth Guard — bearer-token dependency for protected routes.

Invariants:
    - No bearer credentials → AuthenticationError (401)
    - Bad signature, expired or malformed token → InvalidTokenError (403)
    - On success the decoded claims dict is returned to the route

Design Decisions:
    - HTTPBearer(auto_error=False): missing-token status stays 401 with our error envelope
      instead of FastAPI's default 403 detail body
"""

import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from freight_ledger.config import Settings, get_settings
from freight_ledger.core.errors import AuthenticationError
from freight_ledger.core.repository_protocols import OperatorRegistry
from freight_ledger.infrastructure.operators import StaticOperatorRegistry
from freight_ledger.infrastructure.security import decode_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_operator_registry(
    settings: Settings = Depends(get_settings),
) -> OperatorRegistry:
    """FastAPI dependency for the trusted-operator registry."""
    return StaticOperatorRegistry.from_settings(settings)


async def require_operator(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Decoded token claims of the calling operator."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()
    claims = decode_token(
        credentials.credentials, settings.jwt_secret, settings.jwt_algorithm,
    )
    logger.debug("Token accepted", extra={"username": claims.get("username")})
    return claims
