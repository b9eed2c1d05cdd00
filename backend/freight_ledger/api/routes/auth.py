"""Auth Routes — operator login and token verification.

Invariants:
    - Unknown username and wrong password are indistinguishable (same 401 body)
    - Issued token carries the operator's public claims only (never the hash)
    - /api/verify echoes the decoded claims unchanged
"""

import logging

from fastapi import APIRouter, Depends

from freight_ledger.api.auth_guard import get_operator_registry, require_operator
from freight_ledger.config import Settings, get_settings
from freight_ledger.core.errors import InvalidCredentialsError
from freight_ledger.core.repository_protocols import OperatorRegistry
from freight_ledger.infrastructure.security import issue_token, verify_password
from freight_ledger.schemas.auth import (
    LoginRequest, LoginResponse, OperatorOut, VerifyResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    registry: OperatorRegistry = Depends(get_operator_registry),
    settings: Settings = Depends(get_settings),
):
    """Exchange operator credentials for a bearer token."""
    operator = registry.get(body.username)
    if operator is None or not verify_password(body.password, operator.password_hash):
        logger.warning("Login rejected", extra={"username": body.username})
        raise InvalidCredentialsError()

    token = issue_token(
        operator.claims(), settings.jwt_secret,
        settings.jwt_expires_in, settings.jwt_algorithm,
    )
    logger.info("Login succeeded", extra={"username": operator.username})
    return LoginResponse(token=token, user=OperatorOut(**operator.claims()))


@router.get("/verify", response_model=VerifyResponse)
async def verify(claims: dict = Depends(require_operator)):
    return VerifyResponse(user=claims)
