"""Auth Schemas — login, verify and client config payloads."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: str
    password: str


class OperatorOut(BaseModel):
    username: str
    name: str


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    user: OperatorOut


class VerifyResponse(BaseModel):
    """Echo of the decoded token claims (username, name, iat, exp)."""
    valid: bool = True
    user: dict


class ClientConfig(BaseModel):
    apiUrl: str
