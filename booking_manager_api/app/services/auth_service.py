"""
Demo authentication.

``AuthService`` only checks that credentials are present.  It does not
look up users or verify passwords and always returns the same demo
user id and token.  Do not rely on it for access control.
"""

import logging

from ..core.errors import ValidationError
from ..schemas.auth import AuthResponse, AuthUser, LoginRequest, SignupRequest


logger = logging.getLogger(__name__)

DEMO_TOKEN = "demo-token"
DEMO_USER_ID = 1
DEMO_USER_NAME = "Demo User"


class AuthService:
    """Placeholder login and signup."""

    @classmethod
    async def login(cls, credentials: LoginRequest) -> AuthResponse:
        if not credentials.email or not credentials.password:
            raise ValidationError("Email and password are required.")
        logger.info("Demo login for %s", credentials.email)
        return AuthResponse(
            message="Login successful",
            user=AuthUser(id=DEMO_USER_ID, name=DEMO_USER_NAME, email=credentials.email),
            token=DEMO_TOKEN,
        )

    @classmethod
    async def signup(cls, data: SignupRequest) -> AuthResponse:
        if not data.name or not data.email or not data.password:
            raise ValidationError("Name, email, and password are required.")
        logger.info("Demo signup for %s", data.email)
        return AuthResponse(
            message="Account created successfully",
            user=AuthUser(id=DEMO_USER_ID, name=data.name, email=data.email),
            token=DEMO_TOKEN,
        )
