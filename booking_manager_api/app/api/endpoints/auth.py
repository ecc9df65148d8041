"""
Demo authentication endpoints.

Login and signup accept any credentials as long as the fields are
present and return a fixed token.  They exist so that front ends can
exercise their login flow; no access control is enforced anywhere in
the API.
"""

from fastapi import APIRouter, status

from booking_manager_api.app.schemas.auth import AuthResponse, LoginRequest, SignupRequest
from booking_manager_api.app.services.auth_service import AuthService


router = APIRouter()


@router.post("/login", response_model=AuthResponse)
async def login(credentials: LoginRequest | None = None) -> AuthResponse:
    """Log in with an email and password (not verified)."""
    return await AuthService.login(credentials or LoginRequest())


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(data: SignupRequest | None = None) -> AuthResponse:
    """Create a demo account; nothing is stored."""
    return await AuthService.signup(data or SignupRequest())
