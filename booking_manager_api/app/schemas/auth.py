"""
Pydantic models for the demo authentication endpoints.

The login and signup endpoints do not verify credentials; they only
check that the fields are present and hand out a fixed token.  Fields
are optional here so that the service can report missing ones with its
own message.
"""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: Optional[str] = Field(None, example="user@example.com")
    password: Optional[str] = Field(None, example="secret")


class SignupRequest(BaseModel):
    name: Optional[str] = Field(None, example="Jane Doe")
    email: Optional[str] = Field(None, example="user@example.com")
    password: Optional[str] = Field(None, example="secret")


class AuthUser(BaseModel):
    id: int
    name: str
    email: str


class AuthResponse(BaseModel):
    message: str
    user: AuthUser
    token: str
