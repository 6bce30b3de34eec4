# marketplace/schemas/auth.py
"""
Pydantic schemas for the account endpoints (/register, /login).
"""
from pydantic import BaseModel

__all__ = ["CredentialsIn", "UserOut", "LoginOut"]

class CredentialsIn(BaseModel):
    """
    Request body shared by /register and /login.
    Both fields are optional here so that missing values reach the service
    layer and produce the API's own 400 message instead of a schema error.
    """
    username: str | None = None
    password: str | None = None

class UserOut(BaseModel):
    """Public projection of a user. The password is never echoed back."""
    id: str
    username: str

    @classmethod
    def from_model(cls, user) -> "UserOut":
        return cls(id=str(user.id), username=user.username)

class LoginOut(BaseModel):
    """Successful login: the bearer token and who it belongs to."""
    token: str
    user: UserOut
