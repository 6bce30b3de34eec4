# marketplace/api/deps.py
from dataclasses import dataclass

from fastapi import Depends, Header, Request

from marketplace.config import Settings
from marketplace.core.errors import UnknownUser
from marketplace.core.sessions import SessionRegistry, parse_authorization
from marketplace.models.user import User
from marketplace.services import CredentialStore, FavoriteLedger, TemplateCatalog


def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_sessions(request: Request) -> SessionRegistry:
    return request.app.state.sessions

def get_credentials(request: Request) -> CredentialStore:
    return request.app.state.credentials

def get_catalog(request: Request) -> TemplateCatalog:
    return request.app.state.catalog

def get_favorites(request: Request) -> FavoriteLedger:
    return request.app.state.favorites


@dataclass(frozen=True)
class AuthContext:
    """The authenticated caller: who they are and which token they used."""
    user: User
    token: str


async def get_auth_context(
    authorization: str | None = Header(default=None),
    sessions: SessionRegistry = Depends(get_sessions),
    credentials: CredentialStore = Depends(get_credentials),
) -> AuthContext:
    """
    FastAPI dependency guarding authenticated routes.

    Expects ``Authorization: Token <token>``. Any failure short-circuits the
    request with 401 and a message naming the reason.

    Raises:
        MissingToken: no Authorization header
        MalformedHeader: header not in the exact ``Token <token>`` form
        InvalidToken: token not issued or already revoked
        ExpiredToken: session past its expiry (and now evicted)
        UnknownUser: session points at a user that no longer exists

    Usage:
        @router.get("/protected")
        async def protected_route(auth: AuthContext = Depends(get_auth_context)):
            return {"user_id": str(auth.user.id)}
    """
    token = parse_authorization(authorization)
    session = sessions.validate(token)
    user = await credentials.get(session.user_id)
    if user is None:
        raise UnknownUser()
    return AuthContext(user=user, token=token)


async def get_current_user(auth: AuthContext = Depends(get_auth_context)) -> User:
    return auth.user
