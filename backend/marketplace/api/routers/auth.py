# marketplace/api/routers/auth.py
import logging
from fastapi import APIRouter, Depends, status

from marketplace.api.deps import AuthContext, get_auth_context, get_credentials, get_sessions
from marketplace.core.sessions import SessionRegistry
from marketplace.schemas import CredentialsIn, LoginOut, MessageOut, UserOut
from marketplace.services import CredentialStore

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["auth"])

@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def register(body: CredentialsIn, credentials: CredentialStore = Depends(get_credentials)):
    """
    Register a new user account.

    Returns:
        UserOut: id and username (the password is never echoed back)

    Errors:
        - 400: username shorter than 3 characters (after trimming) or password shorter than 4
        - 409: username already exists
    """
    user = await credentials.register(body.username, body.password)
    return UserOut.from_model(user)

@router.post("/login", response_model=LoginOut)
async def login(
    body: CredentialsIn,
    credentials: CredentialStore = Depends(get_credentials),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """
    Authenticate and open a session.

    Every successful login gets a fresh token; tokens from earlier logins keep
    working until they expire or are logged out.

    Errors:
        - 400: username or password missing
        - 401: unknown user or wrong password
    """
    user = await credentials.authenticate(body.username, body.password)
    token = sessions.create(str(user.id))
    logger.info("[auth] login username=%s id=%s", user.username, user.id)
    return LoginOut(token=token, user=UserOut.from_model(user))

@router.post("/logout", response_model=MessageOut)
async def logout(
    auth: AuthContext = Depends(get_auth_context),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """Revoke the token used for this request."""
    sessions.revoke(auth.token)
    logger.info("[auth] logout id=%s", auth.user.id)
    return MessageOut(message="logged out")
