# marketplace/services/credentials.py
"""
Credential store: user registration and username/password authentication.
"""
import logging
from tortoise.exceptions import IntegrityError

from marketplace.core.errors import ConflictError, InvalidCredentials, ValidationError
from marketplace.models.user import User

logger = logging.getLogger("uvicorn.error")

MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 256  # User.username column width
MIN_PASSWORD_LENGTH = 4

REGISTER_RULES_MESSAGE = "username (min 3) and password (min 4) required"
LOGIN_REQUIRED_MESSAGE = "username and password required"


def normalize_username(username) -> str:
    return username.strip() if isinstance(username, str) else ""


class CredentialStore:
    """
    Owns User rows. Passwords are compared with plain equality (no hashing).
    """

    async def register(self, username: str | None, password: str | None) -> User:
        """
        Create a new account.

        Args:
            username: Login name; surrounding whitespace is removed
            password: Stored as given

        Returns:
            The created User

        Raises:
            ValidationError: username shorter than 3 (or longer than 256)
                characters after trimming, or password shorter than 4 characters
            ConflictError: username already taken
        """
        name = normalize_username(username)
        if not MIN_USERNAME_LENGTH <= len(name) <= MAX_USERNAME_LENGTH:
            raise ValidationError(REGISTER_RULES_MESSAGE)
        if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(REGISTER_RULES_MESSAGE)
        if await self._username_taken(name):
            raise ConflictError("username already exists")
        try:
            user = await User.create(username=name, password=password)
        except IntegrityError:
            # Lost a race against a concurrent registration of the same name
            raise ConflictError("username already exists")
        logger.info("[auth] registered username=%s id=%s", user.username, user.id)
        return user

    async def authenticate(self, username: str | None, password: str | None) -> User:
        """
        Check a username/password pair.

        Raises:
            ValidationError: either field missing, empty or not a string
            InvalidCredentials: unknown user or wrong password (indistinguishable)
        """
        if not isinstance(username, str) or not username or not isinstance(password, str) or not password:
            raise ValidationError(LOGIN_REQUIRED_MESSAGE)
        name = username.strip()
        user = await User.get_or_none(username=name)
        if user is None or user.password != password:
            logger.info("[auth] login failed username=%s", name)
            raise InvalidCredentials()
        return user

    async def _username_taken(self, name: str) -> bool:
        return await User.filter(username=name).exists()

    async def get(self, user_id: str) -> User | None:
        return await User.get_or_none(id=user_id)
