"""Authentication service - admin login, JWT issuance and validation."""

from datetime import datetime, timedelta, timezone

import jwt
from passlib.context import CryptContext

from blog.domain.exceptions import UnauthorizedError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

BEARER_PREFIX = "Bearer "


class AuthService:
    """Verifies the configured admin account and issues HS256 tokens."""

    def __init__(
        self,
        secret: str,
        admin_username: str,
        admin_password_hash: str,
        algorithm: str = "HS256",
        expiration: timedelta = timedelta(hours=24),
    ):
        self._secret = secret
        self._admin_username = admin_username
        self._admin_password_hash = admin_password_hash
        self._algorithm = algorithm
        self._expiration = expiration

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password using bcrypt."""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)

    def login(self, username: str, password: str) -> str:
        """Return a fresh token for valid admin credentials."""
        if username != self._admin_username:
            raise UnauthorizedError("invalid username or password")
        if not self.verify_password(password, self._admin_password_hash):
            raise UnauthorizedError("invalid username or password")
        return self.generate_token(username)

    def generate_token(self, username: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "username": username,
            "exp": now + self._expiration,
            "iat": now,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate_token(self, token: str) -> str:
        """Return the username carried by ``token``; accepts an optional ``Bearer`` prefix."""
        token = token.removeprefix(BEARER_PREFIX)
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError as exc:
            raise UnauthorizedError("token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise UnauthorizedError("invalid token") from exc

        username = payload.get("username")
        if not username:
            raise UnauthorizedError("invalid token")
        return username
