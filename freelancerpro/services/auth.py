"""
Local authentication against stored user records.

This is a convenience login for a single-device tool, not a security
boundary: there is no session expiry, no token and no rate limiting.
The current user is kept as a separate storage key holding the user
record with its password blanked.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from freelancerpro.models import User, UserRole
from freelancerpro.services.data_store import DataStore
from freelancerpro.services.passwords import DEFAULT_METHOD, hash_password, verify_password
from freelancerpro.storage import StorageError
from freelancerpro.utils.logging_utils import sanitize_sensitive_data

logger = logging.getLogger(__name__)

USER_EXISTS = "User already exists"
USER_NOT_FOUND = "User not found"
WRONG_PASSWORD = "Incorrect password"
REGISTRATION_FAILED = "Registration failed"
LOGIN_FAILED = "Login failed"


@dataclass
class AuthResult:
    """Outcome of a login or registration attempt.

    Attributes:
        success: Whether the attempt succeeded
        user: The user (password blanked) on success
        error: Human readable reason on failure
    """

    success: bool
    user: Optional[User] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, user: User) -> "AuthResult":
        return cls(success=True, user=user)

    @classmethod
    def failed(cls, error: str) -> "AuthResult":
        return cls(success=False, error=error)


class AuthService:
    """
    Register, log in and track the current user.

    Args:
        store: Data store holding the user records
        hash_method: werkzeug hash method for new passwords

    Example:
        >>> auth = AuthService(store)
        >>> result = auth.register("ana@example.com", "s3cret", "Ana")
        >>> result.success, auth.get_current_user().email
        (True, 'ana@example.com')
    """

    def __init__(self, store: DataStore, hash_method: str = DEFAULT_METHOD):
        self.store = store
        self.storage = store.storage
        self.session_key = store.session_key
        self.hash_method = hash_method

    def register(self, email: str, password: str, name: str) -> AuthResult:
        """Create a freelancer account and make it the current user."""
        try:
            if self.store.get_user_by_email(email) is not None:
                logger.info(f"Registration rejected, email already in use: {email}")
                return AuthResult.failed(USER_EXISTS)

            user = self.store.create_user(
                email=email,
                password=hash_password(password, method=self.hash_method),
                name=name,
                role=UserRole.FREELANCER,
            )
            public_user = user.without_password()
            self.set_current_user(public_user)
        except (StorageError, ValueError) as e:
            logger.error(f"Registration failed for {email}: {e}")
            return AuthResult.failed(REGISTRATION_FAILED)

        logger.info(f"Registered user {user.id}")
        return AuthResult.ok(public_user)

    def login(self, email: str, password: str) -> AuthResult:
        """Verify credentials and make the user current."""
        try:
            user = self.store.get_user_by_email(email)
            if user is None:
                logger.info(f"Login failed, unknown email: {email}")
                return AuthResult.failed(USER_NOT_FOUND)

            if not verify_password(password, user.password):
                logger.info(f"Login failed, wrong password for user {user.id}")
                return AuthResult.failed(WRONG_PASSWORD)

            public_user = user.without_password()
            self.set_current_user(public_user)
        except StorageError as e:
            logger.error(f"Login failed for {email}: {e}")
            return AuthResult.failed(LOGIN_FAILED)

        logger.debug(f"Logged in: {sanitize_sensitive_data(public_user.to_document())}")
        return AuthResult.ok(public_user)

    def get_current_user(self) -> Optional[User]:
        """Return the current user, or None when nobody is logged in.

        An unreadable marker counts as logged out.
        """
        try:
            raw = self.storage.get(self.session_key)
            if raw is None:
                return None
            return User.model_validate_json(raw)
        except (StorageError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable current-user marker: {e}")
            return None

    def set_current_user(self, user: Optional[User]) -> None:
        """Store ``user`` (password blanked) as current, or clear the marker.

        Raises:
            StorageWriteError: If the marker could not be written
        """
        if user is None:
            self.storage.remove(self.session_key)
            return
        marker = user.without_password()
        self.storage.set(self.session_key, marker.model_dump_json(by_alias=True))

    def logout(self) -> None:
        """Forget the current user."""
        current = self.get_current_user()
        self.set_current_user(None)
        if current is not None:
            logger.info(f"Logged out user {current.id}")
