# /campus_admin/core/security.py

"""
One-way password hashing for student credentials.

The rest of the application only relies on the `hash` / `verify` pair;
which algorithm passlib uses underneath is a deployment setting.
"""

from passlib.context import CryptContext

from .config import PASSWORD_HASH_SCHEME


class PasswordHasher:
    def __init__(self, schemes=None):
        self._context = CryptContext(schemes=schemes or [PASSWORD_HASH_SCHEME], deprecated="auto")

    def hash(self, plain_password: str) -> str:
        """Returns a salted one-way hash of `plain_password`."""
        return self._context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Checks `plain_password` against a stored hash.
        A malformed or foreign hash counts as a mismatch, not an error.
        """
        try:
            return self._context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            return False


# Shared instance used by the dependency providers.
password_hasher = PasswordHasher()
