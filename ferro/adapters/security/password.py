"""
bcrypt password adapter - Implements PasswordHasher and PasswordVerifier.

Hashing runs in a worker thread so the event loop is not blocked for the
~100ms+ bcrypt takes at production cost factors. Verification stays
synchronous, matching the PasswordVerifier port.

bcrypt only considers the first 72 bytes of a password. Both paths
truncate to that prefix explicitly so that long passwords hash and
verify consistently across bcrypt releases.
"""

import asyncio

import bcrypt

from ferro.domain.exceptions import InfraError
from ferro.domain.value_objects import PasswordHash, PlainPassword

BCRYPT_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher:
    """
    Implements PasswordHasher and PasswordVerifier protocols via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, rounds: int = 12) -> None:
        """
        Args:
            rounds: bcrypt work factor (log2 of iterations)
        """
        self._rounds = rounds

    async def hash(self, password: PlainPassword) -> PasswordHash:
        """
        Hash a validated plaintext password with a fresh salt.

        Raises:
            InfraError: If bcrypt fails internally
        """
        try:
            hashed = await asyncio.to_thread(
                bcrypt.hashpw, _encode(password.value), bcrypt.gensalt(rounds=self._rounds)
            )
        except ValueError as e:
            raise InfraError(f"Failed to hash password: {e}") from e
        return PasswordHash(hashed.decode("utf-8"))

    def verify(self, plain_password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a bcrypt hash.

        bcrypt.checkpw compares in constant time.

        Returns:
            True if the password matches, False otherwise

        Raises:
            InfraError: If password_hash is not a bcrypt hash
        """
        try:
            return bcrypt.checkpw(_encode(plain_password), password_hash.encode("utf-8"))
        except ValueError as e:
            raise InfraError(f"Invalid password hash: {e}") from e
