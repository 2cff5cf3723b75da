"""
JWT adapter - Implements TokenIssuer and TokenVerifier with PyJWT.

Tokens are compact HS256 JWTs carrying {sub, email, iat, exp}. They are
stateless: nothing is stored server-side and there is no revocation.

Key rotation: ``previous_secrets`` lists keys that are no longer used
for signing but whose tokens are still accepted until they expire.
"""

import time
import uuid
from collections.abc import Sequence

import jwt

from ferro.domain.exceptions import InfraError
from ferro.domain.ports import Claims

_REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


class JwtService:
    """
    Implements TokenIssuer and TokenVerifier protocols via PyJWT.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        secret: str,
        expiration_hours: int,
        algorithm: str = "HS256",
        previous_secrets: Sequence[str] = (),
    ) -> None:
        self._secret = secret
        self._expiration_seconds = expiration_hours * 3600
        self._algorithm = algorithm
        self._previous_secrets = tuple(previous_secrets)

    def generate(self, user_id: uuid.UUID, email: str) -> str:
        """
        Issue a signed token for a user.

        Raises:
            InfraError: If signing fails
        """
        issued_at = int(time.time())
        payload = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self._expiration_seconds,
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise InfraError(f"Failed to generate token: {e}") from e

    def verify(self, token: str) -> Claims:
        """
        Decode a token, checking signature and expiry.

        The current secret is tried first, then each previous secret; only
        a signature mismatch moves on to the next key.

        Raises:
            InfraError: For any malformed, expired or badly signed token
        """
        last_error: jwt.PyJWTError | None = None
        for secret in (self._secret, *self._previous_secrets):
            try:
                payload = jwt.decode(
                    token,
                    secret,
                    algorithms=[self._algorithm],
                    options={"require": _REQUIRED_CLAIMS},
                )
            except jwt.InvalidSignatureError as e:
                last_error = e
                continue
            except jwt.PyJWTError as e:
                raise InfraError(f"Invalid token: {e}") from e
            return Claims(
                sub=str(payload["sub"]),
                email=str(payload["email"]),
                iat=int(payload["iat"]),
                exp=int(payload["exp"]),
            )

        raise InfraError(f"Invalid token: {last_error}") from last_error
