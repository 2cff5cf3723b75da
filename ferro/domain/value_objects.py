"""
Value objects - Immutable, self-validating wrappers around primitives.

Construction is the only validation point: an instance that exists is
valid. Equality and hashing are by wrapped value. Stored values are kept
as given (no trimming or case folding); trimming applies only to the
emptiness checks.
"""

from dataclasses import dataclass, field

from .exceptions import ValidationError

POST_TITLE_MAX_LENGTH = 200
COMMENT_CONTENT_MAX_LENGTH = 2000
PASSWORD_MIN_LENGTH = 8


@dataclass(frozen=True)
class Email:
    """User email address. Must be non-empty and contain '@'."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or "@" not in self.value:
            raise ValidationError("Invalid email format")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PlainPassword:
    """
    Plaintext password, held only while registering or logging in.

    Excluded from repr so it cannot leak through logs or tracebacks.
    """

    value: str = field(repr=False)

    def __post_init__(self) -> None:
        if len(self.value) < PASSWORD_MIN_LENGTH:
            raise ValidationError(f"Password must be at least {PASSWORD_MIN_LENGTH} chars")


@dataclass(frozen=True)
class PasswordHash:
    """
    Opaque password hash.

    Produced by a PasswordHasher or rehydrated from storage. No format
    check is performed here; a malformed hash surfaces as InfraError when
    a PasswordVerifier tries to parse it.
    """

    value: str = field(repr=False)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PostTitle:
    value: str

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise ValidationError("Post title cannot be empty")
        if len(self.value) > POST_TITLE_MAX_LENGTH:
            raise ValidationError(
                f"Post title cannot exceed {POST_TITLE_MAX_LENGTH} characters"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PostContent:
    value: str

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise ValidationError("Post content cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CommentContent:
    value: str

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise ValidationError("Comment content cannot be empty")
        if len(self.value) > COMMENT_CONTENT_MAX_LENGTH:
            raise ValidationError(
                f"Comment content cannot exceed {COMMENT_CONTENT_MAX_LENGTH} characters"
            )

    def __str__(self) -> str:
        return self.value
