"""
Domain exceptions - Closed error taxonomy shared by every layer.

Each failure kind is a subclass of DomainError. The transport layer maps
the kind to a protocol-level status; the reason is a human-readable
message (redacted for InfraError before it reaches a client).
"""


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ValidationError(DomainError):
    """Malformed input or business-rule violation caught before persistence."""

    pass


class AlreadyExists(DomainError):
    """Uniqueness conflict reported by storage."""

    pass


class NotFound(DomainError):
    """A referenced entity does not exist."""

    pass


class InfraError(DomainError):
    """Failure originating outside domain logic (storage, hashing, signing)."""

    pass
