"""Security adapters - Password hashing and token signing."""

from .password import BcryptPasswordHasher
from .tokens import JwtService

__all__ = ["BcryptPasswordHasher", "JwtService"]
