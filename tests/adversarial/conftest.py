"""
Shared fixtures for adversarial tests.

Provides use cases wired to real PostgreSQL repositories for race
condition tests.
"""

import pytest
from psycopg_pool import AsyncConnectionPool

from ferro.adapters.repository.postgres import PostgresUserRepository
from ferro.adapters.security import BcryptPasswordHasher, JwtService
from ferro.application import RegisterUserUseCase

SECRET = "adversarial-test-secret-key-32-bytes!"


@pytest.fixture
def register_use_case(pool: AsyncConnectionPool) -> RegisterUserUseCase:
    """Registration wired to PostgreSQL with the minimum bcrypt cost."""
    return RegisterUserUseCase(
        user_repository=PostgresUserRepository(pool),
        password_hasher=BcryptPasswordHasher(rounds=4),
        token_issuer=JwtService(SECRET, expiration_hours=1),
    )
