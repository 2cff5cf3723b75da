"""
User use cases - Registration and login.

Registration Protocol
=====================

1. Validate email (ValidationError)
2. Advisory existence check by email (AlreadyExists)
3. Validate password length (ValidationError)
4. Hash password, build User, insert
5. Issue token

The existence check in step 2 is not atomic with the insert in step 4.
Two concurrent registrations for the same email can both pass it; the
storage uniqueness constraint then rejects the second insert and the
repository raises AlreadyExists from ``save``.

Login Protocol
==============

1. Validate email (ValidationError)
2. Look up user by email (NotFound)
3. Verify password (ValidationError "Invalid credentials" on mismatch)
   in a worker thread; PasswordVerifier is synchronous and CPU-bound
4. Issue token
"""

import asyncio
import logging
from dataclasses import dataclass

from ferro.domain.aggregates import User
from ferro.domain.exceptions import AlreadyExists, NotFound, ValidationError
from ferro.domain.ports import PasswordHasher, PasswordVerifier, TokenIssuer, UserRepository
from ferro.domain.value_objects import Email, PlainPassword

from .dtos import AuthResponse, LoginUserRequest, RegisterUserRequest

logger = logging.getLogger(__name__)


@dataclass
class RegisterUserUseCase:
    """Create an account and return a token for it."""

    user_repository: UserRepository
    password_hasher: PasswordHasher
    token_issuer: TokenIssuer

    async def execute(self, request: RegisterUserRequest) -> AuthResponse:
        """
        Register a new user.

        Args:
            request: Raw email and password

        Returns:
            AuthResponse with the new user's id, email and token

        Raises:
            ValidationError: If email or password is malformed
            AlreadyExists: If a user with this email is already registered
            InfraError: On storage, hashing or signing failure
        """
        email = Email(request.email)

        if await self.user_repository.find_by_email(email) is not None:
            raise AlreadyExists("User with this email already exists")

        plain_password = PlainPassword(request.password)
        password_hash = await self.password_hasher.hash(plain_password)

        user = User.create(email, password_hash)
        await self.user_repository.save(user)
        logger.info("Registered user %s", user.id)

        token = self.token_issuer.generate(user.id, user.email.value)
        return AuthResponse(user_id=str(user.id), email=user.email.value, token=token)


@dataclass
class LoginUserUseCase:
    """Authenticate by email and password and return a token."""

    user_repository: UserRepository
    password_verifier: PasswordVerifier
    token_issuer: TokenIssuer

    async def execute(self, request: LoginUserRequest) -> AuthResponse:
        """
        Log a user in.

        Raises:
            ValidationError: If email is malformed or the password does not match
            NotFound: If no user exists for the email
            InfraError: On storage failure, unparseable stored hash or signing failure
        """
        email = Email(request.email)

        user = await self.user_repository.find_by_email(email)
        if user is None:
            raise NotFound("User not found")

        matches = await asyncio.to_thread(
            self.password_verifier.verify, request.password, user.password_hash.value
        )
        if not matches:
            raise ValidationError("Invalid credentials")

        token = self.token_issuer.generate(user.id, user.email.value)
        return AuthResponse(user_id=str(user.id), email=user.email.value, token=token)
