"""
relay_admin.auth.config

Administrator credential held as a bcrypt hash.

Responsibilities:
- Hash the operator-supplied secret once at startup (`AdminConfig.build`).
- Compare presented tokens against the stored hash (`AdminConfig.verify`).

A mismatch is a normal `False`; only a failing bcrypt primitive raises. The
guard relies on that split to answer 400 for bad credentials and 500 for faults.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import bcrypt

from relay_admin.auth.errors import AuthError, AuthErrorKind
from relay_admin.auth.header import XApiToken

DEFAULT_ROUNDS = 12

# bcrypt only looks at the first 72 bytes of its input.
MAX_SECRET_BYTES = 72


@dataclass(frozen=True, slots=True)
class AdminConfig:
    hashed_api_token: str = field(repr=False)

    @classmethod
    def build(cls, api_token: str, *, rounds: int = DEFAULT_ROUNDS) -> AdminConfig:
        secret = api_token.encode("utf-8")
        try:
            if len(secret) > MAX_SECRET_BYTES:
                raise ValueError(f"secret is longer than {MAX_SECRET_BYTES} bytes")
            hashed = bcrypt.hashpw(secret, bcrypt.gensalt(rounds=rounds))
        except ValueError as e:
            raise AuthError(AuthErrorKind.HASH) from e
        return cls(hashed_api_token=hashed.decode("ascii"))

    def verify(self, token: XApiToken) -> bool:
        presented = token.value.encode("utf-8")
        if len(presented) > MAX_SECRET_BYTES:
            # A secret this long could never have been built.
            return False
        try:
            return bcrypt.checkpw(presented, self.hashed_api_token.encode("ascii"))
        except ValueError as e:
            raise AuthError(AuthErrorKind.VERIFY) from e
