"""
relay_admin.auth.header

Wire codec for the `X-Api-Token` request header.

Responsibilities:
- Locate exactly one `x-api-token` header among the raw request headers.
- Reject missing, duplicated, or non-text header values.
- Encode a token back into a header pair for clients and tests.

The token itself is opaque here: no trimming, case folding or content checks.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from starlette.requests import HTTPConnection

HEADER_NAME = "x-api-token"

_HEADER_NAME_BYTES = HEADER_NAME.encode("ascii")


class HeaderParseError(Exception):
    """Base class for every way the token header can fail to decode."""


class HeaderMissing(HeaderParseError):
    pass


class DuplicateHeader(HeaderParseError):
    pass


class MalformedHeader(HeaderParseError):
    pass


class InvalidHeaderValue(ValueError):
    pass


def _is_header_text(raw: bytes) -> bool:
    # Visible ASCII, SP and HTAB only.
    return all(b == 0x09 or 0x20 <= b <= 0x7E for b in raw)


@dataclass(frozen=True, slots=True)
class XApiToken:
    """
    Token presented by the caller. `repr` is masked so it never lands in logs.
    """

    value: str = field(repr=False)

    @classmethod
    def parse(cls, raw_headers: Iterable[tuple[bytes, bytes]]) -> XApiToken:
        matches = [value for name, value in raw_headers if name.lower() == _HEADER_NAME_BYTES]
        if not matches:
            raise HeaderMissing(f"{HEADER_NAME} header is missing")
        if len(matches) > 1:
            # Never pick one of several values.
            raise DuplicateHeader(f"{HEADER_NAME} header appears {len(matches)} times")

        raw = matches[0]
        if not raw or not _is_header_text(raw):
            raise MalformedHeader(f"{HEADER_NAME} header value is not valid header text")
        return cls(raw.decode("ascii"))

    @classmethod
    def from_request(cls, conn: HTTPConnection) -> XApiToken:
        return cls.parse(conn.headers.raw)

    def header(self) -> tuple[str, str]:
        return HEADER_NAME, encode(self.value)


def encode(token: str) -> str:
    """
    Validate `token` as a header value and return it unchanged.

    Raises `InvalidHeaderValue` for strings a server would not hand back intact:
    empty values, control or non-ASCII characters, and surrounding whitespace
    (HTTP parsers strip it).
    """

    if not token:
        raise InvalidHeaderValue("header value must not be empty")
    if token != token.strip(" \t"):
        raise InvalidHeaderValue("header value must not start or end with whitespace")
    if not token.isascii() or not _is_header_text(token.encode("ascii")):
        raise InvalidHeaderValue("header value contains characters outside visible ASCII")
    return token


# --- Module Notes -----------------------------------------------------------
# `auth.guard` maps every `HeaderParseError` onto the single PARSE_HEADER error kind,
# so callers only ever observe "Parse Header" for the three failure modes above.
