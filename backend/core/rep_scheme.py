"""
Rep scheme parsing.

A rep scheme token is either a fixed count ("10") or a min-max range
("8-12"). Anything else is rejected; the parser does not guess.
"""

import re
from dataclasses import dataclass

_INT_PATTERN = re.compile(r"\d+")


class RepSchemeParseError(ValueError):
    """Raised when a rep scheme token is malformed."""

    def __init__(self, token: str, reason: str):
        super().__init__(f"Invalid rep scheme '{token}': {reason}")
        self.token = token
        self.reason = reason


@dataclass(frozen=True)
class RepScheme:
    """Structured rep scheme. min may exceed max for malformed ranges."""

    min: int
    max: int
    is_range: bool


def _parse_int(token: str, part: str) -> int:
    part = part.strip()
    if not _INT_PATTERN.fullmatch(part):
        raise RepSchemeParseError(token, f"'{part}' is not a whole number")
    return int(part)


def parse_rep_scheme(token: str) -> RepScheme:
    """
    Parse a rep scheme token.

    Args:
        token: "10" for a fixed count or "8-12" for a range

    Returns:
        RepScheme with min, max and is_range

    Raises:
        RepSchemeParseError: If the token is empty, non-numeric or has more
            than one '-'
    """
    if token is None or not str(token).strip():
        raise RepSchemeParseError(str(token), "empty token")

    token = str(token)
    if "-" in token:
        parts = token.split("-")
        if len(parts) != 2:
            raise RepSchemeParseError(token, "a range needs exactly two bounds")
        low = _parse_int(token, parts[0])
        high = _parse_int(token, parts[1])
        return RepScheme(min=low, max=high, is_range=True)

    value = _parse_int(token, token)
    return RepScheme(min=value, max=value, is_range=False)
