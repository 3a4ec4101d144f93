"""
PostgREST filter value encoding.

Exercise names, equipment and muscles come from a generative step and are
embedded in PostgREST `or=(...)` logic trees. Values are wrapped in double
quotes so reserved characters such as commas and parentheses are taken
literally, which keeps names like "Barbell Full Squat (Back POV)" matchable.

This module has no dependencies on models or services to avoid circular imports.
"""

import re

# Wildcards understood by PostgREST `like`/`ilike` operators
_LIKE_WILDCARDS = re.compile(r"[%*]")


def quote_filter_value(value: str) -> str:
    """
    Quote a value for use inside a PostgREST logic tree.

    Backslashes and double quotes are the only characters that are
    special inside a quoted value, so they are backslash-escaped.

    Args:
        value: Raw filter value

    Returns:
        Double-quoted, escaped value
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def strip_like_wildcards(value: str) -> str:
    """Remove `like` wildcards from a search term."""
    return _LIKE_WILDCARDS.sub("", value)


def contains_pattern(value: str) -> str:
    """
    Build a quoted `ilike` pattern matching any text containing `value`.

    Wildcards inside the value are removed so a term can never widen
    its own match.

    Args:
        value: Raw search term

    Returns:
        Quoted pattern of the form "%value%"
    """
    return quote_filter_value(f"%{strip_like_wildcards(value)}%")
