"""Human readable display names for raw column names."""

from __future__ import annotations

import re

_SEPARATOR_RE = re.compile(r"[\s_\-]+")
_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_UPPERCASE_TOKENS = {"id", "url", "uuid", "ip", "json"}


def humanize(raw_name: str | None) -> str:
    """Turn ``user_first_name`` / ``userFirstName`` into ``User First Name``.

    Total over strings: empty or separator-only names yield ``""``.
    """

    if not raw_name:
        return ""
    spaced = _CAMEL_BOUNDARY_RE.sub(" ", str(raw_name))
    tokens = [token for token in _SEPARATOR_RE.split(spaced) if token]
    return " ".join(_humanize_token(token) for token in tokens)


def _humanize_token(token: str) -> str:
    lowered = token.lower()
    if lowered in _UPPERCASE_TOKENS:
        return lowered.upper()
    return lowered[:1].upper() + lowered[1:]
