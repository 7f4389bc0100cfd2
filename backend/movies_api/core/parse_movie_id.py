"""Movie Id Parsing: lenient integer parsing of the `{id}` path segment.

Invariants:
    - Leading whitespace skipped, optional sign, then the longest run of ASCII digits
    - A "0x"/"0X" prefix reads the following hex digits ("0x1f" -> 31); "0x" alone is no id
    - Trailing characters after the digits are ignored ("12abc" -> 12)
    - Non-ASCII digits ("١") are not digits here
    - No digits, or a number too long to convert -> None, which matches no record
      (caller answers 404)

Design Decisions:
    - Path id taken as str, not int: a non-numeric id is a miss (404), not a
      request validation failure (400), which is what existing clients expect.
    - re.ASCII: str patterns would otherwise let \\d match any Unicode digit
"""

import re

from movies_api.core.domain_types import MovieId

_LEADING_INT = re.compile(
    r"\s*(?P<sign>[+-]?)(?:0[xX](?P<hex>[0-9a-fA-F]*)|(?P<dec>\d+))",
    re.ASCII,
)


def parse_movie_id(raw: str) -> MovieId | None:
    """Parse the leading integer of `raw`, or None if there is none."""
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    sign = -1 if match["sign"] == "-" else 1
    if match["dec"] is not None:
        try:
            value = int(match["dec"].lstrip("0") or "0")
        except ValueError:
            # Past int's max str digits; no stored id can be that large.
            return None
    elif match["hex"]:
        value = int(match["hex"], 16)
    else:
        return None
    return MovieId(sign * value)
