"""
Character normalization applied around the conversion pipeline.

The em-dash rewrite is one-way. Currency protection is reversible: every
``$`` is swapped for a sentinel before the base translator runs and swapped
back afterwards. The sentinel is built from a private-use escape character,
and any escape character already in the input is doubled first, so a
protected text always restores to exactly the original.
"""

import re
from typing import Callable, Tuple

EM_DASH = "—"

SENTINEL_ESCAPE = "\ue000"
DOLLAR_SENTINEL = f"{SENTINEL_ESCAPE}DOLLAR{SENTINEL_ESCAPE}"

# one left-to-right pass: a doubled escape or a full sentinel
_ESCAPED = re.compile(f"{SENTINEL_ESCAPE}({SENTINEL_ESCAPE}|DOLLAR{SENTINEL_ESCAPE})")


def replace_em_dash(text: str) -> str:
    return text.replace(EM_DASH, " - ")


def normalize(text: str) -> str:
    """Rewrite characters that break word-boundary matching downstream."""
    return replace_em_dash(text)


def protect_currency(text: str) -> Tuple[str, Callable[[str], str]]:
    """
    Shield currency symbols from an intermediate transform.

    Returns:
        The protected text and a function restoring the symbols in any text
        derived from it.
    """
    escaped = text.replace(SENTINEL_ESCAPE, SENTINEL_ESCAPE * 2)
    return escaped.replace("$", DOLLAR_SENTINEL), restore_currency


def restore_currency(text: str) -> str:
    # callable replacement: "$" is never read as a group reference
    return _ESCAPED.sub(
        lambda match: SENTINEL_ESCAPE if match.group(1) == SENTINEL_ESCAPE else "$",
        text,
    )
