"""
Phrase substitution over mapping tables.

Entries are applied longest phrase first, one entry at a time, each over the
text produced by the previous entry. A later entry can therefore match text
introduced by an earlier replacement.
"""

import re
from functools import lru_cache
from typing import List, Mapping, Tuple

from app.services.case_matching import match_phrase_case


@lru_cache(maxsize=4096)
def phrase_pattern(phrase: str) -> "re.Pattern[str]":
    """Whole-word, case-insensitive pattern for a phrase."""
    return re.compile(r"\b" + re.escape(phrase) + r"\b", re.IGNORECASE)


def ordered_entries(table: Mapping[str, str]) -> List[Tuple[str, str]]:
    # sorted() is stable, so equal-length phrases keep table order
    return sorted(
        ((phrase, replacement) for phrase, replacement in table.items() if phrase),
        key=lambda entry: len(entry[0]),
        reverse=True,
    )


def apply_mapping(text: str, table: Mapping[str, str]) -> str:
    """Replace every whole-word occurrence of each table phrase, preserving case."""
    if not table:
        return text

    updated = text
    for phrase, replacement in ordered_entries(table):
        # a callable replacement is inserted verbatim, so "$1" or "\1" stay literal
        updated = phrase_pattern(phrase).sub(
            lambda match, repl=replacement: match_phrase_case(match.group(0), repl),
            updated,
        )
    return updated
