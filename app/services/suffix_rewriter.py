"""
Dictionary-validated -ize to -ise rewriting.

A word is only rewritten when the US dictionary knows the original and the
GB dictionary knows the rewritten form. Anything else is left alone, so
proper nouns, foreign words and words that merely end in "ize" survive.
"""

import logging
import re
from typing import Optional

from app.services.case_matching import match_case
from app.services.dictionaries import SpellingDictionary

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"[A-Za-z]+(?:'[A-Za-z]+)?")

# longest suffix first
ISE_SUFFIXES = (
    ("izations", "isations"),
    ("ization", "isation"),
    ("izers", "isers"),
    ("izer", "iser"),
    ("izing", "ising"),
    ("ized", "ised"),
    ("izes", "ises"),
    ("ize", "ise"),
)


def _lookup(dictionary: Optional[SpellingDictionary], word: str) -> bool:
    # a missing dictionary or a broken lookup means "unknown word"
    if dictionary is None:
        return False
    try:
        return dictionary.contains(word)
    except Exception as e:
        logger.warning(f"Dictionary lookup failed for {word!r}: {e}")
        return False


class IseSuffixRewriter:
    """Rewrites -ize family suffixes when both dictionaries agree."""

    def __init__(
        self,
        gb_dictionary: Optional[SpellingDictionary],
        us_dictionary: Optional[SpellingDictionary],
    ):
        self.gb_dictionary = gb_dictionary
        self.us_dictionary = us_dictionary

    def rewrite_word(self, word: str) -> str:
        lower = word.lower()
        if _lookup(self.gb_dictionary, lower):
            return word

        for us_suffix, gb_suffix in ISE_SUFFIXES:
            if not lower.endswith(us_suffix):
                continue
            candidate = lower[: -len(us_suffix)] + gb_suffix
            if _lookup(self.us_dictionary, lower) and _lookup(self.gb_dictionary, candidate):
                return match_case(word, candidate)
            return word
        return word

    def apply(self, text: str) -> str:
        return WORD_PATTERN.sub(lambda match: self.rewrite_word(match.group(0)), text)


def apply_ise_conversions(
    text: str,
    gb_dictionary: Optional[SpellingDictionary],
    us_dictionary: Optional[SpellingDictionary],
) -> str:
    """Functional form of ``IseSuffixRewriter.apply``."""
    return IseSuffixRewriter(gb_dictionary, us_dictionary).apply(text)
