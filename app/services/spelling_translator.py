"""
Base US to UK spelling translation.

The converter treats the translator as a black box: any object implementing
``BaseSpellingTranslator`` can be injected. The default implementation is a
word table loaded from JSON, matched on whole words with the source casing
carried over.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from app.core.exceptions import InitializationError
from app.services.case_matching import match_case


class BaseSpellingTranslator(ABC):
    """Abstract base class for word-level spelling translators"""

    @abstractmethod
    def translate(self, text: str) -> str:
        """Rewrite US spellings in text into UK spellings"""
        pass


class TableSpellingTranslator(BaseSpellingTranslator):
    """
    Translator driven by a US -> UK word table.

    Matching is case-insensitive on whole words; the replacement takes the
    casing of the word it replaces (ALL CAPS, Capitalized, or lower).
    """

    def __init__(self, table: Mapping[str, str]):
        self.logger = logging.getLogger(__name__)
        self._table: Dict[str, str] = {
            us.lower(): uk for us, uk in table.items() if us and uk
        }
        self._pattern: Optional["re.Pattern[str]"] = None
        self._translation_count = 0
        if self._table:
            # longest first so alternation never stops at a shorter prefix
            words = sorted(self._table, key=len, reverse=True)
            self._pattern = re.compile(
                r"\b(" + "|".join(re.escape(w) for w in words) + r")\b",
                re.IGNORECASE,
            )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TableSpellingTranslator":
        """Load the word table from a JSON object file."""
        try:
            with open(path, encoding="utf-8") as f:
                table = json.load(f)
        except (OSError, ValueError) as e:
            raise InitializationError(
                f"Failed to load translation table from {path}",
                details={"path": str(path), "reason": str(e)},
            ) from e
        if not isinstance(table, dict):
            raise InitializationError(
                f"Translation table {path} must be a JSON object",
                details={"path": str(path)},
            )
        return cls(table)

    def _replace(self, match: "re.Match[str]") -> str:
        word = match.group(0)
        return match_case(word, self._table[word.lower()])

    def translate(self, text: str) -> str:
        self._translation_count += 1
        if self._pattern is None:
            return text
        return self._pattern.sub(self._replace, text)

    def get_stats(self) -> dict:
        return {
            "table_size": len(self._table),
            "translation_count": self._translation_count,
        }
