"""
Word dictionaries used to validate suffix rewrites.

Each dictionary is a read-only, case-insensitive word set for one English
variety held in a ``pyspellchecker`` word frequency table. A dictionary can
start from one of pyspellchecker's bundled languages and add words from a
plain or gzipped word-list file.
"""

import gzip
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Union

from spellchecker import SpellChecker

from app.core.exceptions import InitializationError

logger = logging.getLogger(__name__)


class SpellingDictionary(ABC):
    """Membership capability for one English variety"""

    @abstractmethod
    def contains(self, word: str) -> bool:
        """Case-insensitive membership test"""
        pass

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)


class WordListDictionary(SpellingDictionary):
    """
    Dictionary backed by a pyspellchecker word table.

    ``language`` selects one of pyspellchecker's bundled dictionaries (for
    example ``"en"``, which uses US spelling) as the base word set; ``words``
    are added on top.
    """

    def __init__(self, words: Iterable[str] = (), name: str = "custom", language: Optional[str] = None):
        self.name = name
        self.language = language
        try:
            self._checker = SpellChecker(language=language, case_sensitive=False)
        except ValueError as e:
            raise InitializationError(
                f"Unknown dictionary language {language!r}",
                details={"language": language, "reason": str(e)},
            ) from e
        self._checker.word_frequency.load_words([w for w in words if w])

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        name: Optional[str] = None,
        language: Optional[str] = None,
    ) -> "WordListDictionary":
        """
        Load a word list with one word per line, optionally gzipped.

        Blank lines and lines starting with ``#`` are skipped.

        Raises:
            InitializationError: if the file cannot be read, or holds no words
                and there is no base language to fall back on
        """
        path = Path(path)
        try:
            words = read_word_list(path)
        except (OSError, UnicodeDecodeError) as e:
            raise InitializationError(
                f"Failed to load dictionary from {path}",
                details={"path": str(path), "reason": str(e)},
            ) from e
        if not words and language is None:
            raise InitializationError(
                f"Dictionary {path} is empty",
                details={"path": str(path)},
            )
        dictionary = cls(words, name=name or path.name.split(".")[0], language=language)
        logger.info(
            f"Loaded dictionary {dictionary.name} with {len(dictionary)} words",
            extra={"dictionary": dictionary.name, "language": language, "words": len(dictionary)},
        )
        return dictionary

    def contains(self, word: str) -> bool:
        if not word:
            return False
        return word.lower() in self._checker.word_frequency.dictionary

    def __len__(self) -> int:
        return len(self._checker.word_frequency.dictionary)


def read_word_list(path: Path) -> List[str]:
    opener = gzip.open if path.suffix == ".gz" else open
    with opener(path, "rt", encoding="utf-8") as f:
        return [
            line.strip()
            for line in f
            if line.strip() and not line.lstrip().startswith("#")
        ]
