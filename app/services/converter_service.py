"""
NZ spelling conversion service.

Runs the full pipeline over a string:

1. normalize special characters (em-dash)
2. built-in phrase map, exceptions map, then user mappings
3. base US -> UK translation with currency symbols shielded
4. exceptions map, user mappings and phrase map again, so corrections win
   over anything the translator produced
5. dictionary-validated -ize -> -ise rewriting

User mappings are the merge of the memory-only custom mappings and the
persisted corrections (corrections win on conflicts), applied as one table so
that longer phrases from either source are replaced first.

Dictionaries and tables are loaded once by ``initialize()``; conversions
await it, so requests arriving during start-up wait instead of racing.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from app.config.settings import ConverterSettings
from app.core.exceptions import InitializationError, InvalidInputError, NotInitializedError
from app.services.dictionaries import SpellingDictionary, WordListDictionary
from app.services.mapping_engine import apply_mapping
from app.services.mapping_store import InMemoryMappingStore, JsonFileMappingStore
from app.services.object_walker import JSONValue, walk, walk_async
from app.services.spelling_translator import BaseSpellingTranslator, TableSpellingTranslator
from app.services.suffix_rewriter import IseSuffixRewriter
from app.services.text_normalizer import normalize, protect_currency

logger = logging.getLogger(__name__)


def load_mapping_file(path: Union[str, Path]) -> Dict[str, str]:
    """Load a built-in phrase -> replacement table from a JSON object file."""
    try:
        with open(path, encoding="utf-8") as f:
            table = json.load(f)
    except (OSError, ValueError) as e:
        raise InitializationError(
            f"Failed to load mapping table from {path}",
            details={"path": str(path), "reason": str(e)},
        ) from e
    if not isinstance(table, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in table.items()
    ):
        raise InitializationError(
            f"Mapping table {path} must be a JSON object of strings",
            details={"path": str(path)},
        )
    return table


class NZSpellingConverter:
    """
    Converts American/British English text into New Zealand spelling.

    Any component passed to the constructor is used as is; anything missing
    is loaded from ``config`` during ``initialize()``.
    """

    def __init__(
        self,
        config: Optional[ConverterSettings] = None,
        *,
        translator: Optional[BaseSpellingTranslator] = None,
        gb_dictionary: Optional[SpellingDictionary] = None,
        us_dictionary: Optional[SpellingDictionary] = None,
        phrase_map: Optional[Mapping[str, str]] = None,
        exceptions_map: Optional[Mapping[str, str]] = None,
        corrections: Optional[InMemoryMappingStore] = None,
        custom_mappings: Optional[InMemoryMappingStore] = None,
    ):
        self.config = config
        self.translator = translator
        self.gb_dictionary = gb_dictionary
        self.us_dictionary = us_dictionary
        self.phrase_map = dict(phrase_map) if phrase_map is not None else None
        self.exceptions_map = dict(exceptions_map) if exceptions_map is not None else None
        self.corrections = corrections
        self.custom_mappings = custom_mappings or InMemoryMappingStore()
        self._rewriter: Optional[IseSuffixRewriter] = None
        self._initialized = False
        self._initialization_lock = asyncio.Lock()
        self._last_error: Optional[str] = None

    @property
    def initialized(self) -> bool:
        return self._initialized

    def _require_config(self, component: str) -> ConverterSettings:
        if self.config is None:
            raise InitializationError(
                f"No configuration available to load {component}",
                details={"component": component},
            )
        return self.config

    async def initialize(self) -> None:
        """
        Load dictionaries and tables. Safe to call repeatedly and concurrently.

        Raises:
            InitializationError: if any component fails to load
        """
        if self._initialized:
            return
        async with self._initialization_lock:
            if self._initialized:
                return

            logger.info("Initializing NZ spelling converter")
            try:
                await self._load_components()
            except InitializationError as e:
                self._last_error = e.message
                logger.error(f"Converter initialization failed: {e.message}", extra={"details": e.details})
                raise

            self._rewriter = IseSuffixRewriter(self.gb_dictionary, self.us_dictionary)
            self._initialized = True
            self._last_error = None
            logger.info("Converter initialized successfully")

    async def _load_components(self) -> None:
        if self.phrase_map is None:
            self.phrase_map = load_mapping_file(self._require_config("phrase map").phrase_map_path)
        if self.exceptions_map is None:
            self.exceptions_map = load_mapping_file(
                self._require_config("exceptions map").exceptions_map_path
            )
        if self.translator is None:
            self.translator = TableSpellingTranslator.from_file(
                self._require_config("translator").translation_table_path
            )
        if self.corrections is None:
            store = JsonFileMappingStore(self._require_config("corrections").corrections_path)
            store.load()
            self.corrections = store

        # both dictionaries load in parallel off the event loop
        pending = {}
        if self.gb_dictionary is None:
            pending["gb"] = asyncio.to_thread(
                WordListDictionary.from_file,
                self._require_config("GB dictionary").gb_dictionary_path,
                "en-gb-ise",
            )
        if self.us_dictionary is None:
            config = self._require_config("US dictionary")
            pending["us"] = asyncio.to_thread(
                WordListDictionary.from_file,
                config.us_dictionary_path,
                "en-us",
                config.us_dictionary_language or None,
            )
        if pending:
            loaded = dict(zip(pending.keys(), await asyncio.gather(*pending.values())))
            self.gb_dictionary = loaded.get("gb", self.gb_dictionary)
            self.us_dictionary = loaded.get("us", self.us_dictionary)

    def user_mappings(self) -> Mapping[str, str]:
        """Current merged custom mappings and corrections."""
        merged = dict(self.custom_mappings.snapshot())
        if self.corrections is not None:
            merged.update(self.corrections.snapshot())
        return merged

    def run_pipeline(self, text: str) -> str:
        """
        Convert one string synchronously.

        Raises:
            NotInitializedError: if ``initialize()`` has not completed
            InvalidInputError: if ``text`` is not a string
        """
        if not self._initialized:
            raise NotInitializedError()
        if not isinstance(text, str):
            raise InvalidInputError(
                "Text to convert must be a string",
                details={"type": type(text).__name__},
            )

        user_table = self.user_mappings()

        normalized = normalize(text)
        phrase_adjusted = apply_mapping(normalized, self.phrase_map)
        exception_adjusted = apply_mapping(phrase_adjusted, self.exceptions_map)
        user_adjusted = apply_mapping(exception_adjusted, user_table)

        protected, restore = protect_currency(user_adjusted)
        translated = restore(self.translator.translate(protected))

        restored_exceptions = apply_mapping(translated, self.exceptions_map)
        restored_user = apply_mapping(restored_exceptions, user_table)
        final_phrases = apply_mapping(restored_user, self.phrase_map)
        return self._rewriter.apply(final_phrases)

    async def convert(self, text: str) -> str:
        await self.initialize()
        return self.run_pipeline(text)

    async def convert_object(self, value: JSONValue) -> JSONValue:
        """Convert every string leaf of a JSON-like value."""
        await self.initialize()
        return await walk_async(value, self.convert)

    def convert_object_sync(self, value: JSONValue) -> JSONValue:
        return walk(value, self.run_pipeline)

    # Custom mappings (memory only)

    def add_custom_mappings(self, pairs: Mapping[str, str]) -> Dict[str, str]:
        self.custom_mappings.add(pairs)
        return self.custom_mappings.as_dict()

    def remove_custom_mapping(self, key: str) -> bool:
        return self.custom_mappings.remove(key)

    def get_custom_mappings(self) -> Dict[str, str]:
        return self.custom_mappings.as_dict()

    def clear_custom_mappings(self) -> None:
        self.custom_mappings.clear()

    # Corrections (persisted)

    def _require_corrections(self) -> InMemoryMappingStore:
        if self.corrections is None:
            raise NotInitializedError()
        return self.corrections

    def add_corrections(self, pairs: Mapping[str, str]) -> Dict[str, str]:
        store = self._require_corrections()
        store.add(pairs)
        return store.as_dict()

    def remove_correction(self, key: str) -> bool:
        return self._require_corrections().remove(key)

    def get_corrections(self) -> Dict[str, str]:
        return self._require_corrections().as_dict()

    def clear_corrections(self) -> None:
        self._require_corrections().clear()

    def get_status(self) -> Dict[str, Any]:
        status: Dict[str, Any] = {
            "initialized": self._initialized,
            "corrections": len(self.corrections) if self.corrections is not None else 0,
            "custom_mappings": len(self.custom_mappings),
        }
        if self._last_error:
            status["last_error"] = self._last_error
        return status
