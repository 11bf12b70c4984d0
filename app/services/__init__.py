# Conversion pipeline services

from .case_matching import match_case, match_phrase_case, title_case
from .text_normalizer import normalize, protect_currency, replace_em_dash, restore_currency
from .mapping_engine import apply_mapping
from .mapping_store import InMemoryMappingStore, JsonFileMappingStore
from .dictionaries import SpellingDictionary, WordListDictionary
from .spelling_translator import BaseSpellingTranslator, TableSpellingTranslator
from .suffix_rewriter import IseSuffixRewriter, apply_ise_conversions
from .object_walker import walk, walk_async
from .converter_service import NZSpellingConverter

__all__ = [
    "match_case",
    "match_phrase_case",
    "title_case",
    "normalize",
    "protect_currency",
    "replace_em_dash",
    "restore_currency",
    "apply_mapping",
    "InMemoryMappingStore",
    "JsonFileMappingStore",
    "SpellingDictionary",
    "WordListDictionary",
    "BaseSpellingTranslator",
    "TableSpellingTranslator",
    "IseSuffixRewriter",
    "apply_ise_conversions",
    "walk",
    "walk_async",
    "NZSpellingConverter",
]
