"""
Shared fixtures for converter tests.
"""
import asyncio

import pytest
from fastapi.testclient import TestClient

from app.config.settings import ConverterSettings
from app.core.dependencies import service_container
from app.main import app
from app.services.converter_service import NZSpellingConverter
from app.services.dictionaries import WordListDictionary
from app.services.spelling_translator import TableSpellingTranslator


GB_WORDS = [
    "the", "size", "sizes", "colour", "organise", "organised", "organisation",
    "organisations", "customise", "finalise", "realise", "realisation",
]
US_WORDS = [
    "the", "size", "sizes", "color", "organize", "organized", "organization",
    "organizations", "customize", "finalize", "realize", "realization", "recognized",
]


@pytest.fixture
def gb_dictionary():
    return WordListDictionary(GB_WORDS, name="test-gb")


@pytest.fixture
def us_dictionary():
    return WordListDictionary(US_WORDS, name="test-us")


@pytest.fixture
def translator():
    return TableSpellingTranslator({"color": "colour", "analyze": "analyse", "center": "centre"})


@pytest.fixture(scope="session")
def bundled_dictionaries():
    """The full US and GB dictionaries, loaded once per test session."""
    config = ConverterSettings()
    us = WordListDictionary.from_file(config.us_dictionary_path, "en-us", config.us_dictionary_language)
    gb = WordListDictionary.from_file(config.gb_dictionary_path, "en-gb-ise")
    return us, gb


@pytest.fixture
def converter_settings(tmp_path):
    """Bundled data files with corrections written under tmp_path."""
    return ConverterSettings(corrections_path=str(tmp_path / "corrections.json"))


@pytest.fixture
def converter(converter_settings, bundled_dictionaries):
    """Converter over the bundled tables and dictionaries, already initialized."""
    us, gb = bundled_dictionaries
    instance = NZSpellingConverter(converter_settings, us_dictionary=us, gb_dictionary=gb)
    asyncio.run(instance.initialize())
    return instance


@pytest.fixture
def client(converter):
    service_container.set_converter(converter)
    with TestClient(app) as test_client:
        yield test_client
