import asyncio
import copy

import pytest

from app.config.settings import ConverterSettings
from app.core.exceptions import InitializationError, InvalidInputError, NotInitializedError
from app.services.converter_service import NZSpellingConverter
from app.services.mapping_store import InMemoryMappingStore


@pytest.mark.asyncio
async def test_sentence_conversion(converter):
    result = await converter.convert("The organization will analyze the color data.")
    assert result == "The organisation will analyse the colour data."


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "text, expected",
    [("COLOR", "COLOUR"), ("Color", "Colour"), ("color", "colour")],
)
async def test_casing_classes(converter, text, expected):
    assert await converter.convert(text) == expected


@pytest.mark.asyncio
async def test_convert_object(converter):
    payload = {"tags": ["organize", "customize", "finalize"]}
    result = await converter.convert_object(payload)
    assert result == {"tags": ["organise", "customise", "finalise"]}
    assert payload == {"tags": ["organize", "customize", "finalize"]}


@pytest.mark.asyncio
async def test_convert_object_leaves_non_strings(converter):
    payload = {"n": 1, "f": 2.5, "b": False, "z": None, "list": [None, "color", 3]}
    original = copy.deepcopy(payload)
    result = await converter.convert_object(payload)
    assert result == {"n": 1, "f": 2.5, "b": False, "z": None, "list": [None, "colour", 3]}
    assert list(result) == list(original)


@pytest.mark.asyncio
async def test_built_in_phrase_map(converter):
    assert await converter.convert("zip code") == "postcode"
    assert await converter.convert("Find the nearest Gas Station") == "Find the nearest Petrol Station"


@pytest.mark.asyncio
async def test_phrase_map_beats_shorter_custom_mapping(converter):
    converter.add_custom_mappings({"zip": "X"})
    assert await converter.convert("zip code") == "postcode"
    assert await converter.convert("zip it") == "x it"


@pytest.mark.asyncio
async def test_correction_applied(converter):
    converter.add_corrections({"sidewalk": "footpath"})
    assert await converter.convert("Walk on the sidewalk") == "Walk on the footpath"


@pytest.mark.asyncio
async def test_corrections_override_translator(converter):
    converter.add_corrections({"colour": "color"})
    assert await converter.convert("The colour") == "The color"


@pytest.mark.asyncio
async def test_corrections_win_over_custom_mappings(converter):
    converter.add_custom_mappings({"sidewalk": "pavement"})
    converter.add_corrections({"sidewalk": "footpath"})
    assert await converter.convert("sidewalk") == "footpath"


@pytest.mark.asyncio
async def test_longer_user_phrase_first_across_sources(converter):
    converter.add_custom_mappings({"apartment": "flat"})
    converter.add_corrections({"apartment building": "block of flats"})
    assert await converter.convert("an apartment building") == "an block of flats"


@pytest.mark.asyncio
async def test_exceptions_map(converter):
    assert await converter.convert("Connexion via philtre") == "Connection via filter"


@pytest.mark.asyncio
async def test_currency_survives_translation(converter):
    text = "The color print costs $5, the center one $$10."
    result = await converter.convert(text)
    assert result == "The colour print costs $5, the centre one $$10."
    assert result.count("$") == text.count("$")


@pytest.mark.asyncio
async def test_sentence_initial_phrase_keeps_capital(converter):
    assert await converter.convert("Parking lot is full.") == "Car park is full."


@pytest.mark.asyncio
async def test_bracketed_marker_not_mistaken_for_currency(converter):
    assert await converter.convert("literal [[DOLLAR]] token") == "literal [[DOLLAR]] token"


@pytest.mark.asyncio
async def test_em_dash_normalized(converter):
    assert await converter.convert("color—coded") == "colour - coded"


@pytest.mark.asyncio
async def test_unknown_ize_word_unchanged(converter):
    assert await converter.convert("We zorblize daily") == "We zorblize daily"


@pytest.mark.asyncio
async def test_non_string_rejected(converter):
    with pytest.raises(InvalidInputError):
        await converter.convert(123)


def test_run_pipeline_requires_initialization(converter_settings):
    with pytest.raises(NotInitializedError):
        NZSpellingConverter(converter_settings).run_pipeline("color")


def test_sync_object_conversion(converter):
    assert converter.convert_object_sync(["color", {"k": "organize"}]) == ["colour", {"k": "organise"}]


@pytest.mark.asyncio
async def test_injected_components(gb_dictionary, us_dictionary, translator):
    converter = NZSpellingConverter(
        translator=translator,
        gb_dictionary=gb_dictionary,
        us_dictionary=us_dictionary,
        phrase_map={"zip code": "postcode"},
        exceptions_map={},
        corrections=InMemoryMappingStore(),
    )
    assert await converter.convert("Organize the zip code by color") == (
        "Organise the postcode by colour"
    )


@pytest.mark.asyncio
async def test_concurrent_initialize_loads_once(converter_settings):
    converter = NZSpellingConverter(converter_settings)
    await asyncio.gather(*(converter.initialize() for _ in range(5)))
    first = converter.gb_dictionary
    await converter.initialize()
    assert converter.initialized
    assert converter.gb_dictionary is first


@pytest.mark.asyncio
async def test_concurrent_requests_wait_for_initialization(converter_settings):
    converter = NZSpellingConverter(converter_settings)
    results = await asyncio.gather(*(converter.convert("color") for _ in range(5)))
    assert results == ["colour"] * 5


@pytest.mark.asyncio
async def test_initialization_failure(tmp_path):
    config = ConverterSettings(
        us_dictionary_path=str(tmp_path / "missing.txt"),
        corrections_path=str(tmp_path / "corrections.json"),
    )
    converter = NZSpellingConverter(config)

    with pytest.raises(InitializationError):
        await converter.initialize()

    assert not converter.initialized
    assert "last_error" in converter.get_status()
    with pytest.raises(InitializationError):
        await converter.convert("color")


@pytest.mark.asyncio
async def test_missing_config_fails_initialization():
    with pytest.raises(InitializationError):
        await NZSpellingConverter().initialize()
