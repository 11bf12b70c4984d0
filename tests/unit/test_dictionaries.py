import pytest

from app.core.exceptions import InitializationError
from app.services.dictionaries import WordListDictionary


def test_membership_is_case_insensitive():
    dictionary = WordListDictionary(["Organise", "colour"])
    assert dictionary.contains("organise")
    assert dictionary.contains("ORGANISE")
    assert "Colour" in dictionary
    assert not dictionary.contains("organize")


def test_empty_and_non_string_lookups():
    dictionary = WordListDictionary(["colour"])
    assert not dictionary.contains("")
    assert 42 not in dictionary


def test_from_file_skips_comments_and_blanks(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# header\n\ncolour\n  flavour  \n")
    dictionary = WordListDictionary.from_file(path)
    assert len(dictionary) == 2
    assert dictionary.contains("flavour")
    assert dictionary.name == "words"


def test_from_file_missing(tmp_path):
    with pytest.raises(InitializationError):
        WordListDictionary.from_file(tmp_path / "missing.txt")


def test_from_file_empty(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("# nothing here\n")
    with pytest.raises(InitializationError):
        WordListDictionary.from_file(path)


def test_bundled_dictionaries_disagree_on_ize(bundled_dictionaries):
    us, gb = bundled_dictionaries

    assert us.contains("organization") and not gb.contains("organization")
    assert gb.contains("organisation") and not us.contains("organisation")
    assert gb.contains("size") and us.contains("size")
    for word in ("prize", "seize", "capsized", "citizen", "oversized"):
        assert gb.contains(word), word


def test_bundled_dictionaries_are_full_size(bundled_dictionaries):
    us, gb = bundled_dictionaries
    assert len(us) > 100_000
    assert len(gb) > 100_000
    for us_word, gb_word in [
        ("synthesize", "synthesise"),
        ("tokenize", "tokenise"),
        ("incentivize", "incentivise"),
        ("emphasized", "emphasised"),
        ("hospitalization", "hospitalisation"),
    ]:
        assert us.contains(us_word) and not gb.contains(us_word), us_word
        assert gb.contains(gb_word), gb_word


def test_gb_dictionary_uses_uk_spellings(bundled_dictionaries):
    _, gb = bundled_dictionaries
    assert gb.contains("colour") and not gb.contains("color")
    assert gb.contains("centre") and gb.contains("travelled")


def test_language_base_with_extra_words(tmp_path):
    path = tmp_path / "extra.txt"
    path.write_text("zorblize\n")
    dictionary = WordListDictionary.from_file(path, language="en")
    assert dictionary.contains("zorblize")
    assert dictionary.contains("organize")
    assert dictionary.language == "en"


def test_empty_extra_list_allowed_with_language(tmp_path):
    path = tmp_path / "extra.txt"
    path.write_text("# nothing extra\n")
    assert WordListDictionary.from_file(path, language="en").contains("color")


def test_unknown_language_fails_initialization():
    with pytest.raises(InitializationError):
        WordListDictionary(["colour"], language="xx-not-a-language")


def test_from_file_reads_gzip(tmp_path):
    import gzip

    path = tmp_path / "words.txt.gz"
    with gzip.open(path, "wt", encoding="utf-8") as f:
        f.write("# header\ncolour\nflavour\n")
    dictionary = WordListDictionary.from_file(path)
    assert dictionary.name == "words"
    assert len(dictionary) == 2
    assert dictionary.contains("Colour")
