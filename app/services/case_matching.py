"""
Casing helpers shared by the mapping engine and the suffix rewriter.

Casing is always read from the matched source span and applied to the
replacement's own words, so a one-word source can drive a multi-word
replacement and vice versa.
"""


def _is_capitalized(word: str) -> bool:
    return bool(word) and word[0].upper() == word[0] and word[1:].lower() == word[1:]


def title_case(text: str) -> str:
    """Upper-case the first letter of every space-separated word, lower-case the rest."""
    return " ".join(
        word[0].upper() + word[1:].lower() if word else word
        for word in text.split(" ")
    )


def match_case(source: str, replacement: str) -> str:
    """Single-word casing: ALL CAPS, Capitalized, or left as given."""
    if not source or not replacement:
        return replacement
    if source.upper() == source:
        return replacement.upper()
    if _is_capitalized(source):
        return replacement[0].upper() + replacement[1:]
    return replacement


def match_phrase_case(source: str, replacement: str) -> str:
    """Phrase casing: ALL CAPS, all lower, Title Case, Capitalized, or left as given."""
    if not source or not replacement:
        return replacement
    if source.upper() == source:
        return replacement.upper()
    if source.lower() == source:
        return replacement.lower()
    if all(_is_capitalized(word) for word in source.split(" ")):
        return title_case(replacement)
    if _is_capitalized(source):
        return replacement[0].upper() + replacement[1:]
    return replacement
