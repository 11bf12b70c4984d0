from app.services.text_normalizer import (
    DOLLAR_SENTINEL,
    SENTINEL_ESCAPE,
    normalize,
    protect_currency,
    replace_em_dash,
    restore_currency,
)


def test_em_dash_becomes_spaced_hyphen():
    assert replace_em_dash("color—coded") == "color - coded"
    assert normalize("a—b—c") == "a - b - c"


def test_protect_currency_removes_every_dollar():
    protected, restore = protect_currency("$5 and $10, $$ total")
    assert "$" not in protected
    assert protected.count(DOLLAR_SENTINEL) == 4
    assert restore(protected) == "$5 and $10, $$ total"


def test_restore_is_literal():
    # "$1" and "\1" must survive untouched, not be read as group references
    text = "price $1 \\1 $"
    protected, restore = protect_currency(text)
    assert restore(protected) == text


def test_restore_after_intermediate_transform():
    protected, restore = protect_currency("Pay $20 for the color")
    transformed = protected.replace("color", "colour")
    assert restore(transformed) == "Pay $20 for the colour"


def test_text_without_currency_unchanged():
    protected, _ = protect_currency("no money here")
    assert protected == "no money here"
    assert restore_currency("no money here") == "no money here"


def test_bracketed_marker_in_input_survives():
    text = "literal [[DOLLAR]] token and $3"
    protected, restore = protect_currency(text)
    assert restore(protected) == text


def test_sentinel_text_in_input_survives():
    text = f"odd {DOLLAR_SENTINEL} and {SENTINEL_ESCAPE} costs $2"
    protected, restore = protect_currency(text)
    assert protected.count("$") == 0
    assert restore(protected) == text
