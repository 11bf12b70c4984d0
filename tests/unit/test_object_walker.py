import copy

import pytest

from app.services.object_walker import walk, walk_async


PAYLOAD = {
    "title": "color",
    "count": 3,
    "ratio": 0.5,
    "active": True,
    "missing": None,
    "tags": ["color", 1, False, None, ["color"]],
    "nested": {"z": "color", "a": {"deep": "color"}},
}


def shout(text):
    return text.upper()


def test_walk_transforms_only_strings():
    result = walk(PAYLOAD, shout)
    assert result == {
        "title": "COLOR",
        "count": 3,
        "ratio": 0.5,
        "active": True,
        "missing": None,
        "tags": ["COLOR", 1, False, None, ["COLOR"]],
        "nested": {"z": "COLOR", "a": {"deep": "COLOR"}},
    }


def test_walk_preserves_key_order_and_keys():
    result = walk(PAYLOAD, shout)
    assert list(result.keys()) == list(PAYLOAD.keys())
    assert list(result["nested"].keys()) == ["z", "a"]


def test_walk_does_not_mutate_input():
    original = copy.deepcopy(PAYLOAD)
    result = walk(PAYLOAD, shout)
    assert PAYLOAD == original
    assert result["tags"] is not PAYLOAD["tags"]


def test_walk_keys_are_never_transformed():
    assert walk({"color": "color"}, shout) == {"color": "COLOR"}


@pytest.mark.parametrize("scalar", [0, 1.5, True, False, None])
def test_walk_scalars_returned_as_is(scalar):
    assert walk(scalar, shout) is scalar


def test_walk_string_root():
    assert walk("color", shout) == "COLOR"


@pytest.mark.asyncio
async def test_walk_async_matches_walk():
    async def async_shout(text):
        return text.upper()

    assert await walk_async(PAYLOAD, async_shout) == walk(PAYLOAD, shout)


@pytest.mark.asyncio
async def test_walk_async_preserves_array_order():
    import asyncio

    async def slow_first(text):
        # earlier items finish later
        await asyncio.sleep(0.01 if text == "a" else 0)
        return text * 2

    assert await walk_async(["a", "b", "c"], slow_first) == ["aa", "bb", "cc"]
