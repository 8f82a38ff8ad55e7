"""Tests for code normalization."""

import pytest

from biztime.core.slug import slugify_code


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Turbo!", "turbo"),
        ("apple", "apple"),
        ("Big Co. Inc", "big-co-inc"),
        ("*a+b~c.(d)'e\"f!g:h@i", "abcdefghi"),
        ("  Spaced   Out  ", "spaced-out"),
        (123, "123"),
    ],
)
def test_slugify_code(raw, expected) -> None:
    assert slugify_code(raw) == expected


def test_slugify_is_idempotent() -> None:
    once = slugify_code("Turbo Tax: The (Best)!")
    assert slugify_code(once) == once


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("a - b", "a-b"),
        ("Café & Co", "cafe-and-co"),
        ("Bob's $ Shop", "bobs-dollar-shop"),
    ],
)
def test_slugify_code_is_url_safe(raw, expected) -> None:
    assert slugify_code(raw) == expected
