"""
Tests for ordinal extraction.
"""

import pytest

from examples_admin.services.ordinals import extract_ordinal, usable_ordinal


@pytest.mark.parametrize(
    "filename,expected",
    [
        ("1.jpg", 1),
        ("3.png", 3),
        ("42.mp4", 42),
        ("007.webm", 7),
        ("12.tar.gz", 12),
        ("0.png", 0),
    ],
)
def test_leading_digits_before_dot(filename: str, expected: int):
    assert extract_ordinal(filename) == expected


@pytest.mark.parametrize(
    "filename",
    ["cover.png", "v3.png", "3", "3-final.png", ".png", "", " 3.png", "-1.png", None],
)
def test_no_ordinal(filename):
    assert extract_ordinal(filename) is None


def test_zero_is_not_usable():
    assert extract_ordinal("0.jpg") == 0
    assert usable_ordinal("0.jpg") is None
    assert usable_ordinal("2.jpg") == 2
