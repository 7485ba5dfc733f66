"""Tests for functional rgb() and bare triplet parsing."""

import pytest

from colorconverter.color.models import RGBTriplet
from colorconverter.color.rgb import format_rgb, parse_rgb_function, parse_triplet


@pytest.mark.parametrize(
    "text",
    [
        "rgb(26, 43, 60)",
        "rgb(26,43,60)",
        "RGB(26, 43, 60)",
        "Rgb(26, 43, 60)",
        "rgb (26,43,60)",
        "  rgb( 26 , 43 , 60 )  ",
    ],
)
def test_parse_rgb_function(text):
    assert parse_rgb_function(text) == RGBTriplet(26, 43, 60)


@pytest.mark.parametrize(
    "text",
    [
        "rgb(300,0,0)",
        "rgb(256, 0, 0)",
        "rgb(1000,0,0)",
        "rgb(-1,2,3)",
        "rgb(1.5,2,3)",
        "rgb(1,2)",
        "rgb(1,2,3,4)",
        "rgba(1,2,3)",
        "rgb(1 2 3)",
        "rgb(1,2,3",
        "21, 31, 41",
        "",
    ],
)
def test_parse_rgb_function_rejects(text):
    assert parse_rgb_function(text) is None


def test_parse_rgb_function_accepts_bounds():
    assert parse_rgb_function("rgb(0, 0, 255)") == RGBTriplet(0, 0, 255)


@pytest.mark.parametrize(
    "text",
    [
        "21,31,41",
        "21, 31, 41",
        "21 31 41",
        "21，31，41",
        "21\t31\n41",
        " 21 ,，  31\t41 ",
    ],
)
def test_parse_triplet_separators(text):
    assert parse_triplet(text) == RGBTriplet(21, 31, 41)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "21,31",
        "1,2,3,4",
        ",1,2,3",
        "1,2,3,",
        "256,0,0",
        "a,b,c",
        "-1 2 3",
        "+1 2 3",
        "1.0 2 3",
        "rgb(1,2,3)",
    ],
)
def test_parse_triplet_rejects(text):
    assert parse_triplet(text) is None


def test_parse_triplet_allows_leading_zeros():
    assert parse_triplet("001 002 255") == RGBTriplet(1, 2, 255)


def test_format_rgb():
    assert format_rgb(RGBTriplet(17, 170, 255)) == "rgb(17, 170, 255)"


@pytest.mark.parametrize(
    "text",
    [
        "color: rgb(1, 2, 3);",
        "rgb(1,2,3) trailing",
        "background: RGB(1,2,3)",
    ],
)
def test_parse_rgb_function_finds_call_in_surrounding_text(text):
    assert parse_rgb_function(text) == RGBTriplet(1, 2, 3)
