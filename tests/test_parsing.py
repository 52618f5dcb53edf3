"""Tests for path parsing and formatting."""

import pytest

from models import Step
from parsing import (
    format_path,
    format_step,
    format_trace,
    join_step_words,
    parse_path,
    parse_step,
)
from transitions import simulate


@pytest.mark.parametrize(
    "token,expected",
    [
        ("father", Step("father")),
        ("Mother", Step("mother")),
        ("dad", Step("father")),
        ("amma", Step("mother")),
        ("HENDATHI", Step("wife")),
        ("brother", Step.sibling("male")),
        ("elder sister", Step.sibling("female", "elder")),
        ("younger-brother", Step.sibling("male", "younger")),
        ("older brother", Step.sibling("male", "elder")),
        ("sibling", Step.sibling()),
        ("sibling:f", Step.sibling("female")),
        ("sibling:male:younger", Step.sibling("male", "younger")),
        ("sibling::elder", Step.sibling("unknown", "elder")),
    ],
)
def test_parse_step(token, expected):
    assert parse_step(token) == expected


@pytest.mark.parametrize("token", ["spouse", "", "big brother", "sibling:x", "sibling:m:twin"])
def test_parse_step_invalid(token):
    with pytest.raises(ValueError):
        parse_step(token)


def test_parse_possessive_path():
    assert parse_path("Mother's mother's sister's daughter") == [
        Step("mother"),
        Step("mother"),
        Step.sibling("female"),
        Step("daughter"),
    ]


def test_parse_curly_apostrophe():
    assert parse_path("Father’s sister") == [Step("father"), Step.sibling("female")]


def test_parse_separators():
    expected = [Step("wife"), Step.sibling("male", "younger"), Step("son")]

    assert parse_path("wife, younger brother, son") == expected
    assert parse_path("wife > younger brother > son") == expected
    assert parse_path("wife->younger brother->son") == expected


def test_parse_parenthesised_sibling():
    assert parse_path("mother, sibling(female, elder)") == [
        Step("mother"),
        Step.sibling("female", "elder"),
    ]
    assert parse_path("sibling(male)") == [Step.sibling("male")]


def test_parse_empty_path():
    assert parse_path("") == []
    assert parse_path("   ") == []


def test_parse_path_names_bad_token():
    with pytest.raises(ValueError, match="cousin"):
        parse_path("mother's cousin")


def test_format_step():
    assert format_step(Step("father"), 0) == "1. father"
    assert format_step(Step.sibling("female", "elder"), 2) == "3. sibling (female, elder)"
    assert format_step(Step.sibling("male"), 1) == "2. sibling (male)"


def test_format_path():
    steps = [Step("mother"), Step.sibling("male")]
    assert format_path(steps) == "1. mother  2. sibling (male)"


def test_format_trace():
    trace = simulate("male", [Step("mother"), Step("mother")])
    assert format_trace(trace) == "A2 → B1 → A0"


def test_parse_parenthesised_sibling_after_space():
    assert parse_path("mother, sibling (female, elder)") == [
        Step("mother"),
        Step.sibling("female", "elder"),
    ]
    assert parse_path("sibling (male)") == [Step.sibling("male")]


@pytest.mark.parametrize(
    "step",
    [
        Step("father"),
        Step("daughter"),
        Step.sibling("female", "elder"),
        Step.sibling("male"),
        Step.sibling("unknown", "younger"),
    ],
)
def test_badge_text_parses_back(step):
    """A path badge reads back as the step it shows."""
    assert parse_path(format_step(step, 2)) == [step]


@pytest.mark.parametrize(
    "words,expected",
    [
        (["father", "elder", "sister"], "father, elder sister"),
        (["mother", "brother", "son"], "mother, brother, son"),
        (["wife", "Younger", "brother"], "wife, Younger brother"),
        (["father", "elder"], "father, elder"),
        ([], ""),
    ],
)
def test_join_step_words(words, expected):
    assert join_step_words(words) == expected
