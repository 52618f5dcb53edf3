"""Tests for single-step transitions and path simulation."""

import itertools

import pytest

from models import Position, Step, initial_position
from transitions import apply_step, child_column, simulate


SELF_MALE = initial_position("male")
SELF_FEMALE = initial_position("female")
SELF_UNKNOWN = initial_position("unknown")


def test_father():
    assert apply_step(SELF_MALE, Step("father")) == Position("A", 1, "male", "father", True)


def test_father_keeps_column():
    start = Position("B", 2, "female", "wife", False)
    assert apply_step(start, Step("father")) == Position("B", 1, "male", "father", True)


def test_mother():
    assert apply_step(SELF_MALE, Step("mother")) == Position("B", 1, "female", "mother", True)


def test_mother_of_mother_flips_back():
    start = Position("B", 1, "female", "mother", True)
    assert apply_step(start, Step("mother")) == Position("A", 0, "female", "mother", True)


def test_husband_of_female_crosses():
    assert apply_step(SELF_FEMALE, Step("husband")) == Position(
        "B", 2, "male", "husband", False
    )


def test_husband_of_male_stays():
    assert apply_step(SELF_MALE, Step("husband")) == Position(
        "A", 2, "male", "husband", False
    )


def test_husband_of_unknown_crosses():
    assert apply_step(SELF_UNKNOWN, Step("husband")).column == "B"


def test_husband_inherits_direct_flag():
    mother = Position("B", 1, "female", "mother", True)
    assert apply_step(mother, Step("husband")) == Position("A", 1, "male", "husband", True)


def test_wife_of_male_crosses():
    assert apply_step(SELF_MALE, Step("wife")) == Position("B", 2, "female", "wife", False)


def test_wife_of_female_stays():
    assert apply_step(SELF_FEMALE, Step("wife")) == Position("A", 2, "female", "wife", False)


def test_son_of_male_stays_in_column():
    assert apply_step(SELF_MALE, Step("son")) == Position("A", 3, "male", "self", True)


def test_son_of_female_goes_to_fathers_column():
    assert apply_step(SELF_FEMALE, Step("son")) == Position("B", 3, "male", "self", True)


def test_daughter():
    aunt = Position("B", 1, "female", "mother", False)
    assert apply_step(aunt, Step("daughter")) == Position("A", 2, "female", "self", True)


def test_sibling():
    """Sibling keeps the block and the age anchor, and marks a branch."""
    wife = Position("B", 2, "female", "wife", True)
    step = Step.sibling("male", "younger")

    assert apply_step(wife, step) == Position("B", 2, "male", "wife", False)


def test_sibling_unknown_gender():
    assert apply_step(SELF_MALE, Step.sibling()).gender == "unknown"


def test_child_column():
    assert child_column(Position("A", 1, "male", "father", True)) == "A"
    assert child_column(Position("A", 1, "female", "father", False)) == "B"


ALL_STEPS = [
    Step("father"),
    Step("mother"),
    Step("husband"),
    Step("wife"),
    Step("son"),
    Step("daughter"),
    Step.sibling("male", "elder"),
    Step.sibling("female", "unknown"),
]

ROW_CHANGE = {
    "father": -1,
    "mother": -1,
    "son": 1,
    "daughter": 1,
    "husband": 0,
    "wife": 0,
    "sibling": 0,
}

STARTS = [
    SELF_MALE,
    SELF_FEMALE,
    SELF_UNKNOWN,
    Position("B", 0, "female", "mother", True),
    Position("A", 3, "male", "wife", False),
]


@pytest.mark.parametrize("start", STARTS)
@pytest.mark.parametrize("step", ALL_STEPS)
def test_row_and_column_invariants(start, step):
    result = apply_step(start, step)

    assert result.row == start.row + ROW_CHANGE[step.kind]
    assert result.column in ("A", "B")
    if step.kind in ("father", "sibling"):
        assert result.column == start.column
    if step.kind == "mother":
        assert result.column != start.column


@pytest.mark.parametrize("step", ALL_STEPS)
def test_apply_step_is_deterministic(step):
    start = Position("B", 1, "female", "mother", True)
    assert apply_step(start, step) == apply_step(start, step)


def test_simulate_empty():
    assert simulate("male", []) == [SELF_MALE]


def test_simulate_trace():
    steps = [Step("mother"), Step("mother"), Step.sibling("female"), Step("daughter")]
    trace = simulate("male", steps)

    assert [p.cell for p in trace] == ["A2", "B1", "A0", "A0", "B1"]
    assert trace[3] == Position("A", 0, "female", "mother", False)
    assert trace[4] == Position("B", 1, "female", "self", True)


def test_simulate_does_not_change_steps():
    steps = [Step("father"), Step.sibling("female")]
    simulate("male", steps)
    assert steps == [Step("father"), Step.sibling("female")]


@pytest.mark.parametrize("gender", ["male", "female", "unknown"])
def test_simulate_length(gender):
    for steps in itertools.product(ALL_STEPS[:4] + ALL_STEPS[6:], repeat=2):
        trace = simulate(gender, list(steps))
        assert len(trace) == 3
        assert trace[0] == initial_position(gender)
        assert trace[-1] == apply_step(trace[1], steps[1])
