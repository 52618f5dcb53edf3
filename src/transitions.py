"""Moving a position around the grid one step at a time."""

from models import Position, Step, initial_position, other_column


def column_of(position: Position, gender: str) -> str:
    """
    Column in which the person of the given gender sits in a couple.

    Married couples share a row and occupy both columns, so if the current
    person already has that gender the column is kept, otherwise it flips.
    """
    if position.gender == gender:
        return position.column
    return other_column(position.column)


def child_column(position: Position) -> str:
    """Children are always placed under their father's column."""
    return column_of(position, "male")


def apply_step(position: Position, step: Step) -> Position:
    """Return the position reached by taking `step` from `position`."""
    kind = step.kind

    if kind == "father":
        return Position(
            column=position.column,
            row=position.row - 1,
            gender="male",
            age_reference="father",
            no_sibling_in_generation=True,
        )

    if kind == "mother":
        return Position(
            column=other_column(position.column),
            row=position.row - 1,
            gender="female",
            age_reference="mother",
            no_sibling_in_generation=True,
        )

    if kind in ("husband", "wife"):
        gender = "male" if kind == "husband" else "female"
        # Flag carries over through marriage
        return Position(
            column=column_of(position, gender),
            row=position.row,
            gender=gender,
            age_reference=kind,
            no_sibling_in_generation=position.no_sibling_in_generation,
        )

    if kind in ("son", "daughter"):
        return Position(
            column=child_column(position),
            row=position.row + 1,
            gender="male" if kind == "son" else "female",
            age_reference="self",
            no_sibling_in_generation=True,
        )

    # sibling: same block, age judged against whoever the sibling belongs to
    return Position(
        column=position.column,
        row=position.row,
        gender=step.gender,
        age_reference=position.age_reference,
        no_sibling_in_generation=False,
    )


def simulate(self_gender: str, steps: list[Step]) -> list[Position]:
    """
    Walk `steps` from self and return every position visited.

    The first entry is always the initial position, so the trace has
    len(steps) + 1 entries.
    """
    trace = [initial_position(self_gender)]
    for step in steps:
        trace.append(apply_step(trace[-1], step))
    return trace
