"""
Kannada kinship terms for a position on the two-column grid.

Rules follow Ravikiran Rao's South Indian relationship chart: everyone sits in
column A (your side) or B (the side you marry into), one row per generation,
with you at A2. A term is chosen from the final position, the steps taken to
get there and, for parents' generation reached through a child step, the
position one step back in the trace.

Rules are tried in order and the first one that returns a term wins.
"""

from typing import Callable

from models import Position, Step
from transitions import child_column


SELF = "You (self)"
NOT_COVERED = "Relationship not covered"

# Row 2, column A
ELDER_BROTHER = "aNNa (elder brother)"
YOUNGER_BROTHER = "tamma (younger brother)"
BROTHER = "aNNa/tamma (brother)"
ELDER_SISTER = "akka (elder sister)"
YOUNGER_SISTER = "tangi (younger sister)"
SISTER = "akka/tangi (sister)"
SIBLING = "aNNa/tamma/akka/tangi (sibling)"
BROTHER_LIKE = "aNNa/tamma (brother/cousin treated as sibling)"
SISTER_LIKE = "akka/tangi (sister/cousin treated as sibling)"
SIBLING_LIKE = "Sibling/cousin in same block"

# Row 1
FATHER = "Appa (father)"
MOTHER = "Amma (mother)"
FATHERS_BROTHER = "doDDappa/chikkappa (father's brother)"
FATHERS_SISTER = "Atthe (father's sister)"
MOTHERS_BROTHER = "MAva (mother's brother)"
MOTHERS_SISTER = "doDDamma/chikkamma (mother's sister)"

# Row 2, column B
HUSBAND = "GanDa (husband)"
WIFE = "HenDathi (wife)"
ELDER_BROTHER_IN_LAW = "BhAva (elder brother-in-law)"
YOUNGER_BROTHER_IN_LAW = "Maiduna (younger brother-in-law)"
BROTHER_IN_LAW = "BhAva/Maiduna (brother-in-law)"
ELDER_SISTER_IN_LAW = "Attige (elder sister-in-law)"
YOUNGER_SISTER_IN_LAW = "NAdini (younger sister-in-law)"
SISTER_IN_LAW = "Attige/NAdini (sister-in-law)"
SIBLING_IN_LAW = "BhAva/Maiduna/Attige/NAdini (sibling-in-law)"
MALE_COUSIN_IN_LAW = "BhAva/Maiduna (cousin-in-law)"
FEMALE_COUSIN_IN_LAW = "Attige/NAdini (cousin-in-law)"

# Row 3
SON = "Maga (son)"
DAUGHTER = "MagaLu (daughter)"
SON_IN_LAW = "ALiya (son-in-law)"
DAUGHTER_IN_LAW = "Sose (daughter-in-law)"
GRANDSON = "Mommagga (grandson)"
GRANDDAUGHTER = "Mommagalu (granddaughter)"
GRANDCHILD = "Mommagga/Mommagalu (grandchild)"

# Rows 0 and -1
GRANDFATHER = "Ajja (grandfather)"
GRANDMOTHER = "Ajji (grandmother)"
GRANDPARENT = "Ajja/Ajji (grandparent)"
GREAT_GRANDFATHER = "Muttajja (great-grandfather)"
GREAT_GRANDMOTHER = "Muttajji (great-grandmother)"
GREAT_GRANDPARENT = "Muttajja/Muttajji (great-grandparent)"

OWN_SIBLINGS = {
    ("male", "elder"): ELDER_BROTHER,
    ("male", "younger"): YOUNGER_BROTHER,
    ("male", "unknown"): BROTHER,
    ("female", "elder"): ELDER_SISTER,
    ("female", "younger"): YOUNGER_SISTER,
    ("female", "unknown"): SISTER,
}

SIBLINGS_IN_LAW = {
    ("male", "elder"): ELDER_BROTHER_IN_LAW,
    ("male", "younger"): YOUNGER_BROTHER_IN_LAW,
    ("male", "unknown"): BROTHER_IN_LAW,
    ("female", "elder"): ELDER_SISTER_IN_LAW,
    ("female", "younger"): YOUNGER_SISTER_IN_LAW,
    ("female", "unknown"): SISTER_IN_LAW,
}

AGE_ANCHORS = {
    "self": "you",
    "father": "your father",
    "mother": "your mother",
    "husband": "your husband",
    "wife": "your wife",
}

Rule = Callable[[Position, list[Step], str, list[Position]], str | None]


def _by_gender(gender: str, male: str, female: str, unknown: str | None) -> str | None:
    if gender == "male":
        return male
    if gender == "female":
        return female
    return unknown


def _last(steps: list[Step]) -> Step | None:
    return steps[-1] if steps else None


def effective_column(position: Position, steps: list[Step], trace: list[Position]) -> str:
    """
    Column a parents'-generation position should be judged in.

    When the last step was a child step the person is reported by the column
    their parent (the grandparent-level entry before them in the trace) heads
    as a household; otherwise the position's own column is used.
    """
    last = _last(steps)
    if last is not None and last.kind in ("son", "daughter") and len(trace) >= 2:
        return child_column(trace[-2])
    return position.column


def age_anchor_label(position: Position) -> str:
    """Who an elder/younger qualifier on this position is relative to."""
    return AGE_ANCHORS.get(position.age_reference, "you")


def _self_rule(
    position: Position, steps: list[Step], self_gender: str, trace: list[Position]
) -> str | None:
    if not steps:
        return SELF
    return None


def _own_block_rule(
    position: Position, steps: list[Step], self_gender: str, trace: list[Position]
) -> str | None:
    if (position.row, position.column) != (2, "A"):
        return None
    last = _last(steps)
    if last.kind == "sibling":
        return OWN_SIBLINGS.get((last.gender, last.age), SIBLING)
    # Parallel cousins land here and are addressed as siblings
    return _by_gender(position.gender, BROTHER_LIKE, SISTER_LIKE, SIBLING_LIKE)


def _parents_rule(
    position: Position, steps: list[Step], self_gender: str, trace: list[Position]
) -> str | None:
    if position.row != 1:
        return None
    last = _last(steps)
    via_child = last.kind in ("son", "daughter")
    direct = position.no_sibling_in_generation and not via_child
    column = effective_column(position, steps, trace)

    if position.gender == "male":
        if direct:
            return FATHER
        return FATHERS_BROTHER if column == "A" else MOTHERS_BROTHER
    if position.gender == "female":
        if direct:
            return MOTHER
        return FATHERS_SISTER if column == "A" else MOTHERS_SISTER
    return None


def _spouse_block_rule(
    position: Position, steps: list[Step], self_gender: str, trace: list[Position]
) -> str | None:
    if (position.row, position.column) != (2, "B"):
        return None
    last = _last(steps)
    if len(steps) == 1 and last.kind == "husband":
        return HUSBAND
    if len(steps) == 1 and last.kind == "wife":
        return WIFE
    if last.kind == "sibling":
        return SIBLINGS_IN_LAW.get((last.gender, last.age), SIBLING_IN_LAW)
    # Cross cousins land here and are addressed as in-laws
    return _by_gender(position.gender, MALE_COUSIN_IN_LAW, FEMALE_COUSIN_IN_LAW, None)


def _children_rule(
    position: Position, steps: list[Step], self_gender: str, trace: list[Position]
) -> str | None:
    if position.row != 3:
        return None
    kind = _last(steps).kind
    if position.gender == "male":
        if kind == "son":
            return SON
        if kind == "husband":
            return SON_IN_LAW
        return GRANDSON
    if position.gender == "female":
        if kind == "daughter":
            return DAUGHTER
        if kind == "wife":
            return DAUGHTER_IN_LAW
        return GRANDDAUGHTER
    return None


def _grandchildren_rule(
    position: Position, steps: list[Step], self_gender: str, trace: list[Position]
) -> str | None:
    if position.row != 4:
        return None
    return _by_gender(position.gender, GRANDSON, GRANDDAUGHTER, GRANDCHILD)


def _grandparents_rule(
    position: Position, steps: list[Step], self_gender: str, trace: list[Position]
) -> str | None:
    if position.row != 0:
        return None
    return _by_gender(position.gender, GRANDFATHER, GRANDMOTHER, GRANDPARENT)


def _great_grandparents_rule(
    position: Position, steps: list[Step], self_gender: str, trace: list[Position]
) -> str | None:
    if position.row != -1:
        return None
    return _by_gender(
        position.gender, GREAT_GRANDFATHER, GREAT_GRANDMOTHER, GREAT_GRANDPARENT
    )


# Order matters: the first rule returning a term wins
RULES: list[Rule] = [
    _self_rule,
    _own_block_rule,
    _parents_rule,
    _spouse_block_rule,
    _children_rule,
    _grandchildren_rule,
    _grandparents_rule,
    _great_grandparents_rule,
]


def resolve_term(
    position: Position, steps: list[Step], self_gender: str, trace: list[Position]
) -> str:
    """
    Return the kinship term for `position`, reached from self by `steps`.

    `trace` is the full output of `simulate` for the same steps. Grid cells
    no rule covers get NOT_COVERED rather than an error.
    """
    for rule in RULES:
        term = rule(position, steps, self_gender, trace)
        if term is not None:
            return term
    return NOT_COVERED
