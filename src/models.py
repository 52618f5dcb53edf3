"""Data classes for steps and positions on the two-column kinship grid."""

from dataclasses import dataclass


GENDERS = ("male", "female", "unknown")
AGES = ("elder", "younger", "unknown")

DIRECT_KINDS = ("father", "mother", "husband", "wife", "son", "daughter")
STEP_KINDS = DIRECT_KINDS + ("sibling",)

SELF_COLUMN = "A"
SELF_ROW = 2


@dataclass(frozen=True)
class Step:
    kind: str  # father, mother, husband, wife, son, daughter, sibling
    gender: str = "unknown"  # sibling payload only
    age: str = "unknown"  # sibling payload only

    def __post_init__(self):
        if self.kind not in STEP_KINDS:
            raise ValueError(f"Unknown step kind: {self.kind}")
        if self.gender not in GENDERS:
            raise ValueError(f"Unknown gender: {self.gender}")
        if self.age not in AGES:
            raise ValueError(f"Unknown age: {self.age}")
        if self.kind != "sibling" and (self.gender != "unknown" or self.age != "unknown"):
            raise ValueError(f"Only sibling steps carry gender/age, got {self.kind}")

    @classmethod
    def sibling(cls, gender: str = "unknown", age: str = "unknown") -> "Step":
        return cls("sibling", gender, age)


@dataclass(frozen=True)
class Position:
    column: str  # A or B
    row: int  # generation, smaller is older; self is 2
    gender: str
    age_reference: str  # self, father, mother, husband, wife
    no_sibling_in_generation: bool

    @property
    def cell(self) -> str:
        return f"{self.column}{self.row}"


def other_column(column: str) -> str:
    return "B" if column == "A" else "A"


def initial_position(self_gender: str) -> Position:
    """Return the position of the asker: column A, row 2."""
    return Position(
        column=SELF_COLUMN,
        row=SELF_ROW,
        gender=self_gender,
        age_reference="self",
        no_sibling_in_generation=False,
    )
