"""Parsing relation paths from text and formatting steps and traces."""

import re

from models import Position, Step


# Alternative spellings for the direct steps (English and Kannada)
KIND_MAP = {
    "FATHER": "father",
    "DAD": "father",
    "APPA": "father",
    "MOTHER": "mother",
    "MOM": "mother",
    "MUM": "mother",
    "AMMA": "mother",
    "HUSBAND": "husband",
    "GANDA": "husband",
    "WIFE": "wife",
    "HENDATHI": "wife",
    "SON": "son",
    "MAGA": "son",
    "DAUGHTER": "daughter",
    "MAGALU": "daughter",
}

SIBLING_GENDER_MAP = {
    "BROTHER": "male",
    "SISTER": "female",
    "SIBLING": "unknown",
}

GENDER_MAP = {
    "M": "male",
    "MALE": "male",
    "F": "female",
    "FEMALE": "female",
    "?": "unknown",
    "": "unknown",
    "UNKNOWN": "unknown",
}

AGE_MAP = {
    "ELDER": "elder",
    "OLDER": "elder",
    "YOUNGER": "younger",
    "?": "unknown",
    "": "unknown",
    "UNKNOWN": "unknown",
}


def _lookup(table: dict[str, str], value: str, what: str, token: str) -> str:
    key = value.strip().upper()
    if key not in table:
        raise ValueError(f"Unknown {what} '{value.strip()}' in step: {token}")
    return table[key]


def parse_step(token: str) -> Step:
    """
    Parse a single step such as "mother", "elder sister" or "sibling:female:younger".

    Handles forms like:
    - "father", "Dad", "amma"
    - "brother", "younger-sister", "older brother"
    - "sibling", "sibling:f", "sibling:male:elder"
    - "3. sibling:male", numbered as in a path badge
    """
    # Badge numbering such as "3. " is ignored
    s = re.sub(r"^\d+\.\s*", "", token.strip())
    if not s:
        raise ValueError("Empty step")

    # Pattern 1: direct step
    key = s.upper()
    if key in KIND_MAP:
        return Step(KIND_MAP[key])

    # Pattern 2: "[elder|younger] brother|sister|sibling"
    match = re.match(r"^(?:([A-Za-z]+)[\s-]+)?(brother|sister|sibling)$", s, flags=re.IGNORECASE)
    if match:
        age = "unknown"
        if match.group(1):
            age = _lookup(AGE_MAP, match.group(1), "age", token)
        gender = SIBLING_GENDER_MAP[match.group(2).upper()]
        return Step.sibling(gender, age)

    # Pattern 3: "sibling:gender:age" with either part optional
    match = re.match(r"^sibling:([^:]*)(?::([^:]*))?$", s, flags=re.IGNORECASE)
    if match:
        gender = _lookup(GENDER_MAP, match.group(1), "gender", token)
        age = _lookup(AGE_MAP, match.group(2) or "", "age", token)
        return Step.sibling(gender, age)

    raise ValueError(f"Unknown step: {token}")


def parse_path(text: str) -> list[Step]:
    """
    Parse a relation path into steps, read left to right from self.

    Steps may be separated by commas, ">" or "->", or written as possessives:
    "mother's mother's sister's daughter". A sibling payload may also be given
    in parentheses: "sibling(female, elder)" or "sibling (female, elder)".
    """
    s = text.strip()
    if not s:
        return []

    # Parenthesised sibling payload becomes the colon form
    s = re.sub(
        r"\s*\(\s*([^,()]*?)\s*(?:,\s*([^,()]*?)\s*)?\)",
        lambda m: ":" + m.group(1) + (":" + m.group(2) if m.group(2) else ""),
        s,
    )
    # Possessives separate steps
    s = re.sub(r"['’]s\b", ",", s)

    tokens = [t for t in re.split(r"\s*(?:->|>|,)\s*", s) if t.strip()]
    return [parse_step(t) for t in tokens]


def join_step_words(words: list[str]) -> str:
    """
    Join separate command-line words into path text, one step per word.

    An age word attaches to the word after it, so ["father", "elder", "sister"]
    becomes "father, elder sister".
    """
    tokens: list[str] = []
    pending = ""
    for word in words:
        if word.strip().upper() in ("ELDER", "OLDER", "YOUNGER"):
            pending = f"{pending}{word.strip()} "
            continue
        tokens.append(pending + word)
        pending = ""
    if pending:
        tokens.append(pending.strip())
    return ", ".join(tokens)


def format_step(step: Step, index: int) -> str:
    """Badge text for the step at zero-based `index`, e.g. "2. sibling (male, elder)"."""
    if step.kind == "sibling":
        details = step.gender
        if step.age != "unknown":
            details += f", {step.age}"
        return f"{index + 1}. sibling ({details})"
    return f"{index + 1}. {step.kind}"


def format_path(steps: list[Step]) -> str:
    return "  ".join(format_step(step, i) for i, step in enumerate(steps))


def format_position(position: Position) -> str:
    return position.cell


def format_trace(trace: list[Position]) -> str:
    """Trace as grid cells, e.g. "A2 → B1 → A0"."""
    return " → ".join(format_position(p) for p in trace)
