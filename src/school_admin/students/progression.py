"""English curriculum progression.

The path is an explicit table rather than "next index": the named levels
after Part 7 do not follow the numbering.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional, Sequence

from ..core.enums import Part
from ..core.exceptions import ValidationError
from .model import Student

PART_TRANSITIONS: dict[Part, Part] = {
    Part.PART_0: Part.PART_1,
    Part.PART_1: Part.PART_2,
    Part.PART_2: Part.PART_3,
    Part.PART_3: Part.PART_4,
    Part.PART_4: Part.PART_5,
    Part.PART_5: Part.PART_6,
    Part.PART_6: Part.PART_7,
    Part.PART_7: Part.NEW_TOP_ONE,
    Part.NEW_TOP_ONE: Part.TOP_ONE,
    Part.TOP_ONE: Part.CONGRATULATIONS,
}


def next_part(part: str) -> Optional[Part]:
    try:
        return PART_TRANSITIONS.get(Part(part))
    except ValueError:
        return None


def transition_label(source: Part) -> str:
    return f"{source.value} → {PART_TRANSITIONS[source].value}"


def validate_from_parts(from_parts: Optional[Sequence[str]]) -> list[str]:
    """Parts a progression run may start from; empty means every part."""

    if not from_parts:
        return []
    out: list[str] = []
    for value in from_parts:
        try:
            part = Part(value)
        except ValueError:
            raise ValidationError(f"Unknown part: {value}") from None
        if part not in PART_TRANSITIONS:
            raise ValidationError(f"{part.value} has no next part")
        if part.value not in out:
            out.append(part.value)
    return out


def preview_progression(students: Iterable[Student], from_parts: Optional[Sequence[str]] = None) -> dict[str, int]:
    """Count how many English-class students each transition would move."""

    allowed = set(validate_from_parts(from_parts))
    counts: Counter[str] = Counter()
    for s in students:
        if not s.is_english or next_part(s.part) is None:
            continue
        if allowed and s.part not in allowed:
            continue
        counts[transition_label(Part(s.part))] += 1
    return {transition_label(p): counts.get(transition_label(p), 0) for p in PART_TRANSITIONS}
