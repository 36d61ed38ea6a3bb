"""Flattening of nested key chords into one DuckyScript command line."""

from __future__ import annotations

from typing import List

from mallardscript.src.ast.statements import KeyChord, KeyValue
from mallardscript.src.common.exceptions import InvalidStructureError


def collect_key_names(chord: KeyChord) -> List[str]:
    """Key names of a chord in depth-first order, remaining keys last."""
    names: List[str] = []
    for statement in chord.statements:
        if isinstance(statement, KeyChord):
            names.extend(collect_key_names(statement))
        elif isinstance(statement, KeyValue):
            names.append(statement.name)
        else:
            raise InvalidStructureError(
                f"Provided statement {type(statement).__name__} not supported "
                "inside key chords.",
                statement,
            )

    if chord.remaining_keys:
        names.append(chord.remaining_keys)

    return names


def flatten_key_chord(chord: KeyChord) -> str:
    """Render a chord as space separated key names, e.g. ``GUI SHIFT WINDOWS``.

    Raises:
        InvalidStructureError: If the chord holds no key at all
    """
    names = collect_key_names(chord)
    if not names:
        raise InvalidStructureError("Key chord does not press any key.", chord)
    return " ".join(names)
