"""
Tests for lowering/key_chord.py - key chord flattening.
"""

import pytest

from mallardscript.src.ast.statements import KeyChord, KeyValue, RemCommand
from mallardscript.src.common.exceptions import InvalidStructureError
from mallardscript.src.lowering.key_chord import collect_key_names, flatten_key_chord


class TestFlattenKeyChord:
    def test_single_key(self):
        assert flatten_key_chord(KeyChord([], "ENTER")) == "ENTER"

    def test_modifier_and_key(self):
        chord = KeyChord([KeyValue("GUI")], "r")
        assert flatten_key_chord(chord) == "GUI r"

    def test_nested_depth_first(self):
        chord = KeyChord(
            [KeyValue("CTRL"), KeyChord([KeyValue("ALT"), KeyChord([KeyValue("SHIFT")])])],
            "DELETE",
        )
        assert collect_key_names(chord) == ["CTRL", "ALT", "SHIFT", "DELETE"]
        assert flatten_key_chord(chord) == "CTRL ALT SHIFT DELETE"

    def test_modifier_only(self):
        assert flatten_key_chord(KeyChord([KeyValue("GUI")])) == "GUI"

    def test_empty_chord(self):
        with pytest.raises(InvalidStructureError, match="does not press any key"):
            flatten_key_chord(KeyChord([]))

    def test_nested_empty_chords(self):
        with pytest.raises(InvalidStructureError):
            flatten_key_chord(KeyChord([KeyChord([])]))

    def test_foreign_child(self):
        chord = KeyChord([KeyValue("GUI"), RemCommand("x")])
        with pytest.raises(InvalidStructureError, match="RemCommand"):
            flatten_key_chord(chord)
