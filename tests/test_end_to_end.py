"""
End-to-end tests for the MallardScript compiler.
Tests the complete pipeline using sample programs: MallardScript -> Parser -> Lowering -> DuckyScript -> Validation
"""

from pathlib import Path

import pytest

from mallardscript.cli import build_script
from mallardscript.src.lowering import compile_file
from mallardscript.src.parsing import DuckyParser

SAMPLE_DIR = Path(__file__).parent / "sample_programs"
EXAMPLE_DIR = Path(__file__).parent.parent / "example_programs"

sample_programs = sorted(p.name for p in SAMPLE_DIR.iterdir() if p.is_dir())


class TestSamplePrograms:
    """Each sample directory holds index.ducky and the expected flat output."""

    @pytest.mark.parametrize("sample", sample_programs)
    def test_sample_compiles_to_expected(self, sample):
        sample_dir = SAMPLE_DIR / sample
        expected = (sample_dir / "expected.ducky").read_text(encoding="utf-8")
        assert compile_file("index.ducky", sample_dir) == expected

    @pytest.mark.parametrize("sample", sample_programs)
    def test_sample_output_is_duckyscript(self, sample):
        output = compile_file("index.ducky", SAMPLE_DIR / sample)
        DuckyParser().parse(output, f"{sample}/expected.ducky")


class TestExampleProgram:
    """The example payload shipped with the repository."""

    def test_example_builds(self, tmp_path):
        output_path = build_script("index.ducky", tmp_path, EXAMPLE_DIR)
        assert output_path.read_text(encoding="utf-8") == (
            "REM Opens a terminal and greets the user.\n"
            "DEFAULTDELAY 100\n"
            "REM Open a terminal window\n"
            "CTRL ALT t\n"
            "DELAY 1000\n"
            "IF $_CAPSLOCK_ON THEN\n"
            "  CAPSLOCK\n"
            "END_IF\n"
            'STRINGLN echo "Hello from MallardScript"\n'
            "VAR $COUNT = 3\n"
            "WHILE $COUNT > 0\n"
            '  STRINGLN echo "Round $COUNT"\n'
            "  $COUNT = $COUNT - 1\n"
            "END_WHILE"
        )

    def test_build_is_deterministic(self, tmp_path):
        first = build_script("index.ducky", tmp_path / "first", EXAMPLE_DIR)
        second = build_script("index.ducky", tmp_path / "second", EXAMPLE_DIR)
        assert first.read_bytes() == second.read_bytes()

    def test_library_file_builds_alone(self):
        output = compile_file("lib/greeting.ducky", EXAMPLE_DIR)
        assert output.startswith("IF $_CAPSLOCK_ON THEN\n")
