"""Shared constants across the compiler."""

from dataclasses import dataclass

# Output layout
INDENTATION_SIZE = 2
OUTPUT_FILE_NAME = "index.ducky"

# CLI defaults
DEFAULT_INPUT_FILE = "index.ducky"
DEFAULT_OUTPUT_DIRECTORY = "output"

# Shells supported by `mallardscript completions`
COMPLETION_SHELLS = ("bash", "zsh", "fish")


@dataclass(frozen=True)
class CompilerConfig:
    """Settings for one build."""

    indentation_size: int = INDENTATION_SIZE
    output_file_name: str = OUTPUT_FILE_NAME
    # Write straight into the output file and leave it behind on failure
    keep_partial: bool = False
    # Re-parse the emitted file as DuckyScript after compiling
    validate_output: bool = True


DEFAULT_CONFIG = CompilerConfig()
