#!/usr/bin/env python3
"""
MallardScript CLI - Command-line interface for the MallardScript compiler.

This module provides the entry point for the 'mallardscript' command installed via pip.

Usage:
    mallardscript build                               # Compile index.ducky into output/
    mallardscript build -i payload.ducky -o ~/build   # Custom input and output directory
    mallardscript build --keep-partial                # Leave partial output on failure
    mallardscript completions --type zsh              # Print a zsh completion script
"""

import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Optional

import click
from click.shell_completion import get_completion_class

from mallardscript import __version__
from mallardscript.src.common.constants import (
    COMPLETION_SHELLS,
    DEFAULT_CONFIG,
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_DIRECTORY,
    CompilerConfig,
)
from mallardscript.src.common.exceptions import (
    BuildError,
    CompilationError,
    ParseError,
    format_error_chain,
)
from mallardscript.src.lowering.compiler import MallardCompiler
from mallardscript.src.lowering.sink import FileSink
from mallardscript.src.parsing.parser import DuckyParser

PROG_NAME = "mallardscript"


def build_script(
    input_path: str,
    output_directory: Path,
    current_directory: Optional[Path] = None,
    config: CompilerConfig = DEFAULT_CONFIG,
) -> Path:
    """
    Compile a MallardScript entry file into <output_directory>/index.ducky.

    Unless config.keep_partial is set, the output is written to a temporary
    file next to the target and only moved into place once compilation and
    validation succeeded.

    Returns:
        Path of the written DuckyScript file

    Raises:
        BuildError: Wrapping the compilation or validation failure
    """
    current_directory = current_directory or Path.cwd()
    output_directory = Path(output_directory).expanduser()
    output_path = output_directory / config.output_file_name

    try:
        output_directory.mkdir(parents=True, exist_ok=True)
        if config.keep_partial:
            sink = FileSink.create(output_path)
        else:
            fd, temporary_name = tempfile.mkstemp(
                dir=output_directory, prefix=f".{config.output_file_name}.", suffix=".tmp"
            )
            sink = FileSink(os.fdopen(fd, "w+b"), Path(temporary_name))
    except OSError as exc:
        raise BuildError(f"Failed to create output file '{output_path}'.") from exc

    written_path = sink.path
    committed = False

    try:
        try:
            with sink:
                MallardCompiler(sink, config).compile(current_directory, input_path)
        except (CompilationError, RecursionError) as exc:
            raise BuildError(
                f"Failed to compile to output file '{output_path}'."
            ) from exc

        if config.validate_output:
            validate_output(written_path, output_path)

        if not config.keep_partial:
            try:
                os.replace(written_path, output_path)
            except OSError as exc:
                raise BuildError(
                    f"Unable to move compiled output to '{output_path}'."
                ) from exc
        committed = True
    finally:
        # The temporary file never outlives a failed build
        if not committed and not config.keep_partial:
            written_path.unlink(missing_ok=True)

    return output_path


def validate_output(written_path: Path, output_path: Path) -> None:
    """Parse the emitted file as DuckyScript, raising BuildError if it fails."""
    try:
        output_contents = written_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise BuildError(f"Unable to load compiled output '{output_path}'.") from exc

    try:
        DuckyParser().parse(output_contents, str(output_path))
    except (ParseError, RecursionError) as exc:
        raise BuildError(
            f"Unable to validate compiled output '{output_path}'."
        ) from exc


def setup_logging(level: str) -> None:
    """Setup logging configuration."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    logging.basicConfig(level=numeric_level, format="%(levelname)s: %(message)s")


@click.group()
@click.version_option(__version__, prog_name=PROG_NAME)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    help="Set the logging level",
)
def main(log_level):
    """Compile MallardScript into DuckyScript."""
    setup_logging(log_level)


@main.command()
@click.option(
    "-i",
    "--input",
    "input_path",
    type=str,
    default=DEFAULT_INPUT_FILE,
    show_default=True,
    help="Entry file to compile",
)
@click.option(
    "-o",
    "--output",
    "output_directory",
    type=str,
    default=DEFAULT_OUTPUT_DIRECTORY,
    show_default=True,
    help="Output directory to build to",
)
@click.option(
    "--keep-partial",
    is_flag=True,
    help="Write directly to the output file and keep it when compilation fails",
)
@click.option(
    "--no-validate",
    is_flag=True,
    help="Skip re-parsing the compiled output as DuckyScript",
)
def build(input_path, output_directory, keep_partial, no_validate):
    """Build MallardScript input."""
    current_directory = Path.cwd()
    config = CompilerConfig(
        keep_partial=keep_partial,
        validate_output=not no_validate,
    )

    click.echo("Build MallardScript.")
    click.echo(f"  Current Directory: '{current_directory}'")
    click.echo(f"  Input: '{input_path}'")
    click.echo(f"  Output: '{output_directory}'")

    try:
        build_script(input_path, Path(output_directory), current_directory, config)
    except Exception as e:
        click.echo(format_error_chain(e), err=True)
        sys.exit(2)

    click.echo("Done.")


@main.command()
@click.option(
    "-t",
    "--type",
    "shell",
    required=True,
    type=click.Choice(COMPLETION_SHELLS, case_sensitive=False),
    help="Shell to generate completions for",
)
def completions(shell):
    """Print a shell completion script."""
    completion_class = get_completion_class(shell.lower())
    if completion_class is None:
        click.echo(f"Completion type '{shell}' not supported.", err=True)
        sys.exit(2)

    complete_var = f"_{PROG_NAME.upper()}_COMPLETE"
    completion = completion_class(main, {}, PROG_NAME, complete_var)
    click.echo(completion.source())


if __name__ == "__main__":
    main()
