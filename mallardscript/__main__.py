#!/usr/bin/env python3
"""
MallardScript CLI - Entry point for the MallardScript compiler.

This module allows running the compiler as:
    python -m mallardscript build --input index.ducky
    mallardscript build --input index.ducky  (when installed via pip)
"""

from mallardscript.cli import main

if __name__ == "__main__":
    main()
