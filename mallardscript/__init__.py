"""MallardScript to DuckyScript compiler."""

__version__ = "0.1.0"
