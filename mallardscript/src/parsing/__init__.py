from .parser import DialectParser, MallardParser, DuckyParser
from .transformer import DuckyTransformer

"""Parsing module for MallardScript and DuckyScript."""


__all__ = ["DialectParser", "MallardParser", "DuckyParser", "DuckyTransformer"]
