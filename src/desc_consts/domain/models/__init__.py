#!/usr/bin/env python3

"""Domain models for description constant handling."""

from .ast import (
    Call,
    Comment,
    Define,
    Description,
    Field,
    Ident,
    Incdir,
    Include,
    Int,
    Node,
    Resource,
    Str,
    Struct,
    Type,
    walk,
)
from .const_info import MAX_CONST_VALUE, ConstInfo, ConstMapping
from .diagnostics import Diagnostic, ErrorCollector, ErrorHandler, Pos, logging_handler

__all__ = [
    "Call",
    "Comment",
    "ConstInfo",
    "ConstMapping",
    "Define",
    "Description",
    "Diagnostic",
    "ErrorCollector",
    "ErrorHandler",
    "Field",
    "Ident",
    "Incdir",
    "Include",
    "Int",
    "MAX_CONST_VALUE",
    "Node",
    "Pos",
    "Resource",
    "Str",
    "Struct",
    "Type",
    "logging_handler",
    "walk",
]
