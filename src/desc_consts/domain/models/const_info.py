#!/usr/bin/env python3

"""Constant extraction result model."""

from dataclasses import dataclass, field

# Resolved constant values, name -> unsigned 64-bit value
ConstMapping = dict[str, int]

MAX_CONST_VALUE = (1 << 64) - 1


@dataclass
class ConstInfo:
    """Constants and build context required to resolve a description."""

    consts: list[str] = field(default_factory=list)  # sorted, unique
    includes: list[str] = field(default_factory=list)
    incdirs: list[str] = field(default_factory=list)
    defines: dict[str, str] = field(default_factory=dict)
