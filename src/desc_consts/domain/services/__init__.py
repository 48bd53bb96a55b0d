#!/usr/bin/env python3

"""Domain services: constant extraction, serialization and merging."""

from .const_aggregator import deserialize_consts_glob
from .const_extractor import (
    PSEUDO_SYSCALL_PREFIX,
    SYSCALL_NUMBER_PREFIX,
    ConstExtractor,
    extract_consts,
)
from .const_serializer import (
    CONST_FILE_HEADER,
    deserialize_consts,
    parse_uint64,
    serialize_consts,
)

__all__ = [
    "CONST_FILE_HEADER",
    "ConstExtractor",
    "PSEUDO_SYSCALL_PREFIX",
    "SYSCALL_NUMBER_PREFIX",
    "deserialize_consts",
    "deserialize_consts_glob",
    "extract_consts",
    "parse_uint64",
    "serialize_consts",
]
