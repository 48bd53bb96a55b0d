"""Utilities module initialization."""

from .path_utils import create_const_filename, expand_arch_pattern, sanitize_for_filesystem

__all__ = [
    "create_const_filename",
    "expand_arch_pattern",
    "sanitize_for_filesystem",
]
