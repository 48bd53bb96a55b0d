#!/usr/bin/env python3

"""Merging of per-platform constant files.

Constants are resolved separately for every target and stored in one file
per description and architecture. A constant that appears in several files
must have the same value in all of them.
"""

import glob
from pathlib import Path

from ...infrastructure.logging import get_logger, log_timing
from ..models import ConstMapping, ErrorHandler, Pos, logging_handler
from .const_serializer import deserialize_consts

logger = get_logger(__name__)


@log_timing
def deserialize_consts_glob(pattern: str, error_handler: ErrorHandler | None = None) -> ConstMapping | None:
    """Load and merge all constant files matching a glob pattern.

    Unreadable files, an invalid pattern, no matches and cross-file value
    conflicts abort immediately. Malformed files do not: the remaining files
    are still decoded so that every problem gets reported, but the result is
    None.

    Args:
        pattern: Filesystem glob, e.g. ``sys/linux/*_amd64.const``
        error_handler: Receives every diagnostic; defaults to logging_handler

    Returns:
        Merged constant mapping, or None on any error
    """
    if error_handler is None:
        error_handler = logging_handler

    try:
        files = sorted(glob.glob(pattern))
    except (OSError, ValueError) as e:
        error_handler(Pos(), f"failed to find const files: {e}")
        return None

    if not files:
        error_handler(Pos(), f'no const files matched by glob "{pattern}"')
        return None

    logger.debug(f"Glob {pattern!r} matched {len(files)} const file(s)")

    consts: ConstMapping | None = {}
    for file in files:
        try:
            data = Path(file).read_bytes()
        except OSError as e:
            error_handler(Pos(), f"failed to read const file: {e}")
            return None

        file_consts = deserialize_consts(data, Path(file).name, error_handler)
        if file_consts is None:
            consts = None
        if consts is None:
            continue

        for name, value in file_consts.items():
            old = consts.get(name)
            if old is not None and old != value:
                error_handler(Pos(), f'different values for const "{name}": {value} vs {old}')
                return None
            consts[name] = value

    if consts is not None:
        logger.info(f"Loaded {len(consts)} consts from {len(files)} file(s)")
    return consts
