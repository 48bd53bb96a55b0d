#!/usr/bin/env python3

"""Reading and writing of resolved constant files.

Format::

    # AUTOGENERATED FILE
    AT_FDCWD = 18446744073709551516
    O_RDONLY = 0

Entries are written sorted by name so that regenerated files diff cleanly.
"""

import re

from ...infrastructure.logging import get_logger
from ..models import MAX_CONST_VALUE, ConstMapping, ErrorHandler, Pos

logger = get_logger(__name__)

CONST_FILE_HEADER = "# AUTOGENERATED FILE\n"
COMMENT_PREFIX = "#"
SEPARATOR = "="

# Unsigned integer literal with optional base prefix; a bare leading 0 means octal
_UINT_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+|0[0-7]*|[1-9][0-9]*")


def parse_uint64(text: str) -> int:
    """Parse an unsigned 64-bit integer, inferring the base from its prefix.

    Args:
        text: Literal such as ``42``, ``0x2a``, ``052``, ``0o52`` or ``0b101010``

    Returns:
        Parsed value

    Raises:
        ValueError: If text is not a valid literal or does not fit in 64 bits
    """
    if not _UINT_RE.fullmatch(text):
        raise ValueError(f'parsing "{text}": invalid syntax')

    if len(text) > 1 and text[0] == "0" and text[1].isdigit():
        value = int(text[1:], 8)
    else:
        value = int(text, 0)

    if value > MAX_CONST_VALUE:
        raise ValueError(f'parsing "{text}": value out of range')
    return value


def serialize_consts(consts: ConstMapping) -> bytes:
    """Encode a constant mapping in canonical form.

    Args:
        consts: Constant name to value mapping

    Returns:
        File contents, header line followed by entries sorted by name
    """
    lines = [CONST_FILE_HEADER]
    for name, value in sorted(consts.items()):
        lines.append(f"{name} = {value}\n")
    return "".join(lines).encode("utf-8")


def deserialize_consts(data: bytes, file: str, error_handler: ErrorHandler) -> ConstMapping | None:
    """Decode constant file contents.

    Every malformed line is reported and skipped so that all problems in a
    file show up in one run; if anything was reported no mapping is returned.

    Args:
        data: Raw file contents
        file: Name used in diagnostic positions
        error_handler: Receives every diagnostic

    Returns:
        Constant mapping, or None if any line was invalid
    """
    consts: ConstMapping = {}
    ok = True

    for line_no, raw_line in enumerate(data.splitlines(), start=1):
        pos = Pos(file=file, line=line_no)
        try:
            line = raw_line.decode("utf-8")
        except UnicodeDecodeError as e:
            error_handler(pos, f"failed to parse: {e}")
            ok = False
            continue

        if not line or line.startswith(COMMENT_PREFIX):
            continue

        name, sep, value_text = line.partition(SEPARATOR)
        if not sep:
            error_handler(pos, f"expect '{SEPARATOR}'")
            ok = False
            continue

        name = name.strip()
        try:
            value = parse_uint64(value_text.strip())
        except ValueError as e:
            error_handler(pos, f"failed to parse int: {e}")
            ok = False
            continue

        if name in consts:
            error_handler(pos, f'duplicate const "{name}"')
            ok = False
            continue

        consts[name] = value

    if not ok:
        return None

    logger.debug(f"Read {len(consts)} consts from {file}")
    return consts
