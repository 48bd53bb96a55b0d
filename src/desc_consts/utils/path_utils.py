"""Path utilities for constant files."""

import re
import string

CONST_FILE_SUFFIX = ".const"
ARCH_PLACEHOLDER = "{arch}"


def sanitize_for_filesystem(name: str, replacement: str = "_") -> str:
    """Sanitize a string to be safe for use as a filename."""
    if not name:
        return "unnamed"

    valid_chars = set(string.ascii_letters + string.digits + "_-.")
    sanitized = "".join(c if c in valid_chars else replacement for c in name)

    # Collapse multiple replacement characters
    if replacement in sanitized:
        pattern = re.escape(replacement) + "+"
        sanitized = re.sub(pattern, replacement, sanitized)

    sanitized = sanitized.strip(replacement)

    if not sanitized:
        sanitized = "unnamed"

    # Leave room for the arch and extension
    if len(sanitized) > 200:
        sanitized = sanitized[:200].rstrip(replacement)

    return sanitized


def create_const_filename(desc_name: str, arch: object = None) -> str:
    """Create a const filename for a description, e.g. ``socket_amd64.const``."""
    base_name = sanitize_for_filesystem(desc_name)
    if arch is not None:
        base_name = f"{base_name}_{sanitize_for_filesystem(str(arch))}"

    return f"{base_name}{CONST_FILE_SUFFIX}"


def expand_arch_pattern(pattern: str, arch: object = None) -> str:
    """Substitute the ``{arch}`` placeholder in a const file glob."""
    if arch is None:
        return pattern
    return pattern.replace(ARCH_PLACEHOLDER, str(arch))
