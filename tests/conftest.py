"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from desc_consts.domain.models import (
    Call,
    Define,
    Description,
    ErrorCollector,
    Field,
    Ident,
    Incdir,
    Include,
    Int,
    Pos,
    Resource,
    Str,
    Struct,
    Type,
)
from desc_consts.infrastructure.logging import LoggerSetup


def pos(line: int, col: int = 1) -> Pos:
    """Position in the sample description file."""
    return Pos(file="sample.txt", line=line, col=col)


@pytest.fixture
def errors() -> ErrorCollector:
    """Error handler that records diagnostics without logging them."""
    return ErrorCollector()


@pytest.fixture
def write_const_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes a const file into a temporary directory."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_description() -> Description:
    """
    Description touching every place a constant can be referenced.

    Roughly corresponds to:

        include <linux/fcntl.h>
        incdir <include/uapi>
        define AT_FDCWD_ALIAS AT_FDCWD
        resource fd[int32]: AT_FDCWD
        openat(fd const[AT_FDCWD_ALIAS], flags int32[O_RDONLY:O_RDWR]) fd
        syz_open_dev(dev int32[0:MAX_DEV]) fd
        open_how { flags int64 }
    """
    return Description(
        nodes=(
            Include(pos(1), Str(pos(1, 9), "linux/fcntl.h")),
            Incdir(pos(2), Str(pos(2, 8), "include/uapi")),
            Define(pos(3), Ident(pos(3, 8), "AT_FDCWD_ALIAS"), Int(pos(3, 23), ident="AT_FDCWD")),
            Resource(
                pos(4),
                Ident(pos(4, 10), "fd"),
                Type(pos(4, 13), ident="int32"),
                (Int(pos(4, 21), ident="AT_FDCWD"),),
            ),
            Call(
                pos(5),
                Ident(pos(5, 1), "openat"),
                "openat",
                (
                    Field(
                        pos(5, 8),
                        Ident(pos(5, 8), "fd"),
                        Type(
                            pos(5, 11),
                            ident="const",
                            args=(Type(pos(5, 17), value_ident="AT_FDCWD_ALIAS"),),
                        ),
                    ),
                    Field(
                        pos(5, 34),
                        Ident(pos(5, 34), "flags"),
                        Type(
                            pos(5, 40),
                            ident="int32",
                            args=(
                                Type(
                                    pos(5, 46),
                                    value_ident="O_RDONLY",
                                    value_ident2="O_RDWR",
                                    has_colon=True,
                                ),
                            ),
                        ),
                    ),
                ),
                Type(pos(5, 63), ident="fd"),
            ),
            Call(
                pos(6),
                Ident(pos(6, 1), "syz_open_dev"),
                "syz_open_dev",
                (
                    Field(
                        pos(6, 14),
                        Ident(pos(6, 14), "dev"),
                        Type(
                            pos(6, 18),
                            ident="int32",
                            args=(Type(pos(6, 24), value_ident2="MAX_DEV", has_colon=True),),
                        ),
                    ),
                ),
            ),
            Struct(
                pos(7),
                Ident(pos(7, 1), "open_how"),
                (Field(pos(7, 12), Ident(pos(7, 12), "flags"), Type(pos(7, 18), ident="int64")),),
            ),
        )
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging setup performed by CLI tests."""
    yield
    if LoggerSetup.is_initialized():
        LoggerSetup.reset()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """
    Run with no config variables set and no .env file in the cwd.

    Variables are set before being deleted so that values loaded from a .env
    file during the test are removed again afterwards.
    """
    for name in ("CONST_GLOB", "OUTPUT_DIR", "LOG_DIR", "TARGET_ARCH", "VERBOSE"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
