#!/usr/bin/env python3

"""Extraction of constants that must be resolved against target headers.

A description references named constants in several places: defines,
syscall numbers, type parameters and integer literals. The extractor walks
the whole AST once and collects them together with the includes, include
directories and defines needed to compile a program that prints their
values.
"""

from ...infrastructure.logging import get_logger
from ..models import (
    Call,
    Comment,
    ConstInfo,
    Define,
    Description,
    ErrorCollector,
    ErrorHandler,
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
    logging_handler,
    walk,
)

logger = get_logger(__name__)

# Calls with this prefix are pseudo-syscalls and have no kernel syscall number
PSEUDO_SYSCALL_PREFIX = "syz_"
SYSCALL_NUMBER_PREFIX = "__NR_"


class ConstExtractor:
    """Collect required constants from a description AST.

    Problems (duplicate includes, incdirs and defines) are reported through
    the error handler and do not stop the walk. If anything was reported the
    extraction result is discarded.
    """

    def __init__(self, error_handler: ErrorHandler | None = None):
        """Initialize const extractor.

        Args:
            error_handler: Receives every diagnostic; defaults to logging_handler
        """
        self.error_handler = error_handler if error_handler is not None else logging_handler
        self.errors = ErrorCollector(forward=self.error_handler)

    def extract(self, desc: Description) -> ConstInfo | None:
        """Extract constant info from a description.

        Args:
            desc: Parsed description

        Returns:
            ConstInfo with sorted consts, or None if any error was reported
        """
        self.errors = ErrorCollector(forward=self.error_handler)
        info = ConstInfo()
        includes: set[str] = set()
        incdirs: set[str] = set()
        consts: set[str] = set()

        for node in walk(desc):
            self._visit(node, info, includes, incdirs, consts)

        if self.errors:
            logger.debug(f"Const extraction failed with {self.errors.count} error(s)")
            return None

        info.consts = sorted(consts)
        logger.debug(
            f"Extracted {len(info.consts)} consts, {len(info.includes)} includes, "
            f"{len(info.incdirs)} incdirs, {len(info.defines)} defines"
        )
        return info

    def _visit(
        self,
        node: Node,
        info: ConstInfo,
        includes: set[str],
        incdirs: set[str],
        consts: set[str],
    ) -> None:
        match node:
            case Include(pos=pos, file=Str(value=file)):
                if file in includes:
                    self.errors(pos, f'duplicate include "{file}"')
                includes.add(file)
                info.includes.append(file)
            case Incdir(pos=pos, dir=Str(value=dir_)):
                if dir_ in incdirs:
                    self.errors(pos, f'duplicate incdir "{dir_}"')
                incdirs.add(dir_)
                info.incdirs.append(dir_)
            case Define(pos=pos, name=Ident(name=name), value=value):
                if name in info.defines:
                    self.errors(pos, f"duplicate define {name}")
                info.defines[name] = define_value(value)
                consts.add(name)
            case Call(call_name=call_name):
                if not call_name.startswith(PSEUDO_SYSCALL_PREFIX):
                    consts.add(SYSCALL_NUMBER_PREFIX + call_name)
            case Type():
                consts.update(node.const_identifiers())
            case Int(ident=ident):
                if ident:
                    consts.add(ident)
            case Description() | Comment() | Str() | Ident() | Field() | Resource() | Struct():
                pass
            case _:
                raise TypeError(f"unknown AST node type {type(node).__name__}")


def define_value(value: Int) -> str:
    """Textual value of a define: C expression, then identifier, then number."""
    if value.cexpr:
        return value.cexpr
    if value.ident:
        return value.ident
    return str(value.value)


def extract_consts(desc: Description, error_handler: ErrorHandler | None = None) -> ConstInfo | None:
    """Return constants and build context required to resolve a description.

    Args:
        desc: Parsed description
        error_handler: Receives every diagnostic; defaults to logging_handler

    Returns:
        ConstInfo, or None if any problem was reported
    """
    return ConstExtractor(error_handler).extract(desc)
