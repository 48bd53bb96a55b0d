#!/usr/bin/env python3

"""Description AST nodes.

The node set is closed: ``walk`` knows the children of every node type and
rejects anything else, so a new node kind cannot be silently skipped by
consumers that dispatch on node type.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from .diagnostics import Pos


@dataclass(frozen=True)
class Comment:
    """Comment line in a description."""

    pos: Pos
    text: str


@dataclass(frozen=True)
class Str:
    """String literal."""

    pos: Pos
    value: str


@dataclass(frozen=True)
class Ident:
    """Bare identifier."""

    pos: Pos
    name: str


@dataclass(frozen=True)
class Int:
    """Integer literal.

    ``ident`` is set when the literal is written as a named constant and
    ``cexpr`` when it is a raw C expression fragment (only valid in defines).
    """

    pos: Pos
    value: int = 0
    ident: str = ""
    cexpr: str = ""


@dataclass(frozen=True)
class Type:
    """Type reference, e.g. ``int32[0:FOO]`` or ``const[BAR, int8]``.

    ``value_ident`` and ``value_ident2`` hold named constants used as type
    parameters (a single value or the two bounds of a range).
    """

    pos: Pos
    ident: str = ""
    value: int = 0
    value_ident: str = ""
    value_ident2: str = ""
    has_colon: bool = False
    args: tuple["Type", ...] = ()

    def const_identifiers(self) -> list[str]:
        """Named constants embedded in this type, empty slots omitted."""
        return [name for name in (self.value_ident, self.value_ident2) if name]


@dataclass(frozen=True)
class Field:
    """Syscall argument or struct field."""

    pos: Pos
    name: Ident
    type: Type


@dataclass(frozen=True)
class Include:
    pos: Pos
    file: Str


@dataclass(frozen=True)
class Incdir:
    pos: Pos
    dir: Str


@dataclass(frozen=True)
class Define:
    pos: Pos
    name: Ident
    value: Int


@dataclass(frozen=True)
class Resource:
    pos: Pos
    name: Ident
    base: Type
    values: tuple[Int, ...] = ()


@dataclass(frozen=True)
class Call:
    """Syscall declaration, e.g. ``openat$dir(fd fd, file ptr[in, filename])``."""

    pos: Pos
    name: Ident
    call_name: str
    args: tuple[Field, ...] = ()
    ret: Type | None = None


@dataclass(frozen=True)
class Struct:
    pos: Pos
    name: Ident
    fields: tuple[Field, ...] = ()
    is_union: bool = False


@dataclass(frozen=True)
class Description:
    """Root of a parsed description file."""

    nodes: tuple["Node", ...] = field(default_factory=tuple)


Node = (
    Description
    | Comment
    | Str
    | Ident
    | Int
    | Type
    | Field
    | Include
    | Incdir
    | Define
    | Resource
    | Call
    | Struct
)


def children(node: Node) -> tuple[Node, ...]:
    """Return direct children of a node in source order.

    Raises:
        TypeError: If node is not one of the known AST node types
    """
    match node:
        case Description(nodes=nodes):
            return tuple(nodes)
        case Comment() | Str() | Ident() | Int():
            return ()
        case Type(args=args):
            return tuple(args)
        case Field(name=name, type=typ):
            return (name, typ)
        case Include(file=file):
            return (file,)
        case Incdir(dir=dir_):
            return (dir_,)
        case Define(name=name, value=value):
            return (name, value)
        case Resource(name=name, base=base, values=values):
            return (name, base, *values)
        case Call(name=name, args=args, ret=ret):
            return (name, *args) + ((ret,) if ret is not None else ())
        case Struct(name=name, fields=fields):
            return (name, *fields)
        case _:
            raise TypeError(f"unknown AST node type {type(node).__name__}")


def walk(node: Node) -> Iterator[Node]:
    """Yield node and all its descendants in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(children(current)))
