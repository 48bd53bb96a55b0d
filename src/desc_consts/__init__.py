"""Desc Consts - extraction and storage of description constants."""

from .domain.models import ConstInfo, Description, ErrorCollector, Pos
from .domain.services import (
    deserialize_consts,
    deserialize_consts_glob,
    extract_consts,
    serialize_consts,
)
from .infrastructure.config import Config
from .main import main

__all__ = [
    "Config",
    "ConstInfo",
    "Description",
    "ErrorCollector",
    "Pos",
    "deserialize_consts",
    "deserialize_consts_glob",
    "extract_consts",
    "main",
    "serialize_consts",
]
