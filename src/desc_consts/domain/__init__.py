#!/usr/bin/env python3

"""Domain layer containing description models and constant services."""

from . import models, services

__all__ = [
    "models",
    "services",
]
