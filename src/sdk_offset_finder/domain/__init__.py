#!/usr/bin/env python3

"""Domain layer containing models, services and errors."""

from . import errors, models, services

__all__ = [
    "errors",
    "models",
    "services",
]
