#!/usr/bin/env python3

"""Domain layer containing the heuristics and their models."""

from . import catalog, models, services

__all__ = [
    "catalog",
    "models",
    "services",
]
