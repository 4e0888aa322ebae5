"""Contracts layer - protocols shared between layers."""

from .strategies import PackingStrategy

__all__ = [
    "PackingStrategy",
]
