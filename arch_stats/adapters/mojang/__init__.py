"""Mojang skin lookup adapter package."""

from .client import SkinResolver, SkinResult, SkinLookupError

__all__ = [
    "SkinResolver",
    "SkinResult",
    "SkinLookupError",
]
