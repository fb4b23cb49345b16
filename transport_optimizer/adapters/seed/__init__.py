"""Seed adapters - Implementations of the seed loader port."""

from .text_loader import TextSeedLoader

__all__ = ["TextSeedLoader"]
