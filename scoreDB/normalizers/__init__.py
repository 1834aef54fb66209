"""
Normalizer modules for mapping scraped names onto registry entities.
"""
from .player import PlayerNameResolver

__all__ = [
    "PlayerNameResolver",
]
