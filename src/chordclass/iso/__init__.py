from .search import (
    MAX_VERTICES,
    Bijection,
    find_isomorphism,
    is_isomorphism,
    invert_bijection,
)

__all__ = [
    "MAX_VERTICES",
    "Bijection",
    "find_isomorphism",
    "is_isomorphism",
    "invert_bijection",
]
