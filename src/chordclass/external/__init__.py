from .nauty import (
    NAUTY_SHORTG,
    nauty_available,
    canon_g6,
    edgelist_to_g6,
)

__all__ = [
    "NAUTY_SHORTG",
    "nauty_available",
    "canon_g6",
    "edgelist_to_g6",
]
