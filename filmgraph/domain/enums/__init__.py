from filmgraph.domain.enums.mpa_rating import MpaRating
__all__ = [
    "MpaRating",
]
