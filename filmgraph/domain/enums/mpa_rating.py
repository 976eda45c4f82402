from __future__ import annotations

from enum import StrEnum

from filmgraph.domain.errors import InvalidArgumentError


class MpaRating(StrEnum):
    G = "G"
    PG = "PG"
    PG_13 = "PG-13"
    R = "R"
    NC_17 = "NC-17"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def from_string(cls, value: str) -> "MpaRating":
        """Accepts 'pg-13', 'PG_13', ' nc-17 ' and the like."""
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().upper().replace("_", "-")
        for member in cls:
            if member.value == key:
                return member
        raise InvalidArgumentError(f"Unknown MPA rating: {value}")


_DESCRIPTIONS = {
    MpaRating.G: "G - no age restrictions",
    MpaRating.PG: "PG - parental guidance suggested",
    MpaRating.PG_13: "PG-13 - parents strongly cautioned for children under 13",
    MpaRating.R: "R - under 17 requires accompanying adult",
    MpaRating.NC_17: "NC-17 - no one 17 and under admitted",
}
