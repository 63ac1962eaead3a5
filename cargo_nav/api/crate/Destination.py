"""Destination enum for the link to open."""

from enum import Enum

# Shorthands accepted on the command line, mapped to canonical values
_ALIASES = {
    "c": "crate",
    "canonical": "crate",
    "h": "homepage",
    "d": "documentation",
    "r": "repository",
}


class Destination(str, Enum):
    CRATE = "crate"
    HOMEPAGE = "homepage"
    DOCUMENTATION = "documentation"
    REPOSITORY = "repository"

    @classmethod
    def _missing_(cls, value: object) -> "Destination | None":
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        key = _ALIASES.get(key, key)
        for member in cls:
            if member.value == key:
                return member
        return None

    @classmethod
    def parse(cls, value: str) -> "Destination":
        """Parse user input, accepting any case and the single-letter shorthands.

        Raises:
            ValueError: If the value names no destination
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown destination {value!r}; expected one of: {cls.choices()}") from None

    @classmethod
    def choices(cls) -> str:
        """Human-readable list of accepted inputs, e.g. ``crate (c, canonical)``."""
        parts = []
        for member in cls:
            aliases = [alias for alias, value in _ALIASES.items() if value == member.value]
            parts.append(f"{member.value} ({', '.join(aliases)})")
        return ", ".join(parts)

    @property
    def label(self) -> str:
        """Lowercase noun used in user-facing messages."""
        return self.value
