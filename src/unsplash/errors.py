"""Error classes for Unsplash response decoding."""

from typing import Any


class DecodeError(Exception):
    def __init__(self, entity: str, errors: list[dict[str, Any]]):
        location = ".".join(str(p) for p in errors[0]["loc"]) if errors else ""
        super().__init__(f"Could not decode {entity}: {location or 'invalid input'}")
        self.entity = entity
        self.errors = errors
