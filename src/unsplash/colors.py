import re

from pydantic import BaseModel, ConfigDict, Field

HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class RGBColor(BaseModel):
    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0, le=255)
    green: int = Field(ge=0, le=255)
    blue: int = Field(ge=0, le=255)

    @classmethod
    def from_hex(cls, value: str) -> "RGBColor":
        """Build a color from ``#RRGGBB``, ``RRGGBB`` or the ``#RGB`` shorthand."""
        match = HEX_COLOR.match(value.strip())
        if not match:
            raise ValueError(f"Invalid hex color: {value!r}")

        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)

        return cls(
            red=int(digits[0:2], 16),
            green=int(digits[2:4], 16),
            blue=int(digits[4:6], 16),
        )

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def as_hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"
