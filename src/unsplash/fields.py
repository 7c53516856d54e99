"""
Annotated field types shared by every Unsplash model.

Required fields use the strict types directly. Wrapping any of them in
``Soft[...]`` turns a missing or malformed value into None instead of a
validation error, which is how optional API fields behave.
"""

from datetime import datetime
from typing import Annotated, Any, Optional, TypeVar

from pydantic import (
    AnyUrl,
    PlainSerializer,
    PlainValidator,
    Strict,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
)

from unsplash.colors import RGBColor
from unsplash.dates import parse_timestamp

T = TypeVar("T")


def _absent_on_error(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    if value is None:
        return None
    try:
        return handler(value)
    except ValidationError:
        return None


def _api_timestamp(value: Any) -> datetime:
    if not isinstance(value, str):
        raise ValueError("Timestamp must be a string")

    parsed = parse_timestamp(value)
    if parsed is None:
        raise ValueError(f"Unrecognised timestamp: {value!r}")
    return parsed


def _hex_color(value: Any) -> RGBColor:
    if isinstance(value, RGBColor):
        return value
    if not isinstance(value, str):
        raise ValueError("Color must be a hex string")
    return RGBColor.from_hex(value)


Text = StrictStr
Integer = StrictInt
Flag = StrictBool
Number = Annotated[float, Strict()]
Url = AnyUrl
Timestamp = Annotated[datetime, PlainValidator(_api_timestamp)]
Color = Annotated[
    RGBColor,
    PlainValidator(_hex_color),
    PlainSerializer(lambda c: c.as_hex(), return_type=str),
]

Soft = Annotated[Optional[T], WrapValidator(_absent_on_error)]
