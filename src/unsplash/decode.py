import logging
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from unsplash import config
from unsplash.errors import DecodeError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _describe(error: dict[str, Any]) -> str:
    location = ".".join(str(p) for p in error["loc"]) or "<root>"
    return f"{location}: {error['msg']}"


def decode(model: type[M], data: Any) -> Optional[M]:
    """Decode one API payload into ``model``, or return None if it does not fit."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        logger.log(
            config.DECODE_LOG_LEVEL,
            f"[decode] {model.__name__} rejected ({len(errors)} errors), first at {_describe(errors[0])}",
        )
        return None


def decode_or_raise(model: type[M], data: Any) -> M:
    """Same as ``decode`` but raises ``DecodeError`` with the validation details."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(model.__name__, e.errors(include_url=False)) from e


def decode_list(model: type[M], items: Any) -> list[M]:
    """
    Decode a list response such as ``/photos`` or ``/collections``.

    Entries that fail to decode are dropped; order is preserved.
    """
    if not isinstance(items, list):
        logger.warning(
            f"[decode] expected a list of {model.__name__}, got {type(items).__name__}"
        )
        return []

    decoded = [d for d in (decode(model, item) for item in items) if d is not None]

    dropped = len(items) - len(decoded)
    if dropped:
        logger.warning(
            f"[decode] dropped {dropped} of {len(items)} {model.__name__} entries"
        )

    return decoded
