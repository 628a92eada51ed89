"""Ordered fallback resolution for loosely-shaped API records."""
import math
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union


def first_present(record: Dict[str, Any], keys: Iterable[str], default: Any = None,
                  types: Optional[Union[type, Tuple[type, ...]]] = None) -> Any:
    """
    Return the first truthy value among ``keys`` in ``record``.

    Empty strings, zeros and ``None`` fall through to the next key, then to
    ``default``. When ``types`` is given, values of other types fall through
    as well.
    """
    if not isinstance(record, dict):
        return default
    for key in keys:
        value = record.get(key)
        if not value:
            continue
        if types is not None and not isinstance(value, types):
            continue
        return value
    return default


def to_float(value: Any) -> float:
    """Parse a number leniently; anything unparseable becomes 0.0."""
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(result):
        return 0.0
    return result


def resolve_trade_list(payload: Any) -> List[Any]:
    """Trades come back as a bare list, or wrapped under ``trades`` or ``data``."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ('trades', 'data'):
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return []
