"""Alias-chain extraction of values from provider payloads."""

import re
from collections.abc import Mapping, Sequence
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Optional

from assetlens.services.normalization.constants import NESTED_FIELDS_KEY, FieldSpec, KeyPath
from assetlens.utils.logging import get_logger

LOGGER = get_logger(__name__)

_NUMERIC_NOISE = re.compile(r"[\s$,]")


def _lookup(source: Any, key: KeyPath) -> Any:
    """Follow a key or key path through nested mappings and sequences."""
    path = (key,) if isinstance(key, str) else key
    current = source
    for part in path:
        if isinstance(part, int):
            if isinstance(current, Sequence) and not isinstance(current, (str, bytes)) and -len(current) <= part < len(current):
                current = current[part]
            else:
                return None
        elif isinstance(current, Mapping):
            current = current.get(part)
        else:
            return None
        if current is None:
            return None
    return current


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (Mapping, list, tuple)):
        return len(value) > 0
    return True


def resolve(payload: Optional[Mapping], candidate_keys: Iterable[KeyPath], default: Any = None) -> Any:
    """Return the first present value among ``candidate_keys``.

    Each key is tried against the payload itself and then against its nested
    ``fields`` object, before moving on to the next key. ``None``, blank
    strings and empty containers count as absent; zero does not.

    Args:
        payload: Provider record
        candidate_keys: Ordered aliases; tuples are paths into nested records
        default: Value returned when no alias matches

    Returns:
        The matched value, or ``default``
    """
    if not payload:
        return default

    sources = [payload]
    nested = payload.get(NESTED_FIELDS_KEY)
    if isinstance(nested, Mapping):
        sources.append(nested)

    for key in candidate_keys:
        for source in sources:
            value = _lookup(source, key)
            if _is_present(value):
                return value.strip() if isinstance(value, str) else value

    return default


def resolve_field(payload: Optional[Mapping], spec: FieldSpec) -> Any:
    return resolve(payload, spec.aliases, spec.default)


def to_decimal(value: Any, field_name: str = "value") -> Optional[Decimal]:
    """Coerce a provider value to ``Decimal``; unparseable values become ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    else:
        try:
            number = Decimal(_NUMERIC_NOISE.sub("", str(value)))
        except (InvalidOperation, ValueError):
            LOGGER.warning(f"Ignoring non-numeric {field_name}: {value!r}")
            return None
    if not number.is_finite():
        LOGGER.warning(f"Ignoring non-finite {field_name}: {value!r}")
        return None
    return number


def to_int(value: Any, field_name: str = "value") -> Optional[int]:
    number = to_decimal(value, field_name)
    if number is None:
        return None
    return int(number)
