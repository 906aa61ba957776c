"""Deterministic content hashing over selected message fields.

A :class:`HashableConfig` names which attributes of an object are semantic
and under which key they enter the canonical mapping. Overrides replace or
add keys after extraction, in the order given. The mapping is serialized as
sorted, compact JSON and digested with SHA-256.
"""

from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Tuple
import hashlib
import json
import math

FieldOverride = Tuple[str, Any]


@dataclass(frozen=True)
class HashableField:
    source: str
    target: str


@dataclass(frozen=True)
class HashableConfig:
    fields: Tuple[HashableField, ...]
    overrides: Tuple[FieldOverride, ...] = ()

    def with_overrides(self, *overrides: FieldOverride) -> "HashableConfig":
        return HashableConfig(fields=self.fields, overrides=self.overrides + tuple(overrides))


def canonical_fields(obj: Any, config: HashableConfig) -> Dict[str, Any]:
    mapping: Dict[str, Any] = {}
    for hashable in config.fields:
        mapping[hashable.target] = _resolve(obj, hashable.source)
    return mapping


def canonicalize(mapping: Mapping[str, Any]) -> bytes:
    clean = _coerce_json_types(mapping)
    return json.dumps(clean, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )


def hash_fields(mapping: Mapping[str, Any], overrides: Iterable[FieldOverride] = ()) -> str:
    """Hash ``mapping`` after applying ``overrides``. ``mapping`` is not modified."""

    merged = dict(mapping)
    for target, value in overrides:
        merged[target] = value
    return hashlib.sha256(canonicalize(merged)).hexdigest()


def hash_object(obj: Any, config: HashableConfig) -> str:
    return hash_fields(canonical_fields(obj, config), config.overrides)


def _resolve(obj: Any, path: str) -> Any:
    value = obj
    for part in path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part)
    return value


def _coerce_json_types(value: Any) -> Any:
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, Enum):
        return _coerce_json_types(value.value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise ValueError("Non-finite numbers cannot be hashed.")
        # 10 and 10.0 must hash alike
        return int(value) if value.is_integer() else value
    if isinstance(value, Mapping):
        return {str(key): _coerce_json_types(item) for key, item in value.items()}
    if is_dataclass(value) and not isinstance(value, type):
        return {item.name: _coerce_json_types(getattr(value, item.name)) for item in fields(value)}
    if isinstance(value, (list, tuple)):
        return [_coerce_json_types(item) for item in value]
    raise TypeError(f"Unsupported type for hashing: {type(value).__name__}")
