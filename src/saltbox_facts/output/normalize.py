"""Deterministic JSON serialization.

Mappings have no meaningful order in the consumer's model, so keys are
re-emitted sorted at every depth. Sequence order is data and is kept.
"""

from __future__ import annotations

import json
from typing import Any


def normalize(value: Any) -> Any:
    """Return *value* with every mapping's keys in sorted order, recursively.

    Lists and tuples are normalized element-wise (tuples become lists, as
    JSON has no tuple). Scalars pass through unchanged.
    """
    if isinstance(value, dict):
        return {key: normalize(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [normalize(item) for item in value]
    return value


def dumps_normalized(value: Any) -> str:
    """Serialize *value* as one line of key-sorted JSON."""
    return json.dumps(normalize(value), separators=(",", ":"), ensure_ascii=False)
