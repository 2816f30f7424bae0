"""
Owner Info — Short identity labels for objects, used in condition messages.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def get_condition_owner_info(obj: Any) -> str:
    """
    Describe the object that owns a condition, e.g. "Machine/m1".

    Works with typed resources and unstructured mappings alike. When the
    object has no kind, its class name is used; when it has no name, the
    label is just the kind.
    """
    kind: Optional[str] = _get(obj, "kind")
    if not kind:
        kind = type(obj).__name__

    name: Optional[str] = None
    metadata = _get(obj, "metadata")
    if metadata is not None:
        name = _get(metadata, "name")

    if not name:
        return kind
    return f"{kind}/{name}"
