"""Helpers for serializing solver results to JSON."""

from __future__ import annotations

import importlib
from dataclasses import fields, is_dataclass
from typing import Any, Dict, List, Mapping

from ..search.result import SolveResult


# Only classes from this package may be rebuilt from serialized data.
_ALLOWED_PACKAGE = __name__.split(".")[0]


def _class_path(obj: Any) -> str:
    """Return the fully-qualified class path for ``obj``."""

    cls = obj.__class__
    return f"{cls.__module__}.{cls.__name__}"


def serialize(obj: Any) -> Any:
    """Recursively convert ``obj`` into JSON-serialisable data."""

    if is_dataclass(obj) and not isinstance(obj, type):
        data = {f.name: serialize(getattr(obj, f.name)) for f in fields(obj)}
        data["__class__"] = _class_path(obj)
        return data
    if isinstance(obj, dict):
        return {str(k): serialize(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [serialize(v) for v in obj]
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, int):
        # IntEnum cell states are stored as their plain value.
        return int(obj)
    return obj


def deserialize(data: Any) -> Any:
    """Reconstruct Python objects from ``data`` produced by :func:`serialize`."""

    if isinstance(data, dict):
        if "__class__" in data:
            class_path = data["__class__"]
            module_name, _, cls_name = class_path.rpartition(".")
            if module_name.split(".")[0] != _ALLOWED_PACKAGE:
                raise ValueError(f"Refusing to deserialize foreign class {class_path!r}")
            module = importlib.import_module(module_name)
            cls = getattr(module, cls_name)
            kwargs = {k: deserialize(v) for k, v in data.items() if k != "__class__"}
            return cls(**kwargs)
        return {k: deserialize(v) for k, v in data.items()}
    if isinstance(data, list):
        return [deserialize(v) for v in data]
    return data


def result_to_dict(result: SolveResult) -> Dict[str, Any]:
    """Serialize ``result`` into a dictionary."""

    return serialize(result)


def result_from_dict(data: Dict[str, Any]) -> SolveResult:
    """Create a :class:`SolveResult` from ``data`` produced by :func:`result_to_dict`."""

    result = deserialize(data)
    if not isinstance(result, SolveResult):
        raise ValueError(f"Expected serialized SolveResult, got {type(result).__name__}")
    return result


def results_to_dict(results: Mapping[str, List[SolveResult]]) -> Dict[str, Any]:
    """Serialize a mapping of configuration name to results."""

    return {name: [result_to_dict(r) for r in items] for name, items in results.items()}


def results_from_dict(data: Mapping[str, Any]) -> Dict[str, List[SolveResult]]:
    return {name: [result_from_dict(r) for r in items] for name, items in data.items()}


__all__ = [
    "serialize",
    "deserialize",
    "result_to_dict",
    "result_from_dict",
    "results_to_dict",
    "results_from_dict",
]
