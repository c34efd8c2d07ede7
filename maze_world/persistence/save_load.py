"""Load and save solver results."""

from __future__ import annotations

import json
import gzip
from pathlib import Path
from typing import Any, Dict, List, Mapping

from ..search.result import SolveResult
from .serializer import result_from_dict, result_to_dict, results_from_dict, results_to_dict


def _write_json(data: Any, path: Path, gzip_compress: bool) -> None:
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(data)
    if gzip_compress:
        with gzip.open(path, "wt", encoding="utf-8") as fh:
            fh.write(text)
    else:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text)


def _read_json(path: Path, gzip_compress: bool) -> Any:
    if gzip_compress:
        with gzip.open(path, "rt", encoding="utf-8") as fh:
            return json.load(fh)
    with open(path, "r", encoding="utf-8") as fh:
        return json.load(fh)


def save_result(result: SolveResult, path: str | Path, *, gzip_compress: bool = True) -> None:
    """Write ``result`` to ``path`` as JSON.

    Parameters
    ----------
    result:
        The :class:`~maze_world.search.result.SolveResult` to store,
        including any captured belief snapshots.
    path:
        Destination file path. Missing parent directories are created.
    gzip_compress:
        If ``True`` (default), compress the JSON using gzip.
    """

    _write_json(result_to_dict(result), Path(path), gzip_compress)


def load_result(path: str | Path, *, gzip_compress: bool = True) -> SolveResult:
    """Read a result previously written by :func:`save_result`."""

    return result_from_dict(_read_json(Path(path), gzip_compress))


def save_results(
    results: Mapping[str, List[SolveResult]], path: str | Path, *, gzip_compress: bool = True
) -> None:
    """Write a batch of results keyed by configuration name."""

    _write_json(results_to_dict(results), Path(path), gzip_compress)


def load_results(path: str | Path, *, gzip_compress: bool = True) -> Dict[str, List[SolveResult]]:
    return results_from_dict(_read_json(Path(path), gzip_compress))


__all__ = ["save_result", "load_result", "save_results", "load_results"]
