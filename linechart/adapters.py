from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import numpy as np

from linechart.errors import ChartDataError

if TYPE_CHECKING:
    from linechart.dataset import Dataset


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def coerce_values(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return _finite_or_raise(tensor.to(torch.float64).numpy(), label=label)

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(value, dtype=object)
        if arr.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return _coerce_ndarray(arr, label=label)

    raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")


def dataset_from_frame(
    frame: Any,
    *,
    x: str,
    colors: Mapping[str, str],
    names: Mapping[str, str] | None = None,
) -> Dataset:
    """Build a dataset from a pandas DataFrame.

    ``x`` names the ordinal column; every other numeric column becomes a line
    series in frame column order.
    """
    from linechart.dataset import Dataset, Series

    if pd is None:
        raise ChartDataError("pandas is required to build a dataset from a frame")
    if not isinstance(frame, pd.DataFrame):
        raise ChartDataError("frame must be a pandas DataFrame")
    if x not in frame.columns:
        raise ChartDataError(f"column not found: {x}")

    series = [Series(name=str(x), kind="x", values=coerce_values(frame[x], label=str(x)))]
    for col in frame.columns:
        if col == x or not pd.api.types.is_numeric_dtype(frame[col]):
            continue
        series.append(Series(name=str(col), kind="line", values=coerce_values(frame[col], label=str(col))))
    return Dataset(series=tuple(series), colors=dict(colors), names=dict(names or {}))


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f"}:
        return _finite_or_raise(arr.astype(np.float64, copy=False), label=label)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None or isinstance(raw, (bool, str, bytes)):
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return _finite_or_raise(out, label=label)


def _finite_or_raise(arr: np.ndarray, *, label: str) -> np.ndarray:
    bad = np.flatnonzero(~np.isfinite(arr))
    if bad.size:
        raise ChartDataError(f"{label} contains non-finite value at index {int(bad[0])}")
    return arr
