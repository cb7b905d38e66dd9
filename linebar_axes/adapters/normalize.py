from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from linebar_axes.errors import ChartDataError
from linebar_axes.series import DataSet, SeriesData


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_series(values: Any, *, label: str | None = None) -> SeriesData:
    if isinstance(values, SeriesData):
        return values
    raw = _resolve_frame_column(values)
    arr = _coerce_1d_numeric(raw, label=label or "series")
    mask = np.isfinite(arr)
    return SeriesData(values=arr, mask=mask, label=label)


def data_set(*series: Any, labels: Sequence[str | None] | None = None) -> DataSet:
    if labels is not None and len(labels) != len(series):
        raise ChartDataError(f"labels length mismatch: {len(labels)} != {len(series)}")
    out: list[SeriesData] = []
    for i, values in enumerate(series):
        name = labels[i] if labels is not None else None
        out.append(normalize_series(values, label=name))
    return DataSet(series=tuple(out))


def _resolve_frame_column(value: Any) -> Any:
    if pd is not None and isinstance(value, pd.DataFrame):
        numeric_cols = [c for c in value.columns if _is_numeric_dtype(value[c])]
        if len(numeric_cols) != 1:
            raise ChartDataError("DataFrame input must contain exactly one numeric column")
        return value[numeric_cols[0]]
    return value


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

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


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.full(arr.shape[0], np.nan, dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if _is_gap(raw):
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        if isinstance(raw, (str, bytes)):
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ChartDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out


def _is_gap(raw: Any) -> bool:
    if raw is None:
        return True
    # Nullable pandas dtypes surface missing entries as pd.NA.
    return pd is not None and raw is pd.NA
