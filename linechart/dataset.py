from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import numpy as np

from linechart.adapters import coerce_values
from linechart.errors import ChartDataError, MissingColorError


LINE_KIND = "line"
X_KIND = "x"


@dataclass(frozen=True, eq=False)
class Series:
    name: str
    kind: str
    values: np.ndarray

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ChartDataError("series name must be a non-empty string")
        # Kinds other than "line" and "x" are carried but never bounded or drawn.
        if not isinstance(self.kind, str) or not self.kind:
            raise ChartDataError(f"series {self.name!r} needs a non-empty kind tag")
        values = np.array(coerce_values(self.values, label=self.name), dtype=np.float64)
        values.setflags(write=False)
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return int(self.values.size)


@dataclass(frozen=True)
class Dataset:
    """An x series plus line series sharing its ordinal axis.

    Construction validates the schema: exactly one ``"x"`` series, unique
    names, equal lengths, and a color for every line series.
    """

    series: tuple[Series, ...]
    colors: Mapping[str, str] = field(default_factory=dict)
    names: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))
        object.__setattr__(self, "names", MappingProxyType(dict(self.names)))
        seen: set[str] = set()
        for s in self.series:
            if not isinstance(s, Series):
                raise ChartDataError(f"expected Series, got {type(s)!r}")
            if s.name in seen:
                raise ChartDataError(f"duplicate series name: {s.name!r}")
            seen.add(s.name)

        x_series = [s for s in self.series if s.kind == X_KIND]
        if len(x_series) != 1:
            raise ChartDataError(f"dataset must have exactly one x series, got {len(x_series)}")
        x_len = len(x_series[0])

        for s in self.line_series:
            if len(s) != x_len:
                raise ChartDataError(f"series {s.name!r} length {len(s)} != x length {x_len}")
            color = self.colors.get(s.name)
            if not isinstance(color, str) or not color.strip():
                raise MissingColorError(f"series {s.name!r} has no color")

    @property
    def x_series(self) -> Series:
        return next(s for s in self.series if s.kind == X_KIND)

    @property
    def column_length(self) -> int:
        """Length of the x column in the columns layout, name label included."""
        return len(self.x_series) + 1

    @property
    def line_series(self) -> tuple[Series, ...]:
        return tuple(s for s in self.series if s.kind == LINE_KIND)

    def color_of(self, name: str) -> str:
        return self.colors[name]

    @classmethod
    def from_columns(
        cls,
        columns: Sequence[Sequence[Any]],
        types: Mapping[str, str],
        colors: Mapping[str, str],
        names: Mapping[str, str] | None = None,
    ) -> Dataset:
        series: list[Series] = []
        for idx, column in enumerate(columns):
            if isinstance(column, (str, bytes)) or not isinstance(column, Sequence) or len(column) == 0:
                raise ChartDataError(f"column {idx} must be a non-empty [name, *values] list")
            name = column[0]
            if not isinstance(name, str):
                raise ChartDataError(f"column {idx} must start with its series name, got {name!r}")
            if name not in types:
                raise ChartDataError(f"column {name!r} has no entry in types")
            series.append(Series(name=name, kind=types[name], values=list(column[1:])))
        return cls(series=tuple(series), colors=dict(colors), names=dict(names or {}))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> Dataset:
        if not isinstance(raw, Mapping):
            raise ChartDataError("chart data must be an object")
        for key in ("columns", "types", "colors"):
            if key not in raw:
                raise ChartDataError(f"chart data is missing {key!r}")
        if not isinstance(raw["types"], Mapping) or not isinstance(raw["colors"], Mapping):
            raise ChartDataError("types/colors must be objects")
        names = raw.get("names") or {}
        if not isinstance(names, Mapping):
            raise ChartDataError("names must be an object")
        return cls.from_columns(raw["columns"], raw["types"], raw["colors"], names)
