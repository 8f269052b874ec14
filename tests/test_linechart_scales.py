from __future__ import annotations

import unittest

import numpy as np

from linechart import (
    DEFAULT_VIEWPORT,
    Boundary,
    ChartDataError,
    Dataset,
    DegenerateBoundaryError,
    FlatSeriesError,
    Scale,
    Series,
    ViewportConfig,
    build_scale,
    compute_boundaries,
    to_pixel_coords,
)
from linechart.scales import grid_ticks, round_half_up


def _two_series() -> Dataset:
    return Dataset.from_columns(
        [["x", 1, 2, 3], ["y0", 37, 20, 32], ["y1", 22, 12, 30]],
        {"x": "x", "y0": "line", "y1": "line"},
        {"y0": "#3DC23F", "y1": "#F34C44"},
    )


class BoundaryTests(unittest.TestCase):
    def test_two_series_boundary(self) -> None:
        self.assertEqual(compute_boundaries(_two_series()), Boundary(min=12.0, max=37.0))

    def test_x_series_is_ignored(self) -> None:
        ds = Dataset.from_columns(
            [["x", 1542412800000, 1542499200000], ["y0", 5, 7]],
            {"x": "x", "y0": "line"},
            {"y0": "#000"},
        )
        self.assertEqual(compute_boundaries(ds), Boundary(min=5.0, max=7.0))

    def test_boundary_values_are_exact_members(self) -> None:
        rng = np.random.default_rng(7)
        columns: list[list[object]] = [["x", *range(50)]]
        types = {"x": "x"}
        colors = {}
        for k in range(4):
            name = f"y{k}"
            columns.append([name, *rng.normal(loc=k * 10.0, scale=3.0, size=50).tolist()])
            types[name] = "line"
            colors[name] = "#123456"
        ds = Dataset.from_columns(columns, types, colors)
        boundary = compute_boundaries(ds)
        every = np.concatenate([s.values for s in ds.line_series])
        self.assertLessEqual(boundary.min, boundary.max)
        self.assertIn(boundary.min, every.tolist())
        self.assertIn(boundary.max, every.tolist())
        self.assertEqual(boundary.min, float(every.min()))
        self.assertEqual(boundary.max, float(every.max()))

    def test_negative_values(self) -> None:
        ds = Dataset.from_columns(
            [["x", 0, 1, 2], ["y0", -4.5, 2, -1]],
            {"x": "x", "y0": "line"},
            {"y0": "#000"},
        )
        self.assertEqual(compute_boundaries(ds), Boundary(min=-4.5, max=2.0))

    def test_flat_series_boundary(self) -> None:
        ds = Dataset.from_columns([["x", 0, 1, 2], ["y0", 10, 10, 10]], {"x": "x", "y0": "line"}, {"y0": "#000"})
        self.assertEqual(compute_boundaries(ds), Boundary(min=10.0, max=10.0))

    def test_x_only_dataset_is_degenerate(self) -> None:
        ds = Dataset(series=(Series(name="x", kind="x", values=[1, 2, 3]),))
        with self.assertRaises(DegenerateBoundaryError):
            compute_boundaries(ds)

    def test_empty_line_series_is_degenerate(self) -> None:
        ds = Dataset.from_columns([["x"], ["y0"]], {"x": "x", "y0": "line"}, {"y0": "#000"})
        with self.assertRaises(DegenerateBoundaryError):
            compute_boundaries(ds)


class ScaleTests(unittest.TestCase):
    def test_default_viewport_geometry(self) -> None:
        self.assertEqual(DEFAULT_VIEWPORT.dpi_width, 1200)
        self.assertEqual(DEFAULT_VIEWPORT.dpi_height, 400)
        self.assertEqual(DEFAULT_VIEWPORT.view_height, 320)
        self.assertEqual(DEFAULT_VIEWPORT.view_width, 1200)

    def test_build_scale(self) -> None:
        scale = build_scale(Boundary(12.0, 37.0), 3, DEFAULT_VIEWPORT)
        self.assertAlmostEqual(scale.x_ratio, 400.0)
        self.assertAlmostEqual(scale.y_ratio, 12.8)

    def test_flat_boundary_raises(self) -> None:
        with self.assertRaises(FlatSeriesError):
            build_scale(Boundary(10.0, 10.0), 3, DEFAULT_VIEWPORT)

    def test_flat_error_is_a_data_error(self) -> None:
        self.assertTrue(issubclass(FlatSeriesError, ChartDataError))
        self.assertTrue(issubclass(FlatSeriesError, ValueError))

    def test_zero_length_raises(self) -> None:
        with self.assertRaises(ChartDataError):
            build_scale(Boundary(0.0, 1.0), 0, DEFAULT_VIEWPORT)

    def test_scale_follows_viewport(self) -> None:
        viewport = ViewportConfig(width=300, height=100, dpi_scale=1, padding=10)
        scale = build_scale(Boundary(0.0, 40.0), 6, viewport)
        self.assertAlmostEqual(scale.x_ratio, 50.0)
        self.assertAlmostEqual(scale.y_ratio, 2.0)


class CoordinateTests(unittest.TestCase):
    def test_two_series_points(self) -> None:
        ds = _two_series()
        scale = build_scale(compute_boundaries(ds), ds.column_length, DEFAULT_VIEWPORT)
        path = to_pixel_coords(ds.line_series[0], scale, DEFAULT_VIEWPORT)
        self.assertEqual(path.name, "y0")
        # y = floor(400 - 40 - v * 12.8)
        self.assertEqual(path.points, ((0, -114), (300, 104), (600, -50)))
        self.assertLess(path.points[0][1], path.points[1][1])

    def test_point_count_matches_value_count(self) -> None:
        scale = Scale(x_ratio=3.0, y_ratio=1.5)
        for n in (0, 1, 2, 17, 250):
            series = Series(name="y0", kind="line", values=np.linspace(0.0, 1.0, n))
            self.assertEqual(len(to_pixel_coords(series, scale, DEFAULT_VIEWPORT)), n)

    def test_increasing_values_map_upward(self) -> None:
        series = Series(name="y0", kind="line", values=list(range(1, 21)))
        scale = build_scale(Boundary(1.0, 20.0), 20, DEFAULT_VIEWPORT)
        ys = [y for _, y in to_pixel_coords(series, scale, DEFAULT_VIEWPORT).points]
        self.assertTrue(all(a >= b for a, b in zip(ys, ys[1:])))
        xs = [x for x, _ in to_pixel_coords(series, scale, DEFAULT_VIEWPORT).points]
        self.assertEqual(xs[0], 0)
        self.assertTrue(all(a < b for a, b in zip(xs, xs[1:])))

    def test_points_are_floored(self) -> None:
        series = Series(name="y0", kind="line", values=[1.0, 1.0, 1.0])
        path = to_pixel_coords(series, Scale(x_ratio=2.5, y_ratio=0.3), DEFAULT_VIEWPORT)
        self.assertEqual([x for x, _ in path.points], [0, 2, 5])
        self.assertEqual({y for _, y in path.points}, {359})


class GridTickTests(unittest.TestCase):
    def test_ticks_for_two_series(self) -> None:
        ticks = grid_ticks(Boundary(12.0, 37.0), DEFAULT_VIEWPORT)
        self.assertEqual([t.label for t in ticks], ["32", "27", "22", "17", "12"])
        self.assertEqual([t.y for t in ticks], [104.0, 168.0, 232.0, 296.0, 360.0])

    def test_tick_count_is_independent_of_range(self) -> None:
        for hi in (1.0, 10.0, 1e6):
            self.assertEqual(len(grid_ticks(Boundary(0.0, hi), DEFAULT_VIEWPORT)), DEFAULT_VIEWPORT.rows_count)
        viewport = ViewportConfig(rows_count=8)
        self.assertEqual(len(grid_ticks(Boundary(0.0, 1.0), viewport)), 8)

    def test_labels_descend_within_bounds(self) -> None:
        boundary = Boundary(-13.3, 271.9)
        values = [t.value for t in grid_ticks(boundary, DEFAULT_VIEWPORT)]
        self.assertTrue(all(a > b for a, b in zip(values, values[1:])))
        self.assertGreaterEqual(min(values), round_half_up(boundary.min))
        self.assertLessEqual(max(values), round_half_up(boundary.max))

    def test_labels_round_half_up(self) -> None:
        values = [t.value for t in grid_ticks(Boundary(0.0, 2.5), DEFAULT_VIEWPORT)]
        self.assertEqual(values, [2, 2, 1, 1, 0])

    def test_round_half_up(self) -> None:
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(-0.5), 0)
        self.assertEqual(round_half_up(-2.5), -2)
        self.assertEqual(round_half_up(-2.6), -3)
        self.assertEqual(round_half_up(0.49999999999999994), 0)
        self.assertEqual(round_half_up(1.4999999999999998), 1)


if __name__ == "__main__":
    unittest.main()
