from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from linechart import DEFAULT_VIEWPORT, ChartError, Dataset, ViewportConfig, load_viewport_config, render_chart
from linechart.raster import RasterSurface
from linechart.sample_data import sample_dataset


LOGGER = logging.getLogger("linechart.cli")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="linechart")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a chart-data JSON file (columns/types/colors) to PNG.")
    render.add_argument("data", type=Path)
    render.add_argument("--out", type=Path, required=True)
    render.add_argument("--config", type=Path, default=None, help="TOML file with viewport settings.")

    sample = sub.add_parser("render-sample", help="Render the bundled two-series sample to PNG.")
    sample.add_argument("--out", type=Path, required=True)
    sample.add_argument("--config", type=Path, default=None, help="TOML file with viewport settings.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        viewport = _resolve_viewport(args.config)
        if args.command == "render":
            dataset = _load_dataset(args.data)
        elif args.command == "render-sample":
            dataset = sample_dataset()
        else:
            raise RuntimeError(f"unsupported command: {args.command}")
        out = _render_png(dataset, viewport, args.out)
    except ChartError as exc:
        LOGGER.error("%s", exc)
        return 2
    print(f"wrote {out}")
    return 0


def _resolve_viewport(config_path: Path | None) -> ViewportConfig:
    if config_path is None:
        return DEFAULT_VIEWPORT
    return load_viewport_config(config_path)


def _load_dataset(path: Path) -> Dataset:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ChartError(f"cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ChartError(f"invalid JSON in {path}: {exc}") from exc
    # Chart payloads are sometimes exported as a one-element list.
    if isinstance(raw, list) and len(raw) == 1:
        raw = raw[0]
    return Dataset.from_mapping(raw)


def _render_png(dataset: Dataset, viewport: ViewportConfig, out: Path) -> Path:
    surface = RasterSurface(background=viewport.background)
    render_chart(surface, dataset, viewport)
    LOGGER.info("rendered %dx%d canvas", surface.width, surface.height)
    return surface.save_png(out)


if __name__ == "__main__":
    sys.exit(main())
