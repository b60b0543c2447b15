from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

import yaml

from span import config
from span.request import map_zoom_to_span_from_mapping


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

LOGGER = logging.getLogger("zoomspan.cli")


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.StreamHandler()], force=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zoomspan",
        description="Find the highest map zoom that fits all overlays in a viewport.",
    )
    parser.add_argument("request", help="Path to a YAML or JSON request file.")
    parser.add_argument(
        "--world-size",
        type=float,
        default=None,
        help="Web Mercator world size in pixels at zoom 0 (default: $ZOOMSPAN_WORLD_SIZE or 512).",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indent of the printed result.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logs.")
    return parser


def load_request(path: Path) -> dict[str, Any]:
    # YAML is a superset of JSON, so one loader covers both.
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid request root (expected a mapping): {path}")
    return data


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose or config.debug_enabled())

    path = Path(args.request)
    try:
        data = load_request(path)
    except (OSError, yaml.YAMLError, ValueError) as exc:
        LOGGER.error("Cannot read request %s: %s", path, exc)
        return 2

    world_size = args.world_size if args.world_size and args.world_size > 0 else config.world_size()
    result = map_zoom_to_span_from_mapping(data, default_world_size=world_size)
    print(json.dumps(result.to_dict(), indent=args.indent or None))

    if not result.ok:
        LOGGER.warning("zoom-to-span failed: %s", result.error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
