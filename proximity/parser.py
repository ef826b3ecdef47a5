"""Readers for tab-separated point files and clustering configuration files."""

from __future__ import annotations

import logging
import re
from dataclasses import fields
from os import PathLike

from proximity.cluster import ClusterConfig
from proximity.point import Point

log = logging.getLogger(__name__)

_DELIMITER = "\t"
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_CONFIG_KEYS = frozenset(f.name for f in fields(ClusterConfig))


def parse_input_file(path: str | PathLike) -> list[Point]:
    """Read points, one per line: an identifier then tab-terminated coordinates.

    The text after the last tab is ignored. The first row fixes the
    dimension; rows of another dimension are skipped with a warning.
    """
    points: list[Point] = []
    dimension: int | None = None
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            parts = line.rstrip("\n").split(_DELIMITER)
            tabs = len(parts) - 1
            ident = parts[0] if tabs > 0 else ""
            coords = [float(token) for token in parts[1:-1]]
            if dimension is None:
                dimension = tabs - 1
            if tabs - 1 != dimension:
                log.warning("Invalid point %s, ignoring.", ident)
                continue
            points.append(Point(coords, ident))
    return points


def parse_config(path: str | PathLike) -> ClusterConfig:
    """Read ``name: value`` lines into a ClusterConfig, skipping bad lines."""
    config = ClusterConfig()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            item, sep, rest = line.rstrip("\n").partition(":")
            if not sep:
                log.warning("Invalid line in config file, ignoring.")
                continue
            match = _INTEGER.match(rest)
            if match is None:
                log.warning("Invalid config value %r, ignoring.", rest)
                continue
            if item in _CONFIG_KEYS:
                setattr(config, item, int(match.group(1)))
            else:
                log.warning("Invalid item in config file, ignoring.")
    return config