"""Command-line options of the search and clustering programs."""

from __future__ import annotations

import getopt
from collections.abc import Sequence
from dataclasses import dataclass

SEARCH_ALGORITHMS = ("LSH", "Hypercube", "Frechet")
ASSIGNMENT_METHODS = ("Classic", "LSH", "Hypercube")
UPDATE_METHODS = ("Mean Frechet", "Mean Vector")


@dataclass
class SearchOptions:
    """Settings of a nearest-neighbour search run."""

    inputfile: str = ""
    outputfile: str = ""
    queryfile: str = ""
    algorithm: str = ""
    m: int = 10
    probes: int = 2
    num_tables: int = 5
    k: int = 4
    delta: float = 0.69
    continuous: bool = False


@dataclass
class ClusterOptions:
    """Settings of a clustering run."""

    inputfile: str = ""
    outputfile: str = ""
    configurationfile: str = ""
    assignment_method: str = "Classic"
    update_method: str = "Mean Vector"
    complete: bool = False
    silhouettes_enabled: bool = False


def _options(argv: Sequence[str], shortopts: str) -> list[tuple[str, str]]:
    try:
        opts, _ = getopt.gnu_getopt(list(argv), shortopts)
    except getopt.GetoptError as exc:
        raise ValueError("Wrong parameters passed") from exc
    return opts


def _integer(flag: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Option {flag} needs an integer, got {value!r}") from None


def _number(flag: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Option {flag} needs a number, got {value!r}") from None


def parse_search_args(argv: Sequence[str]) -> SearchOptions:
    """Parse search arguments, without the program name."""
    info = SearchOptions()
    for flag, value in _options(argv, "i:q:k:L:o:M:p:a:m:d:"):
        match flag:
            case "-i":
                info.inputfile = value
            case "-q":
                info.queryfile = value
            case "-k":
                info.k = _integer(flag, value)
            case "-L":
                info.num_tables = _integer(flag, value)
            case "-o":
                info.outputfile = value
            case "-M":
                info.m = _integer(flag, value)
            case "-p":
                info.probes = _integer(flag, value)
            case "-a":
                if value not in SEARCH_ALGORITHMS:
                    raise ValueError(f"No algorithm '{value}'")
                info.algorithm = value
            case "-m":
                if value == "discrete":
                    info.continuous = False
                elif value == "continuous":
                    info.continuous = True
                else:
                    raise ValueError(f"No metric '{value}'")
            case "-d":
                info.delta = _number(flag, value)
    return info


def parse_cluster_args(argv: Sequence[str]) -> ClusterOptions:
    """Parse clustering arguments, without the program name."""
    info = ClusterOptions()
    for flag, value in _options(argv, "i:c:o:Csa:u:"):
        match flag:
            case "-i":
                info.inputfile = value
            case "-o":
                info.outputfile = value
            case "-c":
                info.configurationfile = value
            case "-C":
                info.complete = True
            case "-s":
                info.silhouettes_enabled = True
            case "-a":
                if value not in ASSIGNMENT_METHODS:
                    raise ValueError(f"Invalid assignment method '{value}'")
                info.assignment_method = value
            case "-u":
                if value not in UPDATE_METHODS:
                    raise ValueError(f"Invalid update method '{value}'")
                info.update_method = value

    if not info.inputfile:
        raise ValueError("No input file specified")
    if info.assignment_method == "Hypercube" and info.update_method == "Mean Frechet":
        raise ValueError("Can't use Frechet update method with Hypercube assignment method")
    if not info.configurationfile:
        raise ValueError("No config file specified")
    return info