"""One-shot grid solver worker.

Reads a single JSON request from stdin, prints ``{"length": <int> | null}``
to stdout and exits. Diagnostics go to stderr.

Exit status is ``0`` whenever a response was produced, including invalid or
unreachable requests, ``1`` when stdin could not be read or parsed and ``2``
when the response could not be encoded.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import IO, List, Optional

import yaml

from grid_kernels.src.protocol import (
    GridResponse,
    InputReadError,
    ParseError,
    SerializationError,
    ValidationError,
    parse_request,
    read_request_text,
    serialize_response,
)
from grid_kernels.src.search import solve
from grid_kernels.src.utils import config_loader
from grid_kernels.src.utils.logger import get_logger

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_SERIALIZATION = 2


def _write(stdout: IO[str], response: GridResponse) -> None:
    text = serialize_response(response, include_error=config_loader.INCLUDE_ERROR_FIELD)
    stdout.write(text + "\n")
    stdout.flush()


def _emit_null(stdout: IO[str], logger) -> None:
    try:
        _write(stdout, GridResponse())
    except SerializationError as exc:
        logger.error(str(exc))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Read a grid request from stdin and print the shortest path length"
    )
    parser.add_argument("--config", type=Path, help="YAML or JSON settings file")
    parser.add_argument("--verbose", action="store_true", help="Log debug diagnostics")
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    if args.config is not None:
        try:
            config_loader.apply_config(config_loader.load_config(str(args.config)))
        except (OSError, ValueError, yaml.YAMLError) as exc:
            parser.error(f"cannot load config {args.config}: {exc}")
    if args.verbose:
        config_loader.set_log_level("DEBUG")

    logger = get_logger(
        "grid_kernels.solve_grid",
        file_path=config_loader.LOG_FILE,
        level=config_loader.LOG_LEVEL,
    )
    logger.debug("Runtime configuration: %s", config_loader.runtime_config())

    try:
        request = parse_request(read_request_text(stdin))
    except (InputReadError, ParseError) as exc:
        logger.error(str(exc))
        _emit_null(stdout, logger)
        return EXIT_BAD_INPUT

    h = len(request.grid)
    w = len(request.grid[0]) if request.grid else 0
    logger.debug("Solving %dx%d grid from %s to %s", h, w, request.start, request.goal)

    try:
        response = GridResponse(length=solve(request, config_loader.RAGGED_POLICY))
    except ValidationError as exc:
        logger.error("Error: %s", exc.message)
        response = GridResponse(error=exc.category.value)
    logger.debug("Result length: %s", response.length)

    try:
        _write(stdout, response)
    except SerializationError as exc:
        logger.error(str(exc))
        return EXIT_SERIALIZATION
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
