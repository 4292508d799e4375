#!/usr/bin/env python3
"""Entry point for generating R-MAT graphs.

Fills a 2^n x 2^n adjacency matrix by recursive quadrant descent, prints
it with its statistics, and optionally saves the matrix, result.json and
figures.

Usage:
    python run_generator.py -n 4 -p "[0.5, 0.125, 0.125, 0.25]" -g 0.3
    python run_generator.py -d -s -n 5 -p "[0.25, 0.25, 0.25, 0.25]" -g 0.1 --seed 7
    python run_generator.py --config config.json --output graph.txt --plot
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from rmatgen.config import DEFAULT_CONFIG, GeneratorConfig, load_config
from rmatgen.graph import (
    InvalidProbabilitySpecError,
    compute_stats,
    generate_or_load_graph,
    generate_rmat_graph,
    parse_probabilities,
    save_matrix_text,
)
from rmatgen.visualization import format_stats, render_matrix

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Log stage start and elapsed time."""
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    log.info("Completed: %s in %.3fs", name, time.monotonic() - t0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate an R-MAT graph")
    parser.add_argument(
        "-d", "--directed", action=argparse.BooleanOptionalAction, default=None,
        help="Generate a directed graph (--no-directed overrides a config file)",
    )
    parser.add_argument(
        "-s", "--self-connections-allowed", action=argparse.BooleanOptionalAction,
        default=None, help="Allow self loops (diagonal cells)",
    )
    parser.add_argument(
        "-n", type=int, default=None,
        help="Vertex-count exponent: the graph has 2^n vertices",
    )
    parser.add_argument(
        "-p", "--probabilities", type=str, default=None,
        help='Quadrant probabilities, format: "[0.5, 0.125, 0.125, 0.25]"',
    )
    parser.add_argument(
        "-g", "--dest-density", type=float, default=None,
        help="Target graph density in [0, 1]",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed (omit for a non-reproducible run)",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a generator config JSON file; flags override its values",
    )
    parser.add_argument(
        "--output", type=str, default=None,
        help="Write the matrix as 0/1 text to this file",
    )
    parser.add_argument(
        "--results-dir", type=str, default=None,
        help="Write result.json (and figures with --plot) under this directory",
    )
    parser.add_argument(
        "--plot", action="store_true",
        help="Render adjacency heatmap and degree histogram (needs --results-dir)",
    )
    parser.add_argument(
        "--cache", action="store_true",
        help="Reuse graphs cached by config hash and seed",
    )
    parser.add_argument(
        "--no-color", action="store_true",
        help="Print the matrix without ANSI colors",
    )
    parser.add_argument(
        "--quiet", action="store_true",
        help="Skip printing the matrix (stats are still printed)",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Enable DEBUG-level logging",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Merge CLI flags over the config file (or the defaults).

    Raises:
        InvalidProbabilitySpecError: If --probabilities does not parse.
        ValueError: If the merged config is invalid.
    """
    base = load_config(args.config) if args.config else replace(DEFAULT_CONFIG, seed=None)

    overrides = {}
    if args.directed is not None:
        overrides["directed"] = args.directed
    if args.self_connections_allowed is not None:
        overrides["self_connections_allowed"] = args.self_connections_allowed
    if args.n is not None:
        overrides["n"] = args.n
    if args.probabilities is not None:
        overrides["probabilities"] = parse_probabilities(args.probabilities).values
    if args.dest_density is not None:
        overrides["target_density"] = args.dest_density

    seed = args.seed if args.seed is not None else base.seed
    return replace(base, graph=replace(base.graph, **overrides), seed=seed)


def run(args: argparse.Namespace) -> int:
    config = config_from_args(args)
    log.info(
        "Config: n=%d, directed=%s, self_connections_allowed=%s, "
        "probabilities=%s, target_density=%s, seed=%s",
        config.graph.n, config.graph.directed,
        config.graph.self_connections_allowed, config.graph.probabilities,
        config.graph.target_density, config.seed,
    )

    with stage_timer("Graph Fill"):
        if args.cache:
            matrix, fill_result = generate_or_load_graph(config)
        else:
            matrix, fill_result = generate_rmat_graph(config)
    if fill_result.exhausted:
        log.warning(
            "Filled %d < target %d: no fillable cells left",
            fill_result.filled, fill_result.target,
        )

    with stage_timer("Stats"):
        stats = compute_stats(matrix)

    if not args.quiet:
        sys.stdout.write(render_matrix(matrix, color=not args.no_color))
    sys.stdout.write(format_stats(stats))

    if args.output:
        save_matrix_text(matrix, args.output)

    if args.results_dir:
        from rmatgen.results import write_result

        output_dir = write_result(
            config, stats, fill_result, results_dir=args.results_dir
        )
        log.info("result.json written to %s", output_dir)
        if args.plot:
            from rmatgen.visualization import render_all

            with stage_timer("Figures"):
                render_all(matrix, stats, output_dir)
    elif args.plot:
        log.warning("--plot requires --results-dir, skipping figures")

    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        return run(args)
    except (InvalidProbabilitySpecError, ValueError) as e:
        log.error("Invalid input: %s", e)
        return 2
    except Exception:
        log.exception("Generation failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
