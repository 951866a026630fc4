"""CLI entry point for the agency match engine."""

import argparse
import logging
import sys

from agencymatch.core.catalog import load_catalog
from agencymatch.core.config import Settings
from agencymatch.core.schemas import PreferenceRequest
from agencymatch.matching.explain import render_reasons
from agencymatch.pipeline.catalog_filters import CatalogQuery
from agencymatch.pipeline.orchestrator import (
    browse_catalog,
    build_match_response,
    export_response_json,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Agency match engine - rank agencies against startup preferences",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- match subcommand (default) ---
    match_parser = subparsers.add_parser("match", help="Rank agencies for a preference request")
    match_parser.add_argument(
        "--config",
        default="config/settings.yaml",
        help="Path to settings YAML file (default: config/settings.yaml)",
    )
    match_parser.add_argument(
        "--request",
        default="config/request.yaml",
        help="Path to preference request YAML (default: config/request.yaml)",
    )
    match_parser.add_argument(
        "--min-score",
        type=int,
        help="Drop matches scoring below this (default: from settings)",
    )
    match_parser.add_argument(
        "--limit",
        type=int,
        help="Maximum number of matches to show (default: from settings)",
    )
    match_parser.add_argument(
        "--export",
        choices=["json"],
        help="Export results to format (json)",
    )
    match_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )

    # --- explore subcommand ---
    explore_parser = subparsers.add_parser("explore", help="Browse the agency catalog")
    explore_parser.add_argument(
        "--config",
        default="config/settings.yaml",
        help="Path to settings YAML file (default: config/settings.yaml)",
    )
    explore_parser.add_argument("--category", help="Service category, e.g. SEO")
    explore_parser.add_argument("--industry", help="Industry, e.g. SaaS")
    explore_parser.add_argument("--area", help="Area substring, e.g. Remote")
    explore_parser.add_argument("--budget-min", type=int, help="Lowest budget of interest")
    explore_parser.add_argument("--budget-max", type=int, help="Highest budget of interest")
    explore_parser.add_argument("--keyword", help="Search keywords, name and description")
    explore_parser.add_argument(
        "--thinking-style",
        choices=["creative", "data", "hybrid"],
        help="Thinking style",
    )
    explore_parser.add_argument(
        "--experience-level",
        choices=["early-stage", "growth", "enterprise"],
        help="Experience level",
    )
    explore_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )

    # --- top-level flags accepted before the subcommand ---
    parser.add_argument(
        "--verbose", "-v", action="store_true", dest="global_verbose", help=argparse.SUPPRESS,
    )

    argv = list(sys.argv[1:] if argv is None else argv)

    # Default to match when no subcommand given
    if not any(a in ("match", "explore", "-h", "--help") for a in argv):
        argv = ["match", *argv]

    args = parser.parse_args(argv)
    args.verbose = args.verbose or args.global_verbose
    return args


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def cmd_match(args: argparse.Namespace) -> None:
    """Handle match subcommand."""
    settings = Settings.from_yaml(args.config)
    preferences = PreferenceRequest.from_yaml(args.request)
    agencies = load_catalog(settings.catalog.path)

    response = build_match_response(
        preferences,
        agencies,
        settings.matching,
        min_score=args.min_score,
        limit=args.limit,
    )

    if args.export == "json":
        print(export_response_json(response))
        return

    print(f"\n{response.total_matches} matches for {len(agencies)} agencies "
          f"(showing {len(response.matches)}).")
    for rank, r in enumerate(response.matches, start=1):
        print(f"{rank:>3}. {r.candidate.name or r.candidate.id}: "
              f"overall {r.overall_score}, thinking {r.thinking_match_score}")
        for reason in render_reasons(r.reasons):
            print(f"       - {reason}")
    for s in response.skipped:
        print(f"  Skipped '{s.candidate_id}': {s.reason}")


def cmd_explore(args: argparse.Namespace) -> None:
    """Handle explore subcommand."""
    settings = Settings.from_yaml(args.config)
    agencies = load_catalog(settings.catalog.path)

    query = CatalogQuery(
        category=args.category,
        area=args.area,
        budget_min=args.budget_min,
        budget_max=args.budget_max,
        keyword=args.keyword,
        industry=args.industry,
        thinking_style=args.thinking_style,
        experience_level=args.experience_level,
    )
    found = browse_catalog(agencies, query)

    print(f"{len(found)} agencies found.")
    for a in found:
        categories = ", ".join(c.value for c in a.categories)
        print(f"  {a.name or a.id} [{a.thinking_style.value}] {categories} "
              f"(${a.budget_min:,}-${a.budget_max:,})")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    handler = cmd_explore if args.command == "explore" else cmd_match
    try:
        handler(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
