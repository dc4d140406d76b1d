"""
podcheck CLI entry point.

This module provides the command-line interface for podcheck.
"""

from __future__ import annotations

import argparse
import sys

from podcheck import __version__
from podcheck.checks import CHECKS
from podcheck.cli_commands import cmd_check
from podcheck.config import OutputFormat, OutputMode
from podcheck.observability import configure_logging


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the object source and cluster flags shared by every check."""
    parser.add_argument(
        "--pods",
        default="",
        help="Path to YAML file containing PodList or List of pods (default: fetch from cluster)",
    )
    parser.add_argument(
        "--namespaces",
        default="",
        help="Path to YAML file containing NamespaceList or List of namespaces "
        "(default: fetch from cluster)",
    )
    parser.add_argument(
        "--kubeconfig",
        help="Path to kubeconfig file (default: $PODCHECK_KUBECONFIG or ~/.kube/config)",
    )
    parser.add_argument(
        "--context",
        help="Kubernetes context to use (default: current context)",
    )
    parser.add_argument(
        "--in-cluster",
        action="store_true",
        help="Use the in-cluster service account",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        help="Items per list request, 0 disables paging (default: 500)",
    )


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the output flags shared by every check."""
    parser.add_argument(
        "--mode",
        choices=[m.value for m in OutputMode if m != OutputMode.VERBOSE],
        default=OutputMode.SCC.value,
        help="Fields emitted for each pod (default: scc)",
    )
    parser.add_argument(
        "--output",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TSV.value,
        help="Output format (default: tsv)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emit a reason for every evaluated pod, not only eligible ones",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser with one subcommand per check."""
    parser = argparse.ArgumentParser(
        prog="podcheck",
        description="podcheck is a CLI utility that helps you check and filter pods in "
        "Kubernetes clusters.\nIt provides various subcommands to identify pods based on "
        "specific criteria.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"podcheck {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level for stderr diagnostics (default: $PODCHECK_LOG_LEVEL or WARNING)",
    )

    parser.add_argument(
        "--log-format",
        choices=["human", "json"],
        help="Log format (default: $PODCHECK_LOG_FORMAT or human)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available checks")

    for name, check_cls in sorted(CHECKS.items()):
        check_parser = subparsers.add_parser(
            name,
            help=check_cls.description,
            description=check_cls.description,
        )
        _add_source_arguments(check_parser)
        _add_output_arguments(check_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, format=args.log_format)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command in CHECKS:
        return cmd_check(args)

    print(f"Unknown command: {args.command}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
