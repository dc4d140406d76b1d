"""
CLI command handlers for podcheck.

Implements the check subcommands with error handling and output
formatting.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from podcheck.checks import get_check
from podcheck.collectors import ObjectSource
from podcheck.config import CheckConfig, OutputFormat
from podcheck.engine import CheckRunner, NamespaceIndex
from podcheck.errors import PodcheckError

logger = logging.getLogger(__name__)


def cmd_check(args: argparse.Namespace, out: TextIO | None = None) -> int:
    """
    Run a pod check.

    Steps:
        1. Build and validate configuration (no I/O)
        2. Load namespaces, then pods, from files or the cluster
        3. Index namespaces and evaluate every pod
        4. Write records to stdout

    Returns:
        Exit code (0 success, 1 fatal error)
    """
    out = out or sys.stdout

    try:
        config = CheckConfig.from_args(args)
        check = get_check(config.check_name, config.effective_mode)

        source = ObjectSource(config.source, config.cluster)
        namespaces = source.load_namespaces()
        pods = source.load_pods()
    except PodcheckError as e:
        logger.debug("Check setup failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    runner = CheckRunner(check, check_name=config.check_name)
    index = NamespaceIndex(namespaces)

    if config.output_format == OutputFormat.TABLE:
        report = runner.run(pods, index)
        rows = [line.split("\t") for line in report.lines]
        print(format_table(check.headers, rows), file=out)
    else:
        for line in runner.iter_results(pods, index):
            print(line, file=out)

    return 0


def format_table(headers: list[str], rows: list[list[str]]) -> str:
    """
    Format rows as space-aligned columns under a header line.

    Args:
        headers: Column headers
        rows: Row values, one list per row

    Returns:
        Formatted table string
    """
    widths = [len(h) for h in headers]
    for row in rows:
        for i, value in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(value))
            else:
                widths.append(len(value))

    def format_row(values: list[str]) -> str:
        cells = [value.ljust(widths[i]) for i, value in enumerate(values)]
        return "   ".join(cells).rstrip()

    lines = [format_row(headers)]
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)
