#!/usr/bin/env python3
"""Command-line entry point: analyze log files and print the summary."""

import argparse
import sys
from typing import List, Optional

from logstats.config import load_settings
from logstats.core.dispatcher import FileAnalysisDispatcher
from logstats.core.errors import error_handler
from logstats.core.logging import setup_logging
from logstats.models.data import GlobalSummary
from logstats.ui.report import render_summary

def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="logstats",
        description="Summarize severities, top messages and time span of structured log files."
    )
    parser.add_argument("paths", nargs="+", help="Log files to analyze")
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Maximum number of files analyzed concurrently (default: one per file)"
    )
    parser.add_argument("--encoding", default=None, help="Encoding of the log files")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Diagnostic log level"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Render diagnostic logs as JSON"
    )
    parser.add_argument(
        "--counts",
        action="store_true",
        help="Show how often each top message occurred"
    )
    return parser

@error_handler(reraise=False, exclude=(KeyboardInterrupt,))
def run(args: argparse.Namespace) -> GlobalSummary:
    """Configure logging and analyze the requested files.
    
    Args:
        args: Parsed command line arguments
        
    Returns:
        Global summary, or None when a fatal error was reported
    """
    settings = load_settings(
        encoding=args.encoding,
        max_workers=args.workers,
        log_level=args.log_level,
        json_logs=args.json_logs,
    )
    setup_logging(settings.log_level, json_logs=settings.json_logs)
    
    dispatcher = FileAnalysisDispatcher(
        max_workers=settings.max_workers,
        encoding=settings.encoding
    )
    return dispatcher.analyze(args.paths)

def main(argv: Optional[List[str]] = None) -> int:
    """Run the analyzer.
    
    Args:
        argv: Command line arguments, sys.argv[1:] when None
        
    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    summary = run(args)
    if summary is None:
        return 1
    
    render_summary(summary, show_counts=args.counts)
    return 0

if __name__ == "__main__":
    sys.exit(main())
