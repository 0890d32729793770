"""Command-line argument parsing for minfileserver.

This module defines the command-line interface for minfileserver,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from minfileserver import __version__
from minfileserver.logging_config import parse_level


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with minfileserver's options.
    """
    description = """
    minfileserver: browse registered project directories over HTTP.

    Each project is described by a JSON file in the configuration directory and is
    served as a collapsible tree, with raw, JSON and viewer pages for its files and
    plain-text structure and contents listings for its directories. Visibility of
    files and folders is controlled by extension, folder and file-name rules set in
    the settings file and optionally overridden per project.
    """

    epilog = """
    Examples:
      # Serve the projects in ./config using ./settings.json
      minfileserver

      # Use explicit configuration locations
      minfileserver --settings /etc/minfileserver/settings.json --config-dir /etc/minfileserver/projects

      # Listen on all interfaces on a different port
      minfileserver --host 0.0.0.0 --port 9000

      # Debug logging, also written to a rotating log file
      minfileserver --log-level debug --log-file minfileserver.log
    """

    parser = argparse.ArgumentParser(
        prog="minfileserver",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"minfileserver {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-s",
        "--settings",
        type=Path,
        metavar="FILE",
        default=Path("settings.json"),
        help="Path to the general settings file (default: settings.json).",
    )
    parser.add_argument(
        "-c",
        "--config-dir",
        type=Path,
        metavar="DIR",
        default=Path("config"),
        help="Directory holding one <project_id>.json file per project (default: config).",
    )
    parser.add_argument(
        "-H",
        "--host",
        default="127.0.0.1",
        help="Interface to listen on (default: 127.0.0.1).",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        help="Port to listen on. Overrides server_port from the settings file.",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        metavar="LEVEL",
        help="Logging level (debug, info, warning, error). Overrides log_level from the settings file.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="FILE",
        help="Also write logs to this file, rotating it as it grows.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.port is not None and not 0 < args.port < 65536:
        raise ValueError(f"--port must be between 1 and 65535, got {args.port}")
    if args.log_level is not None:
        parse_level(args.log_level)
