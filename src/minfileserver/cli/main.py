"""Command-line interface for minfileserver.

This module loads the settings and project configuration, configures logging and
runs the HTTP server until it is interrupted.

Exit Codes:
    0: Normal shutdown
    1: Configuration or runtime error
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Serve the projects in ./config using ./settings.json
    $ minfileserver

    # Listen on all interfaces
    $ minfileserver --host 0.0.0.0 --port 9000
"""

import logging
import sys

from minfileserver.cli.argparser import create_parser, validate_args
from minfileserver.cli.signal_handler import setup_signal_handling, signal_handler
from minfileserver.config.loader import load_general_settings, load_project_registry
from minfileserver.exceptions import ConfigLoadError
from minfileserver.logging_config import LoggingConfig, configure_logging
from minfileserver.web.app import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point for the minfileserver command-line interface.

    Exit codes:
        0: Normal shutdown
        1: Configuration or runtime error
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    setup_signal_handling()

    parser = create_parser()
    args = parser.parse_args()

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    log_file = str(args.log_file) if args.log_file else None

    try:
        # Log at the requested level while loading, before the settings level is known
        configure_logging(LoggingConfig(level=args.log_level or "INFO", log_file=log_file))

        settings = load_general_settings(args.settings)
        registry = load_project_registry(args.config_dir)

        if args.log_level is None and settings.log_level != "INFO":
            configure_logging(LoggingConfig(level=settings.log_level, log_file=log_file))

        port = args.port if args.port is not None else settings.server_port
        app = create_app(settings, registry)

        logger.info("Serving %d project(s) on http://%s:%d", len(registry), args.host, port)
        app.run(host=args.host, port=port)

    except ConfigLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        logger.debug("Server failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # The server returns normally after Ctrl+C; report the interrupt
    if signal_handler.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
