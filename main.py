# Command line entry point for the page loader
import sys
import argparse
import logging

import constants # Import constants
from config_loader import load_config
from logger_setup import setup_logging
from page_loader import archive_page
from errors import ErrorKind, PageLoaderError

# Human-readable prefix for each error kind
ERROR_PREFIXES = {
    ErrorKind.INVALID_URL: "Invalid URL error",
    ErrorKind.TRANSPORT: "Network error",
    ErrorKind.HTTP_STATUS: "HTTP error",
    ErrorKind.DIRECTORY_UNAVAILABLE: "Output directory error",
}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="page-loader",
        description="Page loader utility: saves a web page and its local assets to disk.",
    )
    parser.add_argument("url", metavar="<url>", help="page to download")
    parser.add_argument("-o", "--output", metavar="[dir]", default=None,
                        help="output dir (default: current working directory)")
    parser.add_argument("-c", "--config", default=None, help="path to a JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("-V", "--version", action="version", version=constants.VERSION)
    return parser


def format_error(error):
    """One distinct message per error kind; unclassified errors keep their own text."""
    if isinstance(error, PageLoaderError):
        return f"{ERROR_PREFIXES[error.kind]}: {error}"
    return f"File system error: {error}"


# --- Main Execution ---
def main(argv=None):
    """Runs the CLI. Prints the saved file path on success; returns the exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        level = "DEBUG" if args.verbose else config['log_level']
        setup_logging(config['log_file'], level)
    except (OSError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        saved_path = archive_page(args.url, args.output, config)
    except (PageLoaderError, OSError) as e:
        logging.debug("Page loading failed", exc_info=True)
        print(format_error(e), file=sys.stderr)
        return 1

    print(saved_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
