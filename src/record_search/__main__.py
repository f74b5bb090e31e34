"""Command line entry point: demo walkthrough or MCP server."""

import argparse
import logging
import sys


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="record-search", description="In-memory record search")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (stderr)")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("demo", help="Run the console walkthrough")
    subparsers.add_parser("serve", help="Run the MCP server over stdio")

    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level)

    if args.command == "serve":
        from .mcp_server import main as server_main
        server_main(log_level=level)
        return 0

    logging.basicConfig(level=level, stream=sys.stderr)
    from .demo import run_demo
    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
