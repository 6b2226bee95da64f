import argparse
import logging
import os
import sys
from typing import List, Optional

import commands
import flowtool_core


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flowtool", description="Manage stored flows.")
    parser.add_argument("--flow-dir", help="Directory holding the flow files (default: ./.flowtool)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List stored flow names")

    read_parser = subparsers.add_parser("read", help="Print a flow's content")
    read_parser.add_argument("name")

    write_parser = subparsers.add_parser("write", help="Create or replace a flow")
    write_parser.add_argument("name")
    write_parser.add_argument("data", nargs="?", default="-", help="Content, or '-' to read stdin")

    delete_parser = subparsers.add_parser("delete", help="Delete a flow")
    delete_parser.add_argument("name")

    return parser


def _configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.getenv("FLOWTOOL_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.WARNING))


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    flowtool_core.configure(flow_dir=args.flow_dir)

    if args.command == "list":
        response = commands.invoke("list_flows")
    elif args.command == "read":
        response = commands.invoke("read_flow", {"name": args.name})
    elif args.command == "write":
        data = sys.stdin.read() if args.data == "-" else args.data
        response = commands.invoke("write_flow", {"name": args.name, "data": data})
    else:
        response = commands.invoke("delete_flow", {"name": args.name})

    if not response["success"]:
        error = response["error"]
        print(f"error [{error['code']}]: {error['message']}", file=sys.stderr)
        return 1

    if args.command == "list":
        for name in response["data"]["flows"]:
            print(name)
    elif args.command == "read":
        sys.stdout.write(response["data"]["data"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
