"""Command line helpers for common_lib.

`--print-template` writes the default YAML configuration to stdout and
`--resolve NAME` prints the file an autoload name maps to.
"""
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from common_lib.autoload import Autoloader
from common_lib.config import CommonConfig, dump_config, load_config
from common_lib.logging_config import configure_logging


def get_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="common_lib")
    p.add_argument("--config", type=Path, default=None, help="Path to the YAML configuration file")
    p.add_argument("--print-template", action="store_true", help="Print the default YAML template to stdout and exit")
    p.add_argument("--resolve", metavar="NAME", help="Print the file path an autoload name maps to")
    return p


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    if argv is not None:
        argv = list(argv)
    return get_parser().parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)

    if args.print_template:
        sys.stdout.write(dump_config(CommonConfig()))
        return 0

    try:
        cfg = load_config(args.config)
    except ValueError as e:
        print("Failed to load config:", e, file=sys.stderr)
        return 1
    configure_logging(args.config)

    if args.resolve:
        loader = Autoloader(cfg.autoload_root, cfg.autoload_namespace)
        try:
            print(loader.resolve(args.resolve))
        except ValueError as e:
            print(e, file=sys.stderr)
            return 1
        return 0

    get_parser().print_help()
    return 2
