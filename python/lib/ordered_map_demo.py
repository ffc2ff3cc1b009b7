#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ordered_map_demo.py
-------------------

Command line walk‑through of `OrderedMap`: builds a small map of ages,
shows duplicate rejection, erase by position and by key, and clearing,
printing the contents after every step.

    $ ordered-map-demo --strategy red-black -v
"""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from typing import List, Optional, TextIO

from ordered_map import STRATEGIES, OrderedMap

logger = logging.getLogger("ordered_map_demo")


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG with *verbose*, INFO otherwise."""
    root = logging.getLogger()
    level = logging.DEBUG if verbose else logging.INFO
    root.setLevel(level)
    # Avoid duplicate logs when main() runs more than once in a process
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        )
        root.addHandler(handler)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="ordered-map-demo",
        description="Exercise a balanced ordered map and print its contents.",
    )
    parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES),
        default="avl",
        help="balancing strategy (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def check(condition: bool, message: str) -> None:
    """Raise ``RuntimeError`` with *message* unless *condition* holds."""
    if not condition:
        raise RuntimeError(f"demo check failed: {message}")


def show(ages: OrderedMap, out: TextIO) -> None:
    out.write(f"Contents of {ages.strategy.name} tree:\n")
    for key, value in ages.items():
        out.write(f"({key}, {value})\n")


def run_demo(strategy: str = "avl", out: Optional[TextIO] = None) -> OrderedMap:
    """Run the scripted scenario and return the (finally cleared) map."""
    if out is None:
        out = sys.stdout
    ages: OrderedMap[str, int] = OrderedMap(strategy=strategy)

    for name, age in (("Joe", 25), ("Ben", 99), ("Arthur", 42)):
        pos, inserted = ages.insert(name, age)
        check(inserted, f"{name} was inserted")
    show(ages, out)

    pos, inserted = ages.insert("Arthur", 142)
    check(not inserted, "duplicate Arthur was rejected")
    check(pos.item == ("Arthur", 42), "duplicate insert kept the first value")
    logger.info("Duplicate insert of %r kept value %r", pos.key, pos.value)
    show(ages, out)

    erased = ages.erase(pos)
    check(erased, "Arthur was erased by position")
    show(ages, out)

    pos, inserted = ages.insert("Arthur", 142)
    check(inserted, "Arthur was inserted again")
    check(ages.find("Arthur") == pos, "find returns the inserted position")
    erased = ages.erase("Ben")
    check(erased, "Ben was erased by key")
    show(ages, out)

    erased = ages.erase("Benjamin")
    check(not erased, "erasing a missing key removed nothing")
    logger.info("Erasing a missing key reported no removal")
    erased = ages.erase("Joe") and ages.erase("Arthur")
    check(erased, "Joe and Arthur were erased")
    show(ages, out)
    out.write(f"Size of {ages.strategy.name} tree: {ages.size()}\n")
    check(ages.empty() and ages.size() == 0, "map is empty after erasing all")

    ages.insert("Ben", 99)
    ages.insert("Arthur", 42)
    check(ages.size() == 2 and not ages.empty(), "map holds two entries")
    ages.clear()
    check(ages.empty() and ages.size() == 0, "map is empty after clear")
    return ages


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    logger.debug("Running demo with the %s strategy", args.strategy)
    run_demo(args.strategy)
    return 0


if __name__ == "__main__":
    sys.exit(main())
