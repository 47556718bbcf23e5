"""
Console entry point for the escape tower assembly menu.

Usage examples:
    tower-assembly
    tower-assembly --generate 12 --seed 7
"""

import argparse
import sys

from mimesis.locales import Locale

from data.generate import ComponentGenerator

from ..data_structures.component_collection import MAX_COMPONENTS
from . import actions
from .display import format_components
from .menu import Menu
from .session import Session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Escape tower component assembly")
    parser.add_argument(
        "--generate",
        type=int,
        default=0,
        metavar="N",
        help=f"Prefill with N random components (at most {MAX_COMPONENTS})",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for generated components"
    )
    parser.add_argument(
        "--locale", default="en", help="mimesis locale for generated names"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    session = Session()
    if args.generate > 0:
        try:
            locale = Locale(args.locale)
        except ValueError:
            print(f"Error: unknown locale {args.locale!r}")
            sys.exit(1)

        generator = ComponentGenerator(locale=locale, seed=args.seed)
        session, added = actions.register(
            session, generator.generate_batch(args.generate)
        )
        print(f"Generated {added} components.")
        print(format_components(session.collection))

    try:
        Menu(session).run()
    except KeyboardInterrupt:
        print("\nInterrupted by user.")


if __name__ == "__main__":
    main()
