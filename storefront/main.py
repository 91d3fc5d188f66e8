"""Entry point for the storefront Textual app."""

from __future__ import annotations

import argparse

from storefront.cart import CartStore
from storefront.config import SUPPORTED_LOCALES
from storefront.persistence import MemoryStorage, SqliteStorage
from storefront.storefront_app import StorefrontApp, configure_debug_log


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storefront", description="Browse the menu and build an order.")
    parser.add_argument("--locale", choices=SUPPORTED_LOCALES, default=None, help="UI language")
    parser.add_argument("--db", default=None, help="cart database path (default: STOREFRONT_CART_DB or data/storefront.db)")
    parser.add_argument("--no-persist", action="store_true", help="keep the cart in memory only")
    parser.add_argument("--debug-log", default=None, help="debug log file")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the Textual application."""
    args = build_parser().parse_args(argv)
    configure_debug_log(args.debug_log)
    storage = MemoryStorage() if args.no_persist else SqliteStorage(args.db)
    StorefrontApp(store=CartStore(storage), locale=args.locale).run()


if __name__ == "__main__":
    main()
