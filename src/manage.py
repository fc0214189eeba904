"""Pustok storefront management CLI.

Usage:
    python src/manage.py setup-db        # Create all tables
    python src/manage.py drop-db         # Drop all tables
    python src/manage.py seed catalogue.json
"""

import argparse
import json
import sys
from pathlib import Path


def _domain():
    from storefront.domain import storefront

    storefront.init()
    return storefront


def setup_database():
    from storefront.utils.db import setup_db

    print("Creating storefront database schema...")
    setup_db(_domain())
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    print("Dropping storefront database schema...")
    drop_db(_domain())
    print("Done.")


def seed_catalogue(path):
    """Load genres and their books from a JSON file.

    Expected shape: ``{"genres": [{"name": ..., "books": [{"name": ..., "sale_price": ...}]}]}``
    """
    from storefront.book.creation import AddBook
    from storefront.book.images import AddBookImage
    from storefront.genre.management import CreateGenre

    data = json.loads(Path(path).read_text(encoding="utf-8"))
    domain = _domain()

    with domain.domain_context():
        for genre in data.get("genres", []):
            genre_id = domain.process(CreateGenre(name=genre["name"]), asynchronous=False)
            for book in genre.get("books", []):
                book_id = domain.process(
                    AddBook(
                        name=book["name"],
                        author=book.get("author"),
                        description=book.get("description"),
                        genre_id=genre_id,
                        sale_price=book["sale_price"],
                        discount_percent=book.get("discount_percent", 0),
                    ),
                    asynchronous=False,
                )
                if book.get("poster"):
                    domain.process(
                        AddBookImage(book_id=book_id, image=book["poster"], poster_status=True),
                        asynchronous=False,
                    )
                print(f"  {genre['name']}: #{book_id} {book['name']}")

    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Pustok storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed", help="Load genres and books from a JSON file")
    seed_parser.add_argument("path", help="Path to the catalogue JSON file")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_catalogue(args.path)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
