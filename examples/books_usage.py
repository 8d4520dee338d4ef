"""
Library Querying Example

This example demonstrates querying a collection of objects:
- Filtering by an object-valued field
- Plucking a column
- Chaining filters fluently
- Grouping and sorting
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List

from fluent_collection import Collection


@dataclass(eq=False)
class Author:
    name: str
    nationality: str


@dataclass
class Book:
    title: str
    author: Author
    pub_date: date
    price: float
    genres: List[str] = field(default_factory=list)


hunter_thompson = Author('Hunter S. Thompson', 'American')
mark_twain = Author('Mark Twain', 'American')
tolkien = Author('J. R. R. Tolkien', 'English')

library = Collection([
    Book('The Hobbit', tolkien, date(1937, 9, 21), 4.99, ['fiction', 'fantasy']),
    Book('The Fellowship of the Ring (LOTR #1)', tolkien, date(1954, 7, 29), 14.50, ['fiction', 'fantasy']),
    Book('The Two Towers (LOTR #2)', tolkien, date(1954, 11, 11), 14.50, ['fiction', 'fantasy']),
    Book('The Return of the King (LOTR #3)', tolkien, date(1955, 10, 20), 14.50, ['fiction', 'fantasy']),

    Book('Fear and Loathing in Las Vegas', hunter_thompson, date(1972, 7, 1), 10, ['gonzo']),
    Book("Hell's Angels", hunter_thompson, date(1967, 1, 1), 8.99, ['gonzo']),

    Book('The Adventures of Tom Sawyer', mark_twain, date(1876, 1, 1), 3.50, ['fiction']),
])


def main() -> None:
    # All the Tolkien books
    tolkien_books = library.where('author', tolkien)

    # Just their prices
    tolkien_prices = tolkien_books.pluck_column('price')
    print("Tolkien prices:", tolkien_prices.values())

    # The prices of Thompson's books, fluently
    thompson_prices = library.where('author', hunter_thompson).pluck_column('price')
    print("Thompson prices:", thompson_prices.values())

    # How much would every fantasy book cost?
    fantasy_total = library.where_contains('genres', 'fantasy').sum('price')
    print(f"Fantasy total: {fantasy_total:.2f}")

    # Books published before 1950, oldest first
    old_books = library.where_less('pub_date', date(1950, 1, 1)).sort_by('pub_date')
    print("Before 1950:", old_books.pluck_column('title').values())

    # Titles grouped by author
    by_author = library.group_by_callback(lambda book: book.author.name)
    for name, books in by_author.items():
        print(f"{name}: {len(books)} book(s)")

    print(library.to_json(indent=2))


if __name__ == "__main__":
    main()
