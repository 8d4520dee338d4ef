"""
Text Processing With group_by

Turn a comma-separated text file into a collection grouped by continent
and convert it to JSON. Rows stay plain lists, so the output carries no
field names (compare with process_text_reduce.py).
"""

from __future__ import annotations

from pathlib import Path

from fluent_collection import Collection

SOURCE = Path(__file__).with_name('process_text_source.txt')


def main() -> None:
    with open(SOURCE, encoding='utf-8') as f:
        data_source = Collection(f.readlines())

    continents = (
        data_source
        .map(str.strip)
        .filter(lambda line: line != '')
        .map(lambda line: line.split(','))
        .group_by('0')
    )

    # A collection can be handed straight to the JSON encoder
    print(continents.to_json(indent=4))


if __name__ == "__main__":
    main()
