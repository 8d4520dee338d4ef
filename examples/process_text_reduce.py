"""
Text Processing With reduce

Turn a comma-separated text file into a dictionary of country records keyed
by continent using reduce(), then convert it to JSON. Unlike
process_text_group_by.py, every country keeps its field names.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel

from fluent_collection import Collection
from fluent_collection.Support.Json import to_json

SOURCE = Path(__file__).with_name('process_text_source.txt')


class Country(BaseModel):
    continent: str
    name: str
    language: str


def add_country(result: Dict[str, List[Country]], row: List[str]) -> Dict[str, List[Country]]:
    continent, name, language = row
    result.setdefault(continent, []).append(
        Country(continent=continent, name=name, language=language)
    )
    return result


def main() -> None:
    with open(SOURCE, encoding='utf-8') as f:
        data_source = Collection(f.readlines())

    continents = (
        data_source
        .map(str.strip)
        .filter(lambda line: line != '')
        .map(lambda line: line.split(','))
        .reduce(add_country, {})
    )

    print(to_json(continents))


if __name__ == "__main__":
    main()
