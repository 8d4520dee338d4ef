from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, List

import pytest

from fluent_collection import Collection


def coffee_records() -> List[Dict[str, Any]]:
    return [
        {'name': 'Black', 'ingredients': [], 'cost': 4.50},
        {'name': 'Decaf', 'ingredients': [], 'cost': 5},
        {'name': 'Cappuccino', 'ingredients': ['Milk', 'Chocolate'], 'cost': 7.50},
        {'name': 'Submarine', 'ingredients': ['Milk', 'Chocolate Bar'], 'cost': 9.99},
    ]


def people_records() -> List[Dict[str, Any]]:
    return [
        {'Name': 'John', 'Age': 21, 'sex': 'M'},
        {'Name': 'Nathan', 'Age': 19, 'sex': 'M'},
        {'Name': 'July', 'Age': 21, 'sex': 'F'},
    ]


@pytest.fixture
def integers() -> Collection[int]:
    """Collection of the numbers 1 to 9."""
    return Collection([1, 2, 3, 4, 5, 6, 7, 8, 9])


@pytest.fixture
def characters() -> Collection[str]:
    """Collection of the letters a to f."""
    return Collection(['a', 'b', 'c', 'd', 'e', 'f'])


@pytest.fixture
def coffees() -> Collection[Dict[str, Any]]:
    """Coffee menu as dictionaries."""
    return Collection(coffee_records())


@pytest.fixture
def coffee_objects(coffees: Collection[Dict[str, Any]]) -> Collection[SimpleNamespace]:
    """Coffee menu as plain objects."""
    return coffees.map(lambda item: SimpleNamespace(**item))


@pytest.fixture
def people() -> Collection[Dict[str, Any]]:
    """People as dictionaries."""
    return Collection(people_records())


@pytest.fixture
def people_objects(people: Collection[Dict[str, Any]]) -> Collection[SimpleNamespace]:
    """People as plain objects."""
    return people.map(lambda item: SimpleNamespace(**item))
