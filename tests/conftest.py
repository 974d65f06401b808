"""
Shared test fixtures for product arranger tests.

Provides products, similarity matrices and a seeded-start random source
so arrangement results are deterministic.
"""

import pytest
from typing import List

from product_arranger.models.product import Product, ProductList
from product_arranger.models.similarity import SimilarityMatrix
from product_arranger.utils.logger import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Console-only logging so tests never create log files."""
    configure_logging(log_dir=None, console_level="WARNING")


class FixedRng:
    """Stand-in for numpy's Generator that always picks the same index."""

    def __init__(self, index: int = 0):
        self.index = index
        self.calls = []

    def integers(self, high):
        self.calls.append(high)
        return self.index


@pytest.fixture
def fixed_rng():
    return FixedRng


def make_products(*names: str) -> List[Product]:
    return [Product(name=name, category="snacks", price=1.0, amount=1) for name in names]


@pytest.fixture
def six_products() -> List[Product]:
    """Products A..F."""
    return make_products("A", "B", "C", "D", "E", "F")


@pytest.fixture
def four_products() -> List[Product]:
    return make_products("A", "B", "C", "D")


@pytest.fixture
def chain_similarity() -> SimilarityMatrix:
    """A-B 1, B-C 3, C-D 10 (symmetric); every other pair unknown."""
    return SimilarityMatrix.from_pairs([
        ("A", "B", 1.0),
        ("B", "C", 3.0),
        ("C", "D", 10.0),
    ])


@pytest.fixture
def greedy_trap_similarity() -> SimilarityMatrix:
    """Greedy from A builds A,B,D,C (score 20); one swap reaches 21."""
    return SimilarityMatrix.from_pairs([
        ("A", "B", 10.0),
        ("B", "C", 1.0),
        ("C", "D", 1.0),
        ("A", "D", 9.0),
        ("B", "D", 9.0),
    ])


@pytest.fixture
def product_list(four_products) -> ProductList:
    return ProductList.from_products("groceries", four_products, category="food")


def names(grid) -> List[List[str]]:
    """Grid of product names, None for empty cells."""
    return [[p.name if p is not None else None for p in row] for row in grid]
