from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

import numpy as np
import pandas as pd

from product_arranger.models.product import Product
from product_arranger.utils.error_handler import ValidationError

ProductRef = Union[str, Product]


def _name(product: ProductRef) -> str:
    return product.name if isinstance(product, Product) else product


class SimilarityMatrix:
    """Pairwise similarity scores between products.

    Scores live in a square numpy matrix indexed by stable integer ids, one
    per product name, in the order names were first seen. Lookups always use
    the (first, second) order they are given in and return 0.0 whenever either
    name is unknown. Scores must be finite and non-negative.
    """

    def __init__(self, names: Optional[Iterable[str]] = None, scores: Optional[np.ndarray] = None):
        names = list(names or [])
        if len(set(names)) != len(names):
            raise ValidationError("Duplicate product names in similarity matrix")
        self._index: Dict[str, int] = {name: i for i, name in enumerate(names)}

        if scores is None:
            scores = np.zeros((len(names), len(names)), dtype=float)
        scores = np.asarray(scores, dtype=float)
        if scores.shape != (len(names), len(names)):
            raise ValidationError(
                f"Similarity matrix shape {scores.shape} does not match {len(names)} products"
            )
        self._check_scores(scores)
        self._scores = scores.copy()

    @classmethod
    def from_nested(cls, mapping: Mapping[str, Mapping[str, float]]) -> "SimilarityMatrix":
        """Build from a name -> name -> score mapping, stored exactly as given"""
        matrix = cls()
        for first, row in mapping.items():
            for second, value in row.items():
                matrix.set_score(first, second, value, symmetric=False)
            matrix._ensure(first)
        return matrix

    @classmethod
    def from_pairs(cls, rows: Iterable[Tuple[ProductRef, ProductRef, float]],
                   symmetric: bool = True) -> "SimilarityMatrix":
        matrix = cls()
        for first, second, value in rows:
            matrix.set_score(first, second, value, symmetric=symmetric)
        return matrix

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "SimilarityMatrix":
        """Build from a square DataFrame whose index and columns are product names"""
        index = [str(name) for name in df.index]
        columns = [str(name) for name in df.columns]
        if set(index) != set(columns):
            raise ValidationError("Similarity table rows and columns name different products")
        ordered = df.copy()
        ordered.index = index
        ordered.columns = columns
        ordered = ordered.loc[index, index].fillna(0.0)
        return cls(index, ordered.to_numpy(dtype=float))

    @staticmethod
    def _check_scores(scores: np.ndarray):
        if not np.all(np.isfinite(scores)):
            raise ValidationError("Similarity scores must be finite")
        if np.any(scores < 0):
            raise ValidationError("Similarity scores cannot be negative")

    def _ensure(self, name: str) -> int:
        """Return the id for name, growing the matrix for new names"""
        if name not in self._index:
            self._index[name] = len(self._index)
            self._scores = np.pad(self._scores, ((0, 1), (0, 1)))
        return self._index[name]

    def set_score(self, first: ProductRef, second: ProductRef, value: float, symmetric: bool = True):
        value = float(value)
        if not np.isfinite(value) or value < 0:
            raise ValidationError(
                f"Invalid similarity {value} between {_name(first)} and {_name(second)}"
            )
        i = self._ensure(_name(first))
        j = self._ensure(_name(second))
        self._scores[i, j] = value
        if symmetric:
            self._scores[j, i] = value

    def score(self, first: ProductRef, second: ProductRef) -> float:
        """Similarity of first -> second, 0.0 when unknown"""
        i = self._index.get(_name(first))
        j = self._index.get(_name(second))
        if i is None or j is None:
            return 0.0
        return float(self._scores[i, j])

    def row(self, product: ProductRef) -> Dict[str, float]:
        """Non-zero scores from product to every other known product"""
        i = self._index.get(_name(product))
        if i is None:
            return {}
        return {name: float(self._scores[i, j]) for name, j in self._index.items() if self._scores[i, j]}

    @property
    def names(self) -> List[str]:
        return list(self._index)

    def is_symmetric(self) -> bool:
        return bool(np.allclose(self._scores, self._scores.T))

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self._scores.copy(), index=self.names, columns=self.names)

    def __contains__(self, product) -> bool:
        return _name(product) in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"SimilarityMatrix({len(self)} products)"
