from math import comb
from typing import Iterable, List, Tuple

import numpy as np

from product_arranger.models.product import Product
from product_arranger.models.similarity import SimilarityMatrix
from product_arranger.utils.constants import BRUTE_FORCE_WARNING_THRESHOLD

class DataValidator:
    """Validate inputs before an arrangement is generated"""

    def __init__(self):
        self.warnings = []
        self.errors = []

    def _reset(self):
        self.warnings = []
        self.errors = []

    def _result(self) -> Tuple[bool, List[str]]:
        return len(self.errors) == 0, self.errors + self.warnings

    def validate_products(self, products: Iterable[Product]) -> Tuple[bool, List[str]]:
        """Validate product data and return (is_valid, issues)"""
        self._reset()
        products = list(products)

        if not products:
            self.errors.append("No products provided for validation")
            return self._result()

        # Names are compared case-insensitively, as lookups are
        names = [p.name.strip().lower() for p in products]
        duplicates = {p.name for p, n in zip(products, names) if names.count(n) > 1}
        if duplicates:
            self.errors.append(f"Duplicate product names found: {sorted(duplicates)}")

        for product in products:
            if not product.name.strip():
                self.errors.append("Product with blank name")
            if product.price < 0:
                self.errors.append(f"{product.name}: Negative price")
            if product.amount < 0:
                self.errors.append(f"{product.name}: Negative amount")

        return self._result()

    def validate_similarities(self, matrix: SimilarityMatrix,
                              products: Iterable[Product]) -> Tuple[bool, List[str]]:
        """Check the similarity table against the products it will be used with"""
        self._reset()
        products = list(products)
        product_names = {p.name for p in products}

        scores = matrix.to_dataframe().to_numpy()
        if scores.size:
            if not np.all(np.isfinite(scores)):
                self.errors.append("Similarity table contains non-finite scores")
            elif np.any(scores < 0):
                self.errors.append("Similarity table contains negative scores")

        unknown = [name for name in matrix.names if name not in product_names]
        if unknown:
            self.warnings.append(f"Similarities for unknown products: {unknown}")

        unscored = [p.name for p in products if not matrix.row(p)]
        if unscored:
            self.warnings.append(f"Products without any similarity: {unscored}")

        if not matrix.is_symmetric():
            self.warnings.append("Similarity table is not symmetric")

        return self._result()

    def validate_dimensions(self, width: int, height: int, n_products: int) -> Tuple[bool, List[str]]:
        """Check shelf dimensions and warn about expensive exhaustive searches"""
        self._reset()
        if width <= 0 or height <= 0:
            self.errors.append(f"Shelf dimensions must be positive, got {width}x{height}")
            return self._result()

        capacity = width * height
        if capacity > n_products:
            self.warnings.append(
                f"Shelf holds {capacity} products but only {n_products} are available"
            )

        size = min(capacity, n_products)
        if n_products and comb(n_products, size) > BRUTE_FORCE_WARNING_THRESHOLD:
            self.warnings.append(
                f"Brute force would explore {comb(n_products, size)} combinations, consider a limit"
            )
        return self._result()
