from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple
import time

from product_arranger.models.product import Product
from product_arranger.models.similarity import SimilarityMatrix
from product_arranger.utils.constants import (
    DEFAULT_LIMIT, DEFAULT_OVERFLOW_POLICY, OVERFLOW_POLICIES, OVERFLOW_RAISE
)
from product_arranger.utils.error_handler import (
    ConfigurationError, EmptyProductListError, InvalidDimensionsError, ShelfOverflowError,
    handle_errors
)
from product_arranger.utils.logger import get_logger

Grid = List[List[Optional[Product]]]
Coordinates = Dict[str, Tuple[int, int]]


class BaseArranger(ABC):
    """Base class for all arrangement strategies.

    Subclasses decide the order of the products; this class scores orderings
    and lays an ordering out on a width x height shelf.
    """

    name = "Base"

    def __init__(self, similarity: SimilarityMatrix, overflow_policy: str = DEFAULT_OVERFLOW_POLICY):
        if overflow_policy not in OVERFLOW_POLICIES:
            raise ConfigurationError(
                f"Unknown overflow policy: {overflow_policy}. Available: {list(OVERFLOW_POLICIES)}"
            )
        self.similarity = similarity
        self.overflow_policy = overflow_policy
        self.logger = get_logger()
        self.metrics: Dict[str, Any] = {}

    @abstractmethod
    def order_products(self, products: List[Product], capacity: int, limit: int) -> List[Product]:
        """Return the ordering to place on the shelf, at most capacity long"""
        pass

    def calculate_score(self, sequence: Sequence[Product]) -> float:
        """Total similarity of a sequence read as a closed cycle"""
        if not sequence:
            return 0.0
        total = 0.0
        for p1, p2 in zip(sequence, sequence[1:]):
            total += self.similarity.score(p1, p2)
        # Wrap around: last back to first
        total += self.similarity.score(sequence[-1], sequence[0])
        return total

    def most_similar(self, product: Product, candidates: Iterable[Product]) -> Optional[Product]:
        """Candidate with the highest similarity from product; first one wins ties"""
        best = None
        best_score = -1.0
        for candidate in candidates:
            score = self.similarity.score(product, candidate)
            if score > best_score:
                best_score = score
                best = candidate
        return best

    def map_to_shelf(self, sequence: Sequence[Product], width: int, height: int,
                     coordinates: Coordinates) -> Grid:
        """Lay a sequence out row by row, alternating direction.

        Even rows fill left to right, odd rows right to left, so the last item
        of one row sits above the first item of the next. Unused cells hold
        None. Each placed product is recorded in coordinates as
        (row, fill position); on odd rows the fill position is counted from
        the right-hand edge, not the visual column.
        """
        overflow = list(sequence[width * height:])
        if overflow and self.overflow_policy == OVERFLOW_RAISE:
            raise ShelfOverflowError(
                f"{len(sequence)} products do not fit a {width}x{height} shelf"
            )

        grid = []
        count = 0
        for i in range(height):
            row = []
            for j in range(width):
                product = sequence[count] if count < len(sequence) else None
                if i % 2 == 0:
                    row.append(product)
                else:
                    row.insert(0, product)
                if product is not None:
                    coordinates[product.name] = (i, j)
                count += 1
            grid.append(row)

        if overflow:
            self.logger.warning(
                f"Shelf is full, {len(overflow)} products left out: {[p.name for p in overflow]}"
            )
        return grid

    @handle_errors(raise_on_error=True)
    def arrange(self, products: Iterable[Product], width: int, height: int,
                limit: int = DEFAULT_LIMIT, coordinates: Optional[Coordinates] = None) -> Grid:
        """Main entry point: order the products and place them on the shelf"""
        products = list(products)
        if not products:
            raise EmptyProductListError("Empty list")
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(f"Shelf dimensions must be positive, got {width}x{height}")
        if coordinates is None:
            coordinates = {}

        start_time = time.time()
        self.metrics = {}
        self.logger.info(
            f"{self.name}: arranging {len(products)} products on a {width}x{height} shelf (limit {limit})"
        )

        sequence = self.order_products(products, width * height, limit)
        grid = self.map_to_shelf(sequence, width, height, coordinates)

        self.metrics.setdefault('best_score', self.calculate_score(sequence))
        self.metrics['products_placed'] = sum(p is not None for row in grid for p in row)
        self.metrics['optimization_time'] = time.time() - start_time
        self.logger.info(
            f"{self.name}: placed {len(sequence)} products, score {self.metrics['best_score']:.2f} "
            f"in {self.metrics['optimization_time']:.2f}s"
        )
        return grid
