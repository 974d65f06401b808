from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Set, Tuple

from product_arranger.models.distribution import Distribution
from product_arranger.models.product import ProductList
from product_arranger.utils.constants import DEFAULT_LIMIT
from product_arranger.utils.error_handler import DistributionError, ShelfError
from product_arranger.utils.logger import get_logger


@dataclass
class Shelf:
    """Shelf model: a width x height grid of slots and its distribution history"""
    shelf_id: int
    width: int  # columns
    height: int  # rows
    product_list: ProductList

    # Oldest first; the last entry is the current distribution
    history: List[Distribution] = field(default_factory=list)

    def __post_init__(self):
        self.logger = get_logger()

    @property
    def capacity(self) -> int:
        return self.width * self.height

    @property
    def num_products(self) -> int:
        return self.product_list.total_quantity

    def generate_distribution(self, name: str, arranger, limit: int = DEFAULT_LIMIT) -> Distribution:
        """Arrange the shelf's products with the given arranger and store the result"""
        if self._find(name) is not None:
            raise DistributionError(f"Distribution {name} already exists on shelf {self.shelf_id}")

        grid = arranger.arrange(self.product_list, self.width, self.height, limit)
        distribution = Distribution(
            name=name,
            grid=grid,
            algorithm=arranger.name,
            score=arranger.metrics.get('best_score'),
            modified_at=datetime.now()
        )
        self.history.append(distribution)
        self.logger.info(f"Shelf {self.shelf_id}: added distribution {name} ({arranger.name})")
        return distribution

    def add_distribution(self, distribution: Distribution):
        if self._find(distribution.name) is not None:
            raise DistributionError(f"Distribution {distribution.name} already exists on shelf {self.shelf_id}")
        self.history.append(distribution)

    def current_distribution(self) -> Distribution:
        if not self.history:
            raise ShelfError("There are no distributions")
        return self.history[-1]

    def make_current(self, name: str):
        """Move a stored distribution to the end of the history"""
        distribution = self.get_distribution(name)
        self.history.remove(distribution)
        self.history.append(distribution)

    def remove_distribution(self, name: str) -> bool:
        distribution = self._find(name)
        if distribution is None:
            return False
        self.history.remove(distribution)
        return True

    def get_distribution(self, name: str) -> Distribution:
        distribution = self._find(name)
        if distribution is None:
            raise DistributionError(f"Distribution {name} not found at shelf: {self.shelf_id}")
        return distribution

    def distribution_names(self) -> Set[str]:
        if not self.history:
            raise DistributionError("There are no distributions")
        return {d.name for d in self.history}

    def distribution_log(self) -> List[Tuple[str, Optional[datetime], datetime]]:
        """(name, modified, created) for every stored distribution, oldest first"""
        return [(d.name, d.modified_at, d.created_at) for d in self.history]

    def swap_products(self, distribution_name: str, first: str, second: str):
        distribution = self.get_distribution(distribution_name)
        distribution.swap_products(first, second)
        self.logger.info(f"Shelf {self.shelf_id}: swapped {first} and {second} in {distribution_name}")

    def change_product_list(self, product_list: ProductList):
        """Assign a new product list; stored distributions no longer apply"""
        self.product_list = product_list
        self.history = []

    def _find(self, name: str) -> Optional[Distribution]:
        return next((d for d in self.history if d.name == name), None)

    def __str__(self) -> str:
        lines = [f"Shelf{{id='{self.shelf_id}', width, height='{self.width}, {self.height}'}}"]
        if self.history:
            lines.append(str(self.history[-1]))
        return "\n".join(lines)
