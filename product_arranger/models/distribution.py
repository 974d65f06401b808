from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple

import pandas as pd

from product_arranger.models.product import Product
from product_arranger.utils.constants import EMPTY_CELL_LABEL
from product_arranger.utils.error_handler import DistributionError

Grid = List[List[Optional[Product]]]
Coordinate = Tuple[int, int]


@dataclass
class Distribution:
    """A named product grid produced by an arrangement algorithm"""
    name: str
    grid: Grid = field(default_factory=list)
    algorithm: Optional[str] = None
    score: Optional[float] = None
    created_at: datetime = field(default_factory=datetime.now)
    modified_at: Optional[datetime] = None

    # Visual (row, column) of every placed product, derived from the grid
    coordinates: Dict[str, Coordinate] = field(init=False, default_factory=dict)

    def __post_init__(self):
        if self.grid:
            self.set_grid(self.grid, touch=False)

    def set_grid(self, grid: Grid, touch: bool = True):
        """Replace the grid and rebuild the coordinate lookup"""
        self.grid = grid
        self.coordinates = {}
        for i, row in enumerate(grid):
            for j, product in enumerate(row):
                if product is not None:
                    self.coordinates[product.name] = (i, j)
        if touch:
            self.modified_at = datetime.now()

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def coordinates_of(self, product_name: str) -> Coordinate:
        if product_name in self.coordinates:
            return self.coordinates[product_name]
        raise DistributionError(f"Product {product_name} not found in distribution {self.name}")

    def swap_cells(self, first: Coordinate, second: Coordinate):
        """Exchange the contents of two cells, either of which may be empty"""
        for row, col in (first, second):
            if not (0 <= row < self.height and 0 <= col < len(self.grid[row])):
                raise DistributionError(f"Cell {(row, col)} is outside distribution {self.name}")

        (i, j), (ii, jj) = first, second
        a, b = self.grid[i][j], self.grid[ii][jj]
        self.grid[i][j], self.grid[ii][jj] = b, a
        if a is not None:
            self.coordinates[a.name] = (ii, jj)
        if b is not None:
            self.coordinates[b.name] = (i, j)
        self.modified_at = datetime.now()

    def swap_products(self, first_name: str, second_name: str):
        self.swap_cells(self.coordinates_of(first_name), self.coordinates_of(second_name))

    def products(self) -> List[Product]:
        """Placed products in row-major visual order"""
        return [product for row in self.grid for product in row if product is not None]

    def as_names(self) -> List[List[str]]:
        return [[p.name if p is not None else EMPTY_CELL_LABEL for p in row] for row in self.grid]

    def to_dataframe(self) -> pd.DataFrame:
        """Grid as a DataFrame of names, rows indexed by shelf level"""
        df = pd.DataFrame(
            [[p.name if p is not None else None for p in row] for row in self.grid],
            columns=range(self.width)
        )
        df.index.name = 'row'
        return df

    def __str__(self) -> str:
        lines = [
            self.name,
            f"Created Date: {self.created_at}",
            f"Last Modified Date: {self.modified_at}",
        ]
        lines.extend("\t".join(row) for row in self.as_names())
        return "\n".join(lines)
