"""Product arrangement system: places products on a shelf grid by similarity"""

from .models import Product, ProductList, SimilarityMatrix, Distribution, Shelf
from .optimization import (
    BaseArranger, BruteForceArranger, HillClimbingArranger, ArrangementAlgorithm,
    create_arranger, available_algorithms
)

__version__ = "0.1.0"

__all__ = ['Product', 'ProductList', 'SimilarityMatrix', 'Distribution', 'Shelf', 'BaseArranger',
           'BruteForceArranger', 'HillClimbingArranger', 'ArrangementAlgorithm', 'create_arranger',
           'available_algorithms']
