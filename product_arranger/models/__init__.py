from .product import Product, ProductList
from .similarity import SimilarityMatrix
from .distribution import Distribution
from .shelf import Shelf

__all__ = ['Product', 'ProductList', 'SimilarityMatrix', 'Distribution', 'Shelf']
