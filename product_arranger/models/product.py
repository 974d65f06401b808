from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, Iterator, Optional

from product_arranger.utils.error_handler import ProductError

def _round_price(value: float) -> float:
    """Round to two decimals, half up"""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

@dataclass(eq=False)
class Product:
    """Product placed on a shelf, identified by its name"""
    name: str
    category: str = "general"
    price: float = 0.0
    original_price: Optional[float] = None
    amount: int = 0

    def __post_init__(self):
        """Validate and normalize fields"""
        if self.name is None or not str(self.name).strip():
            raise ProductError("Name cannot be null or empty")
        if self.category is None or not str(self.category).strip():
            raise ProductError("Category cannot be null or empty")
        if self.price < 0:
            raise ProductError("Price cannot be negative")
        if self.amount < 0:
            raise ProductError("Amount cannot be negative")

        # Original price defaults to the initial price
        if self.original_price is None:
            self.original_price = self.price
        self.original_price = _round_price(self.original_price)
        self.price = _round_price(self.price)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def apply_discount(self, discount: float):
        """Set price to original price minus a percentage discount"""
        if discount < 0 or discount > 100:
            raise ProductError("Discount must be between 0 and 100")
        self.price = _round_price(self.original_price * (1 - discount / 100))

    def restore_price(self):
        self.price = self.original_price

    def update_amount(self, change: int) -> int:
        """Add change to amount, rejecting negative stock"""
        new_amount = self.amount + change
        if new_amount < 0:
            raise ProductError("Amount cannot be negative")
        self.amount = new_amount
        return self.amount


@dataclass
class ProductList:
    """Named collection of unique products, kept in insertion order"""
    name: str
    category: str = "general"
    _products: Dict[str, Product] = field(default_factory=dict, init=False, repr=False)
    last_modified: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_products(cls, name: str, products: Iterable[Product], category: str = "general") -> "ProductList":
        product_list = cls(name=name, category=category)
        for product in products:
            product_list.add_product(product)
        return product_list

    def add_product(self, product: Product) -> bool:
        """Add a product; returns False if one with the same name exists"""
        if product.name in self._products:
            return False
        self._products[product.name] = product
        self._touch()
        return True

    def remove_product(self, product_name: str) -> bool:
        """Remove a product by case-insensitive name"""
        product = self.get_product(product_name)
        if product is None:
            return False
        del self._products[product.name]
        self._touch()
        return True

    def get_product(self, product_name: str) -> Optional[Product]:
        if product_name in self._products:
            return self._products[product_name]
        wanted = product_name.lower()
        return next((p for p in self._products.values() if p.name.lower() == wanted), None)

    def apply_discount(self, discount: float):
        for product in self._products.values():
            product.apply_discount(discount)
        self._touch()

    @property
    def products(self):
        return list(self._products.values())

    @property
    def total_quantity(self) -> int:
        return sum(p.amount for p in self._products.values())

    def is_empty(self) -> bool:
        return not self._products

    def _touch(self):
        self.last_modified = datetime.now()

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._products.values()))

    def __contains__(self, item) -> bool:
        name = item.name if isinstance(item, Product) else item
        return name in self._products
