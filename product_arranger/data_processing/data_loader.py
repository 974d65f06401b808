import pandas as pd
from pathlib import Path
from typing import Optional, Union

from product_arranger.models.product import Product, ProductList
from product_arranger.models.similarity import SimilarityMatrix
from product_arranger.utils.constants import PRODUCT_COLUMNS, SIMILARITY_COLUMNS
from product_arranger.utils.error_handler import ArrangerError, DataLoadError
from product_arranger.utils.logger import get_logger

class DataLoader:
    """Handle loading product lists and similarity tables"""

    def __init__(self, data_path: Union[str, Path] = "data"):
        self.data_path = Path(data_path)
        self.logger = get_logger()

    def _resolve(self, filename: Union[str, Path]) -> Path:
        """Resolve a file relative to the data directory and make sure it exists"""
        file_path = Path(filename)
        if not file_path.is_absolute() and not file_path.exists():
            file_path = self.data_path / file_path
        if not file_path.exists():
            raise DataLoadError(f"Data file not found: {file_path}")
        return file_path

    def _read_csv(self, filename: Union[str, Path], **kwargs) -> pd.DataFrame:
        file_path = self._resolve(filename)
        try:
            return pd.read_csv(file_path, **kwargs)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise DataLoadError(f"Could not read {file_path}: {e}") from e

    def load_products(self, filename: Union[str, Path], list_name: Optional[str] = None,
                      category: str = "general") -> ProductList:
        """Load a product list from a CSV with name, category, price and amount columns"""
        df = self._read_csv(filename)
        if PRODUCT_COLUMNS['name'] not in df.columns:
            raise DataLoadError(f"Product file is missing the '{PRODUCT_COLUMNS['name']}' column")

        name = list_name or Path(filename).stem
        product_list = ProductList(name=name, category=category)
        for product in self._dataframe_to_products(df):
            if not product_list.add_product(product):
                self.logger.warning(f"Duplicate product {product.name} ignored")

        self.logger.info(f"Loaded {len(product_list)} products from {filename}")
        return product_list

    def _dataframe_to_products(self, df: pd.DataFrame):
        """Convert DataFrame rows to Product objects, skipping bad rows"""
        cols = PRODUCT_COLUMNS
        products = []
        for _, row in df.iterrows():
            try:
                price = float(row[cols['price']]) if cols['price'] in row and pd.notna(row[cols['price']]) else 0.0
                original_price = None
                if cols['original_price'] in row and pd.notna(row[cols['original_price']]):
                    original_price = float(row[cols['original_price']])
                product = Product(
                    name=str(row[cols['name']]).strip(),
                    category=str(row[cols['category']]).strip() if cols['category'] in row and pd.notna(row[cols['category']]) else "general",
                    price=price,
                    original_price=original_price,
                    amount=int(row[cols['amount']]) if cols['amount'] in row and pd.notna(row[cols['amount']]) else 0
                )
                products.append(product)
            except (ArrangerError, ValueError, TypeError) as e:
                self.logger.warning(f"Error loading product {row.get(cols['name'], 'unknown')}: {e}")
                continue
        return products

    def load_similarities(self, filename: Union[str, Path], symmetric: bool = True) -> SimilarityMatrix:
        """Load similarities in long (product_1, product_2, score) or wide (square) format"""
        df = self._read_csv(filename)
        first, second, score = SIMILARITY_COLUMNS

        if {first, second, score}.issubset(df.columns):
            df = df.dropna(subset=[first, second]).copy()
            df[score] = pd.to_numeric(df[score], errors='coerce')
            unparsable = df[score].isna()
            for _, row in df[unparsable].iterrows():
                self.logger.warning(f"Error loading similarity {row[first]} -> {row[second]}: unparsable score")
            df = df[~unparsable]
            rows = zip(df[first].astype(str).str.strip(), df[second].astype(str).str.strip(), df[score])
            matrix = SimilarityMatrix.from_pairs(rows, symmetric=symmetric)
        else:
            wide = self._read_csv(filename, index_col=0)
            wide = wide.apply(pd.to_numeric, errors='coerce')
            matrix = SimilarityMatrix.from_dataframe(wide)

        self.logger.info(f"Loaded similarities for {len(matrix)} products from {filename}")
        return matrix
