"""System-wide constants"""

# Algorithm display names
BRUTE_FORCE_NAME = "Brute Force"
HILL_CLIMBING_NAME = "Hill Climbing"

# Search limits
UNBOUNDED_LIMIT = -1  # any negative limit disables the cap
DEFAULT_LIMIT = UNBOUNDED_LIMIT
BRUTE_FORCE_WARNING_THRESHOLD = 1_000_000  # combinations

# Shelf mapping
OVERFLOW_DROP = "drop"
OVERFLOW_RAISE = "raise"
OVERFLOW_POLICIES = (OVERFLOW_DROP, OVERFLOW_RAISE)
DEFAULT_OVERFLOW_POLICY = OVERFLOW_DROP
EMPTY_CELL_LABEL = "null"

# Input files
PRODUCT_COLUMNS = {
    'name': 'name',
    'category': 'category',
    'price': 'price',
    'original_price': 'original_price',
    'amount': 'amount'
}
SIMILARITY_COLUMNS = ('product_1', 'product_2', 'score')

# Logging
LOG_DIR = "logs"
CONSOLE_LOG_LEVEL = "INFO"
FILE_LOG_LEVEL = "DEBUG"
