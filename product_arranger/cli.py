import argparse
import sys
from typing import List, Optional

from product_arranger.data_processing.data_loader import DataLoader
from product_arranger.data_processing.data_validator import DataValidator
from product_arranger.models.shelf import Shelf
from product_arranger.optimization.factory import ArrangementAlgorithm, create_arranger
from product_arranger.utils.constants import DEFAULT_LIMIT, DEFAULT_OVERFLOW_POLICY, OVERFLOW_POLICIES
from product_arranger.utils.error_handler import ArrangerError
from product_arranger.utils.logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Product Arrangement System',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py -p products.csv -s similarities.csv --width 3 --height 2
  python main.py -p products.csv -s similarities.csv --width 4 --height 3 --algorithm brute_force --limit 5000
  python main.py -p products.csv -s similarities.csv --width 5 --height 4 --seed 42 --validate
        """
    )

    parser.add_argument('--products', '-p', required=True,
                       help='CSV file with name, category, price and amount columns')
    parser.add_argument('--similarities', '-s', required=True,
                       help='CSV file with product_1, product_2, score columns or a square matrix')
    parser.add_argument('--data-dir', default='data',
                       help='Directory used to resolve relative file names')
    parser.add_argument('--width', type=int, required=True, help='Number of columns on the shelf')
    parser.add_argument('--height', type=int, required=True, help='Number of rows on the shelf')
    parser.add_argument('--algorithm', '-a', choices=[a.value for a in ArrangementAlgorithm],
                       default=ArrangementAlgorithm.HILL_CLIMBING.value, help='Arrangement algorithm')
    parser.add_argument('--limit', type=int, default=DEFAULT_LIMIT,
                       help='Search limit; negative means unbounded')
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for hill climbing')
    parser.add_argument('--overflow', choices=list(OVERFLOW_POLICIES), default=DEFAULT_OVERFLOW_POLICY,
                       help='What to do with products that do not fit the shelf')
    parser.add_argument('--name', default='distribution', help='Name of the generated distribution')
    parser.add_argument('--validate', '-v', action='store_true',
                       help='Run data validation before arranging')
    parser.add_argument('--log-dir', default=None, help='Also write a log file to this directory')
    parser.add_argument('--log-level', default='INFO',
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Console log level')
    return parser


def run(args: argparse.Namespace) -> int:
    logger = configure_logging(log_dir=args.log_dir, console_level=args.log_level)
    loader = DataLoader(args.data_dir)

    products = loader.load_products(args.products)
    similarity = loader.load_similarities(args.similarities)

    if args.validate:
        validator = DataValidator()
        checks = [
            validator.validate_products(products),
            validator.validate_similarities(similarity, products),
            validator.validate_dimensions(args.width, args.height, len(products)),
        ]
        for is_valid, issues in checks:
            for issue in issues:
                logger.warning(issue)
            if not is_valid:
                logger.error("Validation failed")
                return 1

    kwargs = {'overflow_policy': args.overflow}
    if args.algorithm == ArrangementAlgorithm.HILL_CLIMBING.value:
        kwargs['seed'] = args.seed
    arranger = create_arranger(args.algorithm, similarity, **kwargs)

    shelf = Shelf(shelf_id=1, width=args.width, height=args.height, product_list=products)
    distribution = shelf.generate_distribution(args.name, arranger, args.limit)

    print(distribution)
    print(f"Algorithm: {distribution.algorithm} | Score: {distribution.score:.2f}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except ArrangerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
