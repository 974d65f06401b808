#!/usr/bin/env python3
import sys

from product_arranger.cli import main

if __name__ == "__main__":
    sys.exit(main())
