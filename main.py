"""
Run the voucher service command-line interface.

    python main.py create SUMMER10 10
    python main.py apply SUMMER10 250
"""
import sys

from vouchers.presentation.cli import main

if __name__ == "__main__":
    sys.exit(main())
