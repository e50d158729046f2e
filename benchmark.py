"""Convenience entry point; equivalent to the ``rpc-optimizer`` console script."""

import sys

from rpc_optimizer.cli import main


if __name__ == "__main__":
    sys.exit(main())
