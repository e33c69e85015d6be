"""Entry point for ``python -m src.recovery``."""
import sys

from src.recovery.cli import main

sys.exit(main())
