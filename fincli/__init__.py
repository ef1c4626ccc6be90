"""Finance calculators: mortgages, home purchases, FIRE numbers and rebalancing."""

__version__ = "0.1.0"