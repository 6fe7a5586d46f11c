"""txflow-layout: deterministic layout positioning for address/transaction graphs."""

__version__ = "0.1.0"
