from .currency import Currency
from .money import Money

__all__ = ["Currency", "Money"]
