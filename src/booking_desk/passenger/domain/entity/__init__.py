from .passenger import Passenger

__all__ = ["Passenger"]
