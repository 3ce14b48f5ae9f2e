from .flight import Flight

__all__ = ["Flight"]
