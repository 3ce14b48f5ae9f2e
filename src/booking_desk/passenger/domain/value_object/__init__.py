from .passport_number import PassportNumber

__all__ = ["PassportNumber"]
