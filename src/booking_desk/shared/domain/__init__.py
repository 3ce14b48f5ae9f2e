from .entity import AggregateRoot, Entity
from .exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    ResourceNotFoundException,
)
from .repository import Repository
from .value_object import Currency, Money

__all__ = [
    "Entity",
    "AggregateRoot",
    "Repository",
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "Currency",
    "Money",
]
