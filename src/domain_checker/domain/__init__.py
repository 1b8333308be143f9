"""Domain model for domain-checker.

Re-exports all public types for convenient access:
    from domain_checker.domain import Domain, compare_reverse_label
"""
from domain_checker.domain.name import Domain, compare_reverse_label
from domain_checker.domain.types import DomainText, Ordering, SEPARATOR

__all__ = [
    "Domain",
    "compare_reverse_label",
    "DomainText",
    "Ordering",
    "SEPARATOR",
]
