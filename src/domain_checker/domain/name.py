"""Domain value type -- reverse-label ordering and subdomain containment.

A Domain is the literal text of a domain name. Nothing is lowercased,
stripped or validated: "Example.COM." and "example.com" are different
domains, and the empty string is a domain too.

Reverse-label order reads names from the TLD toward the leftmost label,
the way the segment trie in a DNS filter would:

    com < duck.com < alt.duck.com < ru < gdz.ru

It is computed without splitting. compare_reverse_label() walks both
strings backward one character at a time and treats the separator as
smaller than every ordinary character. That single rule keeps a label
from being compared against half of another label:

    a.com < ab.com      ("." beats "b" at the boundary)
    a.com < a-com       ("." beats "-" even though ord("-") < ord("."))

The blocklist index depends on this: all descendants of an ancestor
land in one contiguous run right after it.
"""
from __future__ import annotations

from dataclasses import dataclass

from domain_checker.domain.types import DomainText, Ordering, SEPARATOR


def compare_reverse_label(left: DomainText, right: DomainText) -> Ordering:
    """Three-way comparison of two domain names in reverse-label order.

    Returns -1 if left sorts first, 1 if right sorts first, 0 if equal.
    """
    for lc, rc in zip(reversed(left), reversed(right)):
        if lc == rc:
            continue
        if lc == SEPARATOR:
            return -1
        if rc == SEPARATOR:
            return 1
        return -1 if lc < rc else 1
    # One name is a character-suffix of the other; the shorter one sorts first.
    return (len(left) > len(right)) - (len(left) < len(right))


@dataclass(frozen=True, slots=True)
class Domain:
    """An immutable domain name compared in reverse-label order.

    Equality and hashing use the exact text. The ordering methods
    delegate to compare_reverse_label(), so sorted() and bisect work
    on lists of Domain directly.
    """
    name: DomainText

    def __str__(self) -> str:
        return self.name

    def __lt__(self, other: Domain) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return compare_reverse_label(self.name, other.name) < 0

    def __le__(self, other: Domain) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return compare_reverse_label(self.name, other.name) <= 0

    def __gt__(self, other: Domain) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return compare_reverse_label(self.name, other.name) > 0

    def __ge__(self, other: Domain) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return compare_reverse_label(self.name, other.name) >= 0

    def is_subdomain_of(self, other: Domain) -> bool:
        """True if self equals other or sits anywhere below it.

        "duck.com" and "alt.duck.com" are subdomains of "com";
        "gooddomain.com" is not a subdomain of "domain.com". Prepending
        the separator to both sides makes the suffix test stop at a
        label boundary.
        """
        if len(self.name) < len(other.name):
            return False
        return (SEPARATOR + self.name).endswith(SEPARATOR + other.name)
