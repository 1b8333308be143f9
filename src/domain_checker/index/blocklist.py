"""BlocklistIndex: sorted, compacted blocklist with O(log n) lookups.

Blocking a domain blocks everything below it, so a query is forbidden
when it equals some blocklist entry or is a subdomain of one. Scanning
the blocklist per query is O(n); this index pays O(n log n) once and
answers each query with one bisect plus one suffix check.

Construction:
    1. Sort the domains in reverse-label order (see domain.name). An
       ancestor sorts before its subdomains, and all of its subdomains
       form one contiguous run right after it.
    2. Walk the sorted list once and drop every entry related by
       containment to the last kept entry. Because of (1) this removes
       duplicates and every covered descendant, leaving entries that
       are pairwise unrelated.

Lookup:
    bisect_right finds the first entry strictly greater than the query.
    With no nested entries left, the only entry that can cover the
    query is the one just before that position.

Usage:
    index = BlocklistIndex([Domain("com"), Domain("gdz.ru")])
    index.is_forbidden(Domain("duck.com"))   # True
    index.is_forbidden(Domain("maps.ru"))    # False

The index has no mutators. Once built it can be shared across threads
without locking.
"""
from __future__ import annotations

import bisect
import logging
from collections.abc import Iterable, Iterator

from domain_checker.domain.name import Domain

log = logging.getLogger(__name__)


def _compact(domains: Iterable[Domain]) -> tuple[Domain, ...]:
    """Sort and drop every entry covered by an earlier kept entry."""
    ordered = sorted(domains)
    kept: list[Domain] = []
    for domain in ordered:
        if kept:
            last = kept[-1]
            if domain.is_subdomain_of(last) or last.is_subdomain_of(domain):
                continue
        kept.append(domain)
    return tuple(kept)


class BlocklistIndex:
    """Immutable set of blocked domains answering subdomain-coverage queries.

    Accepts any iterable of Domain: unordered, with duplicates, with
    entries nested under other entries. An empty blocklist forbids
    nothing.
    """

    __slots__ = ("_entries",)

    def __init__(self, domains: Iterable[Domain] = ()) -> None:
        given = list(domains)
        self._entries = _compact(given)
        log.debug(
            "blocklist compacted: %d domains -> %d entries",
            len(given), len(self._entries),
        )

    @classmethod
    def from_names(cls, names: Iterable[str]) -> BlocklistIndex:
        """Build from raw domain strings."""
        return cls(Domain(name) for name in names)

    @property
    def entries(self) -> tuple[Domain, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Domain]:
        return iter(self._entries)

    def __contains__(self, domain: object) -> bool:
        if not isinstance(domain, Domain):
            return False
        return self.is_forbidden(domain)

    def __repr__(self) -> str:
        return f"BlocklistIndex({len(self._entries)} entries)"

    def covering_entry(self, query: Domain) -> Domain | None:
        """Return the entry that blocks query, or None if nothing does."""
        pos = bisect.bisect_right(self._entries, query)
        if pos == 0:
            return None
        candidate = self._entries[pos - 1]
        if query.is_subdomain_of(candidate):
            return candidate
        return None

    def is_forbidden(self, query: Domain) -> bool:
        """True if query equals an entry or is a subdomain of one."""
        return self.covering_entry(query) is not None

    def check_many(self, queries: Iterable[Domain]) -> list[bool]:
        """Verdicts for each query, in input order."""
        return [self.is_forbidden(q) for q in queries]

    def is_forbidden_naive(self, query: Domain) -> bool:
        """Linear scan over the compacted entries.

        Same answer as is_forbidden(), O(n) instead of O(log n). Kept
        for cross-checking the bisect path.
        """
        return naive_is_forbidden(self._entries, query)


def build_blocklist_index(domains: Iterable[Domain]) -> BlocklistIndex:
    """Build a BlocklistIndex. Never fails; empty input gives an empty index."""
    return BlocklistIndex(domains)


def naive_is_forbidden(blocklist: Iterable[Domain], query: Domain) -> bool:
    """Naive O(n) scan: test the query against every blocked domain.

    Works on a raw, unsorted, uncompacted blocklist. This is the
    baseline for benchmarking.
    """
    return any(query.is_subdomain_of(blocked) for blocked in blocklist)
