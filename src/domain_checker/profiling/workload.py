"""Synthetic blocklists and query streams for benchmarking.

Blocklist shape:
  - a few whole TLDs (blocking everything below them)
  - organisation domains ("tracker-17.net")
  - subdomains of organisations, some of them already covered by a
    blocked organisation or TLD
  - ~5% exact duplicates

Queries mix names under blocked organisations, names under permitted
organisations, look-alikes that share a suffix without sharing a label
("xtracker-17.net"), and bare TLDs. The generator is seeded so two runs
with the same arguments see identical data.
"""
from __future__ import annotations

import random

from domain_checker.domain.name import Domain

_TLD = ["com", "org", "net", "io", "ru", "me", "ua", "dev", "info", "biz"]
_WORDS = [
    "ads", "tracker", "metrics", "cdn", "pixel", "beacon",
    "stats", "click", "promo", "banner", "telemetry", "counter",
]
_SUBDOMAINS = ["www", "api", "m", "static", "img", "eu", "us", "alg", "v2"]


class WorkloadGenerator:
    """Generate a reproducible blocklist and query list."""

    __slots__ = ("_rng", "_blocklist", "_queries", "_orgs")

    def __init__(
        self,
        blocklist_size: int = 10_000,
        query_count: int = 10_000,
        seed: int = 42,
        blocked_tlds: int = 1,
    ) -> None:
        self._rng = random.Random(seed)
        self._orgs = self._generate_orgs(max(blocklist_size, 1))
        self._blocklist = self._generate_blocklist(blocklist_size, blocked_tlds)
        self._queries = self._generate_queries(query_count)

    def _generate_orgs(self, n: int) -> list[str]:
        orgs = []
        for i in range(n):
            word = self._rng.choice(_WORDS)
            tld = self._rng.choice(_TLD)
            orgs.append(f"{word}-{i}.{tld}")
        return orgs

    def _generate_blocklist(self, n: int, blocked_tlds: int) -> list[Domain]:
        names: list[str] = list(self._rng.sample(_TLD, min(blocked_tlds, len(_TLD))))
        while len(names) < n:
            roll = self._rng.random()
            org = self._rng.choice(self._orgs)
            if roll < 0.05 and names:
                names.append(self._rng.choice(names))  # exact duplicate
            elif roll < 0.55:
                names.append(org)
            else:
                names.append(f"{self._rng.choice(_SUBDOMAINS)}.{org}")
        self._rng.shuffle(names)
        return [Domain(name) for name in names[:n]]

    def _generate_queries(self, n: int) -> list[Domain]:
        queries = []
        for _ in range(n):
            roll = self._rng.random()
            org = self._rng.choice(self._orgs)
            if roll < 0.6:
                name = f"{self._rng.choice(_SUBDOMAINS)}.{org}"
            elif roll < 0.8:
                name = org
            elif roll < 0.95:
                name = f"x{org}"
            else:
                name = self._rng.choice(_TLD)
            queries.append(Domain(name))
        return queries

    @property
    def blocklist(self) -> list[Domain]:
        return self._blocklist

    @property
    def queries(self) -> list[Domain]:
        return self._queries
