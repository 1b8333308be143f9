"""Shared fixtures for blocklist index tests."""

from __future__ import annotations

import random

import pytest

from domain_checker.domain import Domain

SEED = 42

FORBIDDEN = ["gdz.ru", "maps.me", "m.gdz.ru", "com"]

QUERIES = [
    "gdz.ru",
    "gdz.com",
    "m.maps.me",
    "alg.m.gdz.ru",
    "maps.com",
    "maps.ru",
    "gdz.ua",
]

EXPECTED = [True, True, True, True, True, False, False]


def domains(names: list[str]) -> list[Domain]:
    return [Domain(n) for n in names]


def random_blocklist(
    count: int, seed: int = SEED, labels: tuple[str, ...] = ("a", "b", "ab", "a-b", "c")
) -> list[Domain]:
    """Random domains of 1-4 labels over a small label pool.

    A small pool guarantees plenty of nesting and duplicates.
    """
    rng = random.Random(seed)
    result = []
    for _ in range(count):
        depth = rng.randint(1, 4)
        result.append(Domain(".".join(rng.choice(labels) for _ in range(depth))))
    return result


@pytest.fixture
def forbidden() -> list[Domain]:
    return domains(FORBIDDEN)


@pytest.fixture
def queries() -> list[Domain]:
    return domains(QUERIES)
