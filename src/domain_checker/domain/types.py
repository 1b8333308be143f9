"""Shared type aliases and constants used across the domain."""
from __future__ import annotations

from typing import TypeAlias

DomainText: TypeAlias = str
Ordering: TypeAlias = int  # negative, zero or positive, like a cmp() result

SEPARATOR = "."
