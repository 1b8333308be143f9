"""Blocklist index: sort once, bisect per query."""

from domain_checker.index.blocklist import (
    BlocklistIndex,
    build_blocklist_index,
    naive_is_forbidden,
)

__all__ = [
    "BlocklistIndex",
    "build_blocklist_index",
    "naive_is_forbidden",
]
