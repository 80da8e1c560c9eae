"""Identifiers for views and path hashing."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Hashable

IdPath = list[int]


@dataclass(frozen=True)
class ViewId:
    """A unique identifier for a view, derived from its path in the view tree."""

    id: int = 0

    def access_id(self) -> int:
        """The accessibility node id; requires a non-zero id."""
        if self.id == 0:
            raise ValueError("the default ViewId has no accessibility id")
        return self.id

    def is_default(self) -> bool:
        return self == ViewId()


def hh(index: Hashable) -> int:
    """Hash a value to an unsigned 64-bit integer, stable within one process."""
    value = hash(index)
    digest = hashlib.blake2b(
        value.to_bytes(8, "little", signed=True), digest_size=8
    ).digest()
    return int.from_bytes(digest, "little")