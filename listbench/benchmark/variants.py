"""
Collection Variants

The two sequence implementations under test and the primitives the
timing functions call on them:

    list   → contiguous resizable array
    deque  → doubly-linked list of fixed-size blocks
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, MutableSequence


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Enum
# ---------------------------------------------------------------------------

class CollectionVariant(Enum):
    """
    Enumeration of benchmarked collection variants.

        LIST   : ``list``, O(1) amortized tail append, O(n) head insert/remove
        DEQUE  : ``collections.deque``, O(1) at both ends, O(n) indexed read
    """
    LIST = "list"
    DEQUE = "deque"

    @classmethod
    def default(cls) -> CollectionVariant:
        return cls.LIST

    @classmethod
    def from_string(cls, value: str) -> CollectionVariant:
        """
        Convert a string to CollectionVariant, supporting common aliases.

        Unknown names fall back to the default variant. The fallback is
        logged, never raised.
        """
        key = value.lower().strip()
        if key in _VARIANT_ALIASES:
            return _VARIANT_ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            fallback = cls.default()
            logger.warning(
                f"Unknown collection variant '{value}', using '{fallback.value}'"
            )
            return fallback

    def create(self) -> MutableSequence:
        """Fresh empty collection of this variant."""
        return VARIANT_OPS[self].factory()

    @property
    def ops(self) -> VariantOps:
        return VARIANT_OPS[self]


# Alternative names accepted by CollectionVariant.from_string
_VARIANT_ALIASES: Dict[str, CollectionVariant] = {
    "array": CollectionVariant.LIST,
    "arraylist": CollectionVariant.LIST,
    "vector": CollectionVariant.LIST,
    "linked": CollectionVariant.DEQUE,
    "linkedlist": CollectionVariant.DEQUE,
    "collections.deque": CollectionVariant.DEQUE,
}


# ---------------------------------------------------------------------------
# Per-variant primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class VariantOps:
    """
    Head/tail primitives for one variant.

    Attributes:
        factory:       Builds a fresh empty collection
        insert_head:   Inserts a value at position 0
        remove_head:   Removes the element at position 0
        remove_tail:   Removes the last element
    """
    factory: Callable[[], MutableSequence]
    insert_head: Callable[[Any, int], None]
    remove_head: Callable[[Any], Any]
    remove_tail: Callable[[Any], Any]


VARIANT_OPS: Dict[CollectionVariant, VariantOps] = {
    CollectionVariant.LIST: VariantOps(
        factory=list,
        insert_head=lambda coll, value: coll.insert(0, value),
        remove_head=lambda coll: coll.pop(0),
        remove_tail=lambda coll: coll.pop(),
    ),
    CollectionVariant.DEQUE: VariantOps(
        factory=deque,
        insert_head=lambda coll, value: coll.appendleft(value),
        remove_head=lambda coll: coll.popleft(),
        remove_tail=lambda coll: coll.pop(),
    ),
}


def resolve_variant(exemplar: Any) -> CollectionVariant:
    """
    Determine which variant to instantiate from a caller-supplied exemplar.

    Accepts a CollectionVariant, a variant name, or a collection instance.
    Anything unrecognized resolves to the default variant (logged).

    Raises:
        ValueError: if exemplar is None
    """
    if exemplar is None:
        raise ValueError("Collection exemplar must not be None")

    if isinstance(exemplar, CollectionVariant):
        return exemplar
    if isinstance(exemplar, str):
        return CollectionVariant.from_string(exemplar)
    if isinstance(exemplar, deque):
        return CollectionVariant.DEQUE
    if isinstance(exemplar, list):
        return CollectionVariant.LIST

    fallback = CollectionVariant.default()
    logger.warning(
        f"Unsupported collection type {type(exemplar).__name__}, "
        f"using '{fallback.value}'"
    )
    return fallback
