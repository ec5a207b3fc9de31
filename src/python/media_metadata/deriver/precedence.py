"""
Ordered fallback lists.

Every derived field is resolved by a precedence chain: an ordered list of
(source label, extractor) pairs evaluated until one extractor returns a value
that is not None. Keeping the order in a flat list makes the priority of each
source visible in one place.
"""

import logging
from typing import Callable, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S")

Chain = Sequence[Tuple[str, Callable[[S], Optional[T]]]]


def first_present(chain: Chain, source: S) -> Optional[Tuple[str, T]]:
    """
    Evaluate a precedence chain against a source.

    Args:
        chain: Ordered (label, extractor) pairs; each extractor takes the source
        source: Object handed to every extractor

    Returns:
        (label, value) of the first extractor returning a value, or None
    """
    for label, extract in chain:
        value = extract(source)
        if value is not None:
            logger.debug("Resolved from %s", label)
            return label, value
    return None


def resolve(chain: Chain, source: S, default: Optional[T] = None) -> Optional[T]:
    """Evaluate a chain and return only the value, or ``default`` if nothing matched."""
    found = first_present(chain, source)
    return default if found is None else found[1]
