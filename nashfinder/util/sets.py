"""Power sets and cartesian products over finite sets.

Both operations build their results by iterative accumulation instead of
recursion, so deep inputs do not exhaust the interpreter stack. The
results are lists of unique ``frozenset`` objects in a deterministic order
for inputs with a deterministic iteration order.

Cartesian products are set-based, not tuple-based: a combination only
records which elements were picked, not from which position. If two
input sets share equal elements, combinations picking the same value from
both positions collapse, and the product holds fewer combinations than
the arithmetic product of the set sizes. Callers that need positional
identity must tag their elements, for example with
:class:`~nashfinder.game.player_action.PlayerAction`.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from collections.abc import Set as AbstractSet
from math import prod
from typing import TypeVar, overload

from nashfinder.core.exceptions import InvalidArgumentError
from nashfinder.core.logging import get_logger
from nashfinder.core.settings import DEFAULT_MAX_ENUMERATION_SIZE, get_cached_settings

K = TypeVar("K", bound=Hashable)

logger = get_logger(__name__)


def _unique(items: Iterable[K]) -> list[K]:
    """Distinct items in first-seen order."""
    return list(dict.fromkeys(items))


def _enumeration_limit() -> int:
    try:
        return get_cached_settings().max_enumeration_size
    except ValueError as e:
        # Covers pydantic ValidationError and pydantic-settings SettingsError
        logger.warning(
            "invalid_settings",
            error=str(e),
            limit=DEFAULT_MAX_ENUMERATION_SIZE,
        )
        return DEFAULT_MAX_ENUMERATION_SIZE


def _check_enumeration_size(operation: str, size: int) -> None:
    limit = _enumeration_limit()
    if size > limit:
        logger.warning(
            "large_enumeration",
            operation=operation,
            size=size,
            limit=limit,
        )


def power_set(items: Iterable[K]) -> list[frozenset[K]]:
    """Create the power set of the given items.

    The first item is the head: for every subset of the remaining items,
    the subset extended by the head is listed before the subset itself.
    The result always contains exactly ``2 ** n`` subsets for ``n``
    distinct items, starting with the full set and ending with the empty
    set.

    Args:
        items: Elements of the set. Duplicates are ignored.

    Returns:
        Every subset of the items, including the empty and the full set.
    """
    elements = _unique(items)
    _check_enumeration_size("power_set", 2 ** len(elements))

    subsets: list[frozenset[K]] = [frozenset()]
    # Fold from the tail so the first element ends up as the outermost head
    for head in reversed(elements):
        subsets = [
            subset for other in subsets for subset in (other | {head}, other)
        ]
    return subsets


@overload
def cartesian_product(sets: AbstractSet[K]) -> list[frozenset[K]]: ...


@overload
def cartesian_product(sets: Sequence[Iterable[K]]) -> list[frozenset[K]]: ...


def cartesian_product(sets):
    """Create the cartesian product of a sequence of sets.

    Passing a single set instead of a sequence of sets creates the product
    of that set with itself, the same as ``cartesian_product([s, s])``.
    Any set argument counts as that single set, even a set of sets, so
    factors must be passed as a list or tuple.

    Args:
        sets: Sequence of at least two sets, or a single set.

    Returns:
        Every combination picking one element of each set, as frozensets.
        Equal combinations appear once.

    Raises:
        InvalidArgumentError: If fewer than two sets are given.
    """
    if isinstance(sets, AbstractSet):
        sets = [sets, sets]
    factors = [_unique(factor) for factor in sets]
    if len(factors) < 2:
        raise InvalidArgumentError(
            "The cartesian product needs at least two sets. "
            f"Got: {len(factors)}"
        )
    _check_enumeration_size(
        "cartesian_product", prod(len(factor) for factor in factors)
    )

    combinations: list[frozenset] = [frozenset()]
    # Fix one set at a time, from the last to the first
    for factor in reversed(factors):
        combinations = _unique(
            combination | {element}
            for element in factor
            for combination in combinations
        )
    return combinations
