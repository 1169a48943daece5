"""Monotonic order checks for knot vectors."""

from __future__ import annotations

from enum import Enum

import torch
from torch import Tensor

from ._internal_invariant_error import InternalInvariantError
from ._not_monotonic_error import (
    NotMonotonicError,
    NotStrictlyIncreasingError,
)


class OrderDirection(Enum):
    """Direction of a monotonic order."""

    INCREASING = "increasing"
    DECREASING = "decreasing"


def check_order(
    values: Tensor,
    direction: OrderDirection = OrderDirection.INCREASING,
    strict: bool = True,
    abort: bool = False,
) -> bool:
    """
    Check that a 1-D sequence is monotonic in the given direction.

    Parameters
    ----------
    values : Tensor
        Sequence to check, shape (n,). Anything accepted by
        ``torch.as_tensor`` works.
    direction : OrderDirection
        Required direction of the order.
    strict : bool
        If True, consecutive values must not be equal.
    abort : bool
        If True, raise instead of returning False.

    Returns
    -------
    bool
        True if ``values`` is ordered, False otherwise (only when
        ``abort`` is False).

    Raises
    ------
    NotStrictlyIncreasingError
        If ``abort`` is set, ``direction`` is increasing, ``strict`` is set
        and the order is violated.
    NotMonotonicError
        If ``abort`` is set and the order is violated in any other mode.
    InternalInvariantError
        If ``direction`` is not an ``OrderDirection`` member.

    Notes
    -----
    Sequences with fewer than two elements are always ordered. A NaN
    entry fails every comparison and therefore breaks the order.
    """
    v = torch.as_tensor(values)
    if v.dim() != 1:
        raise ValueError(f"Expected a 1-D sequence, got shape {tuple(v.shape)}")

    previous = v[:-1]
    current = v[1:]

    if direction is OrderDirection.INCREASING:
        ordered = current > previous if strict else current >= previous
    elif direction is OrderDirection.DECREASING:
        ordered = current < previous if strict else current <= previous
    else:
        raise InternalInvariantError(f"Unknown order direction: {direction!r}")

    if bool(torch.all(ordered)):
        return True

    if not abort:
        return False

    # Index of the first element that breaks the order
    index = int(torch.nonzero(~ordered)[0]) + 1
    message = (
        f"Sequence is not {'strictly ' if strict else ''}"
        f"{direction.value} at index {index}: "
        f"{v[index - 1].item()} followed by {v[index].item()}"
    )
    if direction is OrderDirection.INCREASING and strict:
        raise NotStrictlyIncreasingError(message)
    raise NotMonotonicError(message)
