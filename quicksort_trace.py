"""
Quicksort step trace.

generate_trace(values) runs a Lomuto-partition quicksort (last element as pivot,
left sub-range before right) on a private copy of `values` and records a Step at
every observable event:

    pivot chosen      pivot_index=high
    comparison        pivot_index=high, comparing_indices=(j, high)   before the swap decision
    swap              same metadata as the comparison, array after the swap
    partition done    pivot_index=<pivot's final slot>

The first step is the untouched input, the last one the sorted array; neither
carries metadata. The whole trace is built before it is returned.
"""

import logging
from dataclasses import dataclass

from arrays_common import validate_values

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Step:
    """One snapshot of the array plus the partition metadata at that moment."""

    values: tuple
    pivot_index: int | None = None
    comparing_indices: tuple | None = None

    def to_dict(self) -> dict:
        """Renderer-facing form; absent metadata is left out."""
        d = {"values": list(self.values)}
        if self.pivot_index is not None:
            d["pivotIndex"] = self.pivot_index
        if self.comparing_indices is not None:
            d["comparingIndices"] = list(self.comparing_indices)
        return d


def is_sorted(values) -> bool:
    return all(values[k] <= values[k + 1] for k in range(len(values) - 1))


def _emit(steps, arr, pivot_index=None, comparing=None):
    # tuple(arr) snapshots the working buffer; identical consecutive steps are dropped
    step = Step(tuple(arr), pivot_index, comparing)
    if steps and steps[-1] == step:
        return
    steps.append(step)


def _partition(arr, lo, hi, steps) -> int:
    pivot = arr[hi]
    _emit(steps, arr, hi)
    i = lo - 1
    for j in range(lo, hi):
        cmp = (j, hi)
        _emit(steps, arr, hi, cmp)
        if arr[j] <= pivot:
            i += 1
            if i != j:
                arr[i], arr[j] = arr[j], arr[i]
                _emit(steps, arr, hi, cmp)
    arr[i + 1], arr[hi] = arr[hi], arr[i + 1]
    _emit(steps, arr, i + 1)
    return i + 1


def _quick(arr, lo, hi, steps):
    if hi - lo < 1:
        return
    p = _partition(arr, lo, hi, steps)
    _quick(arr, lo, p - 1, steps)
    _quick(arr, p + 1, hi, steps)


def generate_trace(values) -> list:
    """
    Return the list of Steps quicksort goes through when sorting `values`.

    `values` is not modified. Raises TypeError / ValueError (from
    arrays_common.validate_values) for non-numeric or non-finite elements.
    """
    arr = validate_values(values)
    steps = [Step(tuple(arr))]
    _quick(arr, 0, len(arr) - 1, steps)
    _emit(steps, arr)
    logger.debug("quicksort trace: %d values -> %d steps", len(arr), len(steps))
    return steps
