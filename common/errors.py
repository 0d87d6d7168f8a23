"""Exceptions raised by the range-query structures and the checks that raise them."""
import operator
from numbers import Integral
from typing import Any, Dict, Optional, Sequence, Sized

import numpy as np


class RangeQueryError(Exception):
    """Base exception for range-query structures"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]]=None) -> None:
        super().__init__(message)
        self.details = details or {}


class InvalidSize(RangeQueryError, ValueError):
    """Raised when a structure is constructed with a non-positive or non-integer size"""


class LengthMismatch(RangeQueryError, ValueError):
    """Raised when `build` receives a sequence of the wrong length"""


class IndexOutOfRange(RangeQueryError, IndexError):
    """Raised when an index is not an integer in [0, size) or a range has left > right"""


def check_size(size: int) -> int:
    if not isinstance(size, Integral) or size <= 0:
        raise InvalidSize(f'Size must be a positive integer, got {size!r}', {'size': size})
    return int(size)


def check_length(values: Sized, size: int) -> None:
    if len(values) != size:
        raise LengthMismatch(f'Expected {size} values, got {len(values)}',
                            {'expected': size, 'actual': len(values)})


def check_index(index: int, size: int) -> None:
    if not isinstance(index, Integral) or not 0 <= index < size:
        raise IndexOutOfRange(f'Index {index!r} is out of range [0, {size})',
                            {'index': index, 'size': size})


def check_range(left: int, right: int, size: int) -> None:
    """Validate an inclusive range [left, right]

    :param left: left boundary of the range
    :param right: right boundary of the range
    :param size: number of elements of the structure
    """
    check_index(left, size)
    check_index(right, size)
    if left > right:
        raise IndexOutOfRange(f'Invalid range [{left}, {right}]: left > right',
                            {'left': left, 'right': right, 'size': size})


def to_int64(value: int) -> np.int64:
    """Convert an element value to int64, raising TypeError for non-integers
    and OverflowError for integers that do not fit"""
    return np.int64(operator.index(value))


def to_int64_array(values: Sequence[int], size: int) -> np.ndarray:
    check_length(values, size)
    return np.array([to_int64(value) for value in values], dtype=np.int64)
