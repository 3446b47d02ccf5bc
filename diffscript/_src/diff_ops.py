# coding=utf-8
# Copyright 2026 The Diffscript Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Operations that make up a diff (an edit script).

A diff is a list of `DiffOperation`s.  There are exactly four operations:

* `Addition(key, value)`: inserts (sequence) or sets (mapping) `value`.
* `Deletion(key)`: removes the element at `key`.
* `Update(key, new_value)`: replaces the value at `key`.  Mappings only.
* `Movement(old_key, new_key)`: relocates an element.  Sequences only.

For sequences, keys are positions in the working copy *at the time the
operation is applied*, so the operations must be applied in order.  For
mappings, keys are the mapping's own keys, and operations are independent.
"""

import abc
import dataclasses
import operator
from typing import Any, Dict, List

from diffscript._src import equality


class DiffApplicationError(Exception):
  """Base class for errors raised when a diff doesn't fit its source."""


class OperationOutOfRangeError(DiffApplicationError, IndexError):
  """A sequence position is outside of the working copy."""


class MissingKeyError(DiffApplicationError, KeyError):
  """A mapping key that should be removed is not present."""

  def __str__(self):
    # KeyError.__str__ quotes its argument; keep the message readable.
    return str(self.args[0]) if self.args else ''


class UnsupportedOperationError(DiffApplicationError, ValueError):
  """An operation was applied to a kind of collection that doesn't support it."""


def _position(op: 'DiffOperation', position: Any, length: int) -> int:
  """Checks that `0 <= position < length` and returns it as an `int`."""
  if isinstance(position, bool):
    raise OperationOutOfRangeError(
        f'{op!r}: expected an integer position, got {position!r}.')
  try:
    index = operator.index(position)
  except TypeError:
    raise OperationOutOfRangeError(
        f'{op!r}: expected an integer position, got {position!r}.') from None
  if not 0 <= index < length:
    raise OperationOutOfRangeError(
        f'{op!r}: position {index} is out of range (expected 0 <= position < '
        f'{length}).')
  return index


class DiffOperation(metaclass=abc.ABCMeta):
  """Base class for diff operations.

  Each `DiffOperation` describes a single change to a working copy of the
  collection being patched.
  """

  @abc.abstractmethod
  def apply_to_sequence(self, working: List[Any]) -> None:
    """Applies this operation to the list `working`, in place."""
    raise NotImplementedError()

  @abc.abstractmethod
  def apply_to_mapping(self, working: Dict[Any, Any]) -> None:
    """Applies this operation to the dict `working`, in place."""
    raise NotImplementedError()


@dataclasses.dataclass(frozen=True)
class Addition(DiffOperation):
  """Inserts `value` at position `key`, or sets `working[key] = value`."""
  key: Any
  value: Any

  def apply_to_sequence(self, working: List[Any]) -> None:
    index = _position(self, self.key, len(working) + 1)
    working.insert(index, equality.deepcopy_value(self.value))

  def apply_to_mapping(self, working: Dict[Any, Any]) -> None:
    working[self.key] = equality.deepcopy_value(self.value)


@dataclasses.dataclass(frozen=True)
class Deletion(DiffOperation):
  """Removes the element at position or key `key`."""
  key: Any

  def apply_to_sequence(self, working: List[Any]) -> None:
    del working[_position(self, self.key, len(working))]

  def apply_to_mapping(self, working: Dict[Any, Any]) -> None:
    if self.key not in working:
      raise MissingKeyError(f'{self!r}: key {self.key!r} is not present.')
    del working[self.key]


@dataclasses.dataclass(frozen=True)
class Update(DiffOperation):
  """Replaces the value for `key` with `new_value`.  Mappings only."""
  key: Any
  new_value: Any

  def apply_to_sequence(self, working: List[Any]) -> None:
    raise UnsupportedOperationError(
        f'{self!r}: Update is not supported for sequences.')

  def apply_to_mapping(self, working: Dict[Any, Any]) -> None:
    working[self.key] = equality.deepcopy_value(self.new_value)


@dataclasses.dataclass(frozen=True)
class Movement(DiffOperation):
  """Moves the element at `old_key` to `new_key`.  Sequences only.

  `new_key` is the element's position after the move (i.e., after it has
  been removed from `old_key`).
  """
  old_key: Any
  new_key: Any

  def apply_to_sequence(self, working: List[Any]) -> None:
    old_index = _position(self, self.old_key, len(working))
    new_index = _position(self, self.new_key, len(working))
    working.insert(new_index, working.pop(old_index))

  def apply_to_mapping(self, working: Dict[Any, Any]) -> None:
    raise UnsupportedOperationError(
        f'{self!r}: Movement is not supported for mappings.')
