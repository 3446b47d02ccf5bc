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

"""Diffs and patches for ordered sequences (lists and tuples)."""

from typing import Any, List, Optional, Sequence

from absl import logging
from diffscript._src import diff_ops
from diffscript._src import equality


def _find_match(working: List[Any], start: int, value: Any,
                equals: equality.Comparator) -> Optional[int]:
  """Returns the first index `i >= start` with `equals(value, working[i])`."""
  for i in range(start, len(working)):
    if equals(value, working[i]):
      return i
  return None


def diff_to(
    source: Sequence[Any],
    target: Sequence[Any],
    equals: equality.Comparator = equality.default_equals,
) -> List[diff_ops.DiffOperation]:
  """Returns a list of operations that transforms `source` into `target`.

  The diff is built greedily: a working copy of `source` is brought in line
  with `target` one position at a time.  For each position `j`, the leftmost
  element of the working copy at or after `j` that is equal to `target[j]` is
  moved to `j` (a `Movement`, or nothing if it is already there).  If there is
  no such element, `target[j]` is inserted (an `Addition`).  Finally, any
  surplus elements are removed from the end (`Deletion`s, highest position
  first).

  The result is deterministic but not necessarily the shortest possible
  diff.  Each operation's positions refer to the working copy as it is just
  before that operation is applied, so the operations must be applied in
  order (see `apply_diff`).

  Args:
    source: The sequence to transform.
    target: The sequence that `source` should be transformed into.
    equals: Comparator used to decide whether two elements are the same.

  Returns:
    A list of `Addition`, `Movement` and `Deletion` operations.
  """
  ops = []
  working = list(source)
  for j, target_value in enumerate(target):
    i = _find_match(working, j, target_value, equals)
    if i is None:
      working.insert(j, target_value)
      ops.append(diff_ops.Addition(j, target_value))
    elif i != j:
      working.insert(j, working.pop(i))
      ops.append(diff_ops.Movement(i, j))
  for k in range(len(working) - 1, len(target) - 1, -1):
    ops.append(diff_ops.Deletion(k))
  logging.debug('Sequence diff of %d -> %d elements has %d operation(s).',
                len(source), len(target), len(ops))
  return ops


def diff_from(
    current: Sequence[Any],
    other: Sequence[Any],
    equals: equality.Comparator = equality.default_equals,
) -> List[diff_ops.DiffOperation]:
  """Returns a list of operations that transforms `other` into `current`.

  This recomputes the diff in the opposite direction; it is not the inverse
  of `diff_to(current, other)`.
  """
  return diff_to(other, current, equals)


def apply_diff(source: Sequence[Any],
               ops: Sequence[diff_ops.DiffOperation]) -> Sequence[Any]:
  """Applies `ops` to a copy of `source`, and returns the result.

  Args:
    source: The sequence to patch.  It is not modified.
    ops: Operations, typically returned by `diff_to(source, target)`.  They
      are applied in order.

  Returns:
    The patched sequence: a tuple if `source` is a tuple, otherwise a list.

  Raises:
    OperationOutOfRangeError: If an operation refers to a position that does
      not exist in the working copy.
    UnsupportedOperationError: If `ops` contains an `Update`.
  """
  working = equality.deepcopy_value(list(source))
  for step, op in enumerate(ops):
    try:
      op.apply_to_sequence(working)
    except diff_ops.DiffApplicationError as e:
      raise type(e)(f'Failed to apply operation #{step}: {e}') from e
  if isinstance(source, tuple):
    return tuple(working)
  return working
