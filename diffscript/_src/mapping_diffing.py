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

"""Diffs and patches for keyed mappings."""

from typing import Any, Dict, Iterable, List, Mapping

from absl import logging
from diffscript._src import diff_ops
from diffscript._src import equality


def diff_to(
    source: Mapping[Any, Any],
    target: Mapping[Any, Any],
    equals: equality.Comparator = equality.default_equals,
) -> List[diff_ops.DiffOperation]:
  """Returns a list of operations that transforms `source` into `target`.

  * Keys only in `source` yield `Deletion(key)`.
  * Keys only in `target` yield `Addition(key, target[key])`.
  * Keys in both whose values are not `equals` yield
    `Update(key, target[key])`.

  The operations are independent of one another, and may be applied in any
  order.  Callers should not rely on the order in which they are returned.

  Args:
    source: The mapping to transform.
    target: The mapping that `source` should be transformed into.
    equals: Comparator used to decide whether two values are the same.

  Returns:
    A list of `Deletion`, `Update` and `Addition` operations.
  """
  ops = []
  for key, value in source.items():
    if key not in target:
      ops.append(diff_ops.Deletion(key))
    elif not equals(value, target[key]):
      ops.append(diff_ops.Update(key, target[key]))
  for key, value in target.items():
    if key not in source:
      ops.append(diff_ops.Addition(key, value))
  logging.debug('Mapping diff of %d -> %d keys has %d operation(s).',
                len(source), len(target), len(ops))
  return ops


def diff_from(
    current: Mapping[Any, Any],
    other: Mapping[Any, Any],
    equals: equality.Comparator = equality.default_equals,
) -> List[diff_ops.DiffOperation]:
  """Returns a list of operations that transforms `other` into `current`."""
  return diff_to(other, current, equals)


def apply_diff(source: Mapping[Any, Any],
               ops: Iterable[diff_ops.DiffOperation]) -> Dict[Any, Any]:
  """Applies `ops` to a copy of `source`, and returns the result.

  `Addition` and `Update` both set the key's value; `Deletion` removes it.

  Raises:
    MissingKeyError: If a `Deletion` names a key that is not present.
    UnsupportedOperationError: If `ops` contains a `Movement`.
  """
  result = equality.deepcopy_value(dict(source))
  for step, op in enumerate(ops):
    try:
      op.apply_to_mapping(result)
    except diff_ops.DiffApplicationError as e:
      raise type(e)(f'Failed to apply operation #{step}: {e}') from e
  return result
