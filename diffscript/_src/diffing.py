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

"""Entry points that diff or patch either sequences or mappings.

These pick `sequence_diffing` or `mapping_diffing` based on the kind of the
source collection.
"""

import collections.abc
from typing import Any, List, Sequence

from diffscript._src import diff_ops
from diffscript._src import equality
from diffscript._src import mapping_diffing
from diffscript._src import sequence_diffing


def _collection_module(value: Any):
  if isinstance(value, collections.abc.Mapping):
    return mapping_diffing
  elif isinstance(value, (list, tuple)):
    return sequence_diffing
  else:
    raise TypeError(
        'Expected a mapping, list or tuple; got value of type '
        f'{type(value).__name__}: {value!r}')


def diff(
    source: Any,
    target: Any,
    equals: equality.Comparator = equality.default_equals,
) -> List[diff_ops.DiffOperation]:
  """Returns the operations that transform `source` into `target`.

  Args:
    source: A mapping, list or tuple.
    target: A collection of the same kind as `source` (lists and tuples are
      interchangeable).
    equals: Comparator used to decide whether two values are the same.

  Raises:
    TypeError: If `source` and `target` are not collections of the same kind.
  """
  module = _collection_module(source)
  if _collection_module(target) is not module:
    raise TypeError(
        f'Can not diff a {type(source).__name__} against a '
        f'{type(target).__name__}.')
  return module.diff_to(source, target, equals)


def diff_from(
    current: Any,
    other: Any,
    equals: equality.Comparator = equality.default_equals,
) -> List[diff_ops.DiffOperation]:
  """Returns the operations that transform `other` into `current`."""
  return diff(other, current, equals)


def apply_diff(source: Any, ops: Sequence[diff_ops.DiffOperation]) -> Any:
  """Returns a patched copy of `source`; see `sequence_diffing.apply_diff`."""
  return _collection_module(source).apply_diff(source, ops)
