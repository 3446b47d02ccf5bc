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

"""Utility functions for tests that compare diffable values."""

from typing import Any, List, Tuple

from absl.testing import absltest
from diffscript._src import equality

# A path to a nested value: a tuple of list indices and mapping keys.
Path = Tuple[Any, ...]


def path_str(path: Path) -> str:
  """Returns a string like `[0]['a']` for `path`."""
  return ''.join(f'[{element!r}]' for element in path)


def describe_value_diffs(x: Any, y: Any) -> List[str]:
  """Returns a list of strings describing differences between x and y.

  Values are compared with `equality.default_equals`.  Where both values are
  mappings or sequences, the differences are reported for their children;
  otherwise the two values are reported as a whole.

  Args:
    x: A diffable value.
    y: A diffable value.
  """
  diffs = []

  def values_diff_message(x_val, y_val, path):
    """A message indicating that `x_val` != `y_val` at `path`."""
    path = path_str(path)
    x_repr = repr(x_val)
    y_repr = repr(y_val)
    if len(x_repr) + len(y_repr) + len(path) < 70:
      return f'* x{path}={x_repr} but y{path}={y_repr}'
    else:
      # For longer values, it's easier to spot differences if the two
      # values are displayed on separate lines.
      return f'* x{path}={x_repr} but\n  y{path}={y_repr}'

  def find_diffs(x_val, y_val, path):
    """Adds differences between `x_val` and `y_val` to `diffs`."""
    if equality.default_equals(x_val, y_val):
      return
    kind = equality.value_kind(x_val)
    if kind is not equality.value_kind(y_val):
      diffs.append(f'* type(x{path_str(path)}) != type(y{path_str(path)}): '
                   f'{type(x_val)} vs {type(y_val)}')
    elif kind is equality.ValueKind.MAPPING:
      for key in x_val:
        if key not in y_val:
          diffs.append(
              f'* x{path_str(path + (key,))} has a value but '
              f'y{path_str(path + (key,))} does not.')
        else:
          find_diffs(x_val[key], y_val[key], path + (key,))
      for key in y_val:
        if key not in x_val:
          diffs.append(
              f'* y{path_str(path + (key,))} has a value but '
              f'x{path_str(path + (key,))} does not.')
    elif kind is equality.ValueKind.SEQUENCE and len(x_val) == len(y_val):
      for i, (x_child, y_child) in enumerate(zip(x_val, y_val)):
        find_diffs(x_child, y_child, path + (i,))
    else:
      diffs.append(values_diff_message(x_val, y_val, path))

  find_diffs(x, y, ())
  return sorted(diffs)


class TestCase(absltest.TestCase):
  """Mixin class for absltest.TestCase, that adds assertValuesEqual method."""

  def assertValuesEqual(self, x, y):
    """Asserts that two values are equal under `equality.default_equals`.

    If they are not, raises `self.failureException` with a message describing
    the differences between `x` and `y`.

    Args:
      x: A diffable value.
      y: A diffable value.
    """
    if not equality.default_equals(x, y):
      diffs = describe_value_diffs(x, y) or [f'* x={x!r} but y={y!r}']
      raise self.failureException('x != y:\n' + '\n'.join(diffs))

  def assertValuesNotEqual(self, x, y):
    if equality.default_equals(x, y):
      raise self.failureException(f'Unexpectedly equal: {x!r} and {y!r}')


def restore_registries_after_test(test_case: absltest.TestCase) -> None:
  """Restores the `equality` registries once `test_case` finishes.

  Registrations are global; call this in `setUp` of tests that register
  types, comparators or absence sentinels, so they don't leak into other
  tests.

  Args:
    test_case: The running test case.
  """
  # pylint: disable=protected-access
  bool_types = set(equality._BOOL_TYPES)
  int_types = set(equality._INT_TYPES)
  float_tolerances = dict(equality._FLOAT_TOLERANCES)
  comparators = dict(equality._COMPARATORS)
  absent_value_ids = set(equality._ABSENT_VALUE_IDS)
  absent_values = list(equality._ABSENT_VALUES)

  def restore():
    equality._BOOL_TYPES.clear()
    equality._BOOL_TYPES.update(bool_types)
    equality._INT_TYPES.clear()
    equality._INT_TYPES.update(int_types)
    equality._FLOAT_TOLERANCES.clear()
    equality._FLOAT_TOLERANCES.update(float_tolerances)
    equality._COMPARATORS.clear()
    equality._COMPARATORS.update(comparators)
    equality._ABSENT_VALUE_IDS.clear()
    equality._ABSENT_VALUE_IDS.update(absent_value_ids)
    equality._ABSENT_VALUES[:] = absent_values

  test_case.addCleanup(restore)
