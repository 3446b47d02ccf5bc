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

"""Tests for mapping_diffing."""

import itertools
import random

from absl.testing import absltest
from absl.testing import parameterized
from diffscript._src import diff_ops
from diffscript._src import equality
from diffscript._src import mapping_diffing
from diffscript.testing import nested_values
from diffscript.testing import test_util


class Absent:
  pass


def _random_mapping(rng: random.Random, max_size: int = 6):
  keys = rng.sample(range(10), rng.randint(0, max_size))
  return {key: nested_values.generate_nested_value(rng, max_depth=2)
          for key in keys}


class MappingDiffTest(test_util.TestCase, parameterized.TestCase):

  def test_deletion_update_and_addition(self):
    source = {'a': 1, 'b': 2}
    target = {'b': 3, 'c': 4}
    ops = mapping_diffing.diff_to(source, target)
    self.assertCountEqual(ops, [
        diff_ops.Deletion('a'),
        diff_ops.Update('b', 3),
        diff_ops.Addition('c', 4),
    ])
    for permutation in itertools.permutations(ops):
      self.assertEqual(mapping_diffing.apply_diff(source, permutation), target)

  @parameterized.parameters([
      ({},),
      ({'a': 1},),
      ({'a': [1, {'b': None}], 'c': (2.5, 'x')},),
  ])
  def test_identical_mappings_have_empty_diff(self, value):
    self.assertEqual(mapping_diffing.diff_to(value, dict(value)), [])

  def test_values_compared_with_default_equals(self):
    ops = mapping_diffing.diff_to({'a': 1, 'b': 0.5}, {'a': True, 'b': 0.5})
    self.assertEqual(ops, [diff_ops.Update('a', True)])

  def test_none_values_are_present(self):
    ops = mapping_diffing.diff_to({'a': None}, {})
    self.assertEqual(ops, [diff_ops.Deletion('a')])
    ops = mapping_diffing.diff_to({}, {'a': None})
    self.assertEqual(ops, [diff_ops.Addition('a', None)])

  def test_custom_comparator(self):
    ops = mapping_diffing.diff_to(
        {'a': 'X', 'b': 'y'}, {'a': 'x', 'b': 'z'},
        equals=lambda a, b: a.lower() == b.lower())
    self.assertEqual(ops, [diff_ops.Update('b', 'z')])

  def test_comparator_argument_order(self):
    calls = []

    def equals(a, b):
      calls.append((a, b))
      return False

    mapping_diffing.diff_to({'k': 'source'}, {'k': 'target'}, equals=equals)
    self.assertEqual(calls, [('source', 'target')])

  def test_diff_from_is_reverse_direction(self):
    ops = mapping_diffing.diff_from({'a': 1}, {'b': 2})
    self.assertCountEqual(ops, [diff_ops.Deletion('b'),
                                diff_ops.Addition('a', 1)])

  def test_apply_does_not_mutate_source(self):
    source = {'a': [1]}
    result = mapping_diffing.apply_diff(source, [diff_ops.Addition('b', 2)])
    result['a'].append(2)
    self.assertEqual(source, {'a': [1]})
    self.assertEqual(result, {'a': [1, 2], 'b': 2})

  def test_apply_mismatched_source_fails(self):
    with self.assertRaisesRegex(diff_ops.MissingKeyError, 'operation #1'):
      mapping_diffing.apply_diff(
          {'a': 1}, [diff_ops.Deletion('a'), diff_ops.Deletion('b')])

  def test_apply_movement_fails(self):
    with self.assertRaises(diff_ops.UnsupportedOperationError):
      mapping_diffing.apply_diff({'a': 1}, [diff_ops.Movement('a', 'b')])

  def test_round_trip_keeps_registered_absent_values(self):
    test_util.restore_registries_after_test(self)
    absent = Absent()
    equality.register_absent_value(absent)
    source = {'a': 1, 'b': absent}
    target = {'a': absent, 'b': absent, 'c': absent}
    ops = mapping_diffing.diff_to(source, target)
    self.assertCountEqual(ops, [diff_ops.Update('a', absent),
                                diff_ops.Addition('c', absent)])
    result = mapping_diffing.apply_diff(source, ops)
    self.assertValuesEqual(result, target)
    for key in target:
      self.assertIs(result[key], absent)

  @parameterized.parameters(range(20))
  def test_round_trip(self, seed):
    rng = random.Random(seed)
    source = _random_mapping(rng)
    target = _random_mapping(rng)
    ops = mapping_diffing.diff_to(source, target)
    self.assertValuesEqual(mapping_diffing.apply_diff(source, ops), target)
    self.assertEqual(mapping_diffing.diff_to(source, source), [])

  @parameterized.parameters(range(10))
  def test_operations_commute(self, seed):
    rng = random.Random(seed)
    source = _random_mapping(rng)
    target = _random_mapping(rng)
    ops = mapping_diffing.diff_to(source, target)
    expected = mapping_diffing.apply_diff(source, ops)
    for _ in range(5):
      shuffled = list(ops)
      rng.shuffle(shuffled)
      self.assertEqual(mapping_diffing.apply_diff(source, shuffled), expected)


if __name__ == '__main__':
  absltest.main()
