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

"""Deep, type-aware equality for diffable values.

Diffable values are built from a closed set of kinds (see `ValueKind`):
`None`, booleans, integers, floats, strings, sequences (`list` and `tuple`),
mappings, and "opaque" values (anything else).  `default_equals` compares two
such values recursively, and is the comparator used by default whenever two
collections are diffed.

The set of types that fall into each kind can be extended with the
`register_*` functions in this module (see `diffscript.extensions.numpy` for
an example).  Registration is expected to happen at start-up; the registries
are only read while comparing values.
"""

import collections.abc
import copy
import enum
from typing import Any, Callable, Dict, Optional, Set, Type

from absl import logging

# Signature for comparators: `comparator(a, b) -> bool`.
Comparator = Callable[[Any, Any], bool]

DOUBLE_PRECISION_TOLERANCE = 1e-9
SINGLE_PRECISION_TOLERANCE = 1e-6


class Missing:
  """Sentinel class for values that are absent.

  `MISSING` compares equal to `None` (and to itself) under `default_equals`.
  """

  def __repr__(self):
    return 'diffscript.MISSING'

  def __deepcopy__(self, memo):
    """Override for deepcopy that does not copy this sentinel object."""
    del memo
    return self

  def __copy__(self):
    """Override for `copy.copy()` that does not copy this sentinel object."""
    return self


MISSING = Missing()


class ValueKind(enum.Enum):
  """The kinds of values that `default_equals` knows how to compare."""
  NULL = 'null'
  BOOLEAN = 'boolean'
  INTEGER = 'integer'
  FLOAT = 'float'
  TEXT = 'text'
  SEQUENCE = 'sequence'
  MAPPING = 'mapping'
  OPAQUE = 'opaque'


_BOOL_TYPES: Set[Type[Any]] = {bool}
_INT_TYPES: Set[Type[Any]] = {int}
_FLOAT_TOLERANCES: Dict[Type[Any], float] = {float: DOUBLE_PRECISION_TOLERANCE}
_COMPARATORS: Dict[Type[Any], Comparator] = {}
_ABSENT_VALUE_IDS: Set[int] = {id(MISSING)}
# Keeps registered sentinels alive, so their ids can't be reused.
_ABSENT_VALUES = [MISSING]


def register_bool_type(bool_type: Type[Any]) -> None:
  """Registers `bool_type` (and its subclasses) as booleans."""
  _BOOL_TYPES.add(bool_type)


def register_int_type(int_type: Type[Any]) -> None:
  """Registers `int_type` (and its subclasses) as integers."""
  _INT_TYPES.add(int_type)


def register_float_type(float_type: Type[Any], tolerance: float) -> None:
  """Registers `float_type` as a float kind compared with `tolerance`.

  Two floats are equal if their absolute difference is strictly less than
  the tolerance.  When floats of two different registered types are compared,
  the larger (looser) of their tolerances is used.

  Args:
    float_type: The type to register.  Subclasses of `float_type` that are
      not registered themselves use the same tolerance.
    tolerance: A positive absolute tolerance.

  Raises:
    ValueError: If `tolerance` is not positive.
  """
  if tolerance <= 0:
    raise ValueError(f'Expected a positive tolerance, got {tolerance!r}.')
  previous = _FLOAT_TOLERANCES.get(float_type)
  if previous is not None and previous != tolerance:
    logging.warning(
        'Changing the tolerance for %s from %s to %s.',
        float_type,
        previous,
        tolerance,
    )
  _FLOAT_TOLERANCES[float_type] = tolerance


def register_comparator(value_type: Type[Any], comparator: Comparator) -> None:
  """Registers a comparator for opaque values of type `value_type`.

  The comparator is only consulted when both values have exactly the same
  type, and that type is `value_type` or one of its subclasses.

  Args:
    value_type: The type of opaque value handled by `comparator`.
    comparator: A function `(a, b) -> bool`.
  """
  _COMPARATORS[value_type] = comparator


def register_absent_value(sentinel: Any) -> None:
  """Registers `sentinel` as a marker for absent values (treated as `None`)."""
  if id(sentinel) not in _ABSENT_VALUE_IDS:
    _ABSENT_VALUE_IDS.add(id(sentinel))
    _ABSENT_VALUES.append(sentinel)


def _find_registered(value_type: Type[Any], registry) -> Optional[Type[Any]]:
  """Returns the first class in `value_type.__mro__` found in `registry`."""
  for cls in value_type.__mro__:
    if cls in registry:
      return cls
  return None


def unwrap_absent(value: Any) -> Any:
  """Returns `None` if `value` is a registered absence sentinel."""
  return None if id(value) in _ABSENT_VALUE_IDS else value


def deepcopy_value(value: Any) -> Any:
  """Returns a deep copy of `value` that keeps absence sentinels as-is.

  Sentinels are recognized by identity, so copying one would turn it into an
  opaque value.
  """
  memo = {id(sentinel): sentinel for sentinel in _ABSENT_VALUES}
  return copy.deepcopy(value, memo)


def value_kind(value: Any) -> ValueKind:
  """Returns the `ValueKind` for `value`."""
  value = unwrap_absent(value)
  if value is None:
    return ValueKind.NULL
  value_type = type(value)
  # Booleans are checked first, since `bool` is a subclass of `int`.
  if _find_registered(value_type, _BOOL_TYPES) is not None:
    return ValueKind.BOOLEAN
  if _find_registered(value_type, _INT_TYPES) is not None:
    return ValueKind.INTEGER
  if _find_registered(value_type, _FLOAT_TOLERANCES) is not None:
    return ValueKind.FLOAT
  if isinstance(value, str):
    return ValueKind.TEXT
  if isinstance(value, (list, tuple)):
    return ValueKind.SEQUENCE
  if isinstance(value, collections.abc.Mapping):
    return ValueKind.MAPPING
  return ValueKind.OPAQUE


def float_tolerance(value: Any) -> float:
  """Returns the absolute tolerance used to compare the float `value`."""
  float_type = _find_registered(type(value), _FLOAT_TOLERANCES)
  if float_type is None:
    raise TypeError(f'{value!r} is not a registered float type.')
  return _FLOAT_TOLERANCES[float_type]


def _floats_equal(a, b) -> bool:
  if a == b:  # Handles infinities, which have no finite difference.
    return True
  tolerance = max(float_tolerance(a), float_tolerance(b))
  return abs(float(a) - float(b)) < tolerance


def _opaque_equal(a, b) -> bool:
  """Compares two opaque values, which must have exactly the same type."""
  if type(a) is not type(b):
    return False
  comparator_type = _find_registered(type(a), _COMPARATORS)
  try:
    if comparator_type is not None:
      return bool(_COMPARATORS[comparator_type](a, b))
    return bool(a == b)
  except Exception:  # pylint: disable=broad-except
    logging.warning(
        'Comparing values of type %s raised an exception; treating them as '
        'unequal.',
        type(a),
        exc_info=True,
    )
    return False


def default_equals(a: Any, b: Any) -> bool:
  """Returns true if `a` and `b` are deeply equal.

  Values are compared by kind (see `ValueKind`).  Values of different kinds
  are never equal; in particular `True != 1` and `1 != 1.0`.  Floats are
  compared with an absolute tolerance (1e-9 for Python floats, 1e-6 for single
  precision floats registered with `register_float_type`).  Sequences and
  mappings are compared recursively.  Opaque values are equal only if they
  have the same type and compare equal with `==` (or a registered comparator).

  This function never raises.

  Args:
    a: The first value.
    b: The second value.

  Returns:
    Whether `a` and `b` should be treated as the same value.
  """
  a = unwrap_absent(a)
  b = unwrap_absent(b)
  kind = value_kind(a)
  if kind is not value_kind(b):
    return False

  if kind is ValueKind.NULL:
    return True
  elif kind is ValueKind.MAPPING:
    if set(a.keys()) != set(b.keys()):
      return False
    # Keys like `1` and `True` hash alike; they must also be of the same kind.
    b_keys = {key: key for key in b.keys()}
    if any(value_kind(key) is not value_kind(b_keys[key]) for key in a):
      return False
    return all(default_equals(a[key], b[key]) for key in a)
  elif kind is ValueKind.SEQUENCE:
    if len(a) != len(b):
      return False
    return all(default_equals(x, y) for x, y in zip(a, b))
  elif kind is ValueKind.TEXT:
    return a == b
  elif kind is ValueKind.BOOLEAN:
    return bool(a) == bool(b)
  elif kind is ValueKind.INTEGER:
    return int(a) == int(b)
  elif kind is ValueKind.FLOAT:
    return _floats_equal(a, b)
  else:
    return _opaque_equal(a, b)
