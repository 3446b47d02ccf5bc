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

"""Diffscript extensions to compare numpy values.

After `enable()`, numpy scalars are compared by kind like their Python
counterparts: `np.float32` and `np.float16` are single precision floats,
`np.float64` is a double precision float, numpy integers are integers, and
`np.bool_` is a boolean.  Arrays are compared with `np.array_equal`.
"""

from diffscript._src import equality
import numpy as np

_single_precision_types = (np.float16, np.float32)

_double_precision_types = (np.float64,)

_int_types = (
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
)


def arrays_equal(a: np.ndarray, b: np.ndarray) -> bool:
  """Returns true if `a` and `b` have the same shape and elements."""
  return bool(np.array_equal(a, b))


def enable():
  """Registers numpy types with `diffscript.equality`."""
  for float_type in _single_precision_types:
    equality.register_float_type(float_type,
                                 equality.SINGLE_PRECISION_TOLERANCE)
  for float_type in _double_precision_types:
    equality.register_float_type(float_type,
                                 equality.DOUBLE_PRECISION_TOLERANCE)
  for int_type in _int_types:
    equality.register_int_type(int_type)
  equality.register_bool_type(np.bool_)
  equality.register_comparator(np.ndarray, arrays_equal)
