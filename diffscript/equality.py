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

"""Deep, type-aware equality used to compare diffable values."""

# pylint: disable=unused-import
from diffscript._src.equality import Comparator
from diffscript._src.equality import deepcopy_value
from diffscript._src.equality import default_equals
from diffscript._src.equality import DOUBLE_PRECISION_TOLERANCE
from diffscript._src.equality import float_tolerance
from diffscript._src.equality import MISSING
from diffscript._src.equality import Missing
from diffscript._src.equality import register_absent_value
from diffscript._src.equality import register_bool_type
from diffscript._src.equality import register_comparator
from diffscript._src.equality import register_float_type
from diffscript._src.equality import register_int_type
from diffscript._src.equality import SINGLE_PRECISION_TOLERANCE
from diffscript._src.equality import unwrap_absent
from diffscript._src.equality import value_kind
from diffscript._src.equality import ValueKind
