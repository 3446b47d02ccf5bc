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

"""Init file for the `diffscript` package."""

from diffscript._src.diff_ops import Addition
from diffscript._src.diff_ops import Deletion
from diffscript._src.diff_ops import DiffOperation
from diffscript._src.diff_ops import Movement
from diffscript._src.diff_ops import Update
from diffscript._src.diffing import apply_diff
from diffscript._src.diffing import diff
from diffscript._src.diffing import diff_from
from diffscript._src.equality import default_equals
from diffscript._src.equality import MISSING
from diffscript.version import __version__
