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

"""Operations that make up a diff: Addition, Deletion, Update, Movement."""

# pylint: disable=unused-import
from diffscript._src.diff_ops import Addition
from diffscript._src.diff_ops import Deletion
from diffscript._src.diff_ops import DiffApplicationError
from diffscript._src.diff_ops import DiffOperation
from diffscript._src.diff_ops import MissingKeyError
from diffscript._src.diff_ops import Movement
from diffscript._src.diff_ops import OperationOutOfRangeError
from diffscript._src.diff_ops import Update
from diffscript._src.diff_ops import UnsupportedOperationError
