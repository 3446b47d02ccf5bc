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

"""Conversion of diff operations to and from flat records and JSON."""

# pylint: disable=unused-import
from diffscript._src.serialization import DeserializationError
from diffscript._src.serialization import dump_json
from diffscript._src.serialization import from_record
from diffscript._src.serialization import load_json
from diffscript._src.serialization import to_record
