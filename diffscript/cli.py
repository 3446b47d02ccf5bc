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

r"""Command line tool that diffs or patches JSON documents.

Print the diff that transforms one JSON document into another:

```sh
diffscript --source=old.json --target=new.json > script.json
```

Apply a previously computed diff:

```sh
diffscript --source=old.json --script=script.json
```

Both documents must be JSON arrays, or both JSON objects.
"""

import json
from typing import Any, Sequence

from absl import app
from absl import flags
from diffscript._src import diffing
from diffscript._src import serialization

_SOURCE = flags.DEFINE_string(
    'source', None, 'JSON file with the document to diff or patch.')
_TARGET = flags.DEFINE_string(
    'target', None, 'JSON file with the document to diff against.')
_SCRIPT = flags.DEFINE_string(
    'script', None, 'JSON file with a diff to apply to the source document.')
_INDENT = flags.DEFINE_integer(
    'indent', 2, 'Indentation of the JSON output; negative for compact output.')


def _load_document(path: str) -> Any:
  with open(path, encoding='utf-8') as f:
    return json.load(f)


def _indent(indent: int):
  return indent if indent >= 0 else None


def diff_files(source_path: str, target_path: str, indent: int = 2) -> str:
  """Returns the JSON diff that transforms one JSON file into another."""
  ops = diffing.diff(_load_document(source_path), _load_document(target_path))
  return serialization.dump_json(ops, indent=_indent(indent))


def patch_file(source_path: str, script_path: str, indent: int = 2) -> str:
  """Returns the JSON document obtained by applying a JSON diff to a file."""
  with open(script_path, encoding='utf-8') as f:
    ops = serialization.load_json(f.read())
  patched = diffing.apply_diff(_load_document(source_path), ops)
  return json.dumps(patched, indent=_indent(indent))


def main(argv: Sequence[str]) -> None:
  if len(argv) > 1:
    raise app.UsageError(f'Unexpected CLI arguments: {argv[1:]!r}')
  if _SOURCE.value is None:
    raise app.UsageError('--source is required.')
  if (_TARGET.value is None) == (_SCRIPT.value is None):
    raise app.UsageError('Exactly one of --target or --script is required.')
  if _TARGET.value is not None:
    print(diff_files(_SOURCE.value, _TARGET.value, _INDENT.value))
  else:
    print(patch_file(_SOURCE.value, _SCRIPT.value, _INDENT.value))


def run():
  """Entry point for the `diffscript` console script."""
  app.run(main)


if __name__ == '__main__':
  run()
