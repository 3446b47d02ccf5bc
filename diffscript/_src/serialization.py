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

"""Conversion of diff operations to and from flat records.

Each operation is represented as a dict with a `"type"` discriminator and the
operation's fields, using camelCase field names:

    {"type": "addition", "key": 0, "value": ...}
    {"type": "deletion", "key": 0}
    {"type": "update", "key": "a", "newValue": ...}
    {"type": "movement", "oldKey": 2, "newKey": 0}

Values are stored as-is, so `dump_json` requires them to be JSON-serializable.
"""

import collections.abc
import json
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type

from absl import logging
from diffscript._src import diff_ops


class DeserializationError(ValueError):
  """Indicates that a serialized diff could not be decoded."""


_OperationSpec = Tuple[Type[diff_ops.DiffOperation], Tuple[str, ...]]

# Maps each record type to its operation class and the record fields that
# hold the operation's constructor arguments (in order).
_OPERATION_TYPES: Dict[str, _OperationSpec] = {
    'update': (diff_ops.Update, ('key', 'newValue')),
    'addition': (diff_ops.Addition, ('key', 'value')),
    'deletion': (diff_ops.Deletion, ('key',)),
    'movement': (diff_ops.Movement, ('oldKey', 'newKey')),
}


def to_record(op: diff_ops.DiffOperation) -> Dict[str, Any]:
  """Returns the flat record for `op`."""
  if isinstance(op, diff_ops.Update):
    return {'type': 'update', 'key': op.key, 'newValue': op.new_value}
  elif isinstance(op, diff_ops.Addition):
    return {'type': 'addition', 'key': op.key, 'value': op.value}
  elif isinstance(op, diff_ops.Deletion):
    return {'type': 'deletion', 'key': op.key}
  elif isinstance(op, diff_ops.Movement):
    return {'type': 'movement', 'oldKey': op.old_key, 'newKey': op.new_key}
  else:
    raise TypeError(f'Unsupported diff operation: {op!r}')


def from_record(record: Any) -> Optional[diff_ops.DiffOperation]:
  """Returns the operation described by `record`, or `None` if it is invalid.

  A record is invalid if it is not a mapping, if its `"type"` is missing or
  unrecognized, or if it lacks one of the fields required for its type.  A
  field that is present with a `None` value counts as present.

  Args:
    record: A record, as returned by `to_record` (or parsed from JSON).
  """
  if not isinstance(record, collections.abc.Mapping):
    logging.debug('Ignoring diff record that is not a mapping: %r', record)
    return None
  op_type = record.get('type')
  if not isinstance(op_type, str) or op_type not in _OPERATION_TYPES:
    logging.debug('Ignoring diff record with unknown type: %r', record)
    return None
  op_cls, field_names = _OPERATION_TYPES[op_type]
  missing = [name for name in field_names if name not in record]
  if missing:
    logging.debug('Ignoring %s record without %s: %r', op_type,
                  ', '.join(missing), record)
    return None
  return op_cls(*(record[name] for name in field_names))


def dump_json(ops: Sequence[diff_ops.DiffOperation], **kwargs) -> str:
  """Returns `ops` as a JSON array of records.

  Args:
    ops: The diff to serialize.
    **kwargs: Passed through to `json.dumps` (e.g. `indent`).
  """
  return json.dumps([to_record(op) for op in ops], **kwargs)


def load_json(serialized: str) -> List[diff_ops.DiffOperation]:
  """Returns the diff encoded in `serialized` (see `dump_json`).

  Raises:
    DeserializationError: If `serialized` is not a JSON array, or if any of
      its records is invalid.  A diff is never partially decoded, since
      applying part of a sequence diff would give a meaningless result.
  """
  try:
    records = json.loads(serialized)
  except json.JSONDecodeError as e:
    raise DeserializationError(f'Invalid JSON for a diff: {e}') from e
  if not isinstance(records, list):
    raise DeserializationError(
        f'Expected a JSON array of diff records, got {type(records).__name__}.')
  ops = []
  for i, record in enumerate(records):
    op = from_record(record)
    if op is None:
      raise DeserializationError(
          f'Invalid diff record at index {i}: {record!r}')
    ops.append(op)
  return ops
