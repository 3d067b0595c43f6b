import re
import math
from collections import Counter
from dataclasses import dataclass, field, replace
from pathlib import PurePosixPath
from typing import List, Union

import numpy as np

MAIN_SECTION = 'MAIN'
SECTION_KEY = '#cm'
# Keys allowed to repeat inside one section
REPEATING_KEYS = ('#ms',)

META_MARKERS = ('/*@Meta', '/*@meta')
BODY_END = '// Section'

# Binary data is not reproduced, generated presets end after the footer
FOOTER = ('\n\n\n\n'
          '// Section for ugly compressed binary Data\n'
          '// DON\'T TOUCH THIS\n\n')

NUMBER_RE = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')


class PresetParseError(ValueError):
    pass


@dataclass
class PresetMetaEntry:
    key: str
    value: Union[str, List[str]]


@dataclass
class PresetParam:
    id: str
    key: str
    section: str
    value: Union[str, int, float]
    index: int
    type: str = 'string'


@dataclass
class Preset:
    file_path: str
    preset_name: str
    meta: List[PresetMetaEntry] = field(default_factory=list)
    params: List[PresetParam] = field(default_factory=list)

    def clone(self):
        return Preset(
            file_path=self.file_path,
            preset_name=self.preset_name,
            meta=[PresetMetaEntry(entry.key, list(entry.value)
                                  if isinstance(entry.value, list)
                                  else entry.value)
                  for entry in self.meta],
            params=[replace(param) for param in self.params])


def parse_value(raw):
    """Returns (value, type) for a raw parameter value."""
    if NUMBER_RE.match(raw):
        number = float(raw)
        if math.isfinite(number):
            if number.is_integer():
                return (int(number), 'integer')
            return (number, 'float')
    return (raw, 'string')


def format_value(value):
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        # shortest round-trip digits, never exponent notation
        return np.format_float_positional(value, trim='-')
    return str(value)


def value_type(value):
    """Type a value gets when written and parsed again."""
    return parse_value(format_value(value))[1]


def parse_preset(text, file_path):
    return Preset(
        file_path=file_path,
        preset_name=PurePosixPath(file_path.replace('\\', '/')).stem,
        meta=get_preset_metadata(text),
        params=get_preset_params(text))


def get_preset_metadata(text):
    header = text.split('*/')[0]
    for marker in META_MARKERS:
        header = header.replace(marker, '', 1)
    rows = [row for row in header.splitlines() if row]
    if len(rows) % 2:
        raise PresetParseError(
            f'Metadata key {rows[-1]!r} has no value')

    meta = []
    for i in range(0, len(rows), 2):
        key = rows[i][:-1] if rows[i].endswith(':') else rows[i]
        value = rows[i + 1].replace("'", '')
        if ', ' in value:
            value = value.split(', ')
        meta.append(PresetMetaEntry(key, value))
    return meta


def get_preset_params(text):
    segments = text.split('*/')
    if len(segments) < 2 or BODY_END not in segments[1]:
        raise PresetParseError('Could not parse preset parameter body')
    body = segments[1].split(BODY_END)[0]
    if not body.strip():
        raise PresetParseError('Could not parse preset parameter body')

    params = []
    section = MAIN_SECTION
    rows = [row for row in body.splitlines() if row]
    for (index, row) in enumerate(rows):
        (key, _, raw) = row.partition('=')
        if key == SECTION_KEY:
            section = raw
        (value, value_type) = parse_value(raw)
        param_id = f'{section}/{key}'
        if key in REPEATING_KEYS:
            param_id += f'/{index}'
        params.append(PresetParam(id=param_id, key=key, section=section,
                                  value=value, index=index, type=value_type))
    return params


def find_duplicate_ids(preset):
    """Ids that occur more than once and would collide in a params model."""
    counts = Counter(param.id for param in preset.params)
    return [param_id for (param_id, count) in counts.items() if count > 1]


def serialize_preset(preset):
    out = ['/*@Meta\n\n']
    for entry in preset.meta:
        out.append(f'{entry.key}:\n')
        if isinstance(entry.value, list):
            out.append(f"'{', '.join(entry.value)}'\n\n")
        else:
            out.append(f"'{entry.value}'\n\n")
    out.append('*/\n\n')

    for param in preset.params:
        out.append(f'{param.key}={format_value(param.value)}\n')

    out.append(FOOTER)
    return ''.join(out)
