"""Shared fixtures: small hand-written presets in the u-he text layout."""

import random

import pytest

from presetlib.library import PresetLibrary
from presetlib.parser import parse_preset


def make_preset_text(body, meta=None):
    meta = meta if meta is not None else [('Author', 'Tester'),
                                          ('Categories', 'Bass, Lead')]
    header = '/*@Meta\n\n'
    for (key, value) in meta:
        header += f"{key}:\n'{value}'\n\n"
    return (header + '*/\n\n' + body +
            '\n\n\n\n// Section for ugly compressed binary Data\n'
            '// DON\'T TOUCH THIS\n\n[binary:AAAA]\n')


SAMPLE_BODY = '\n'.join([
    '#AM=Diva',
    'Ver=1',
    '#cm=OSC',
    'Tune=2.5',
    'Wave=Saw',
    '#ms=none',
    '#ms=ModWhl',
    '#cm=VCF1',
    'Cutoff=60',
    'Res=0.35',
    'Type=LP4',
])


@pytest.fixture
def sample_text():
    return make_preset_text(SAMPLE_BODY)


@pytest.fixture
def sample_preset(sample_text):
    return parse_preset(sample_text, 'Bass/Sample Bass.h2p')


@pytest.fixture
def library():
    bodies = {
        'Bass/Deep Bass.h2p': 'Ver=1\nCutoff=20\nRes=0.10\nWave=Saw',
        'Lead/Bright Lead.h2p': 'Ver=1\nCutoff=100\nRes=0.90\nWave=Square',
        'Pad/Soft Pad.h2p': 'Ver=1\nCutoff=50\nRes=0.55\nWave=Triangle',
    }
    return PresetLibrary('/presets/Diva', [
        parse_preset(make_preset_text(body), path)
        for (path, body) in bodies.items()
    ])


@pytest.fixture
def rng():
    return random.Random(1234)
