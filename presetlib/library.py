import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from presetlib.parser import Preset, PresetParseError, parse_preset, serialize_preset, find_duplicate_ids

logger = logging.getLogger(__name__)

PRESET_PATTERN = '**/*.h2p'


class PresetNotFoundError(LookupError):
    def __init__(self, identifier):
        self.identifier = identifier
        super().__init__(f'No preset with name {identifier} found!')


@dataclass
class PresetLibrary:
    preset_root_folder: str
    presets: List[Preset] = field(default_factory=list)


def default_preset_root(synth, home=None):
    """First existing u-he preset folder for `synth`, or None."""
    home = Path(home) if home is not None else Path.home()
    candidates = [
        home / 'Documents' / 'u-he' / f'{synth}.data' / 'Presets' / synth,
        home / '.u-he' / synth / 'Presets' / synth,
        home / 'Library' / 'Audio' / 'Presets' / 'u-he' / synth,
    ]
    for candidate in candidates:
        if candidate.is_dir():
            return candidate
    return None


def load_preset_library(root, pattern=PRESET_PATTERN):
    """
    Parse every preset file below `root`. Files that fail to parse are
    logged and skipped, they never abort the whole scan.
    """
    root = Path(root)
    library = PresetLibrary(root.as_posix())
    for path in sorted(root.glob(pattern)):
        if not path.is_file():
            continue
        file_path = path.relative_to(root).as_posix()
        try:
            text = path.read_text(encoding='utf-8', errors='replace')
            preset = parse_preset(text, file_path)
        except (OSError, PresetParseError) as e:
            logger.warning(f'Skipping preset {file_path}: {e}')
            continue
        duplicates = find_duplicate_ids(preset)
        if duplicates:
            logger.warning(f'Preset {file_path} has colliding parameter ids: '
                           f'{", ".join(duplicates)}')
        library.presets.append(preset)
    logger.info(f'Found and loaded {len(library.presets)} presets from {root}')
    return library


def find_preset(library, identifier):
    for preset in library.presets:
        if identifier in preset.file_path:
            return preset
    raise PresetNotFoundError(identifier)


def write_preset_library(library):
    root = Path(library.preset_root_folder)
    written = []
    for preset in library.presets:
        path = root / preset.file_path
        if path in written:
            logger.warning(f'Overwriting {path}, file paths in the library are not unique')
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(serialize_preset(preset), encoding='utf-8')
        logger.debug(f'Wrote {path}')
        written.append(path)
    return written
