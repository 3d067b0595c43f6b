import math
import random
import logging

from presetlib.library import PresetLibrary, PresetNotFoundError, find_preset
from presetlib.names import random_name, ADJECTIVES, COLORS, NAMES
from presetlib.parser import PresetMetaEntry, value_type
from presetlib.utils import pick

logger = logging.getLogger(__name__)

OUTPUT_FOLDER = 'RANDOM'
AUTHOR = 'Random Generator'
GENERATOR = 'uhe-preset-randomizer'
NAME_ATTEMPTS = 20

__all__ = ['generate_fully_random_presets', 'generate_randomized_presets',
           'generate_merged_presets', 'get_merge_ratios',
           'ParamModelLookupError', 'PresetNotFoundError', 'RandomizerError']


class RandomizerError(Exception):
    pass


class ParamModelLookupError(RandomizerError, KeyError):
    def __init__(self, param_id, iteration=None):
        self.param_id = param_id
        self.iteration = iteration
        super().__init__(param_id)

    def __str__(self):
        where = f' (preset {self.iteration + 1})' if self.iteration is not None else ''
        return f'No observed values for parameter {self.param_id}{where}'


def _output_library(library):
    return PresetLibrary(f'{library.preset_root_folder}/{OUTPUT_FOLDER}', [])


def _model_values(params_model, param_id, iteration):
    entry = params_model.get(param_id)
    if entry is None or not entry.values:
        raise ParamModelLookupError(param_id, iteration)
    return entry.values


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _fit_type(value, param_type):
    if param_type == 'integer':
        return math.floor(value + 0.5)
    if param_type == 'float':
        scaled = value * 100
        if not math.isfinite(scaled):
            return value
        # round first so 2.57 * 100 does not truncate to 256
        return math.trunc(round(scaled, 6)) / 100
    return value


def _blend(old, new, random_ratio, param_type):
    if random_ratio <= 0:
        return old
    if random_ratio >= 1:
        return new
    return _fit_type(old * (1 - random_ratio) + new * random_ratio, param_type)


def _unique_name(dictionaries, rng, used, suffix=''):
    """Preset name not yet used in this run, redrawn or numbered on collision."""
    for _ in range(NAME_ATTEMPTS):
        name = f'RND {random_name(dictionaries, rng)}{suffix}'
        if name not in used:
            break
    else:
        counter = 2
        while f'{name} {counter}' in used:
            counter += 1
        name = f'{name} {counter}'
    used.add(name)
    return name


def get_merge_ratios(count, rng=None):
    """Random shares for `count` presets that add up to 1."""
    if count < 1:
        raise ValueError('Need at least one preset to compute merge ratios')
    rng = rng or random
    draws = [rng.random() for _ in range(count)]
    total = sum(draws)
    if not total:
        return [1 / count] * count
    return [draw / total for draw in draws]


def generate_fully_random_presets(library, params_model, amount, rng=None):
    """
    Every parameter gets a value observed somewhere in the library.
    A random library preset only provides the scaffold.
    """
    rng = rng or random.Random()
    result = _output_library(library)
    used = set()
    for i in range(amount):
        preset = pick(library.presets, rng).clone()
        for param in preset.params:
            new_value = pick(_model_values(params_model, param.id, i), rng)
            if param.value != new_value:
                logger.debug(f'  {param.id}: Old: {param.value} -> New: {new_value}')
            param.value = new_value
            param.type = value_type(new_value)

        preset.preset_name = _unique_name((ADJECTIVES, COLORS, NAMES), rng, used)
        preset.file_path = f'{preset.preset_name}.h2p'
        preset.meta = [
            PresetMetaEntry('Author', AUTHOR),
            PresetMetaEntry('Description',
                            f'Fully random preset, generated by {GENERATOR}'),
        ]
        logger.info(f'Generated random preset: {preset.file_path}')
        result.presets.append(preset)
    return result


def generate_randomized_presets(library, params_model, base, randomness, amount, rng=None):
    """
    Variations of one base preset. `randomness` (0-100) sets how far each
    parameter moves towards a value drawn from the params model.
    """
    rng = rng or random.Random()
    if isinstance(base, str):
        base = find_preset(library, base)

    random_ratio = min(max(randomness, 0), 100) / 100

    result = _output_library(library)
    used = set()
    for i in range(amount):
        preset = base.clone()
        for param in preset.params:
            candidate = pick(_model_values(params_model, param.id, i), rng)
            if candidate == param.value:
                continue
            if param.type != 'string':
                if not (_is_number(candidate) and _is_number(param.value)):
                    continue
                new_value = _blend(param.value, candidate, random_ratio, param.type)
            elif rng.random() > random_ratio:
                new_value = param.value
            else:
                new_value = candidate
            if new_value != param.value:
                logger.debug(f'  {param.id}: {param.value} -> {candidate} -> {new_value}')
            param.value = new_value

        preset.preset_name = _unique_name((ADJECTIVES, COLORS), rng, used,
                                          f' {base.preset_name}')
        preset.file_path = f'{preset.preset_name}.h2p'
        logger.info(f'Generated random preset: {preset.file_path}')
        result.presets.append(preset)
    return result


def generate_merged_presets(library, merge, base=None, amount=1, rng=None):
    """
    Blend several presets with one set of random ratios per run.
    Numeric parameters are averaged by ratio, string parameters are
    taken from one of the merged presets.
    """
    rng = rng or random.Random()
    if isinstance(merge, str):
        merge = [merge]
    merge_presets = []
    if isinstance(base, str):
        merge_presets.append(find_preset(library, base))
    elif base is not None:
        merge_presets.append(base)
    for identifier in merge:
        merge_presets.append(find_preset(library, identifier))
    if not merge_presets:
        raise ValueError('No presets to merge')

    names = ', '.join(preset.preset_name for preset in merge_presets)
    logger.info(f'Merging presets: {names}')

    ratios = get_merge_ratios(len(merge_presets), rng)
    lookups = [{param.id: param for param in preset.params} for preset in merge_presets]
    logger.debug(f'Merge ratios: {", ".join("%.03f" % ratio for ratio in ratios)}')

    result = _output_library(library)
    used = set()
    for i in range(amount):
        preset = pick(merge_presets, rng).clone()
        for param in preset.params:
            if param.type == 'string':
                found = pick(lookups, rng).get(param.id)
                new_value = found.value if found is not None else param.value
            else:
                total = 0
                for (lookup, ratio) in zip(lookups, ratios):
                    found = lookup.get(param.id)
                    if found is not None and _is_number(found.value):
                        total += found.value * ratio
                    else:
                        total += param.value * ratio
                new_value = _fit_type(total, param.type)
            if new_value != param.value:
                logger.debug(f'  {param.id}: {param.value} -> {new_value}')
            param.value = new_value

        preset.preset_name = _unique_name((ADJECTIVES, COLORS, NAMES), rng, used)
        preset.file_path = f'{preset.preset_name}.h2p'
        preset.meta = [
            PresetMetaEntry('Author', AUTHOR),
            PresetMetaEntry('Description',
                            f'Merged preset, based on {names}. Generated by {GENERATOR}'),
        ]
        logger.info(f'Generated merged preset: {preset.file_path}')
        result.presets.append(preset)
    return result
