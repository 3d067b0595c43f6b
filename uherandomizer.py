#!/usr/bin/env python3

import sys
import random
import logging
import argparse
from presetlib.config import ConfigError, load_config
from presetlib.library import PresetNotFoundError, default_preset_root, load_preset_library, write_preset_library
from presetlib.analyser import build_params_model
from presetlib.randomizer import (RandomizerError, generate_fully_random_presets,
                                  generate_merged_presets, generate_randomized_presets)

logger = logging.getLogger('uherandomizer')


def build_parser():
    ap = argparse.ArgumentParser(
        description="Generate random u-he presets from an existing preset library")
    ap.add_argument('-c', '--config',
                    type=str,
                    help="JSON config file, command line options override it")
    ap.add_argument('-s', '--synth',
                    type=str,
                    help="Synth name, used to find the default preset folder (e.g. Diva)")
    ap.add_argument('-f', '--folder',
                    type=str,
                    dest='preset_root',
                    help="Preset folder to read, overrides --synth")
    ap.add_argument('-a', '--amount',
                    type=int,
                    help="Number of presets to generate")
    ap.add_argument('-r', '--randomness',
                    type=int,
                    help="Randomness in percent (0 to 100) when randomizing --preset")
    ap.add_argument('-p', '--preset',
                    type=str,
                    help="Base preset, matched as a substring of its path")
    ap.add_argument('-m', '--merge',
                    type=str,
                    action='append',
                    help="Preset to merge, can be given multiple times")
    ap.add_argument('--seed',
                    type=int,
                    help="Seed for reproducible output")
    ap.add_argument('--debug',
                    default=None,
                    action='store_true',
                    help="Log every changed parameter")
    ap.add_argument('--dry-run',
                    default=False,
                    action='store_true',
                    help="Generate presets but don't write them")
    return ap


def generate(config, library, params_model, rng):
    if config.mode == 'merge':
        return generate_merged_presets(library, config.merge, config.preset,
                                       config.amount, rng)
    if config.mode == 'randomize':
        return generate_randomized_presets(library, params_model, config.preset,
                                           config.randomness, config.amount, rng)
    return generate_fully_random_presets(library, params_model, config.amount, rng)


def run(config, dry_run=False):
    preset_root = config.preset_root
    if not preset_root and config.synth:
        preset_root = default_preset_root(config.synth)
    if not preset_root:
        raise ConfigError("No preset folder found, use --folder or --synth")

    library = load_preset_library(preset_root)
    if not library.presets:
        raise ConfigError(f"No presets found in {preset_root}")
    params_model = build_params_model(library)
    rng = random.Random(config.seed)
    generated = generate(config, library, params_model, rng)
    if dry_run:
        return []
    return write_preset_library(generated)


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
        config.update(synth=args.synth, preset_root=args.preset_root,
                      amount=args.amount, randomness=args.randomness,
                      preset=args.preset, merge=args.merge, seed=args.seed,
                      debug=args.debug)
    except (OSError, ConfigError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(level=logging.DEBUG if config.debug else logging.INFO,
                        format='%(levelname)s %(message)s')
    try:
        written = run(config, dry_run=args.dry_run)
    except (ConfigError, PresetNotFoundError, RandomizerError) as e:
        logger.error(e)
        return 1
    for path in written:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
