import json
from dataclasses import dataclass, field, fields
from typing import List, Optional


INT_OPTIONS = ('amount', 'randomness', 'seed')


class ConfigError(ValueError):
    pass


def _to_int(key, value):
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ConfigError(f'{key} must be an integer, got {value!r}')
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f'{key} must be an integer, got {value!r}') from None


@dataclass
class Config:
    synth: Optional[str] = None
    preset_root: Optional[str] = None
    amount: int = 16
    randomness: int = 20
    preset: Optional[str] = None
    merge: List[str] = field(default_factory=list)
    seed: Optional[int] = None
    debug: bool = False

    @property
    def mode(self):
        if self.merge:
            return 'merge'
        if self.preset:
            return 'randomize'
        return 'random'

    def update(self, **overrides):
        """Apply overrides that are not None, e.g. parsed CLI arguments."""
        known = {f.name for f in fields(self)}
        for (key, value) in overrides.items():
            if key not in known:
                raise ConfigError(f'Unknown config option: {key}')
            if value is None:
                continue
            if key in INT_OPTIONS:
                value = _to_int(key, value)
            if key == 'merge' and isinstance(value, str):
                value = [value]
            setattr(self, key, value)
        if self.amount < 0:
            raise ConfigError('amount must not be negative')
        return self


def load_config(path=None):
    config = Config()
    if path is None:
        return config
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f'Invalid config file {path}: {e}') from e
    if not isinstance(data, dict):
        raise ConfigError(f'Config file {path} must contain a JSON object')
    return config.update(**data)
