import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class ParamModel:
    id: str
    type: str
    values: List[Any] = field(default_factory=list)
    distinct_values: List[Any] = field(default_factory=list)
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    avg_value: Optional[float] = None

    @property
    def numeric(self):
        return self.type != 'string'


def _numeric_values(values):
    return np.array([v for v in values
                     if isinstance(v, (int, float)) and not isinstance(v, bool)],
                    dtype=float)


def analyse_param(param_id, param_type, values):
    model = ParamModel(param_id, param_type, list(values))
    seen = set()
    for value in values:
        if value not in seen:
            seen.add(value)
            model.distinct_values.append(value)
    if param_type != 'string':
        numbers = _numeric_values(values)
        if numbers.size:
            model.min_value = float(np.min(numbers))
            model.max_value = float(np.max(numbers))
            model.avg_value = float(np.mean(numbers))
    return model


def build_params_model(library):
    """
    Collect every observed value per parameter id across the library.
    The type of a parameter is the type of its first observation.
    """
    observed = {}
    types = {}
    for preset in library.presets:
        for param in preset.params:
            if param.id not in observed:
                observed[param.id] = []
                types[param.id] = param.type
            observed[param.id].append(param.value)

    model = {param_id: analyse_param(param_id, types[param_id], values)
             for (param_id, values) in observed.items()}
    logger.info(summarize_params_model(model))
    return model


def summarize_params_model(model):
    numeric = sum(1 for entry in model.values() if entry.numeric)
    return (f'Analyzed {len(model)} parameters: '
            f'{numeric} numeric, {len(model) - numeric} string')
