import math
import random


def pick(sequence, rng=None):
    """Uniformly pick one element of a non-empty sequence."""
    if not sequence:
        raise ValueError('cannot pick from an empty sequence')
    rng = rng or random
    return sequence[math.floor(rng.random() * len(sequence))]
