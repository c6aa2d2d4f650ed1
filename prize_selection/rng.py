import random
from typing import Optional


def get_rng(seed: Optional[int] = None) -> random.Random:
    """
    One generator per request. Pass it down to every draw instead of
    creating new ones, otherwise rapid successive calls can share a seed.
    """
    return random.Random(seed)
