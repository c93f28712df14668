import numpy as np

from app.config import settings


def get_rng() -> np.random.Generator:
    """En generator per request. Med RANDOM_SEED satt blir svaren reproducerbara."""
    return np.random.default_rng(settings.random_seed)
