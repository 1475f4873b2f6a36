"""Base generator class for data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for Faker-backed generators.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility. Each generator owns its own
        ``random.Random`` so seeding does not touch the global state.
    locale : str
        Faker locale (default ``fr_FR``).
    """

    def __init__(self, seed: int | None = None, locale: str = "fr_FR") -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
