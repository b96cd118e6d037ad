"""Population of chromosomes bred by human selection."""
from __future__ import annotations

import logging
import threading
from typing import Optional

import numpy as np

from artmaker.core.errors import ConfigurationError, InvalidState
from artmaker.core.rng import ensure_rng
from artmaker.genetics.chromosome import Chromosome, crossover
from artmaker.genetics.proteins import ProteinSchema, default_schema

logger = logging.getLogger(__name__)


def _check_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size <= 0:
        raise ConfigurationError(f"population size must be a positive integer, got {size!r}")
    return int(size)


def _check_rate(rate: float) -> float:
    rate = float(rate)
    if not 0.0 <= rate <= 1.0:
        raise ConfigurationError(f"mutation rate must be within [0, 1], got {rate}")
    return rate


class Population:
    """A generation of chromosomes plus the individuals marked for breeding.

    ``fit_individuals`` is a multiset: marking the same chromosome twice
    doubles its chance of being drawn as a parent. Breeding appends children
    two at a time, so an odd ``size`` yields ``size + 1`` individuals unless
    ``truncate`` is set.
    """

    def __init__(
        self,
        size: int,
        mutation_rate: float,
        *,
        schema: Optional[ProteinSchema] = None,
        rng: Optional[np.random.Generator] = None,
        truncate: bool = False,
    ):
        self.size = _check_size(size)
        self.mutation_rate = _check_rate(mutation_rate)
        self.schema = schema if schema is not None else default_schema()
        self.rng = ensure_rng(rng)
        self.truncate = truncate
        self.generation_number = 0
        self.individuals: list[Chromosome] = [Chromosome.generate(self.schema, self.rng) for _ in range(self.size)]
        self.fit_individuals: list[Chromosome] = []
        self._lock = threading.Lock()

    @property
    def fit_count(self) -> int:
        return len(self.fit_individuals)

    def mark_fitness(self, chromosome: Chromosome) -> None:
        with self._lock:
            self.fit_individuals.append(chromosome)

    def generation(self, mutation_rate: Optional[float] = None) -> list[Chromosome]:
        """Breed the marked individuals into a new generation and return it."""
        with self._lock:
            if not self.fit_individuals:
                raise InvalidState("mark at least one individual before breeding a new generation")
            rate = self.mutation_rate if mutation_rate is None else _check_rate(mutation_rate)

            parents = list(self.fit_individuals)
            offspring: list[Chromosome] = []
            while len(offspring) < self.size:
                male = parents[int(self.rng.integers(len(parents)))]
                female = parents[int(self.rng.integers(len(parents)))]
                offspring.extend(crossover(male, female))
            if self.truncate:
                offspring = offspring[: self.size]
            offspring = [child.mutate(rate, self.rng) for child in offspring]

            self.mutation_rate = rate
            self.generation_number += 1
            self.individuals = offspring
            self.fit_individuals = []
            logger.info(
                "generation %d bred from %d marked individuals (%d children, mutation rate %.2f)",
                self.generation_number,
                len(parents),
                len(offspring),
                rate,
            )
            return offspring

    def snapshot(self) -> dict:
        lengths = [len(c) for c in self.individuals]
        return {
            "generation": self.generation_number,
            "size": self.size,
            "individuals": len(self.individuals),
            "fit_count": self.fit_count,
            "mutation_rate": self.mutation_rate,
            "mean_length": float(np.mean(lengths)) if lengths else 0.0,
            "min_length": min(lengths, default=0),
            "max_length": max(lengths, default=0),
        }
