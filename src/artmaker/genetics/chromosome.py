"""Chromosomes and their variation operators."""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

import numpy as np

from .codec import DecodedGenome, decode, express, find_pivot, generate_genome, random_digits, validate_genome
from .phenotype import Phenotype
from .proteins import ProteinSchema

logger = logging.getLogger(__name__)


def crossover_point(genome: str, schema: ProteinSchema) -> int:
    """Boundary nearest to the middle of ``genome`` (half-up rounding)."""
    target = max((len(genome) + 1) // 2 - 1, 0)
    return find_pivot(genome, target, schema)


def crossover(parent_a: "Chromosome", parent_b: "Chromosome") -> tuple["Chromosome", "Chromosome"]:
    """Single-point crossover at each parent's own middle boundary.

    The two pivots are computed independently, so parents with different
    sibling counts may be cut at different schema positions. Children then
    inherit a shifted tail; decoding tolerates the resulting layout.
    """
    schema = parent_a.schema
    a, b = parent_a.genes, parent_b.genes
    pivot_a = crossover_point(a, schema)
    pivot_b = crossover_point(b, parent_b.schema)
    child_one = Chromosome(a[:pivot_a] + b[pivot_b:], schema)
    child_two = Chromosome(b[:pivot_b] + a[pivot_a:], schema)
    return child_one, child_two


def mutate(genome: str, schema: ProteinSchema, mutation_rate: float, rng: np.random.Generator) -> str:
    """Rewrite one whole segment with probability ``mutation_rate``.

    The segment is the span between the boundary at or after a random index
    and the next boundary, so the genome length never changes. A segment can
    be a control digit, which changes that protein's sibling count.
    """
    if rng.random() >= mutation_rate:
        return genome
    index = int(rng.integers(0, len(genome) + 1))
    start = find_pivot(genome, index, schema)
    if start >= len(genome):
        return genome
    end = find_pivot(genome, start + 1, schema)
    logger.debug("mutating segment [%d:%d] of %d-digit genome", start, end, len(genome))
    return genome[:start] + random_digits(end - start, rng) + genome[end:]


@dataclass(frozen=True)
class Chromosome:
    """One individual; two chromosomes with the same genes are interchangeable."""

    genes: str
    schema: ProteinSchema = field(compare=False, repr=False)

    @classmethod
    def generate(cls, schema: ProteinSchema, rng: np.random.Generator) -> "Chromosome":
        return cls(generate_genome(schema, rng), schema)

    @classmethod
    def from_genome(cls, genes: str, schema: ProteinSchema, *, validate: bool = False) -> "Chromosome":
        if validate:
            validate_genome(genes, schema)
        return cls(genes, schema)

    def __len__(self) -> int:
        return len(self.genes)

    def mate(self, other: "Chromosome") -> tuple["Chromosome", "Chromosome"]:
        return crossover(self, other)

    def mutate(self, mutation_rate: float, rng: np.random.Generator) -> "Chromosome":
        genes = mutate(self.genes, self.schema, mutation_rate, rng)
        if genes == self.genes:
            return self
        return Chromosome(genes, self.schema)

    def decode(self) -> DecodedGenome:
        return decode(self.genes, self.schema)

    def express(self) -> Phenotype:
        return express(self.genes, self.schema)
