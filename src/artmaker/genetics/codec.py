"""Genome codec: generation, layout, pivot search and decoding.

A genome is a plain string of digits. Its layout is never stored: walking the
schema in ordinal order and reading each repeating protein's control digit
recovers every segment boundary. ``layout`` is that single walk; pivot search
and decoding are both built on it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from artmaker.core.errors import OutOfRange
from .phenotype import Phenotype, PhenotypeValue, assemble
from .proteins import Protein, ProteinSchema, digits, rgb, scaled

DIGITS = frozenset("0123456789")

__all__ = [
    "Segment",
    "DecodedGenome",
    "random_digits",
    "generate_genome",
    "layout",
    "find_pivot",
    "expected_length",
    "validate_genome",
    "decode",
    "express",
    "digits",
    "scaled",
    "rgb",
]


@dataclass(frozen=True)
class Segment:
    """A control digit (``index == -1``) or one protein instance payload."""

    protein: Protein
    index: int
    siblings: int
    start: int
    end: int

    @property
    def is_control(self) -> bool:
        return self.index < 0


def random_digits(n: int, rng: np.random.Generator) -> str:
    if n <= 0:
        return ""
    return "".join(str(d) for d in rng.integers(0, 10, size=n))


def generate_genome(schema: ProteinSchema, rng: np.random.Generator) -> str:
    parts: list[str] = []
    for protein in schema:
        if protein.repeating:
            siblings = int(rng.integers(0, 10))
            parts.append(str(siblings))
            parts.append(random_digits(siblings * protein.size, rng))
        else:
            parts.append(random_digits(protein.size, rng))
    return "".join(parts)


def _control_digit(genome: str, offset: int) -> int:
    # a control digit cut off by a short genome counts as no siblings
    if offset >= len(genome):
        return 0
    char = genome[offset]
    if char not in DIGITS:
        raise OutOfRange(f"non-digit control character {char!r} at offset {offset}")
    return int(char)


def layout(genome: str, schema: ProteinSchema) -> list[Segment]:
    """Walk the schema over ``genome`` and return every segment in order."""
    segments: list[Segment] = []
    offset = 0
    for protein in schema:
        if protein.repeating:
            siblings = _control_digit(genome, offset)
            segments.append(Segment(protein, -1, siblings, offset, offset + 1))
            offset += 1
            for index in range(siblings):
                segments.append(Segment(protein, index, siblings, offset, offset + protein.size))
                offset += protein.size
        else:
            segments.append(Segment(protein, 0, 1, offset, offset + protein.size))
            offset += protein.size
    return segments


def expected_length(genome: str, schema: ProteinSchema) -> int:
    """Length implied by the schema and the genome's own control digits."""
    segments = layout(genome, schema)
    return segments[-1].end if segments else 0


def validate_genome(genome: str, schema: ProteinSchema) -> str:
    if not set(genome) <= DIGITS:
        raise OutOfRange("genome may only contain the digits 0-9")
    expected = expected_length(genome, schema)
    if expected != len(genome):
        raise OutOfRange(f"genome has {len(genome)} digits but its layout needs {expected}")
    return genome


def find_pivot(genome: str, target: int, schema: ProteinSchema) -> int:
    """Return the first segment boundary at or after ``target``.

    Boundaries are the ends of control digits and of protein instances. The
    genome end always counts as a boundary.
    """
    if target < 0 or target > len(genome):
        raise OutOfRange(f"pivot target {target} outside genome of length {len(genome)}")
    for segment in layout(genome, schema):
        if segment.end >= target:
            return min(segment.end, len(genome))
    return len(genome)


class DecodedGenome:
    """Lazy, restartable view over the phenotype values of one genome."""

    def __init__(self, genome: str, schema: ProteinSchema):
        self.genome = genome
        self.schema = schema

    def __iter__(self) -> Iterator[PhenotypeValue]:
        for segment in layout(self.genome, self.schema):
            if segment.is_control:
                continue
            if segment.end > len(self.genome):
                break
            payload = self.genome[segment.start : segment.end]
            value = segment.protein.express(payload, segment.index, segment.siblings, segment.start)
            if value is not None:
                yield value

    def __repr__(self) -> str:
        return f"DecodedGenome({self.genome!r})"


def decode(genome: str, schema: ProteinSchema) -> DecodedGenome:
    return DecodedGenome(genome, schema)


def express(genome: str, schema: ProteinSchema) -> Phenotype:
    return assemble(decode(genome, schema))
