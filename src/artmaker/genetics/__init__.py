"""Digit-string genomes, their protein schema and variation operators."""
from .proteins import Protein, ProteinSchema, default_schema
from .phenotype import DrawInstruction, Phenotype, Renderer, ScalarValue, SetupParams, assemble
from .codec import decode, express, find_pivot, generate_genome, layout, random_digits, validate_genome
from .chromosome import Chromosome, crossover, mutate

__all__ = [
    "Protein",
    "ProteinSchema",
    "default_schema",
    "DrawInstruction",
    "Phenotype",
    "Renderer",
    "ScalarValue",
    "SetupParams",
    "assemble",
    "decode",
    "express",
    "find_pivot",
    "generate_genome",
    "layout",
    "random_digits",
    "validate_genome",
    "Chromosome",
    "crossover",
    "mutate",
]
