"""Interactive genetic art: digit genomes bred by human selection."""
from artmaker.evolution import Population
from artmaker.genetics import Chromosome, ProteinSchema, default_schema

__all__ = ["Population", "Chromosome", "ProteinSchema", "default_schema"]
__version__ = "0.1.0"
