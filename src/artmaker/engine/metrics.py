"""Per-generation statistics and CSV output."""
from __future__ import annotations
from pathlib import Path
import pandas as pd

from artmaker.evolution.population import Population


def generation_record(population: Population) -> dict:
    record = population.snapshot()
    record["schema"] = ",".join(p.name for p in population.schema)
    return record


def save_metrics(records: list[dict], path: Path):
    df = pd.DataFrame(records)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return df
