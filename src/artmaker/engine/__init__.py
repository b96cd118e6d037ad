"""Run bookkeeping."""
from .metrics import generation_record, save_metrics

__all__ = ["generation_record", "save_metrics"]
