"""
Inspection Scripts
"""
from .runner import run, run_inspection

__all__ = ["run", "run_inspection"]
