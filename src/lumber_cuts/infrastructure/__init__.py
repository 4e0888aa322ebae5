"""Infrastructure layer - packing algorithm and formatters."""

from .bin_packing import BestFitPacker, Bin
from .formatters import CutPlanFormatter, JsonExporter

__all__ = [
    # Bin packing
    "BestFitPacker",
    "Bin",
    # Formatters
    "CutPlanFormatter",
    "JsonExporter",
]
