"""Engine — фасад конверсии для loan proposal контрактов."""

from .conversion_engine import ConversionEngine

__all__ = [
    "ConversionEngine",
]
