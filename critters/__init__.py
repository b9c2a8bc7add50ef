"""Grid-dwelling critters that hop, turn and convert each other."""

__version__ = "0.1.0"
