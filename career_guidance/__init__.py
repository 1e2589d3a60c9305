"""Career guidance scoring and wellness-analytics engine."""

__version__ = "1.0.0"
