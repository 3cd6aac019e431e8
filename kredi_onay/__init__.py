"""Credit approval data loading, simple classifiers and evaluation metrics."""

__version__ = "0.1.0"