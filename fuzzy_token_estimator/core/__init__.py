"""Core module: classification, estimation, result types."""
