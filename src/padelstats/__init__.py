"""Normalization of match-analysis results into the canonical analytics schema."""

__version__ = "0.1.0"
