"""Pydantic models for API I/O."""

from .analysis import FormatRequest, MetricErrorDetail

__all__ = [
    "FormatRequest",
    "MetricErrorDetail",
]
