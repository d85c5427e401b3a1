"""Utility modules for ReviewLens."""

from .data_prep import export_to_json, prepare_reviews

__all__ = [
    "export_to_json",
    "prepare_reviews",
]
