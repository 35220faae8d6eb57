"""Scanning modules for the File Catalog tool."""

from .extractor import FeatureExtractor

__all__ = ['FeatureExtractor']
