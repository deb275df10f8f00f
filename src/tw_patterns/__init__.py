"""
tw-pattern-analyzer - Tailwind class pattern mining

Scans JSX/TSX, Astro, Vue and Svelte sources for Tailwind class lists,
groups near-duplicates by Jaccard similarity and ranks the groups by how
likely they are to be worth extracting into a shared component.
"""

__version__ = "0.1.0"

from .api import analyze, analyze_sources
from .config import AnalyzerConfig, load_config
from .models import Cluster, FileParseResult, PatternStats, Report
from .scanning import find_classes_in_source
from .tokens import canonicalize, jaccard, tokenize

__all__ = [
    "analyze",  # Main entry point
    "analyze_sources",
    "AnalyzerConfig",
    "load_config",
    "Cluster",
    "FileParseResult",
    "PatternStats",
    "Report",
    "find_classes_in_source",
    "canonicalize",
    "jaccard",
    "tokenize",
]
