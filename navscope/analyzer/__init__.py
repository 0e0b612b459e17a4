"""Heuristic structural analysis of imported HTML documents."""

from .analyzer import StructuralAnalyzer
from .reconcile import candidate_section_ids, find_section_index, reconcile
from .sections import extract_section_title, extract_sections, fallback_section
from .settings import AnalyzerSettings
from .toc import extract_toc_entries, synthesize_heading_entries

__all__ = [
    "AnalyzerSettings",
    "StructuralAnalyzer",
    "candidate_section_ids",
    "extract_section_title",
    "extract_sections",
    "extract_toc_entries",
    "fallback_section",
    "find_section_index",
    "reconcile",
    "synthesize_heading_entries",
]
