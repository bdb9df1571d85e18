"""
pinfo - PE metadata reporter

Hashes, architecture, imports and sections of Windows executables, shown
as text, JSON or an HTML page.
"""

from .analyzer import PEAnalyzer, analyze_file
from .report import Report, SectionHeader

__version__ = '1.0.0'

__all__ = ['PEAnalyzer', 'analyze_file', 'Report', 'SectionHeader']
