#!/usr/bin/env python3
"""
parsers package
---------------
Parsers for quantum chemistry calculation reports.
"""

from .base_parser import ReportParser, ParsedReport, ParseError
from .gaussian_parser import GaussianFrequencyParser

__all__ = ['ReportParser', 'ParsedReport', 'ParseError', 'GaussianFrequencyParser']
