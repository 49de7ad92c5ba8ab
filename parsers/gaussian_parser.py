#!/usr/bin/env python3
"""
gaussian_parser.py
------------------
Parser for Gaussian Opt Freq output files.
Extracts the zero-point vibrational energy and the fundamental frequencies,
merging near-identical printed frequencies (degenerate modes) into one mode.
"""

import os
import re
from .base_parser import ReportParser, ParsedReport, ParseError
from config import REPORT_MARKERS, FREQUENCY_THRESHOLD, BANNER_SCAN_LINES
from normal_modes import ModeCursor


class GaussianFrequencyParser(ReportParser):
    """
    Parser for the frequency part of Gaussian output files.

    The normal-mode listing starts after the "... and normal coordinates:"
    header and ends at the thermochemistry summary. Every "Frequencies --"
    line inside it contributes samples, left to right, to a ModeCursor.
    """

    MARKERS = REPORT_MARKERS

    _freq_pat = re.compile(r'Frequencies\s*-+(.*)')

    def __init__(self, threshold=FREQUENCY_THRESHOLD, message_service=None):
        self.threshold = threshold
        self.message_service = message_service

    @classmethod
    def can_parse(cls, file_path):
        """
        Determines if this parser can handle the given file

        Parameters:
            file_path (str): Path to the file to check

        Returns:
            bool: True if this parser can handle the file
        """
        if not file_path.lower().endswith(('.log', '.out')):
            return False

        try:
            with open(file_path, 'r', errors='replace') as f:
                for _ in range(BANNER_SCAN_LINES):
                    line = next(f, '')
                    if "Gaussian" in line or "GAUSSIAN" in line:
                        return True
            return False
        except OSError:
            return False

    def parse(self, file_path, n_expected):
        """
        Parse a Gaussian output file.

        Parameters:
            file_path (str): Path to the output file
            n_expected (int): Number of fundamentals this molecule must yield

        Returns:
            ParsedReport: problems are recorded on the report, not raised.
            An unreadable file raises the underlying OSError.
        """
        lines = self.read_file_lines(file_path)
        return self.parse_lines(lines, n_expected, report=os.path.basename(file_path))

    def parse_lines(self, lines, n_expected, report=None):
        problems = []

        try:
            zpe = self.read_zpe(lines, report)
        except ParseError as e:
            zpe = None
            problems.append(str(e))

        try:
            frequencies = self.read_frequencies(lines, n_expected, report)
        except ParseError as e:
            frequencies = []
            problems.append(str(e))

        return ParsedReport(zpe, tuple(frequencies), tuple(problems))

    def read_zpe(self, lines, report=None):
        """
        Zero-point energy in kcal/mol: the leading number on the line after
        the "Zero-point vibrational energy" marker.
        """
        marker = self.MARKERS["zpe"]
        for i, line in enumerate(lines):
            if marker not in line:
                continue
            if i + 1 >= len(lines):
                raise ParseError("no value after the ZPE marker", report)
            parts = lines[i + 1].split()
            try:
                return float(parts[0])
            except (IndexError, ValueError):
                raise ParseError(f"malformed ZPE value line: {lines[i + 1].strip()!r}", report)
        raise ParseError("ZPE marker not found", report)

    def read_frequencies(self, lines, n_expected=None, report=None):
        """
        Fundamental frequencies of the normal-mode section, one per logical mode.

        Raises:
            ParseError: section missing, no samples, or a mode count
                        different from n_expected
        """
        start = None
        for i, line in enumerate(lines):
            if self.MARKERS["section_start"] in line:
                start = i + 1
                break
        if start is None:
            raise ParseError("normal-mode section not found", report)

        cursor = ModeCursor(self.threshold)
        for line in lines[start:]:
            if self.MARKERS["section_end"] in line:
                break
            for sample in self._frequency_samples(line):
                cursor.add_sample(sample)

        try:
            modes = cursor.finish()
        except ValueError:
            raise ParseError("no frequencies found in the normal-mode section", report)

        if self.message_service:
            self.message_service.log_debug(
                f"{report or 'report'}: modes {', '.join(f'{m:.2f}' for m in modes)}"
            )

        if n_expected is not None and len(modes) != n_expected:
            raise ParseError(f"found {len(modes)} modes, expected {n_expected}", report)
        return modes

    def _frequency_samples(self, line):
        """Numbers following the "Frequencies --" sub-marker, up to the first non-number."""
        if self.MARKERS["frequencies"] not in line:
            return []
        match = self._freq_pat.search(line)
        if not match:
            return []

        samples = []
        for token in match.group(1).split():
            try:
                samples.append(float(token))
            except ValueError:
                break
        return samples
