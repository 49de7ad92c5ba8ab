#!/usr/bin/env python3
"""
base_parser.py
--------------
Abstract base class for calculation report parsers.
Contains the ReportParser interface, the ParsedReport record and ParseError.
"""

import os
from abc import ABC, abstractmethod
from collections import namedtuple


class ParseError(ValueError):
    """A report was read but expected markers or values are missing or malformed."""

    def __init__(self, message, report=None):
        self.report = report
        if report:
            message = f"{report}: {message}"
        super().__init__(message)


class ParsedReport(namedtuple("ParsedReport", ["zpe", "frequencies", "problems"])):
    """
    Values extracted from one report.

    zpe is None when the marker was not found or its value was malformed,
    which keeps "missing" distinct from a genuine zero.
    """

    __slots__ = ()

    def is_valid(self, n_expected):
        return (self.zpe is not None
                and not self.problems
                and len(self.frequencies) == n_expected)


class ReportParser(ABC):
    """
    Abstract base class for report parsers.
    Each parser class should implement methods to check file compatibility
    and parse a report into a ParsedReport.
    """

    @classmethod
    @abstractmethod
    def can_parse(cls, file_path):
        """
        Determines if this parser can handle the given file

        Parameters:
            file_path (str): Path to the file to check

        Returns:
            bool: True if this parser can handle the file
        """
        pass

    @abstractmethod
    def parse(self, file_path, n_expected):
        """
        Parse a report into a ParsedReport

        Parameters:
            file_path (str): Path to the report
            n_expected (int): Number of fundamental frequencies expected

        Returns:
            ParsedReport
        """
        pass

    @staticmethod
    def read_file_lines(file_path):
        """Helper method to read report lines"""
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, 'r', errors='replace') as f:
            return f.readlines()
