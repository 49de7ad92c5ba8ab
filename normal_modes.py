#!/usr/bin/env python3
"""
normal_modes.py
---------------
Classes for grouping printed vibrational frequencies into logical modes and
for storing the computed frequencies and ZPEs of a whole run.
"""

import numpy as np

from config import FREQUENCY_THRESHOLD
from reference_data import MOLECULES, frequency_offsets


class IncompleteResultsError(ValueError):
    """Raised when computed values are missing or invalid for some molecules."""

    def __init__(self, problems):
        self.problems = dict(problems)
        details = "; ".join(f"{name}: {reason}" for name, reason in self.problems.items())
        super().__init__(f"Computed data incomplete for {len(self.problems)} molecule(s): {details}")


class ModeAccumulator:
    """
    Running sum and sample count for one logical mode.
    Near-identical printed frequencies (degenerate modes) are averaged here.
    """
    def __init__(self):
        self.total = 0.0
        self.count = 0

    def add(self, sample):
        self.total += sample
        self.count += 1

    @property
    def average(self):
        if not self.count:
            raise ValueError("No samples accumulated for this mode")
        return self.total / self.count

    def deviation(self, sample):
        """Absolute difference between a sample and the running average."""
        return abs(self.average - sample)


class ModeCursor:
    """
    Assigns a stream of frequency samples to consecutive mode indices.

    A sample that deviates from the current mode's running average by the
    threshold or more closes that mode and opens the next one. This is a
    heuristic: it relies on samples of one mode arriving consecutively and on
    distinct modes being further apart than the threshold.
    """
    def __init__(self, threshold=FREQUENCY_THRESHOLD):
        self.threshold = threshold
        self.modes = []  # finalized mode frequencies, in order
        self._current = ModeAccumulator()

    @property
    def position(self):
        """Index of the mode currently being accumulated."""
        return len(self.modes)

    def add_sample(self, sample):
        if self._current.count and self._current.deviation(sample) >= self.threshold:
            self._finalize()
        self._current.add(sample)

    def _finalize(self):
        self.modes.append(self._current.average)
        self._current = ModeAccumulator()

    def finish(self):
        """
        Force-finalize the mode in progress and return all modes.

        Raises:
            ValueError: if no sample was ever added
        """
        if not self._current.count:
            raise ValueError("No frequency samples were read")
        self._finalize()
        return list(self.modes)


class ComputedResults:
    """
    Computed ZPEs and fundamental frequencies for every benchmark molecule.

    Values start as NaN so an unset entry can never be mistaken for a
    computed zero. Molecules whose report could not be parsed are kept in
    `invalid` with the reason.
    """
    def __init__(self, molecules=MOLECULES):
        self.molecules = tuple(molecules)
        self.offsets = frequency_offsets(self.molecules)
        n_freqs = sum(m.n_frequencies for m in self.molecules)
        self.frequencies = np.full(n_freqs, np.nan)
        self.zpes = np.full(len(self.molecules), np.nan)
        self.invalid = {}
        self._stored = set()

    def _slice(self, index):
        start = self.offsets[index]
        return slice(start, start + self.molecules[index].n_frequencies)

    def store(self, index, report):
        """
        Store a ParsedReport for the molecule at `index`.
        Invalid reports mark the molecule invalid; whatever was parsed is kept.
        """
        molecule = self.molecules[index]
        if report.zpe is not None:
            self.zpes[index] = report.zpe
        if len(report.frequencies) == molecule.n_frequencies:
            self.frequencies[self._slice(index)] = report.frequencies
        if report.is_valid(molecule.n_frequencies):
            self.invalid.pop(molecule.name, None)
            self._stored.add(index)
        else:
            self.mark_invalid(index, "; ".join(report.problems) or "invalid report")

    def mark_invalid(self, index, reason):
        self.invalid[self.molecules[index].name] = reason
        self._stored.discard(index)

    def molecule_frequencies(self, index):
        return self.frequencies[self._slice(index)]

    @property
    def is_complete(self):
        return not self.invalid and len(self._stored) == len(self.molecules)

    def validate(self):
        """
        Check that every molecule has a valid ZPE and frequency slice.

        Raises:
            IncompleteResultsError: listing every invalid or unset molecule
        """
        problems = dict(self.invalid)
        for index, molecule in enumerate(self.molecules):
            if molecule.name in problems:
                continue
            if index not in self._stored:
                problems[molecule.name] = "not computed"
            elif np.isnan(self.zpes[index]) or np.isnan(self.molecule_frequencies(index)).any():
                problems[molecule.name] = "missing values"
        if problems:
            raise IncompleteResultsError(problems)

    def freeze(self):
        """Make the value arrays read-only once the run is over."""
        self.frequencies.flags.writeable = False
        self.zpes.flags.writeable = False
