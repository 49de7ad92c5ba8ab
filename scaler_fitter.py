#!/usr/bin/env python3
"""
scaler_fitter.py
----------------
Drives one scaler fitting run: for every benchmark molecule, write the input,
run Gaussian and parse the report, then fit the computed frequencies and ZPEs
against the reference values.

Molecules are processed strictly one after another. Input-generation and
calculation failures abort the run; unparsable reports are reported and the
run stops before fitting.
"""

import os
import time
from collections import namedtuple

from config import TEMPORARY_EXTENSIONS
from linear_fit import no_intercept_linear_fit
from message_service import MessageService
from normal_modes import ComputedResults
from parsers.gaussian_parser import GaussianFrequencyParser
from reference_data import MOLECULES, reference_frequencies, reference_zpes


ScalerResults = namedtuple("ScalerResults", ["frequency_fit", "zpe_fit", "computed", "elapsed"])


class ScalerFitter:
    """
    One scaler fitting run over the benchmark molecules.

    Parameters:
        writer: InputWriter producing `<name>.gjf` in workdir
        runner: GaussianRunner (or any object with run(name) -> report path)
        parser: report parser, GaussianFrequencyParser by default
        workdir (str): directory holding inputs and outputs
        molecules: Molecule records to process, in order
        message_service: Optional MessageService
    """
    def __init__(self, writer, runner, parser=None, workdir=".", molecules=MOLECULES,
                 message_service=None):
        self.message_service = message_service or MessageService()
        self.writer = writer
        self.runner = runner
        self.parser = parser or GaussianFrequencyParser(message_service=self.message_service)
        self.workdir = workdir
        self.molecules = tuple(molecules)
        self.computed = ComputedResults(self.molecules)

    def process_molecule(self, index):
        """Write, calculate and parse one molecule, storing its values."""
        molecule = self.molecules[index]

        self.writer.write(molecule.name, self.workdir)
        self.message_service.log_info(f"Calculating {molecule.name}...")
        report_path = self.runner.run(molecule.name)

        if os.path.exists(report_path) and not self.parser.can_parse(report_path):
            self.message_service.log_warning(f"{report_path} does not look like a Gaussian output file")

        try:
            report = self.parser.parse(report_path, molecule.n_frequencies)
        except OSError as e:
            self.message_service.log_error(f"Cannot read report of {molecule.name}: {e}")
            self.computed.mark_invalid(index, f"report unreadable: {e}")
            return

        self.computed.store(index, report)
        for problem in report.problems:
            self.message_service.log_warning(problem)
        if molecule.name in self.computed.invalid:
            self.message_service.log_warning(f"Data of {molecule.name} marked invalid")

    def calculate(self):
        """
        Process every molecule in table order. The computed values are
        read-only afterwards.

        Returns:
            float: elapsed wall-clock seconds
        """
        start = time.time()
        for index in range(len(self.molecules)):
            self.process_molecule(index)
        self.computed.freeze()
        return time.time() - start

    def fit(self):
        """
        Fit the computed values against the references.

        Raises:
            IncompleteResultsError: some molecule has no valid data
            RegressionError: a fit is undefined
        """
        self.computed.validate()
        frequency_fit = no_intercept_linear_fit(self.computed.frequencies,
                                                reference_frequencies(self.molecules))
        zpe_fit = no_intercept_linear_fit(self.computed.zpes, reference_zpes(self.molecules))
        return frequency_fit, zpe_fit

    def run(self):
        """
        Run the whole workflow.

        Returns:
            ScalerResults
        """
        elapsed = self.calculate()
        frequency_fit, zpe_fit = self.fit()
        return ScalerResults(frequency_fit, zpe_fit, self.computed, elapsed)

    def comparison_lines(self):
        """Computed and reference values side by side, as printed in interactive runs."""
        lines = []
        ref_freqs = reference_frequencies(self.molecules)
        for i, (calc, ref) in enumerate(zip(self.computed.frequencies, ref_freqs)):
            lines.append(f"Calculated   frequency {i}: {calc:9.4f}")
            lines.append(f"Experimental frequency {i}: {ref:9.4f}")
        lines.append("")
        for i, (calc, ref) in enumerate(zip(self.computed.zpes, reference_zpes(self.molecules))):
            lines.append(f"Calculated   ZPE {i}: {calc:8.5f}")
            lines.append(f"Experimental ZPE {i}: {ref:8.5f}")
        return lines

    def cleanup(self, extensions=TEMPORARY_EXTENSIONS):
        """
        Remove the per-molecule temporary files that exist.

        Returns:
            list: removed file paths
        """
        removed = []
        for molecule in self.molecules:
            self.message_service.log_info(f"Removing {molecule.name}...")
            for ext in extensions:
                file_path = os.path.join(self.workdir, molecule.name + ext)
                if os.path.exists(file_path):
                    os.remove(file_path)
                    removed.append(file_path)
        return removed
