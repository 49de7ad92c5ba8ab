#!/usr/bin/env python3
"""
calculator.py

Runs the external Gaussian program on generated input files.
"""

import os
import subprocess

from config import GAUSSIAN_EXECUTABLES, INPUT_EXTENSION, OUTPUT_EXTENSION


class CalculationError(RuntimeError):
    """Gaussian could not be run or exited with a non-zero status."""

    def __init__(self, name, executable, reason):
        self.name = name
        self.executable = executable
        super().__init__(
            f"Calculation of {name} failed ({executable}: {reason}). "
            f"Check your PATH and GAUSS_EXEDIR."
        )


class GaussianRunner:
    """
    Invokes `<executable> <name>.gjf <name>.out` in the working directory.

    The first candidate executable is used until the very first calculation
    of the runner fails; only then is the next candidate tried, once.
    No timeout is imposed: a hanging Gaussian job blocks the run.
    """
    def __init__(self, executables=GAUSSIAN_EXECUTABLES, cwd=".", message_service=None):
        if not executables:
            raise ValueError("At least one Gaussian executable is required")
        self.executables = tuple(executables)
        self.executable = self.executables[0]
        self.cwd = cwd
        self.message_service = message_service
        self._first_call = True

    def command(self, name):
        return [self.executable, name + INPUT_EXTENSION, name + OUTPUT_EXTENSION]

    def _invoke(self, name):
        """Returns None on success, otherwise a short failure reason."""
        try:
            subprocess.run(self.command(name), cwd=self.cwd, check=True)
        except subprocess.CalledProcessError as e:
            return f"exit status {e.returncode}"
        except OSError as e:
            return str(e)
        return None

    def run(self, name):
        """
        Run the calculation for one molecule.

        Returns:
            str: path of the output file

        Raises:
            CalculationError: the calculation failed after any fallback
        """
        allow_fallback = self._first_call
        self._first_call = False

        reason = self._invoke(name)
        if reason and allow_fallback and len(self.executables) > 1:
            previous = self.executable
            self.executable = self.executables[1]
            if self.message_service:
                self.message_service.log_warning(
                    f"Calling {previous} failed, try calling {self.executable}...this may NOT be an error."
                )
            reason = self._invoke(name)

        if reason:
            raise CalculationError(name, self.executable, reason)
        return os.path.join(self.cwd, name + OUTPUT_EXTENSION)
