#!/usr/bin/env python3
"""
freqscalers.py

Usage:
  freqscalers [-d] [level]

Runs Gaussian Opt Freq calculations on 15 small molecules and fits the
fundamental frequency and zero-point energy scalers for the given level.
"""

import os
import sys

from config import (DEFAULT_LEVEL, RESULT_FILE, TEMPLATE_FILE,
                    EXIT_SUCCESS, EXIT_INPUT_ERROR, EXIT_CALCULATION_ERROR,
                    EXIT_PARSE_ERROR, EXIT_FIT_ERROR, EXIT_USAGE_ERROR,
                    EXIT_OUTPUT_ERROR)
from calculator import GaussianRunner, CalculationError
from export import export_results, format_results
from help_text import USAGE_TEXT, PROMPT_TEXT
from input_writer import InputWriter, GaussianTemplate, InputGenerationError
from linear_fit import RegressionError
from message_service import MessageService
from normal_modes import IncompleteResultsError
from scaler_fitter import ScalerFitter

HELP_FLAGS = ("-h", "--help", "/?")
DEBUG_FLAGS = ("-d", "--debug")


def _read_line():
    try:
        return input()
    except EOFError:
        return ""


def prompt_level():
    """Ask for the calculation level; an empty answer selects the default."""
    print("\n".join(PROMPT_TEXT))
    level = _read_line().strip()
    print()
    return level or DEFAULT_LEVEL


def pause(prompt):
    print(prompt)
    _read_line()


def build_writer(level, message_service):
    """
    InputWriter for an explicit level, else for template.gjf when present,
    else for a level asked interactively.
    """
    if level is not None:
        return InputWriter(level=level, message_service=message_service)
    if os.path.exists(TEMPLATE_FILE):
        message_service.log_info(f"Using input template {TEMPLATE_FILE}")
        template = GaussianTemplate.from_file(TEMPLATE_FILE)
        return InputWriter(template=template, message_service=message_service)
    return InputWriter(level=prompt_level(), message_service=message_service)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if any(arg in HELP_FLAGS for arg in args):
        print("\n".join(USAGE_TEXT))
        return EXIT_SUCCESS
    debug = any(arg in DEBUG_FLAGS for arg in args)
    args = [arg for arg in args if arg not in DEBUG_FLAGS]
    if len(args) > 1:
        print("\n".join(USAGE_TEXT))
        return EXIT_USAGE_ERROR

    interactive = not args
    messages = MessageService(debug=debug)

    def fail(message, code):
        messages.log_error(message)
        if interactive:
            pause("Press ENTER to exit abnormally...")
        return code

    try:
        writer = build_writer(args[0] if args else None, messages)
    except InputGenerationError as e:
        return fail(str(e), EXIT_INPUT_ERROR)

    runner = GaussianRunner(cwd=".", message_service=messages)
    fitter = ScalerFitter(writer, runner, workdir=".", message_service=messages)

    # --- Calculations ---
    try:
        elapsed = fitter.calculate()
    except InputGenerationError as e:
        return fail(str(e), EXIT_INPUT_ERROR)
    except CalculationError as e:
        return fail(str(e), EXIT_CALCULATION_ERROR)

    if interactive:
        print("\n".join(fitter.comparison_lines()))

    # --- Fitting ---
    try:
        frequency_fit, zpe_fit = fitter.fit()
    except IncompleteResultsError as e:
        return fail(str(e), EXIT_PARSE_ERROR)
    except RegressionError as e:
        return fail(f"Scaler fit failed: {e}", EXIT_FIT_ERROR)

    print()
    print(format_results(writer.label, frequency_fit, zpe_fit), end="")
    try:
        export_results(writer.label, frequency_fit, zpe_fit, RESULT_FILE)
    except OSError as e:
        return fail(f"Cannot write {RESULT_FILE}: {e}", EXIT_OUTPUT_ERROR)
    messages.log_info(f"Time Elapsed: {int(elapsed)} s.")
    print()
    messages.log_info(f"Done! The result has been saved to \"{RESULT_FILE}\".")

    # --- Temporary files ---
    if interactive:
        print("Press ENTER directly will remove temporary files and exit.")
        print("If anything is input, temporary files will be kept.")
        if _read_line() == "":
            fitter.cleanup()
    else:
        fitter.cleanup()

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
