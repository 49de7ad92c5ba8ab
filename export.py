#!/usr/bin/env python3
"""
export.py

This module writes the scaler fitting results to a plain-text report.
The layout is fixed so reports from different levels can be compared.
"""

from config import RESULT_FILE


def format_results(label, frequency_fit, zpe_fit):
    """
    Build the result report text.

    Parameters:
        label (str): "level: <level>" or "template: <file>"
        frequency_fit (FitResult): fit of the fundamental frequencies
        zpe_fit (FitResult): fit of the zero-point energies

    Returns:
        str: the report, ending with a newline
    """
    lines = [
        label,
        "",
        f"Scaler for fundamental frequency at this level: {frequency_fit.slope:6.4f}",
        f"Squared statistical significant linear coefficient of correlation: {frequency_fit.r_squared:6.4f}",
        "",
        f"Scaler for ZPE at this level: {zpe_fit.slope:6.4f}",
        f"Squared statistical significant linear coefficient of correlation: {zpe_fit.r_squared:6.4f}",
    ]
    return "\n".join(lines) + "\n"


def export_results(label, frequency_fit, zpe_fit, filename=RESULT_FILE, message_service=None):
    """
    Write the result report to a file.

    Parameters:
        label (str): Calculation level label
        frequency_fit (FitResult): Frequency scaler fit
        zpe_fit (FitResult): ZPE scaler fit
        filename (str): The name of the output file
        message_service: Optional MessageService instance for sending status messages

    Returns:
        The filename of the written report
    """
    content = format_results(label, frequency_fit, zpe_fit)

    with open(filename, 'w') as f:
        f.write(content)

    if message_service:
        message_service.log_info(f"Result saved to {filename}")

    return filename
