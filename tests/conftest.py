import os

import pytest

from reference_data import MOLECULES

FREQ_SCALE = 0.965
ZPE_SCALE = 0.98

# Degenerate modes are printed once per component
DEGENERACY = {
    "CO2": (2, 1, 1),
    "N2O": (2, 1, 1),
    "HCN": (2, 1, 1),
    "C2H2": (2, 2, 1, 1, 1),
    "NH3": (1, 2, 1, 2),
    "CH4": (3, 2, 1, 3),
}

HEADER = """ Entering Gaussian System, Link 0=g16
 Input=test.gjf
 Output=test.out
 ******************************************
 Gaussian 16:  ES64L-G16RevC.01  3-Jul-2019
 ******************************************
"""

SECTION_START = """ Harmonic frequencies (cm**-1), IR intensities (KM/Mole), Raman scattering
 activities (A**4/AMU), depolarization ratios for plane and unpolarized
 incident light, reduced masses (AMU), force constants (mDyne/A),
 and normal coordinates:
"""

THERMO = """ -------------------
 - Thermochemistry -
 -------------------
 Temperature   298.150 Kelvin.  Pressure   1.00000 Atm.
"""


def frequency_block(values):
    """Gaussian-style normal-mode block, three modes per row."""
    lines = []
    for start in range(0, len(values), 3):
        row = values[start:start + 3]
        lines.append("                      " + "                      ".join(
            str(start + k + 1) for k in range(len(row))))
        lines.append("                     " + "                     ".join("A" for _ in row))
        lines.append(" Frequencies --" + "".join(f"{v:>23.4f}" for v in row))
        lines.append(" Red. masses --" + "".join(f"{1.0823:>23.4f}" for _ in row))
        lines.append(" Frc consts  --" + "".join(f"{1.8712:>23.4f}" for _ in row))
        lines.append(" IR Inten    --" + "".join(f"{10.5:>23.4f}" for _ in row))
        lines.append("  Atom  AN      X      Y      Z")
    return "\n".join(lines) + "\n"


def gaussian_report(frequencies, zpe=6.27708, include_zpe=True, include_section=True,
                    zpe_value_line=None):
    """
    Minimal Gaussian Opt Freq output.

    Parameters:
        frequencies: printed frequencies, in order
        zpe: ZPE in kcal/mol written after the ZPE marker
        include_zpe: write the ZPE marker at all
        include_section: write the normal-coordinates header
        zpe_value_line: replaces the line following the ZPE marker
    """
    text = HEADER
    text += " Full mass-weighted force constant matrix:\n"
    text += " Low frequencies ---   -5.1234   -0.0011    0.0009\n"
    if include_section:
        text += SECTION_START
    text += frequency_block(list(frequencies))
    text += THERMO
    if include_zpe:
        text += " Zero-point vibrational energy      26263.3 (Joules/Mol)\n"
        text += (zpe_value_line if zpe_value_line is not None
                 else f"                                   {zpe:.5f} (Kcal/Mol)") + "\n"
    text += " Normal termination of Gaussian 16 at Mon Oct 19 12:00:00 2026.\n"
    return text


def printed_frequencies(molecule, scale=FREQ_SCALE):
    """Computed frequencies as Gaussian would print them, degenerate modes repeated."""
    counts = DEGENERACY.get(molecule.name, (1,) * molecule.n_frequencies)
    values = []
    for ref, count in zip(molecule.frequencies, counts):
        values.extend([ref / scale] * count)
    return values


def molecule_report(molecule, freq_scale=FREQ_SCALE, zpe_scale=ZPE_SCALE, **kwargs):
    return gaussian_report(printed_frequencies(molecule, freq_scale),
                           zpe=molecule.zpe / zpe_scale, **kwargs)


def benchmark_reports(overrides=None):
    """Reports for all benchmark molecules, keyed by name."""
    reports = {m.name: molecule_report(m) for m in MOLECULES}
    reports.update(overrides or {})
    return reports


class FakeRunner:
    """Stands in for GaussianRunner: writes canned reports into workdir."""

    def __init__(self, workdir, reports):
        self.workdir = workdir
        self.reports = reports
        self.calls = []

    def run(self, name):
        self.calls.append(name)
        path = os.path.join(self.workdir, name + ".out")
        with open(path, "w") as f:
            f.write(self.reports[name])
        return path


@pytest.fixture
def reports():
    return benchmark_reports()


@pytest.fixture
def fake_runner(tmp_path, reports):
    return FakeRunner(str(tmp_path), reports)
