#!/usr/bin/env python3
"""
reference_data.py
-----------------
Experimental reference values for the 15-molecule scaler benchmark.

Fundamental frequencies (cm^-1) follow the F38/10 set and zero-point
energies (kcal/mol) the ZPVE15/10 set of JCTC 6, 2872 (2010).
Each molecule contributes a fixed number of fundamentals; 38 in total.
"""

from collections import namedtuple

import numpy as np


Molecule = namedtuple("Molecule", ["name", "n_frequencies", "zpe", "frequencies"])


MOLECULES = (
    Molecule("HF",   1, 5.86353,   (3959,)),
    Molecule("H2",   1, 6.2310,    (4159,)),
    Molecule("N2",   1, 3.3618,    (2330,)),
    Molecule("F2",   1, 1.3021,    (894,)),
    Molecule("CO",   1, 3.0929144, (2143,)),
    Molecule("OH",   1, 5.2915,    (3568,)),
    Molecule("Cl2",  1, 0.7983,    (554,)),
    Molecule("CO2",  3, 7.3,       (667, 1333, 2349)),
    Molecule("H2O",  3, 13.26,     (1595, 3657, 3756)),
    Molecule("N2O",  3, 6.770,     (589, 1285, 2224)),
    Molecule("HCN",  3, 10.0,      (712, 2089, 3312)),
    Molecule("C2H2", 5, 16.49,     (612, 730, 1974, 3289, 3374)),
    Molecule("H2CO", 6, 16.1,      (1167, 1249, 1500, 1746, 2782, 2843)),
    Molecule("NH3",  4, 21.200,    (950, 1627, 3337, 3444)),
    Molecule("CH4",  4, 27.710,    (1306, 1534, 2917, 3019)),
)

TOTAL_MOLECULES = len(MOLECULES)
TOTAL_FREQUENCIES = sum(m.n_frequencies for m in MOLECULES)

_BY_NAME = {m.name: m for m in MOLECULES}


def get_molecule(name):
    """Return the Molecule record for an identifier such as 'H2O'."""
    return _BY_NAME[name]


def molecule_names():
    return [m.name for m in MOLECULES]


def frequency_offsets(molecules=MOLECULES):
    """
    Start offset of each molecule inside the flattened frequency sequence.

    Returns:
        list: offsets in table order, e.g. [0, 1, 2, ..., 7, 10, ...]
    """
    offsets = []
    position = 0
    for molecule in molecules:
        offsets.append(position)
        position += molecule.n_frequencies
    return offsets


def reference_frequencies(molecules=MOLECULES):
    """Flattened reference fundamentals in table order."""
    return np.array([f for m in molecules for f in m.frequencies], dtype=float)


def reference_zpes(molecules=MOLECULES):
    """Reference zero-point energies in table order."""
    return np.array([m.zpe for m in molecules], dtype=float)
