#!/usr/bin/env python3
"""
benchmark_geometries.py
-----------------------
Starting geometries (Angstrom) for the benchmark molecules.
Each entry is an immutable Geometry record looked up by molecule identifier.
"""

from collections import namedtuple


Atom = namedtuple("Atom", ["symbol", "x", "y", "z"])


class Geometry(namedtuple("Geometry", ["charge", "multiplicity", "atoms"])):
    """Charge, spin multiplicity and Cartesian atoms of one molecule."""

    __slots__ = ()

    def to_gaussian(self):
        """
        Molecule specification block for a Gaussian input:
        the "charge multiplicity" line followed by one line per atom.
        """
        lines = [f"{self.charge} {self.multiplicity}"]
        for atom in self.atoms:
            lines.append(f" {atom.symbol:<2}{atom.x:>30.8f}{atom.y:>14.8f}{atom.z:>14.8f}")
        return "\n".join(lines)


def _linear(*atoms):
    """Atoms placed on the z axis: (symbol, z) pairs."""
    return tuple(Atom(symbol, 0.0, 0.0, z) for symbol, z in atoms)


GEOMETRIES = {
    "HF":   Geometry(0, 1, _linear(("F", 0.093383), ("H", -0.840446))),
    "H2":   Geometry(0, 1, _linear(("H", 0.371394), ("H", -0.371394))),
    "N2":   Geometry(0, 1, _linear(("N", 0.552749), ("N", -0.552749))),
    "F2":   Geometry(0, 1, _linear(("F", 0.701406), ("F", -0.701406))),
    "CO":   Geometry(0, 1, _linear(("O", 0.487682), ("C", -0.650243))),
    "OH":   Geometry(0, 2, _linear(("O", 0.109213), ("H", -0.873704))),
    "Cl2":  Geometry(0, 1, _linear(("Cl", 1.020868), ("Cl", -1.020868))),
    "CO2":  Geometry(0, 1, _linear(("C", 0.0), ("O", 1.169148), ("O", -1.169148))),
    "H2O":  Geometry(0, 1, (
        Atom("O", 0.0, 0.0, 0.119718),
        Atom("H", 0.0, 0.761550, -0.478874),
        Atom("H", 0.0, -0.761550, -0.478874),
    )),
    "N2O":  Geometry(0, 1, _linear(("N", -0.072717), ("N", -1.207101), ("O", 1.119840))),
    "HCN":  Geometry(0, 1, _linear(("C", -0.502004), ("H", -1.572134), ("N", 0.654880))),
    "C2H2": Geometry(0, 1, _linear(
        ("C", 0.602486), ("H", 1.669128), ("C", -0.602486), ("H", -1.669128),
    )),
    "H2CO": Geometry(0, 1, (
        Atom("C", 0.0, 0.0, -0.528956),
        Atom("H", 0.0, 0.937892, -1.123662),
        Atom("H", 0.0, -0.937892, -1.123662),
        Atom("O", 0.0, 0.0, 0.677633),
    )),
    "NH3":  Geometry(0, 1, (
        Atom("N", 0.0, 0.0, 0.119357),
        Atom("H", 0.0, 0.938578, -0.278499),
        Atom("H", -0.812832, -0.469289, -0.278499),
        Atom("H", 0.812832, -0.469289, -0.278499),
    )),
    "CH4":  Geometry(0, 1, (
        Atom("C", 0.0, 0.0, 0.0),
        Atom("H", 0.631339, 0.631339, 0.631339),
        Atom("H", -0.631339, -0.631339, 0.631339),
        Atom("H", -0.631339, 0.631339, -0.631339),
        Atom("H", 0.631339, -0.631339, -0.631339),
    )),
}


def get_geometry(name):
    """Return the Geometry for a benchmark molecule identifier."""
    return GEOMETRIES[name]
