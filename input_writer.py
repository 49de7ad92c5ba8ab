#!/usr/bin/env python3
"""
input_writer.py

Writes one Gaussian input file per benchmark molecule, either from a
calculation level string or from a user template containing placeholders.
"""

import os
import re

from config import (INPUT_EXTENSION, ROUTE_TEMPLATE, TEMPLATE_PLACEHOLDERS)
from benchmark_geometries import get_geometry


class InputGenerationError(Exception):
    """An input file could not be generated."""


class GaussianTemplate:
    """
    A Gaussian input template split once into literal text and placeholder
    tokens. Rendering substitutes the tokens for one molecule.

    Recognised placeholders (see config.TEMPLATE_PLACEHOLDERS):
        [NAME]      molecule identifier, e.g. for the title or %chk line
        [GEOMETRY]  charge/multiplicity line followed by the atoms
    """

    _token_pat = re.compile(
        "(" + "|".join(re.escape(t) for t in TEMPLATE_PLACEHOLDERS.values()) + ")"
    )

    def __init__(self, text, source=None):
        self.source = source
        self.parts = self._split(text)
        if TEMPLATE_PLACEHOLDERS["geometry"] not in self.parts:
            where = f" {source}" if source else ""
            raise InputGenerationError(
                f"Template{where} has no {TEMPLATE_PLACEHOLDERS['geometry']} placeholder"
            )

    @classmethod
    def from_file(cls, file_path):
        try:
            with open(file_path, 'r') as f:
                text = f.read()
        except OSError as e:
            raise InputGenerationError(f"Cannot read template {file_path}: {e}") from e
        return cls(text, source=file_path)

    @classmethod
    def from_text(cls, text):
        return cls(text)

    def _split(self, text):
        # re.split with a capture group keeps the tokens; drop empty literals
        return [part for part in self._token_pat.split(text) if part]

    def render(self, name, geometry):
        values = {
            TEMPLATE_PLACEHOLDERS["name"]: name,
            TEMPLATE_PLACEHOLDERS["geometry"]: geometry.to_gaussian(),
        }
        text = "".join(values.get(part, part) for part in self.parts)
        # Gaussian needs a blank line after the molecule specification
        if not text.endswith("\n\n"):
            text = text.rstrip("\n") + "\n\n"
        return text


class InputWriter:
    """
    Generates `<name>.gjf` inputs for the benchmark molecules.

    Exactly one of `level` (e.g. "B3LYP/6-31G*") or `template`
    (a GaussianTemplate) must be given.
    """
    def __init__(self, level=None, template=None, message_service=None):
        if (level is None) == (template is None):
            raise ValueError("Give either a calculation level or a template")
        self.level = level
        self.template = template
        self.message_service = message_service

    @property
    def label(self):
        """Text identifying the calculation level in the result report."""
        if self.template is not None:
            return f"template: {self.template.source or '<text>'}"
        return f"level: {self.level}"

    def render(self, name):
        geometry = get_geometry(name)
        if self.template is not None:
            return self.template.render(name, geometry)

        route = ROUTE_TEMPLATE.format(level=self.level)
        return f"{route}\n\n{name}\n\n{geometry.to_gaussian()}\n\n"

    def write(self, name, directory="."):
        """
        Write the input file for one molecule.

        Returns:
            str: path of the written file

        Raises:
            InputGenerationError: the file could not be created
        """
        file_path = os.path.join(directory, name + INPUT_EXTENSION)
        if self.message_service:
            self.message_service.log_info(f"Generating input file for {name}...")
        content = self.render(name)
        try:
            with open(file_path, 'w') as f:
                f.write(content)
        except OSError as e:
            raise InputGenerationError(f"Cannot create Gaussian input file {file_path}: {e}") from e
        return file_path
