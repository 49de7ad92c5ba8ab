import os

import pytest

from input_writer import InputWriter, GaussianTemplate, InputGenerationError


def test_level_input(tmp_path):
    writer = InputWriter(level="B3LYP/6-31G*")
    path = writer.write("OH", str(tmp_path))
    assert path == os.path.join(str(tmp_path), "OH.gjf")

    text = open(path).read()
    lines = text.splitlines()
    assert lines[0] == "# Opt Freq B3LYP/6-31G*"
    assert lines[1] == ""
    assert lines[2] == "OH"
    assert lines[3] == ""
    assert lines[4] == "0 2"
    assert lines[5].split()[0] == "O"
    assert lines[6].split()[0] == "H"
    assert text.endswith("\n\n")
    assert writer.label == "level: B3LYP/6-31G*"


TEMPLATE = """%chk=[NAME].chk
%nproc=4
# Opt Freq M062X/def2SVP EmpiricalDispersion=GD3

[NAME] benchmark

[GEOMETRY]
"""


def test_template_rendering():
    template = GaussianTemplate.from_text(TEMPLATE)
    assert "[GEOMETRY]" in template.parts
    writer = InputWriter(template=template)
    text = writer.render("CO2")
    assert text.startswith("%chk=CO2.chk\n")
    assert "\nCO2 benchmark\n" in text
    assert "\n0 1\n C " in text
    assert "[" not in text
    assert text.endswith("\n\n")


def test_template_from_file(tmp_path):
    path = tmp_path / "template.gjf"
    path.write_text(TEMPLATE)
    writer = InputWriter(template=GaussianTemplate.from_file(str(path)))
    assert writer.label == f"template: {path}"
    writer.write("H2", str(tmp_path))
    assert (tmp_path / "H2.gjf").read_text().startswith("%chk=H2.chk")


def test_template_without_geometry_placeholder():
    with pytest.raises(InputGenerationError, match=r"\[GEOMETRY\]"):
        GaussianTemplate.from_text("# Opt Freq HF/3-21G\n\n[NAME]\n\n0 1\nH 0 0 0\n")


def test_unreadable_template(tmp_path):
    with pytest.raises(InputGenerationError):
        GaussianTemplate.from_file(str(tmp_path / "missing.gjf"))


def test_unwritable_directory(tmp_path):
    writer = InputWriter(level="HF/3-21G")
    with pytest.raises(InputGenerationError):
        writer.write("HF", str(tmp_path / "no" / "such" / "dir"))


def test_level_or_template_required():
    with pytest.raises(ValueError):
        InputWriter()
    with pytest.raises(ValueError):
        InputWriter(level="HF/3-21G", template=GaussianTemplate.from_text("[GEOMETRY]"))
