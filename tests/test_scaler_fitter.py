import numpy as np
import pytest

from conftest import FakeRunner, benchmark_reports, molecule_report, FREQ_SCALE, ZPE_SCALE
from input_writer import InputWriter
from message_service import MessageService
from normal_modes import IncompleteResultsError
from reference_data import MOLECULES, TOTAL_FREQUENCIES, TOTAL_MOLECULES, get_molecule
from scaler_fitter import ScalerFitter


def make_fitter(tmp_path, runner):
    return ScalerFitter(InputWriter(level="B3LYP/6-31G*"), runner, workdir=str(tmp_path),
                        message_service=MessageService(quiet=True))


def test_full_run(tmp_path, fake_runner):
    fitter = make_fitter(tmp_path, fake_runner)
    results = fitter.run()

    assert fake_runner.calls == [m.name for m in MOLECULES]
    assert results.computed.frequencies.shape == (TOTAL_FREQUENCIES,)
    assert results.computed.zpes.shape == (TOTAL_MOLECULES,)
    assert not np.isnan(results.computed.frequencies).any()
    assert results.computed.is_complete

    assert 0.96 <= results.frequency_fit.slope <= 0.97
    assert results.frequency_fit.slope == pytest.approx(FREQ_SCALE, abs=1e-5)
    assert results.frequency_fit.r_squared == pytest.approx(1.0, abs=1e-6)
    assert results.zpe_fit.slope == pytest.approx(ZPE_SCALE, abs=1e-5)
    assert results.elapsed >= 0


def test_inputs_are_written(tmp_path, fake_runner):
    make_fitter(tmp_path, fake_runner).run()
    for molecule in MOLECULES:
        assert (tmp_path / f"{molecule.name}.gjf").exists()


def test_degenerate_modes_are_merged_per_molecule(tmp_path, fake_runner):
    results = make_fitter(tmp_path, fake_runner).run()
    index = [m.name for m in MOLECULES].index("CH4")
    expected = [f / FREQ_SCALE for f in get_molecule("CH4").frequencies]
    assert list(results.computed.molecule_frequencies(index)) == pytest.approx(expected, abs=1e-3)


def test_bad_report_stops_before_fitting(tmp_path):
    h2o = get_molecule("H2O")
    reports = benchmark_reports({"H2O": molecule_report(h2o, include_zpe=False)})
    runner = FakeRunner(str(tmp_path), reports)
    fitter = make_fitter(tmp_path, runner)

    with pytest.raises(IncompleteResultsError) as info:
        fitter.run()
    # the remaining molecules are still calculated
    assert len(runner.calls) == TOTAL_MOLECULES
    assert list(info.value.problems) == ["H2O"]
    warnings = fitter.message_service.get_messages("warning")
    assert any("H2O" in w[2] for w in warnings)


def test_missing_report_is_reported(tmp_path, fake_runner):
    class NoOutputRunner(FakeRunner):
        def run(self, name):
            path = super().run(name)
            if name == "N2":
                (tmp_path / "N2.out").unlink()
            return path

    runner = NoOutputRunner(str(tmp_path), fake_runner.reports)
    fitter = make_fitter(tmp_path, runner)
    with pytest.raises(IncompleteResultsError, match="N2: report unreadable"):
        fitter.run()
    assert fitter.message_service.get_messages("error")


def test_comparison_lines(tmp_path, fake_runner):
    fitter = make_fitter(tmp_path, fake_runner)
    fitter.run()
    lines = fitter.comparison_lines()
    assert len(lines) == 2 * TOTAL_FREQUENCIES + 1 + 2 * TOTAL_MOLECULES
    assert lines[1] == "Experimental frequency 0: 3959.0000"
    assert lines[-1] == "Experimental ZPE 14: 27.71000"


def test_cleanup(tmp_path, fake_runner):
    fitter = make_fitter(tmp_path, fake_runner)
    fitter.run()
    (tmp_path / "HF.chk").write_text("")
    (tmp_path / "keep.txt").write_text("")

    removed = fitter.cleanup()
    assert len(removed) == 2 * TOTAL_MOLECULES + 1
    assert sorted(p.name for p in tmp_path.iterdir()) == ["keep.txt"]
