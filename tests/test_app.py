"""Tests for the command-line entry point."""

from free_body import run


class TestRun:
    """Tests for run()."""

    def test_prints_report(self, capsys):
        assert run([]) == 0
        out = capsys.readouterr().out
        assert "shoulder" in out
        assert "moment arm 100.00 mm" in out

    def test_overrides_are_applied(self, capsys):
        assert run(["--zoom", "600"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines()[0] == "origin    (300.00, 300.00)"

    def test_bad_parameter_exits_with_error(self, capsys):
        assert run(["--rx", "45 deg"]) == 2
        assert "Invalid parameters" in capsys.readouterr().err

    def test_spaced_unit_is_accepted(self, capsys):
        assert run(["--density", "997 kg / m^3"]) == 0
        assert "shoulder" in capsys.readouterr().out

    def test_unparseable_density_exits_with_error(self, capsys):
        assert run(["--density", "lots"]) == 2
        assert "Invalid parameters" in capsys.readouterr().err
