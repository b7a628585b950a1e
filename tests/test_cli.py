"""End-to-end tests of the command line entry point."""
import pytest

from miniball_d.cli import main


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "DataSet.csv"
    path.write_text("0,0\n4,0\n0,3\n2,1\n")
    return path


class TestMain:

    def test_success(self, data_file, tmp_path):
        out = tmp_path / "Output.csv"
        assert main([str(data_file), str(out)]) == 0
        assert out.read_text() == "6.250000, 2.000000, 1.500000"

    def test_three_dimensions(self, tmp_path):
        data = tmp_path / "cube.csv"
        data.write_text("".join(f"{x},{y},{z}\n" for x in (0, 2) for y in (0, 2) for z in (0, 2)))
        out = tmp_path / "out.csv"
        assert main([str(data), str(out)]) == 0
        fields = [float(v) for v in out.read_text().split(',')]
        assert fields == pytest.approx([3.0, 1.0, 1.0, 1.0])

    def test_missing_input(self, tmp_path):
        assert main([str(tmp_path / "missing.csv"), str(tmp_path / "out.csv")]) == 1
        assert not (tmp_path / "out.csv").exists()

    def test_empty_input(self, tmp_path):
        data = tmp_path / "empty.csv"
        data.write_text("")
        assert main([str(data), str(tmp_path / "out.csv")]) == 1

    def test_unwritable_output(self, data_file, tmp_path):
        assert main([str(data_file), str(tmp_path / "no_such_dir" / "out.csv")]) == 1

    @pytest.mark.parametrize('argv', [[], ["only_one.csv"], ["a.csv", "b.csv", "c.csv"]])
    def test_usage(self, argv, capsys):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 1
        assert "usage" in capsys.readouterr().err

    def test_verbose_report(self, data_file, tmp_path, capsys):
        out = tmp_path / "Output.csv"
        assert main([str(data_file), str(out)], verbose=True) == 0
        printed = capsys.readouterr().out
        assert "Data dimension: 2" in printed
        assert "Number of points in miniball: 4" in printed
        assert "Squared radius: 6.25" in printed
        assert "support points:" in printed
        assert "Relative accuracy:" in printed
        assert "Optimality slack:" in printed
        assert "Validity:" in printed and "ok" in printed
