import pytest

from symorder.core.domain.models.census_record import CensusRecord, ClassificationPath
from symorder.infrastructure.repositories import write_census_records
from symorder.presentation.cli import census_report, detect_order


class TestDetectOrder:
    """Tests for the order detection command."""

    def test_axis_from_chain_superposition(self, c3_trimer_pdb, capsys):
        assert detect_order.main([str(c3_trimer_pdb), "--axis-chains", "A", "B"]) == 0
        assert capsys.readouterr().out == "c3\t3\n"

    def test_explicit_axis(self, c3_trimer_pdb, capsys):
        argv = [str(c3_trimer_pdb), "--axis-direction", "0", "0", "1", "--chains", "A", "B", "C"]
        assert detect_order.main(argv) == 0
        assert capsys.readouterr().out == "c3\t3\n"

    def test_missing_file(self, tmp_path, capsys):
        argv = [str(tmp_path / "missing.pdb"), "--axis-direction", "0", "0", "1"]
        assert detect_order.main(argv) == 1
        assert capsys.readouterr().out == ""

    def test_invalid_config(self, c3_trimer_pdb):
        argv = [str(c3_trimer_pdb), "--axis-direction", "0", "0", "1", "--bandwidth", "2"]
        assert detect_order.main(argv) == 1

    def test_failed_detection(self, c3_trimer_pdb):
        argv = [str(c3_trimer_pdb), "--axis-direction", "0", "0", "1", "--degree-sampling", "90"]
        assert detect_order.main(argv) == 1

    def test_axis_is_required(self, c3_trimer_pdb):
        with pytest.raises(SystemExit):
            detect_order.main([str(c3_trimer_pdb)])


class TestCensusReport:
    """Tests for the census report command."""

    @pytest.fixture
    def census_file(self, tmp_path):
        records = [
            CensusRecord("d1", 2, ClassificationPath("F1", "SF1", "FA1")),
            CensusRecord("d2", 2, ClassificationPath("F1", "SF2", "FA2")),
            CensusRecord("d3", None, ClassificationPath("F2", "SF3", "FA3")),
        ]
        return write_census_records(records, str(tmp_path / "census.csv"))

    def test_table_only(self, census_file, capsys):
        assert census_report.main([census_file, "--no-summary"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "order\tN folds\tN superfamilies\tN families\tN domains\texamples",
            "2\t1\t2\t2\t2\tSF1\tSF2",
        ]

    def test_summary_and_delimiters(self, census_file, capsys):
        argv = [census_file, "--delimiter", ",", "--example-separator", "SPACE"]
        assert census_report.main(argv) == 0
        out = capsys.readouterr().out
        assert "2 domains, 2 families, 2 superfamilies, 1 folds for order=2:" in out
        assert out.endswith("2,1,2,2,2,SF1 SF2\n")

    def test_unreadable_file(self, tmp_path):
        assert census_report.main([str(tmp_path / "missing.csv")]) == 1


@pytest.mark.parametrize(
    "value, expected",
    [
        ("TAB", "\t"),
        ("newline", "\n"),
        ("SPACE", " "),
        ("\\t", "\t"),
        (";\\n", ";\n"),
        (",", ","),
        ("§", "§"),
        ("→", "→"),
    ],
)
def test_delimiter_values(value, expected):
    assert census_report._delimiter(value) == expected
