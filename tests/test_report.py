from pathlib import Path

from dupflag import report
from dupflag.matcher import MatchResult


def test_write_csv_rows(tmp_path: Path):
    results = [
        MatchResult(Path("a.png"), exact=True, partial=None),
        MatchResult(Path("b.png"), exact=False, partial=True),
        MatchResult(Path("c.png"), exact=False, partial=False),
    ]
    out = tmp_path / "reports" / "check.csv"
    report.write_csv(results, out)
    rows = report.read_csv(out)
    assert [r["image"] for r in rows] == ["a.png", "b.png", "c.png"]
    assert [r["result"] for r in rows] == ["found", "found", "not_found"]
    assert [r["partial"] for r in rows] == ["", "yes", "no"]
    assert list(rows[0].keys()) == report.CSV_FIELDS
