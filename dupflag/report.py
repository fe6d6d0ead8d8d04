"""Reporting utilities: CSV output of check results."""
import csv
from pathlib import Path
from typing import Dict, Iterable, List

from dupflag.matcher import MatchResult

CSV_FIELDS = [
    "image",
    "exact",
    "partial",
    "result",
]


def result_row(res: MatchResult) -> Dict[str, str]:
    return {
        "image": str(res.file_path),
        "exact": "yes" if res.exact else "no",
        "partial": "" if res.partial is None else ("yes" if res.partial else "no"),
        "result": "found" if res.found else "not_found",
    }


def write_csv(results: Iterable[MatchResult], out_path: Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for r in results:
            writer.writerow(result_row(r))


def read_csv(path: Path) -> List[Dict[str, str]]:
    with Path(path).open(newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))
