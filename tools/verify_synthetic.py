"""Quick evaluator for the synthetic flag/check dataset.

Usage example:
    python tools/verify_synthetic.py \
      --db_dir data/synth_db \
      --input_dir data/synth_new \
      --labels data/synth_labels.csv

The script flags the db images into a scratch store, checks every input image
with and without partial matching and reports how many annotated exact,
partial and unique images end up with the expected outcome.
"""
import argparse
import csv
import logging
import sys
import tempfile
from pathlib import Path
from typing import Dict, List

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dupflag import encoder, inputs, matcher, recorder
from dupflag.config import Config
from dupflag.store import FlatFileStore

# label -> (expected found without --partial, expected found with --partial)
EXPECTED = {
    "exact": (True, True),
    "partial": (False, True),
    "unique": (False, False),
}


def load_labels(path: Path) -> Dict[str, Dict[str, str]]:
    rows: Dict[str, Dict[str, str]] = {}
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            rows[row["new_image"]] = row
    return rows


def evaluate(db_dir: Path, input_dir: Path, labels_path: Path, *, chunk_length: int) -> Dict[str, object]:
    labels = load_labels(labels_path)
    logger = logging.getLogger("dupflag.verify")
    stats: Dict[str, object] = {"totals": {}, "hits": {}, "mismatches": []}

    with tempfile.TemporaryDirectory() as tmp:
        cfg = Config(store_path=Path(tmp) / "store.db", chunk_length=chunk_length)
        store = FlatFileStore(cfg.store_path)
        db_images = [encoder.encode_image(p, cfg.chunk_length) for p in inputs.collect_images(db_dir, cfg)]
        recorder.flag_images(db_images, store, store.load(), logger)
        store_text = store.load()

        for img_path in inputs.collect_images(input_dir, cfg):
            image = encoder.encode_image(img_path, cfg.chunk_length)
            label = labels.get(img_path.name, {}).get("label", "unique")
            want = EXPECTED.get(label, EXPECTED["unique"])
            got = (
                matcher.match(image, store_text).found,
                matcher.match(image, store_text, partial=True).found,
            )
            stats["totals"][label] = stats["totals"].get(label, 0) + 1
            if got == want:
                stats["hits"][label] = stats["hits"].get(label, 0) + 1
            else:
                stats["mismatches"].append(
                    {"image": img_path.name, "label": label, "expected": want, "predicted": got}
                )
    return stats


def format_summary(stats: Dict[str, object]) -> str:
    lines: List[str] = []
    for label, total in sorted(stats["totals"].items()):
        hits = stats["hits"].get(label, 0)
        lines.append(f"{label.capitalize()} accuracy: {hits}/{total} ({hits / (total or 1):.1%})")
    mismatches = stats["mismatches"]
    if mismatches:
        lines.append("\nMismatches (exact, partial):")
        for miss in mismatches:
            lines.append(
                f" - {miss['image']} [{miss['label']}]: expected {miss['expected']} got {miss['predicted']}"
            )
    else:
        lines.append("\nAll samples matched expected labels.")
    return "\n".join(lines)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Evaluate synthetic flag/check dataset")
    p.add_argument("--db_dir", default="data/synth_db")
    p.add_argument("--input_dir", default="data/synth_new")
    p.add_argument("--labels", default="data/synth_labels.csv")
    p.add_argument("--chunk_length", type=int, default=120)
    return p.parse_args()


def main() -> None:
    args = parse_args()
    stats = evaluate(
        Path(args.db_dir),
        Path(args.input_dir),
        Path(args.labels),
        chunk_length=args.chunk_length,
    )
    print(format_summary(stats))


if __name__ == "__main__":
    main()
