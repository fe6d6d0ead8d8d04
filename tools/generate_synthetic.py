"""Generate a synthetic dataset for flag/check experiments.

Creates two folders under `out_dir`: `synth_db` (images to flag) and
`synth_new` (images to check), plus `synth_labels.csv` listing ground truth.

Usage:
  python tools/generate_synthetic.py --out_dir ./data --count 5
"""
import argparse
import csv
import random
from pathlib import Path

from PIL import Image, ImageDraw


def _aligned(n: int) -> int:
    # base64 output only lines up with the original on 3-byte boundaries
    return n - n % 3


def generate(out_dir: Path, count: int = 5, seed: int = 0):
    rng = random.Random(seed)
    db = out_dir / 'synth_db'
    new = out_dir / 'synth_new'
    db.mkdir(parents=True, exist_ok=True)
    new.mkdir(parents=True, exist_ok=True)

    labels = []
    for i in range(1, count + 1):
        img = Image.new('RGB', (160, 120), (200 + i * 5, 180 + i * 3, 160 + i * 2))
        draw = ImageDraw.Draw(img)
        for x in range(10, 150, 4):
            for y in range(10, 110, 4):
                if (x * y + i) % 13 < 4:
                    draw.point((x, y), (rng.randint(0, 255), 0, 0))
        base = db / f'base_{i}.png'
        img.save(base)
        raw = base.read_bytes()

        # byte-identical copy
        (new / f'new_{i}_copy.png').write_bytes(raw)
        labels.append((f'new_{i}_copy.png', base.name, 'exact'))

        # a plain byte prefix or suffix would still be an exact substring,
        # so each partial variant carries a few foreign bytes
        (new / f'new_{i}_head.png').write_bytes(b'\x00\x01\x02' + raw[:_aligned(len(raw) * 2 // 3)])
        labels.append((f'new_{i}_head.png', base.name, 'partial'))

        cut = _aligned(len(raw) // 2)
        (new / f'new_{i}_spliced.png').write_bytes(raw[:cut] + b'\xde\xad\xbe' + raw[cut:])
        labels.append((f'new_{i}_spliced.png', base.name, 'partial'))

        # re-encoded pixels share no bytes with the stored file
        img.save(new / f'new_{i}_resaved.jpg', quality=90)
        labels.append((f'new_{i}_resaved.jpg', '', 'unique'))

    for j in range(1, count + 1):
        u = Image.new('RGB', (120, 80), (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255)))
        u.save(new / f'new_unique_{j}.png')
        labels.append((f'new_unique_{j}.png', '', 'unique'))

    labp = out_dir / 'synth_labels.csv'
    with open(labp, 'w', newline='', encoding='utf-8') as f:
        w = csv.writer(f)
        w.writerow(['new_image', 'matched_image', 'label'])
        for row in labels:
            w.writerow(row)
    return labp


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument('--out_dir', default='data')
    p.add_argument('--count', type=int, default=5)
    p.add_argument('--seed', type=int, default=0)
    return p.parse_args()


def main():
    args = parse_args()
    labp = generate(Path(args.out_dir), args.count, args.seed)
    print('Done. Labels:', labp)


if __name__ == '__main__':
    main()
