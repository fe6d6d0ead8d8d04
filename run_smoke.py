"""Run a simple smoke test of the flag/check flow without pytest.

Creates temporary directories with tiny JPEG fixtures and runs both commands.
"""
import base64
import tempfile
from pathlib import Path

from dupflag import encoder, inputs, matcher, recorder, report, scanner, store
from dupflag.config import Config
from dupflag.logs import configure_logging


_TINY_JPEG_B64 = (
    "/9j/4AAQSkZJRgABAQAAAQABAAD/2wCEAAkGBxISEBUQEBAVFRUVFRUVFRUVFRUVFRUXFhUVFRUYHSggGBolGxUVITEhJSkrLi4uFx8zODMsNygtLisBCgoKDg0OGhAQGy0lICYtLS0tLS0tLS0tLS0tLS0tLS0tLS0tLS0tLS0tLS0tLS0tLS0tLS0tLS0tLS0tLf/AABEIAJ8BPgMBIgACEQEDEQH/xAAbAAABBQEBAAAAAAAAAAAAAAAAAQIEBQYDB//EADwQAAEDAgQDBgMHAwMFAAAAAAEAAgMEEQUSITEGE0FRMmFxgZGh8COhsUIjUmKyweHxFSNDU5LxJENT/8QAGQEAAwEBAQAAAAAAAAAAAAAAAAECAwQF/8QAJhEBAAICAgIBAwUAAAAAAAAAAAECAxESIQQxQVEiUYGh8GH/2gAMAwEAAhEDEQA/AO4gAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAD//Z"
)


def _write_tiny_jpeg(path: Path) -> None:
    path.write_bytes(base64.b64decode(_TINY_JPEG_B64))


def run():
    with tempfile.TemporaryDirectory() as db_dir, tempfile.TemporaryDirectory() as in_dir, tempfile.TemporaryDirectory() as out_dir:
        dbp = Path(db_dir)
        inp = Path(in_dir)
        outp = Path(out_dir)
        cfg = Config(store_path=outp / "store.db", log_path=outp / "logs.log")
        logger = configure_logging(cfg.log_path)

        _write_tiny_jpeg(dbp / "db_1.jpg")
        _write_tiny_jpeg(inp / "new_1.jpg")
        # cut on a 3-byte boundary so the tail encodes to a suffix of the original
        raw = base64.b64decode(_TINY_JPEG_B64)
        (inp / "new_2_tail.jpg").write_bytes(raw[(len(raw) // 2) // 3 * 3:])

        print("Flagging db images...")
        st = store.FlatFileStore(cfg.store_path)
        db_images = [encoder.encode_image(p, cfg.chunk_length) for p in inputs.collect_images(dbp, cfg)]
        recorder.flag_images(db_images, st, st.load(), logger)

        print("Checking inputs (partial)...")
        new_images = [encoder.encode_image(p, cfg.chunk_length) for p in inputs.collect_images(inp, cfg)]
        stats, results = scanner.check_images(new_images, st.load(), logger, partial=True)
        assert all(isinstance(r, matcher.MatchResult) for r in results)
        csvp = outp / "check_report.csv"
        report.write_csv(results, csvp)
        print(f"Smoke run complete. Found {stats.ratio()}, store holds {st.count()} line(s).")


if __name__ == "__main__":
    run()
