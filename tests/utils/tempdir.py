from contextlib import contextmanager
from pathlib import Path
import shutil
import tempfile


@contextmanager
def managed_temp_dir(prefix: str):
    tmp_path = Path(tempfile.mkdtemp(prefix=f"ens_search_{prefix}_"))
    try:
        yield tmp_path
    finally:
        shutil.rmtree(tmp_path, ignore_errors=True)


def write_lines(path: Path, lines: list[str]) -> Path:
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path
