from pathlib import Path

from .GenerateError import GenerateError


def write_test_script(output_dir: Path, utility: str, content: str) -> Path:
    """Write ``<output_dir>/<utility>_test.sh`` and return its path.

    Raises:
        GenerateError: If the directory or file cannot be written
    """
    path = output_dir / f"{utility}_test.sh"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise GenerateError(f"Failed to write {path}: {exc}") from exc
    return path
