"""Plain-text file persistence."""

from pathlib import Path


class FileStorage:
    """Appends text to files and reads them back.

    Both operations raise OSError on failure.
    """

    def write(self, path: str | Path, content: str) -> None:
        """Append content as one line, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(content.rstrip("\n") + "\n")

    def read_all(self, path: str | Path) -> str:
        """Return the whole file content."""
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
