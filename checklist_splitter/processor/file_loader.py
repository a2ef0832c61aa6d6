from pathlib import Path


class FileLoader:
    """Reads the checklist document bytes from disk."""

    def load(self, path: Path) -> bytes:
        """Read document bytes from disk.

        Raises:
            FileNotFoundError: if the file does not exist at the given path.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return path.read_bytes()
