from pathlib import Path


class TextLoader:
    """Plain-text bylaw transcriptions."""

    EXTENSIONS = {".txt", ".md"}

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.EXTENSIONS

    def load(self, file_path: Path) -> str:
        return file_path.read_text(encoding="utf-8")
