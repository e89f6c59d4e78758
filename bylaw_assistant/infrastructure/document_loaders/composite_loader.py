import logging
from pathlib import Path
from typing import Optional

from .pdf_loader import PDFLoader
from .text_loader import TextLoader

logger = logging.getLogger(__name__)


class CompositeLoader:
    """Dispatch to the first loader that supports the file."""

    def __init__(self, loaders: Optional[list] = None):
        self._loaders = loaders or [PDFLoader(), TextLoader()]

    def supports(self, file_path: Path) -> bool:
        return file_path.is_file() and any(
            loader.supports(file_path) for loader in self._loaders
        )

    def load(self, file_path: Path) -> Optional[str]:
        for loader in self._loaders:
            if loader.supports(file_path):
                try:
                    return loader.load(file_path)
                except Exception as e:
                    logger.error(f"Failed to load {file_path.name}: {e}")
                    return None
        return None
