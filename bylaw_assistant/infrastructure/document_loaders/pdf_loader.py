import re
from pathlib import Path

from pypdf import PdfReader

# Page furniture repeated on consolidated bylaw PDFs
PAGE_FOOTER = re.compile(r"^\s*Page \d+(?: of \d+)?\s*$", re.MULTILINE | re.IGNORECASE)


class PDFLoader:
    """Extract bylaw text from a PDF, one page after another."""

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".pdf"

    def load(self, file_path: Path) -> str:
        reader = PdfReader(file_path)
        text_parts = []
        for page in reader.pages:
            text = page.extract_text()
            if text:
                text_parts.append(PAGE_FOOTER.sub("", text).strip())
        return "\n".join(part for part in text_parts if part)
