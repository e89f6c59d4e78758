"""Ingest service - bylaw indexing."""

import hashlib
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from ..catalog.bylaws import BylawCatalog
from ..models.document import Chunk, VectorRecord
from ..protocols.embedder import EmbedderProtocol
from ..protocols.vector_store import VectorStoreProtocol

logger = logging.getLogger(__name__)

BYLAW_NUMBER = re.compile(r"(?<!\d)(\d{4})(?!\d)")
ENACTED_YEAR = re.compile(r"(?<!\d)((?:19|20)\d{2})(?!\d)")

# Numbered headings at the start of a line: "1.", "4.2", "4.2.1"
SECTION_HEADING = re.compile(r"(?:^|\n)(\d+(?:\.\d+)*)\.?[ \t]+")
SENTENCE = re.compile(r"[^.!?]+[.!?]+")


class IngestService:
    """Service for indexing bylaw documents into the vector store."""

    def __init__(
        self,
        embedder: EmbedderProtocol,
        vector_store: VectorStoreProtocol,
        catalog: Optional[BylawCatalog] = None,
        docs_path: str = "./public/pdfs",
        min_length: int = 50,
        max_length: int = 1000,
        batch_size: int = 50,
    ):
        """Initialize ingest service.

        Args:
            embedder: Embedding service.
            vector_store: Vector store.
            catalog: Bylaw catalog, for titles and document URLs.
            docs_path: Path to bylaw documents folder.
            min_length: Sections shorter than this are dropped.
            max_length: Sections longer than this are split by sentence.
            batch_size: Chunks per embed/upsert round.
        """
        self._embedder = embedder
        self._vector_store = vector_store
        self._catalog = catalog or BylawCatalog()
        self._docs_path = Path(docs_path)
        self._min_length = min_length
        self._max_length = max_length
        self._batch_size = batch_size

        self._loader: Optional["CompositeLoader"] = None

    @property
    def loader(self):
        """Lazy load document loader."""
        if self._loader is None:
            from bylaw_assistant.infrastructure.document_loaders import CompositeLoader

            self._loader = CompositeLoader()
        return self._loader

    def _compute_hash(self, content: str) -> str:
        """Compute content hash."""
        return hashlib.md5(content.encode()).hexdigest()[:12]

    @staticmethod
    def bylaw_number_from(file_path: Path) -> Optional[str]:
        """First standalone 4-digit run in the file name."""
        match = BYLAW_NUMBER.search(file_path.stem)
        return match.group(1) if match else None

    @staticmethod
    def enacted_year_from(file_path: Path, bylaw_number: str) -> str:
        stem = file_path.stem.replace(bylaw_number, "", 1)
        match = ENACTED_YEAR.search(stem)
        return match.group(1) if match else "Unknown"

    def _split_sentences(self, text: str) -> list[str]:
        """Pack sentences into pieces no longer than max_length."""
        sentences = SENTENCE.findall(text) or [text]
        pieces = []
        current = ""

        for sentence in sentences:
            if current and len(current) + len(sentence) > self._max_length:
                pieces.append(current.strip())
                current = sentence
            else:
                current += sentence

        if current.strip():
            pieces.append(current.strip())

        return pieces

    def chunk_sections(self, text: str) -> list[tuple[str, str]]:
        """Split bylaw text into (section, text) chunks.

        Sections start at numbered headings. Sections shorter than
        min_length are dropped, longer than max_length are split on
        sentence boundaries. Text without headings falls back to
        sentence packing with sections named `chunk-N`.
        """
        headings = list(SECTION_HEADING.finditer(text))
        chunks: list[tuple[str, str]] = []

        for i, heading in enumerate(headings):
            end = headings[i + 1].start() if i + 1 < len(headings) else len(text)
            body = text[heading.end() : end].strip()

            if len(body) < self._min_length:
                continue

            section = heading.group(1)
            if len(body) > self._max_length:
                chunks.extend((section, piece) for piece in self._split_sentences(body))
            else:
                chunks.append((section, body))

        if chunks:
            return chunks

        text = text.strip()
        if not text:
            return []
        return [(f"chunk-{i}", piece) for i, piece in enumerate(self._split_sentences(text))]

    def _metadata(self, chunk: Chunk, date_enacted: str, indexed_at: str) -> dict:
        return {
            "bylawNumber": chunk.bylaw_number,
            "title": chunk.title,
            "section": chunk.section,
            "text": chunk.content,
            "url": self._catalog.document_url(chunk.bylaw_number, chunk.section),
            "category": "General",
            "dateEnacted": date_enacted,
            "lastUpdated": indexed_at,
            "fileHash": chunk.file_hash,
            "source": chunk.source,
        }

    def run(self, force: bool = False) -> int:
        """Index bylaw documents.

        Args:
            force: Force re-indexing of all documents.

        Returns:
            Number of new chunks indexed.
        """
        if not self._docs_path.exists():
            logger.error(f"Docs path not found: {self._docs_path}")
            return 0

        existing_hashes = set()
        if not force:
            for meta in self._vector_store.get_all_metadatas():
                if "fileHash" in meta:
                    existing_hashes.add(meta["fileHash"])

        all_chunks: list[tuple[Chunk, str]] = []

        for file_path in sorted(self._docs_path.iterdir()):
            if not self.loader.supports(file_path):
                continue

            bylaw_number = self.bylaw_number_from(file_path)
            if bylaw_number is None:
                logger.warning(f"Skip {file_path.name}: no bylaw number in file name")
                continue

            content = self.loader.load(file_path)
            if not content:
                continue

            file_hash = self._compute_hash(content)
            if file_hash in existing_hashes:
                logger.debug(f"Skip unchanged: {file_path.name}")
                continue

            title = self._catalog.title_for(bylaw_number)
            date_enacted = self.enacted_year_from(file_path, bylaw_number)

            for i, (section, text) in enumerate(self.chunk_sections(content)):
                chunk = Chunk(
                    content=text,
                    bylaw_number=bylaw_number,
                    title=title,
                    section=section,
                    source=file_path.name,
                    file_hash=file_hash,
                    chunk_index=i,
                )
                all_chunks.append((chunk, date_enacted))

        if not all_chunks:
            logger.info("No new documents to index")
            return 0

        indexed_at = datetime.now(timezone.utc).isoformat()
        total_indexed = 0
        for i in range(0, len(all_chunks), self._batch_size):
            batch = all_chunks[i : i + self._batch_size]

            embeddings = self._embedder.embed_batch([c.content for c, _ in batch])
            records = [
                VectorRecord(
                    id=chunk.id,
                    values=vector,
                    metadata=self._metadata(chunk, date_enacted, indexed_at),
                )
                for (chunk, date_enacted), vector in zip(batch, embeddings)
            ]
            self._vector_store.upsert(records)

            total_indexed += len(batch)
            logger.info(f"Indexed batch: {total_indexed}/{len(all_chunks)}")

        logger.info(
            f"Indexing complete: {total_indexed} chunks from {len(set(c.source for c, _ in all_chunks))} files"
        )
        return total_indexed
