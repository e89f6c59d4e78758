"""Bylaw document loaders."""
from .pdf_loader import PDFLoader
from .text_loader import TextLoader
from .composite_loader import CompositeLoader

__all__ = ["PDFLoader", "TextLoader", "CompositeLoader"]
