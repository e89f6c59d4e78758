import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Container:
    _factories: dict[type, Callable[[], Any]] = field(default_factory=dict)
    _singletons: dict[type, Any] = field(default_factory=dict)
    _singleton_flags: set[type] = field(default_factory=set)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface.

        Args:
            interface: Interface type.
            factory: Factory function.
            singleton: Whether to cache instance.
        """
        self._factories[interface] = factory
        if singleton:
            self._singleton_flags.add(interface)

    def resolve(self, interface: type[T]) -> T:
        if interface in self._singletons:
            return self._singletons[interface]

        if interface not in self._factories:
            raise KeyError(f"No factory registered for {interface}")

        instance = self._factories[interface]()

        if interface in self._singleton_flags:
            self._singletons[interface] = instance

        return instance

    def reset(self) -> None:
        """Reset singletons (for testing)."""
        self._singletons.clear()


container = Container()


def _build_embedder(settings: Settings):
    if settings.embedding_provider == "local":
        from .infrastructure.embeddings.sentence_transformer import (
            SentenceTransformerEmbedder,
        )

        return SentenceTransformerEmbedder(settings.local_embedding_model)

    from .infrastructure.embeddings.openai_embedder import OpenAIEmbedder

    return OpenAIEmbedder(
        api_key=settings.openai_api_key,
        model=settings.embedding_model,
        batch_size=settings.embedding_batch_size,
        batch_delay=settings.embedding_batch_delay,
    )


def _build_vector_store(settings: Settings):
    if settings.vector_backend == "chroma":
        from .infrastructure.vector_stores.chroma_store import ChromaVectorStore

        return ChromaVectorStore(
            host=settings.chroma_host,
            port=settings.chroma_port,
            collection_name=settings.chroma_collection,
        )

    from .infrastructure.vector_stores.pinecone_store import PineconeVectorStore

    return PineconeVectorStore(
        api_key=settings.pinecone_api_key,
        index_name=settings.pinecone_index,
        namespace=settings.pinecone_namespace,
    )


def configure_container(settings: Settings, target: Container | None = None) -> Container:
    """Configure container with all dependencies.

    Args:
        settings: Application settings.
        target: Container to fill. Defaults to the module-level container.

    Returns:
        Configured container.
    """
    from .core.cache import CacheSweeper, ResultCache
    from .core.catalog import BylawCatalog
    from .core.protocols.embedder import EmbedderProtocol
    from .core.protocols.vector_store import VectorStoreProtocol
    from .core.services.answer_service import AnswerService
    from .core.services.citation_service import CitationService
    from .core.services.ingest_service import IngestService
    from .core.services.search_service import SearchService

    c = target if target is not None else container

    c.register(EmbedderProtocol, lambda: _build_embedder(settings), singleton=True)

    c.register(
        VectorStoreProtocol, lambda: _build_vector_store(settings), singleton=True
    )

    c.register(
        ResultCache,
        lambda: ResultCache(
            capacity=settings.cache_capacity, ttl_ms=settings.cache_ttl_ms
        ),
        singleton=True,
    )

    c.register(
        CacheSweeper,
        lambda: CacheSweeper(
            c.resolve(ResultCache), interval=settings.cache_sweep_interval
        ),
        singleton=True,
    )

    c.register(BylawCatalog, BylawCatalog, singleton=True)

    c.register(
        SearchService,
        lambda: SearchService(
            embedder=c.resolve(EmbedderProtocol),
            vector_store=c.resolve(VectorStoreProtocol),
            cache=c.resolve(ResultCache),
            catalog=c.resolve(BylawCatalog),
        ),
        singleton=True,
    )

    c.register(
        CitationService,
        lambda: CitationService(catalog=c.resolve(BylawCatalog)),
        singleton=True,
    )

    c.register(AnswerService, AnswerService, singleton=True)

    c.register(
        IngestService,
        lambda: IngestService(
            embedder=c.resolve(EmbedderProtocol),
            vector_store=c.resolve(VectorStoreProtocol),
            catalog=c.resolve(BylawCatalog),
            docs_path=settings.docs_path,
            min_length=settings.chunk_min_length,
            max_length=settings.chunk_max_length,
        ),
        singleton=True,
    )

    logger.info(
        f"Container configured: embeddings={settings.embedding_provider}, "
        f"vector backend={settings.vector_backend}"
    )
    return c
