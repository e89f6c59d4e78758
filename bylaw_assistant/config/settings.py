
from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    openai_api_key: str = ""

    # "openai" (hosted) or "local" (sentence-transformers)
    embedding_provider: str = "openai"
    embedding_model: str = "text-embedding-3-small"
    local_embedding_model: str = "sentence-transformers/all-MiniLM-L6-v2"
    embedding_batch_size: int = 10
    embedding_batch_delay: float = 0.5

    # "pinecone" or "chroma"
    vector_backend: str = "pinecone"

    pinecone_api_key: str = ""
    pinecone_index: str = "oak-bay-bylaws"
    pinecone_namespace: str = ""

    chroma_host: str = "localhost"
    chroma_port: int = 8001
    chroma_collection: str = "oak_bay_bylaws"

    cache_capacity: int = 100
    cache_ttl_ms: int = 5 * 60 * 1000
    cache_sweep_interval: float = 60.0

    search_default_limit: int = 5
    search_default_min_score: float = 0.5

    docs_path: str = "./public/pdfs"
    chunk_min_length: int = 50
    chunk_max_length: int = 1000

    api_host: str = "0.0.0.0"
    api_port: int = 8000

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
