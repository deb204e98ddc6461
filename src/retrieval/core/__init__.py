"""Core retrieval components: document model and action type tags."""

from .types import (
    BaseDocument,
    CommonIndexerOptions,
    CommonRetrieverOptions,
    Document,
    DocumentSchema,
    IndexerFn,
    MultipartContent,
    MultipartDocument,
    RetrieverFn,
    TextDocument,
)
from .metadata import (
    IndexerAction,
    RetrieverAction,
    indexer_with_metadata,
    retriever_with_metadata,
)

__all__ = [
    'BaseDocument',
    'CommonIndexerOptions',
    'CommonRetrieverOptions',
    'Document',
    'DocumentSchema',
    'IndexerFn',
    'MultipartContent',
    'MultipartDocument',
    'RetrieverFn',
    'TextDocument',
    'IndexerAction',
    'RetrieverAction',
    'indexer_with_metadata',
    'retriever_with_metadata',
]
