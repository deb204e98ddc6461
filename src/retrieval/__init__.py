"""Retrieval module - typed retriever / indexer actions.

This module contains:
- core: document model (text and multipart documents, common options) and
  the type tags attached to retriever/indexer actions
- actions: factories that turn user functions into registered actions, the
  document store composing both, and the generic retrieve/index entry points

Example:
    from retrieval import (
        CommonIndexerOptions,
        CommonRetrieverOptions,
        TextDocument,
        document_store_factory,
        index,
        retrieve,
    )

    store = document_store_factory(
        provider="memory",
        id="simple",
        input_type=str,
        document_type=TextDocument,
        retriever_options_type=CommonRetrieverOptions,
        indexer_options_type=CommonIndexerOptions,
        retrieve_fn=search,
        index_fn=add,
    )
    await index(indexer=store, docs=[TextDocument(content="a")])
    docs = await retrieve(retriever=store, query="a", options={"k": 2})
"""

from .core import (
    CommonIndexerOptions,
    CommonRetrieverOptions,
    Document,
    IndexerAction,
    MultipartContent,
    MultipartDocument,
    RetrieverAction,
    TextDocument,
)
from .actions import (
    DocumentStore,
    document_store_factory,
    index,
    indexer_factory,
    retrieve,
    retriever_factory,
)

__all__ = [
    # Document model
    "CommonIndexerOptions",
    "CommonRetrieverOptions",
    "Document",
    "MultipartContent",
    "MultipartDocument",
    "TextDocument",
    # Actions
    "IndexerAction",
    "RetrieverAction",
    "DocumentStore",
    "document_store_factory",
    "index",
    "indexer_factory",
    "retrieve",
    "retriever_factory",
]
