"""Shared fixtures for retrieval tests."""

import pytest
from unittest.mock import AsyncMock

from retrieval import (
    CommonIndexerOptions,
    CommonRetrieverOptions,
    MultipartDocument,
    TextDocument,
    document_store_factory,
)


class InMemoryCollection:
    """Backing collection for the ``memory/simple`` store used in tests."""

    def __init__(self):
        self.docs = []

    async def add(self, docs, options):
        self.docs.extend(docs)

    async def search(self, query, options):
        hits = [doc for doc in self.docs if query in doc.content]
        if options.k is not None:
            hits = hits[: int(options.k)]
        return hits


@pytest.fixture
def collection():
    """Empty in-memory collection."""
    return InMemoryCollection()


@pytest.fixture
def text_store(collection, registry):
    """Text document store registered as memory/simple."""
    return document_store_factory(
        provider="memory",
        id="simple",
        input_type=str,
        document_type=TextDocument,
        retriever_options_type=CommonRetrieverOptions,
        indexer_options_type=CommonIndexerOptions,
        retrieve_fn=collection.search,
        index_fn=collection.add,
        registry=registry,
    )


@pytest.fixture
def multipart_index_fn():
    """Indexing function that records its calls."""
    return AsyncMock(return_value=None)


@pytest.fixture
def multipart_store(multipart_index_fn, registry):
    """Multipart document store registered as memory/images."""
    return document_store_factory(
        provider="memory",
        id="images",
        input_type=str,
        document_type=MultipartDocument,
        retriever_options_type=CommonRetrieverOptions,
        indexer_options_type=CommonIndexerOptions,
        retrieve_fn=AsyncMock(return_value=[]),
        index_fn=multipart_index_fn,
        registry=registry,
    )


@pytest.fixture
def sample_text_documents():
    """Sample text documents."""
    return [
        TextDocument(content="hello world", metadata={"source": "greeting"}),
        TextDocument(content="hello again"),
        TextDocument(content="hello there", metadata={"source": "greeting"}),
        TextDocument(content="goodbye"),
    ]
