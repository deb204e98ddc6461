"""Retriever / indexer factories, document store and dispatch entry points."""

from .retriever import retriever_factory
from .indexer import indexer_factory
from .document_store import DocumentStore, document_store_factory
from .dispatch import index, retrieve

__all__ = [
    'retriever_factory',
    'indexer_factory',
    'DocumentStore',
    'document_store_factory',
    'index',
    'retrieve',
]
