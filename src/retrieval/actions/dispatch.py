"""Generic ``retrieve`` / ``index`` entry points.

Both accept either a ``DocumentStore`` or a bare tagged action:

- retrieval never branches, stores and retriever actions are both invoked
  directly with ``{query, options}``;
- indexing calls ``value.index(...)`` when the value exposes an ``index``
  operation and invokes the value itself otherwise.
"""

from typing import Any, Iterable, List, Optional, Union

from core.constants.exceptions import UnsupportedIndexerError
from core.observation.logger import activity_scope, get_logger

from ..core.metadata import IndexerAction, RetrieverAction
from ..core.types import Document
from .document_store import DocumentStore

logger = get_logger(__name__)


async def retrieve(
    *,
    retriever: Union[DocumentStore, RetrieverAction],
    query: Any,
    options: Optional[Any] = None,
) -> List[Document]:
    """Retrieve documents from a retriever action or a document store."""
    with activity_scope():
        logger.debug("Retrieving via %s", type(retriever).__name__)
        return await retriever({"query": query, "options": options})


async def index(
    *,
    indexer: Union[DocumentStore, IndexerAction],
    docs: Iterable[Any],
    options: Optional[Any] = None,
) -> None:
    """Index documents through an indexer action or a document store.

    ``docs`` is handed to the action untouched; its schema decides what is
    acceptable.

    Raises:
        UnsupportedIndexerError: ``indexer`` has a non-callable ``index``
            attribute, or is neither store-shaped nor callable
    """
    payload = {"docs": docs, "options": options}

    with activity_scope():
        if hasattr(indexer, "index"):
            index_method = getattr(indexer, "index")
            if not callable(index_method):
                raise UnsupportedIndexerError(indexer, "'index' attribute is not callable")
            logger.debug("Indexing via %s.index", type(indexer).__name__)
            await index_method(payload)
            return

        if callable(indexer):
            logger.debug("Indexing via direct call")
            await indexer(payload)
            return

    raise UnsupportedIndexerError(indexer, "expected a document store or an indexer action")
