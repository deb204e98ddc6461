"""Document store: one handle over a retriever action and an indexer action."""

from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar

from core.action import ActionRegistry
from core.observation.logger import get_logger

from ..core.metadata import IndexerAction, RetrieverAction
from ..core.types import Document, DocumentSchema, IndexerFn, RetrieverFn
from .indexer import indexer_factory
from .retriever import retriever_factory

logger = get_logger(__name__)

QueryT = TypeVar("QueryT")
RetrieverOptionsT = TypeVar("RetrieverOptionsT")
IndexerOptionsT = TypeVar("IndexerOptionsT")


def _pick(params: Any, *keys: str) -> Any:
    # Missing keys and non-mapping params are left for schema validation to report.
    if not isinstance(params, Mapping):
        return params
    return {key: params[key] for key in keys if key in params}


class DocumentStore(Generic[QueryT, RetrieverOptionsT, IndexerOptionsT]):
    """Callable retrieval handle with an attached ``index`` operation.

    ``await store({"query": ..., "options": ...})`` retrieves through the
    retriever action and ``await store.index({"docs": ..., "options": ...})``
    indexes through the indexer action. The store holds no state of its own.
    """

    __slots__ = ("_retriever", "_indexer")

    def __init__(
        self,
        retriever: RetrieverAction[QueryT, Any, RetrieverOptionsT],
        indexer: IndexerAction[Any, IndexerOptionsT],
    ):
        self._retriever = retriever
        self._indexer = indexer

    @property
    def retriever(self) -> RetrieverAction[QueryT, Any, RetrieverOptionsT]:
        return self._retriever

    @property
    def indexer(self) -> IndexerAction[Any, IndexerOptionsT]:
        return self._indexer

    @property
    def document_type(self) -> DocumentSchema:
        return self._retriever.doc_type

    def __repr__(self) -> str:
        return f"DocumentStore(document_type={self.document_type.__name__})"

    async def __call__(self, params: Mapping[str, Any]) -> List[Document]:
        return await self._retriever(_pick(params, "query", "options"))

    async def index(self, params: Mapping[str, Any]) -> None:
        await self._indexer(_pick(params, "docs", "options"))


def document_store_factory(
    *,
    provider: str,
    id: str,
    input_type: Type[QueryT],
    document_type: DocumentSchema,
    retriever_options_type: Type[RetrieverOptionsT],
    indexer_options_type: Type[IndexerOptionsT],
    retrieve_fn: RetrieverFn[QueryT, RetrieverOptionsT],
    index_fn: IndexerFn[IndexerOptionsT],
    registry: Optional[ActionRegistry] = None,
) -> DocumentStore[QueryT, RetrieverOptionsT, IndexerOptionsT]:
    """Create a ``DocumentStore`` from a retrieval function and an indexing function.

    The indexer is registered before the retriever, both under ``provider/id``
    in their own category, and both share ``document_type`` so retrieved
    documents can always be indexed back.

    Registration is not transactional: if the retriever key is already taken,
    ``DuplicateActionError`` is raised and the freshly registered indexer
    stays in the registry.
    """
    indexer = indexer_factory(
        provider,
        id,
        document_type,
        indexer_options_type,
        index_fn,
        registry=registry,
    )
    retriever = retriever_factory(
        provider,
        id,
        input_type,
        document_type,
        retriever_options_type,
        retrieve_fn,
        registry=registry,
    )
    logger.info("Document store %s/%s ready", provider, id)
    return DocumentStore(retriever, indexer)
