"""Type tags for retriever and indexer actions.

A registered action only knows its composed request/response schemas. The
tagging helpers below attach the query, document and options schemas it was
built from as plain attributes (``query_type``, ``doc_type``,
``custom_options_type``) and return the very same object, typed as
``RetrieverAction`` / ``IndexerAction`` so generic call sites keep precise
types. Nothing reads the tags at runtime.
"""

from typing import Any, List, Mapping, Protocol, Type, TypeVar, cast

from core.action import Action

QueryT = TypeVar("QueryT")
DocT = TypeVar("DocT")
OptionsT = TypeVar("OptionsT")


class RetrieverAction(Protocol[QueryT, DocT, OptionsT]):
    """Retriever action carrying its query, document and options schemas."""

    name: str
    query_type: Type[QueryT]
    doc_type: Type[DocT]
    custom_options_type: Type[OptionsT]

    async def __call__(self, payload: Mapping[str, Any]) -> List[DocT]:
        ...


class IndexerAction(Protocol[DocT, OptionsT]):
    """Indexer action carrying its document and options schemas."""

    name: str
    doc_type: Type[DocT]
    custom_options_type: Type[OptionsT]

    async def __call__(self, payload: Mapping[str, Any]) -> None:
        ...


def retriever_with_metadata(
    retriever: Action,
    query_type: Type[QueryT],
    doc_type: Type[DocT],
    custom_options_type: Type[OptionsT],
) -> RetrieverAction[QueryT, DocT, OptionsT]:
    """Tag ``retriever`` in place and return it unchanged."""
    retriever.query_type = query_type
    retriever.doc_type = doc_type
    retriever.custom_options_type = custom_options_type
    return cast(RetrieverAction[QueryT, DocT, OptionsT], retriever)


def indexer_with_metadata(
    indexer: Action,
    doc_type: Type[DocT],
    custom_options_type: Type[OptionsT],
) -> IndexerAction[DocT, OptionsT]:
    """Tag ``indexer`` in place and return it unchanged."""
    indexer.doc_type = doc_type
    indexer.custom_options_type = custom_options_type
    return cast(IndexerAction[DocT, OptionsT], indexer)
