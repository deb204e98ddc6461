"""Retriever factory.

Wraps a user retrieval function into a validated ``retrieve`` action,
registers it under ``retriever`` / ``provider/id`` and returns it tagged with
the schemas it was built from.
"""

from typing import Any, List, Optional, Type

from core.action import ActionRegistry, ActionType, action, get_registry
from core.observation.logger import get_logger

from ..core.metadata import QueryT, DocT, OptionsT, RetrieverAction, retriever_with_metadata
from ..core.types import RetrieverFn
from .requests import retriever_request_model

logger = get_logger(__name__)


def retriever_factory(
    provider: str,
    retriever_id: str,
    input_type: Type[QueryT],
    document_type: Type[DocT],
    custom_options_type: Type[OptionsT],
    fn: RetrieverFn[QueryT, OptionsT],
    *,
    registry: Optional[ActionRegistry] = None,
) -> RetrieverAction[QueryT, DocT, OptionsT]:
    """Create and register a retriever action for ``fn``.

    Args:
        provider: Provider name, first half of the registration key
        retriever_id: Retriever id, second half of the registration key
        input_type: Schema of the query
        document_type: Schema every returned document must match
        custom_options_type: Schema of the retrieval options
        fn: ``async fn(query, options) -> documents``
        registry: Registry to file the action into (process-wide by default)

    Returns:
        The registered action, invocable as ``await retriever({"query": ..., "options": ...})``
    """

    async def handler(request: Any) -> List[Any]:
        return await fn(request.query, request.options)

    retriever = action(
        name="retrieve",
        input_schema=retriever_request_model(input_type, custom_options_type),
        output_schema=List[document_type],
        handler=handler,
        description=f"Retrieves {document_type.__name__} from {provider}/{retriever_id}",
    )

    key = f"{provider}/{retriever_id}"
    (registry or get_registry()).register_action(ActionType.RETRIEVER, key, retriever)
    logger.debug("Created retriever %s (document type %s)", key, document_type.__name__)

    return retriever_with_metadata(retriever, input_type, document_type, custom_options_type)
