"""Indexer factory.

Wraps a user indexing function into a validated ``index`` action with no
output, registers it under ``indexer`` / ``provider/id`` and returns it tagged
with the schemas it was built from.
"""

from typing import Any, Optional, Type

from core.action import ActionRegistry, ActionType, action, get_registry
from core.observation.logger import get_logger

from ..core.metadata import DocT, OptionsT, IndexerAction, indexer_with_metadata
from ..core.types import IndexerFn
from .requests import indexer_request_model

logger = get_logger(__name__)


def indexer_factory(
    provider: str,
    indexer_id: str,
    document_type: Type[DocT],
    custom_options_type: Type[OptionsT],
    fn: IndexerFn[OptionsT],
    *,
    registry: Optional[ActionRegistry] = None,
) -> IndexerAction[DocT, OptionsT]:
    """Create and register an indexer action for ``fn``.

    Documents are validated against ``document_type`` before ``fn`` runs, so
    ``fn`` never sees a malformed document. Whatever ``fn`` returns is dropped.
    """

    async def handler(request: Any) -> None:
        await fn(request.docs, request.options)

    indexer = action(
        name="index",
        input_schema=indexer_request_model(document_type, custom_options_type),
        output_schema=None,
        handler=handler,
        description=f"Indexes {document_type.__name__} into {provider}/{indexer_id}",
    )

    key = f"{provider}/{indexer_id}"
    (registry or get_registry()).register_action(ActionType.INDEXER, key, indexer)
    logger.debug("Created indexer %s (document type %s)", key, document_type.__name__)

    return indexer_with_metadata(indexer, document_type, custom_options_type)
