"""Request schemas composed from user-supplied query, document and options schemas."""

from typing import Any, List, Mapping, Type

from pydantic import BaseModel, ConfigDict, create_model, model_validator


class ActionRequest(BaseModel):
    """Base for composed ``{..., options}`` requests.

    A missing or ``None`` ``options`` is validated as ``{}``, so option schemas
    whose fields are all optional can be left out by callers. Schemas with
    required fields still fail validation.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @model_validator(mode="before")
    @classmethod
    def _default_options(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and data.get("options") is None:
            return {**data, "options": {}}
        return data


def retriever_request_model(
    query_type: Any, options_type: Any
) -> Type[ActionRequest]:
    """Build the ``{query, options}`` input schema of a retriever."""
    return create_model(
        "RetrieverRequest",
        __base__=ActionRequest,
        query=(query_type, ...),
        options=(options_type, ...),
    )


def indexer_request_model(
    document_type: Any, options_type: Any
) -> Type[ActionRequest]:
    """Build the ``{docs, options}`` input schema of an indexer."""
    return create_model(
        "IndexerRequest",
        __base__=ActionRequest,
        docs=(List[document_type], ...),
        options=(options_type, ...),
    )
