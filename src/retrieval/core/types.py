"""Core data types for the retrieval action layer.

Documents come in two variants that share optional metadata:

- ``TextDocument``: ``content`` is a plain string.
- ``MultipartDocument``: ``content`` carries ``mimeType``, ``data`` and an
  optional raw ``blob``.

Both are frozen pydantic models, so a document's variant never changes after
creation. A store picks one of the two classes as its document schema and the
same class validates both retrieval output and indexing input.
"""

from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field


class BaseDocument(BaseModel):
    """Fields shared by every document variant."""

    model_config = ConfigDict(frozen=True)

    metadata: Optional[Dict[str, Any]] = None


class TextDocument(BaseDocument):
    """Document whose content is plain text."""

    content: str


class MultipartContent(BaseModel):
    """MIME-typed payload of a multipart document.

    Fields:
        mime_type: MIME type of the payload, ``mimeType`` on the wire
        data: Encoded payload (e.g. base64 or a URL)
        blob: Optional raw binary payload
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mime_type: str = Field(alias="mimeType")
    data: str
    blob: Optional[bytes] = None


class MultipartDocument(BaseDocument):
    """Document whose content is a MIME-typed payload."""

    content: MultipartContent


Document = Union[TextDocument, MultipartDocument]
DocumentSchema = Union[Type[TextDocument], Type[MultipartDocument]]


class CommonRetrieverOptions(BaseModel):
    """Options understood by most retrievers."""

    k: Optional[float] = Field(default=None, description="Number of documents to retrieve")


class CommonIndexerOptions(BaseModel):
    """Options understood by every indexer (none)."""


QueryT = TypeVar("QueryT")
OptionsT = TypeVar("OptionsT")

# User-supplied implementations. Retrievers may return documents or plain
# mappings; the action validates them against the document schema either way.
RetrieverFn = Callable[[QueryT, OptionsT], Awaitable[Sequence[Union[Document, Dict[str, Any]]]]]
IndexerFn = Callable[[List[Document], OptionsT], Awaitable[None]]
