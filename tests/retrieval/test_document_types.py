"""Tests for document and options schemas."""

import pytest
from pydantic import ValidationError

from retrieval import (
    CommonIndexerOptions,
    CommonRetrieverOptions,
    MultipartContent,
    MultipartDocument,
    TextDocument,
)


def test_text_document_metadata_is_optional():
    """Test text documents accept missing metadata."""
    doc = TextDocument(content="hello")

    assert doc.content == "hello"
    assert doc.metadata is None
    assert doc.model_dump() == {"content": "hello", "metadata": None}


def test_text_document_rejects_non_string_content():
    """Test text content must be a string."""
    with pytest.raises(ValidationError):
        TextDocument(content=123)


def test_text_document_is_frozen():
    """Test a document's content cannot be reassigned."""
    doc = TextDocument(content="hello")

    with pytest.raises(ValidationError):
        doc.content = "changed"


def test_multipart_document_uses_wire_field_names():
    """Test multipart content accepts and dumps mimeType/data/blob."""
    doc = MultipartDocument.model_validate(
        {
            "content": {"mimeType": "image/png", "data": "aGVsbG8="},
            "metadata": {"page": 1},
        }
    )

    assert doc.content.mime_type == "image/png"
    assert doc.model_dump(by_alias=True) == {
        "content": {"mimeType": "image/png", "data": "aGVsbG8=", "blob": None},
        "metadata": {"page": 1},
    }


def test_multipart_content_accepts_python_field_name():
    """Test multipart content can be built with snake_case names."""
    content = MultipartContent(mime_type="text/plain", data="abc", blob=b"abc")

    assert content.blob == b"abc"


def test_multipart_document_requires_mime_type():
    """Test missing mimeType fails validation."""
    with pytest.raises(ValidationError) as exc_info:
        MultipartDocument.model_validate({"content": {"data": "abc"}})

    assert exc_info.value.errors()[0]["loc"] == ("content", "mimeType")


def test_multipart_document_rejects_text_content():
    """Test a text document is not a valid multipart document."""
    with pytest.raises(ValidationError):
        MultipartDocument.model_validate({"content": "plain text"})


def test_common_retriever_options():
    """Test k is an optional number."""
    assert CommonRetrieverOptions().k is None
    assert CommonRetrieverOptions(k=2).k == 2
    assert CommonRetrieverOptions.model_fields["k"].description == "Number of documents to retrieve"

    with pytest.raises(ValidationError):
        CommonRetrieverOptions(k="many")


def test_common_indexer_options_has_no_fields():
    """Test indexer options schema is an empty object."""
    assert CommonIndexerOptions.model_fields == {}
    assert CommonIndexerOptions.model_validate({}).model_dump() == {}
