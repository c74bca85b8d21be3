"""Unit tests for MetadataClient.

HTTP is served by httpx.MockTransport so no network access is needed.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from govmeta.config.metadata_client_config import (
    TEST_METADATA_CLIENT_CONFIG,
    MetadataClientConfig,
)
from govmeta.domain.errors.extraction import InvalidIdentifierError, MissingFieldError
from govmeta.domain.errors.retrieval import (
    DocumentExpansionError,
    DocumentFetchError,
    EmptyDocumentError,
    MalformedPayloadError,
    NotANodeError,
)
from govmeta.domain.models.field_schema import CIP100_FIELDS
from govmeta.infrastructure.adapters.expanded_document_expander import (
    ExpandedDocumentExpander,
)
from govmeta.infrastructure.adapters.expanded_graph_accessor import (
    ExpandedGraphAccessor,
)
from govmeta.infrastructure.adapters.metadata_client import MetadataClient
from govmeta.infrastructure.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from tests.helpers import document_node

URL = "https://example.com/metadata.jsonld"


def _client(
    handler: Callable[[httpx.Request], httpx.Response],
    config: MetadataClientConfig = TEST_METADATA_CLIENT_CONFIG,
) -> MetadataClient:
    return MetadataClient(
        config=config,
        expander=ExpandedDocumentExpander(),
        accessor=ExpandedGraphAccessor(),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def _json_handler(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=json.dumps(payload))

    return handler


class TestLoad:
    """Successful loads."""

    async def test_loads_expanded_document(self) -> None:
        """An expanded document is fetched and extracted."""
        client = _client(_json_handler([document_node()]))

        document = await client.load(URL)

        assert document.hash_algorithm == "blake2b-256"
        assert document.authors[0].name == "Pi Lanningham"

    async def test_content_type_ignored(self) -> None:
        """Documents served as text/plain are still parsed."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                content=json.dumps(document_node()).encode(),
                headers={"Content-Type": "text/plain"},
            )

        document = await _client(handler).load(URL)

        assert document.body.comment == "This is a test vector for CIP-100"

    async def test_sends_user_agent(self) -> None:
        """The configured User-Agent header is sent."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text=json.dumps(document_node()))

        config = MetadataClientConfig(user_agent="govmeta-test/1.0")
        await _client(handler, config).load(URL)

        assert seen[0].headers["User-Agent"] == "govmeta-test/1.0"
        assert str(seen[0].url) == URL

    async def test_expander_receives_base_iri(self) -> None:
        """The expander is given the parsed payload and the request URL."""
        expander = MagicMock()
        expander.expand.return_value = [document_node()]
        client = MetadataClient(
            config=TEST_METADATA_CLIENT_CONFIG,
            expander=expander,
            accessor=ExpandedGraphAccessor(),
            http_client=httpx.AsyncClient(
                transport=httpx.MockTransport(_json_handler({"@context": {}}))
            ),
        )

        await client.load(URL)

        expander.expand.assert_called_once_with({"@context": {}}, URL)


class TestLoadFailures:
    """Every failure surfaces as a recoverable error."""

    async def test_invalid_url(self) -> None:
        """A malformed URL is rejected before any request."""
        handler = MagicMock()

        with pytest.raises(InvalidIdentifierError):
            await _client(handler).load("not a url")

        handler.assert_not_called()

    async def test_http_error_status(self) -> None:
        """Non-2xx responses raise DocumentFetchError with the status."""
        client = _client(_json_handler({}, status_code=404))

        with pytest.raises(DocumentFetchError) as exc_info:
            await client.load(URL)

        assert exc_info.value.status_code == 404

    async def test_transport_error(self) -> None:
        """Transport failures raise DocumentFetchError without a status."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DocumentFetchError) as exc_info:
            await _client(handler).load(URL)

        assert exc_info.value.status_code is None
        assert "connection refused" in exc_info.value.reason

    async def test_malformed_json(self) -> None:
        """Non-JSON payloads raise MalformedPayloadError instead of aborting."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="{not json")

        with pytest.raises(MalformedPayloadError):
            await _client(handler).load(URL)

    async def test_payload_too_large(self) -> None:
        """Payloads above the configured limit are rejected."""
        config = MetadataClientConfig(max_payload_bytes=16)
        client = _client(_json_handler([document_node()]), config)

        with pytest.raises(MalformedPayloadError, match="exceeds limit"):
            await client.load(URL)

    async def test_compacted_document(self) -> None:
        """The pass-through expander rejects compacted JSON-LD."""
        client = _client(_json_handler({"@context": {}, "body": {}}))

        with pytest.raises(DocumentExpansionError):
            await client.load(URL)

    async def test_empty_document(self) -> None:
        """A document with no objects raises EmptyDocumentError."""
        with pytest.raises(EmptyDocumentError):
            await _client(_json_handler([])).load(URL)

    async def test_first_object_not_a_node(self) -> None:
        """A value object in first position raises NotANodeError."""
        with pytest.raises(NotANodeError):
            await _client(_json_handler([{"@value": "x"}, document_node()])).load(URL)

    async def test_extraction_error_propagates(self) -> None:
        """Extraction failures propagate unchanged."""
        doc = document_node()
        del doc[CIP100_FIELDS.hash_algorithm]

        with pytest.raises(MissingFieldError) as exc_info:
            await _client(_json_handler([doc])).load(URL)

        assert exc_info.value.path == ("hash_algorithm",)

    async def test_undecodable_body(self) -> None:
        """A body that does not decode in its declared charset is malformed."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                content=b"\xff\xfe[]",
                headers={"Content-Type": "application/json; charset=utf-8"},
            )

        with pytest.raises(MalformedPayloadError, match="cannot decode"):
            await _client(handler).load(URL)


class TestPayloadLimit:
    """The payload limit bounds how much of the body is read."""

    async def test_declared_length_rejected_before_reading(self) -> None:
        """A Content-Length above the limit is rejected up front."""
        config = MetadataClientConfig(max_payload_bytes=1024)

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, content=b"[]", headers={"Content-Length": "4096"}
            )

        with pytest.raises(MalformedPayloadError, match="exceeds limit"):
            await _client(handler, config).load(URL)

    async def test_streamed_body_stops_at_limit(self) -> None:
        """A body without Content-Length is read only up to the limit."""
        config = MetadataClientConfig(max_payload_bytes=2048)
        sent: list[int] = []

        async def chunks() -> AsyncIterator[bytes]:
            for index in range(100):
                sent.append(index)
                yield b" " * 1024

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=chunks())

        with pytest.raises(MalformedPayloadError, match="exceeds limit"):
            await _client(handler, config).load(URL)

        assert len(sent) < 100

    async def test_body_at_limit_accepted(self) -> None:
        """A body exactly at the limit is read in full."""
        payload = json.dumps([document_node()]).encode()
        config = MetadataClientConfig(max_payload_bytes=len(payload))

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=payload)

        document = await _client(handler, config).load(URL)

        assert document.hash_algorithm == "blake2b-256"


class TestCorrelationId:
    """Each load runs under a correlation ID."""

    async def test_generated_for_load_and_restored(self) -> None:
        """Without a caller ID, one is generated and removed afterwards."""
        token = set_correlation_id("")
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(get_correlation_id())
            return httpx.Response(200, text=json.dumps([document_node()]))

        try:
            await _client(handler).load(URL)
            after = get_correlation_id()
        finally:
            reset_correlation_id(token)

        assert seen[0] != ""
        assert after == ""

    async def test_caller_id_kept(self) -> None:
        """An ID set by the caller is used as-is."""
        token = set_correlation_id("drep-sync-42")
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(get_correlation_id())
            return httpx.Response(200, text=json.dumps([document_node()]))

        try:
            await _client(handler).load(URL)
            after = get_correlation_id()
        finally:
            reset_correlation_id(token)

        assert seen == ["drep-sync-42"]
        assert after == "drep-sync-42"

    async def test_restored_after_failure(self) -> None:
        """The generated ID is removed even when the load fails."""
        token = set_correlation_id("")
        try:
            with pytest.raises(DocumentFetchError):
                await _client(_json_handler({}, status_code=500)).load(URL)
            after = get_correlation_id()
        finally:
            reset_correlation_id(token)

        assert after == ""
