"""Governance metadata client.

Fetches a CIP-100 document over HTTP, parses the JSON payload, expands it
into graph nodes and runs typed extraction on the first node.

Every failure is raised as a GovernanceMetadataError subclass:
- invalid URL -> InvalidIdentifierError
- transport failure or non-2xx status -> DocumentFetchError
- payload not JSON, not decodable or too large -> MalformedPayloadError
- expander rejects payload -> DocumentExpansionError
- no objects / first object not a node -> EmptyDocumentError / NotANodeError
- extraction failure -> ExtractionError subclasses

The body is streamed and reading stops as soon as it passes
max_payload_bytes; a declared Content-Length above the limit is rejected
before any of the body is read.

Usage:
    client = MetadataClient(
        config=MetadataClientConfig.from_environment(),
        expander=PyLdDocumentExpander(),
        accessor=ExpandedGraphAccessor(),
    )
    document = await client.load("https://example.com/metadata.jsonld")
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from govmeta.application.ports.document_expander import DocumentExpanderProtocol
from govmeta.application.ports.graph_accessor import GraphAccessorProtocol
from govmeta.application.services.extraction_service import (
    GovernanceMetadataExtractor,
)
from govmeta.config.metadata_client_config import MetadataClientConfig
from govmeta.domain.errors.extraction import InvalidIdentifierError
from govmeta.domain.errors.retrieval import (
    DocumentFetchError,
    EmptyDocumentError,
    MalformedPayloadError,
    NotANodeError,
)
from govmeta.domain.models.governance_metadata import Document
from govmeta.domain.value_objects.iri import Iri
from govmeta.infrastructure.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from govmeta.infrastructure.observability.logging import get_logger_for_component


class MetadataClient:
    """Client for fetching governance metadata from the web.

    The content type of the response is not checked; many hosts serve
    JSON-LD as text/plain or application/octet-stream.

    Attributes:
        _config: Client configuration.
        _expander: Expansion step from parsed JSON to graph objects.
        _accessor: Graph accessor matching the expander's node shape.
        _http_client: Optional shared httpx client; a short-lived client
            is created per request when absent.
    """

    def __init__(
        self,
        config: MetadataClientConfig,
        expander: DocumentExpanderProtocol,
        accessor: GraphAccessorProtocol,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the metadata client.

        Args:
            config: Client configuration.
            expander: Document expander.
            accessor: Graph accessor for expanded nodes.
            http_client: Optional shared httpx.AsyncClient.
        """
        self._config = config
        self._expander = expander
        self._accessor = accessor
        self._extractor = GovernanceMetadataExtractor(accessor)
        self._http_client = http_client
        self._log = get_logger_for_component(type(self).__name__)

    async def load(self, url: str) -> Document:
        """Load and extract the governance metadata document at url.

        When no correlation ID is set, one is generated for the duration
        of the load so every log entry of this load can be tied together.

        Args:
            url: Absolute URL of the document.

        Returns:
            The extracted Document.

        Raises:
            GovernanceMetadataError: See module docstring for the mapping.
        """
        if get_correlation_id():
            return await self._load(url)

        token = set_correlation_id(generate_correlation_id())
        try:
            return await self._load(url)
        finally:
            reset_correlation_id(token)

    async def _load(self, url: str) -> Document:
        try:
            base_iri = Iri(url)
        except ValueError as e:
            raise InvalidIdentifierError(url, str(e)) from e

        bound_log = self._log.bind(url=url)
        content = await self._fetch(str(base_iri))
        payload = self._parse(str(base_iri), content)

        objects = self._expander.expand(payload, str(base_iri))
        if not objects:
            bound_log.warning("governance_document_empty")
            raise EmptyDocumentError(url)

        node = self._accessor.as_subnode(objects[0])
        if node is None:
            bound_log.warning("governance_document_not_a_node")
            raise NotANodeError(url)

        document = self._extractor.extract_document(node)
        bound_log.info(
            "governance_document_loaded",
            author_count=len(document.authors),
            reference_count=len(document.body.references),
        )
        return document

    async def _fetch(self, url: str) -> str:
        if self._http_client is not None:
            return await self._get_text(self._http_client, url)
        async with httpx.AsyncClient() as client:
            return await self._get_text(client, url)

    async def _get_text(self, client: httpx.AsyncClient, url: str) -> str:
        try:
            async with client.stream(
                "GET",
                url,
                headers={"User-Agent": self._config.user_agent},
                timeout=self._config.timeout_seconds,
                follow_redirects=self._config.follow_redirects,
            ) as response:
                if not response.is_success:
                    self._log.error(
                        "governance_document_fetch_failed",
                        url=url,
                        status_code=response.status_code,
                    )
                    raise DocumentFetchError(
                        url,
                        response.reason_phrase or "unexpected status",
                        response.status_code,
                    )
                self._check_declared_length(url, response)
                body = await self._read_limited(url, response)
                encoding = response.charset_encoding or "utf-8"
        except httpx.HTTPError as e:
            self._log.error("governance_document_fetch_error", url=url, error=str(e))
            raise DocumentFetchError(url, str(e) or type(e).__name__) from e

        self._log.debug(
            "governance_document_fetched",
            url=url,
            status_code=response.status_code,
            size=len(body),
        )
        try:
            return body.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            self._log.warning("governance_document_decode_failed", url=url, error=str(e))
            raise MalformedPayloadError(url, f"cannot decode body as {encoding}") from e

    def _check_declared_length(self, url: str, response: httpx.Response) -> None:
        declared = response.headers.get("Content-Length")
        if declared is None or not declared.isdigit():
            return
        if int(declared) > self._config.max_payload_bytes:
            raise self._too_large(url, int(declared))

    async def _read_limited(self, url: str, response: httpx.Response) -> bytes:
        body = bytearray()
        async for chunk in response.aiter_bytes():
            body.extend(chunk)
            if len(body) > self._config.max_payload_bytes:
                raise self._too_large(url, len(body))
        return bytes(body)

    def _too_large(self, url: str, size: int) -> MalformedPayloadError:
        self._log.warning(
            "governance_document_too_large",
            url=url,
            size=size,
            max_payload_bytes=self._config.max_payload_bytes,
        )
        return MalformedPayloadError(
            url,
            f"payload of at least {size} bytes exceeds limit of "
            f"{self._config.max_payload_bytes}",
        )

    def _parse(self, url: str, content: str) -> Any:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            self._log.warning("governance_document_parse_failed", url=url, error=str(e))
            raise MalformedPayloadError(url, str(e)) from e
