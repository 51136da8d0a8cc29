# collection_client/client.py
from __future__ import annotations
from typing import Any
import logging
import time
import httpx
from urllib.parse import quote

from pydantic import ValidationError

from .config import ClientConfig
from .exceptions import (
    VectorDBError, NotFound, Conflict, BadRequest, TransportError, ServerError, Unauthorized
)
from .logging_config import LOGGER_NAME
from .schema import CollectionSchema
from . import models as M

log = logging.getLogger(LOGGER_NAME)


class VectorDBClient:
    def __init__(self, config: ClientConfig, transport: httpx.BaseTransport | None = None):
        self.cfg = config
        headers = {"Authorization": f"Bearer {config.api_key}"} if config.api_key else None
        self._client = httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout_s,
            headers=headers,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "VectorDBClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------ low-level helpers ------------
    def _request(self, method: str, url: str, json: Any | None = None) -> httpx.Response:
        tries = max(1, self.cfg.retries + 1)
        last_exc: Exception | None = None
        for attempt in range(tries):
            log.debug("[http] %s %s attempt=%d", method, url, attempt + 1)
            try:
                resp = self._client.request(method, url, json=json)
                # Map common HTTP errors
                if resp.status_code >= 500:
                    raise ServerError(f"HTTP {resp.status_code}: {resp.text}")
                if resp.status_code == 404:
                    raise NotFound(resp.text)
                if resp.status_code == 409:
                    raise Conflict(resp.text)
                if resp.status_code in (400, 422):
                    raise BadRequest(resp.text)
                if resp.status_code in (401, 403):
                    raise Unauthorized(resp.text)
                if not resp.is_success:
                    raise VectorDBError(f"HTTP {resp.status_code}: {resp.text}")
                return resp
            except (httpx.ConnectError, httpx.ReadTimeout, httpx.RemoteProtocolError) as e:
                last_exc = e
                if attempt < tries - 1:
                    log.warning("[http] %s %s failed (%s), retrying", method, url, e)
                    time.sleep(0.25 * (2 ** attempt))
                    continue
                raise TransportError(str(e)) from e
            except ServerError as e:
                last_exc = e
                if attempt < tries - 1:
                    log.warning("[http] %s %s server error, retrying: %s", method, url, e)
                    time.sleep(0.5 * (2 ** attempt))
                    continue
                raise
        assert False, f"unreachable: {last_exc}"

    # ------------ Collections ------------
    @staticmethod
    def _collection_url(name: str, suffix: str = "") -> str:
        # one escaped path segment; "" would otherwise hit the list endpoint
        if not name:
            raise NotFound("Collection name is empty")
        return f"/v1/collections/{quote(name, safe='')}{suffix}"

    def create_collection(self, schema: CollectionSchema) -> M.Collection:
        if self.cfg.strict_schema:
            schema.validate()
        log.info("[collection] creating %s", schema)
        try:
            body = M.CreateCollectionIn.from_schema(schema).model_dump(mode="json")
        except ValidationError as e:
            raise BadRequest(f"Invalid collection schema: {e}") from e
        r = self._request("POST", "/v1/collections", json=body)
        return M.Collection(**r.json())

    def has_collection(self, name: str) -> bool:
        try:
            self._request("GET", self._collection_url(name))
        except NotFound:
            return False
        return True

    def describe_collection(self, name: str) -> CollectionSchema:
        r = self._request("GET", self._collection_url(name))
        return M.Collection(**r.json()).to_schema()

    def list_collections(self) -> list[str]:
        r = self._request("GET", "/v1/collections")
        return [M.Collection(**x).name for x in r.json()]

    def count_rows(self, name: str) -> int:
        r = self._request("GET", self._collection_url(name, "/count"))
        return M.RowCountOut(**r.json()).count

    def drop_collection(self, name: str) -> None:
        log.info("[collection] dropping %s", name)
        self._request("DELETE", self._collection_url(name))
