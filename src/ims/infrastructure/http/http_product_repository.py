"""HTTP implementation of ProductRepository.

Talks to a REST collection resource::

    GET    /products          -> [Product, ...]
    POST   /products          -> Product
    PUT    /products/{id}     -> Product
    DELETE /products/{id}     -> no content

Every failure (connection error, timeout, non-2xx status, undecodable
body, malformed list record) is normalised to the error class of the
operation. A write that returns 2xx has succeeded, whatever its body
holds. There is no retry.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from ims.domain.exceptions import (
    ApiError,
    DeleteError,
    FetchError,
    SaveError,
    UpdateError,
    ValidationError,
)
from ims.domain.model.draft import ProductPayload
from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

COLLECTION = "/products"


class HttpProductRepository(ProductRepository):

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        body = self._send("GET", COLLECTION, FetchError)
        if not isinstance(body, list):
            logger.warning("GET %s returned %s, expected a list", COLLECTION, type(body).__name__)
            raise FetchError()
        return [self._parse(record, FetchError) for record in body]

    def create(self, payload: ProductPayload) -> Product:
        # The product exists once the POST succeeds; the body only echoes it.
        body = self._send(
            "POST", COLLECTION, SaveError, json=payload.to_json(), require_body=False
        )
        return self._echo(body, payload)

    def update(self, product_id: str, payload: ProductPayload) -> Product:
        body = self._send(
            "PUT",
            self._item_path(product_id),
            UpdateError,
            json=payload.to_json(),
            require_body=False,
        )
        return self._echo(body, payload, product_id)

    def remove(self, product_id: str) -> None:
        self._send("DELETE", self._item_path(product_id), DeleteError, require_body=False)

    # --- HTTP helpers ---------------------------------------------------------

    @staticmethod
    def _item_path(product_id: str) -> str:
        return f"{COLLECTION}/{quote(str(product_id), safe='')}"

    def _send(
        self,
        method: str,
        path: str,
        error_cls: type[ApiError],
        require_body: bool = True,
        **kwargs: Any,
    ) -> Any:
        """Issue a request and return the decoded JSON body.

        Returns None for an empty body. When ``require_body`` is False an
        undecodable body on a 2xx response also yields None instead of
        an error.
        """
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise error_cls() from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            if not require_body:
                logger.warning("%s %s succeeded with an unreadable body: %s", method, url, exc)
                return None
            logger.warning("%s %s failed: %s", method, url, exc)
            raise error_cls() from exc

    @staticmethod
    def _echo(body: Any, payload: ProductPayload, product_id: str | None = None) -> Product:
        """Product returned by a successful write.

        Backends differ in what they echo (nothing, just the id, the full
        record); whatever is missing is taken from the request payload.
        """
        try:
            return Product.from_json(body)
        except ValidationError:
            logger.debug("Write response %r is not a full product record", body)
        if isinstance(body, dict) and body.get("id") is not None:
            product_id = str(body["id"])
        return Product(
            id="" if product_id is None else str(product_id),
            name=payload.name,
            quantity=payload.quantity,
            price=payload.price,
        )

    @staticmethod
    def _parse(record: Any, error_cls: type[ApiError]) -> Product:
        try:
            return Product.from_json(record)
        except ValidationError as exc:
            logger.warning("Malformed product record %r: %s", record, exc)
            raise error_cls() from exc
