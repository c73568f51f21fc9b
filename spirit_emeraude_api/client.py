"""Spirit Emeraude content API client.

This module defines a small client wrapper around the content API
served by :mod:`spirit_emeraude_api.app` (or by the upstream content
service it stands in for).  Every response of that API is wrapped in
an envelope ``{"success", "message", "data", "pagination"}``; the
client unwraps ``data``, renames an upstream ``_id`` key to ``id`` and
parses records into the pydantic ``Read`` schemas.

The client exposes high-level methods for the storefront pages:

* :meth:`list_products` / :meth:`get_product` – catalog.
* :meth:`list_formations` / :meth:`get_formation` – training sessions.
* :meth:`list_impacts` – impact stories.
* :meth:`list_gallery` – gallery photos.
* :meth:`send_contact` – submit the contact form.

and for the admin console (requires ``api_key``):

* :meth:`create_product`, :meth:`update_product`, :meth:`delete_product`.
* :meth:`list_contact_messages`, :meth:`delete_contact_message`.

Every method returns a tuple ``(result, error)``.  HTTP and transport
failures never raise; ``error`` is then a dictionary with the keys
``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from .app.schemas.contact import ContactMessageCreate, ContactMessageRead
from .app.schemas.formation import FormationRead
from .app.schemas.gallery import GalleryPhotoRead
from .app.schemas.impact import ImpactRead
from .app.schemas.product import ProductCreate, ProductRead

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

Error = Dict[str, Any]

DEFAULT_PREFIX = "/api/spiritemeraude"


def map_id(item: Any) -> Any:
    """Rename an upstream ``_id`` key to ``id``; leave anything else untouched."""
    if isinstance(item, dict) and "_id" in item and "id" not in item:
        item = dict(item)
        item["id"] = item.pop("_id")
    return item


class SpiritEmeraudeAPI:
    """Client for the content API."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = DEFAULT_PREFIX,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API host, e.g. ``http://localhost:8000``.
            prefix: Application prefix the content routes are mounted under.
            api_key: Optional bearer token.  Required for admin operations.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = "/" + prefix.strip("/") if prefix.strip("/") else ""
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def url(self, path: str) -> str:
        normalized = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}{self.prefix}{normalized}"

    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(payload, error)``.  ``payload`` is the decoded JSON
            body on success (``None`` for an empty body).  On failure,
            ``payload`` is ``None`` and ``error`` describes the issue.
        """
        url = self.url(path)
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("message") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        except ValueError as exc:
            logger.error("API returned invalid JSON: %s", exc)
            return None, {"status_code": None, "message": "Invalid JSON response"}

    @staticmethod
    def _unwrap(payload: Any) -> Any:
        """Return the ``data`` member of an envelope.

        Bare payloads (no envelope) are returned as they are.
        """
        if isinstance(payload, dict) and "data" in payload and "success" in payload:
            return payload["data"]
        return payload

    def _parse_one(self, model: Type[M], item: Any) -> Tuple[Optional[M], Optional[Error]]:
        try:
            return model.model_validate(map_id(item)), None
        except ValidationError as exc:
            logger.error("Unexpected %s payload: %s", model.__name__, exc)
            return None, {"status_code": None, "message": f"Invalid {model.__name__} payload"}

    def _get_list(self, model: Type[M], path: str, params: Dict[str, Any] | None = None) -> Tuple[List[M], Optional[Error]]:
        payload, error = self._request("GET", path, params=params)
        if error:
            return [], error
        data = self._unwrap(payload)
        if not isinstance(data, list):
            logger.error("Expected a %s list, got %s", model.__name__, type(data).__name__)
            return [], {"status_code": None, "message": f"Invalid {model.__name__} list payload"}
        items: List[M] = []
        for raw in data:
            item, error = self._parse_one(model, raw)
            if error:
                return [], error
            items.append(item)
        return items, None

    def _get_one(self, model: Type[M], path: str) -> Tuple[Optional[M], Optional[Error]]:
        payload, error = self._request("GET", path)
        if error:
            return None, error
        return self._parse_one(model, self._unwrap(payload))

    def _send(self, method: str, model: Type[M], path: str, body: BaseModel) -> Tuple[Optional[M], Optional[Error]]:
        payload, error = self._request(method, path, json_body=body.model_dump(mode="json", by_alias=True))
        if error:
            return None, error
        return self._parse_one(model, self._unwrap(payload))

    def _delete(self, path: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", path)
        if error:
            return False, error
        return True, None

    @staticmethod
    def _category_param(category: Optional[str]) -> Dict[str, Any]:
        # "all" is a storefront tab, not a category.
        if category is None or category == "all":
            return {}
        return {"category": category}

    # ------------------------------------------------------------------
    # Storefront operations
    # ------------------------------------------------------------------
    def list_products(self, category: Optional[str] = None) -> Tuple[List[ProductRead], Optional[Error]]:
        return self._get_list(ProductRead, "/product", self._category_param(category))

    def get_product(self, product_id: str) -> Tuple[Optional[ProductRead], Optional[Error]]:
        return self._get_one(ProductRead, f"/product/{product_id}")

    def list_formations(self) -> Tuple[List[FormationRead], Optional[Error]]:
        return self._get_list(FormationRead, "/formation")

    def get_formation(self, formation_id: str) -> Tuple[Optional[FormationRead], Optional[Error]]:
        return self._get_one(FormationRead, f"/formation/{formation_id}")

    def list_impacts(self) -> Tuple[List[ImpactRead], Optional[Error]]:
        return self._get_list(ImpactRead, "/impact")

    def list_gallery(self, category: Optional[str] = None) -> Tuple[List[GalleryPhotoRead], Optional[Error]]:
        return self._get_list(GalleryPhotoRead, "/gallery", self._category_param(category))

    def send_contact(self, message: ContactMessageCreate) -> Tuple[Optional[ContactMessageRead], Optional[Error]]:
        """Submit the contact form.

        The message is validated locally by ``ContactMessageCreate``
        before it is sent, so callers get field errors without a round
        trip.
        """
        return self._send("POST", ContactMessageRead, "/contact", message)

    # ------------------------------------------------------------------
    # Admin operations
    # ------------------------------------------------------------------
    def create_product(self, product: ProductCreate) -> Tuple[Optional[ProductRead], Optional[Error]]:
        return self._send("POST", ProductRead, "/product", product)

    def update_product(self, product_id: str, product: ProductCreate) -> Tuple[Optional[ProductRead], Optional[Error]]:
        return self._send("PUT", ProductRead, f"/product/{product_id}", product)

    def delete_product(self, product_id: str) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"/product/{product_id}")

    def list_contact_messages(self) -> Tuple[List[ContactMessageRead], Optional[Error]]:
        return self._get_list(ContactMessageRead, "/contact")

    def delete_contact_message(self, message_id: str) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"/contact/{message_id}")
