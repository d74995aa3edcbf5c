"""Card Store API client.

A thin wrapper around the card endpoints using the ``requests``
library.  Every method returns a tuple ``(data, error)``: on success
``error`` is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  The message is
taken from the ``message`` key of the error body the service returns.

Example::

    api = CardStoreAPI(base_url="http://localhost:3000")
    card, error = api.create_card("Clubs", "2")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)


class CardStoreAPI:
    """Client for the Card Store HTTP API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
                Include ``/api/v1`` to use the versioned routes.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/cards``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
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
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except (ValueError, AttributeError):
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Card operations
    # ------------------------------------------------------------------
    def list_cards(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all cards.

        Returns:
            A tuple ``(cards, error)``.  ``cards`` is empty on failure.
        """
        data, error = self._request("GET", "/cards")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_card(self, card_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single card by ID."""
        return self._request("GET", f"/cards/{card_id}")

    def create_card(self, suit: str, value: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create a card and return it with its server-assigned ``id``."""
        return self._request("POST", "/cards", json_body={"suit": suit, "value": value})

    def delete_card(self, card_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Delete a card.

        Returns:
            A tuple ``(card, error)`` where ``card`` is the removed card.
        """
        data, error = self._request("DELETE", f"/cards/{card_id}")
        if error:
            return None, error
        if isinstance(data, dict):
            logger.info("%s", data.get("message"))
            return data.get("card"), None
        return None, None
