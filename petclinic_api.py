"""Pet Clinic API client.

This module defines a small client wrapper around the Pet Clinic REST
API served by ``petclinic.app.main``.  The client uses the
``requests`` library internally and exposes high‑level methods for the
clinic's front desk workflows:

* :meth:`list_owners` – return all owners.
* :meth:`get_owner` – fetch a single owner with pets and visits.
* :meth:`find_owners` – search owners by (part of) their last name.
* :meth:`create_owner` / :meth:`update_owner` – manage owner records.
* :meth:`add_pet` – register a new pet for an owner.
* :meth:`add_visit` – record a visit for a pet.
* :meth:`list_vets` / :meth:`list_pet_types` – read lookup data.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PetClinicAPI:
    """Client for interacting with the Pet Clinic API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8000``.
            api_prefix: Path prefix of the versioned API.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/owners/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  Redirects are followed, so a
            search with a single match yields that owner's details.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
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
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Owner operations
    # ------------------------------------------------------------------
    def list_owners(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/owners/")
        if error:
            return [], error
        return data or [], None

    def get_owner(self, owner_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/owners/{owner_id}")

    def find_owners(self, last_name: str = "") -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search owners whose last name contains ``last_name``.

        The server redirects when exactly one owner matches; the
        resulting single owner is wrapped in a list here.  No match is
        reported as an empty list without an error.
        """
        data, error = self._request("GET", "/owners/selected", params={"lastName": last_name})
        if error:
            if error.get("status_code") == 404:
                return [], None
            return [], error
        if isinstance(data, dict):
            return [data], None
        return data or [], None

    def create_owner(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/owners/", json_body=payload)

    def update_owner(self, owner_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/owners/{owner_id}", json_body=payload)

    # ------------------------------------------------------------------
    # Pets and visits
    # ------------------------------------------------------------------
    def add_pet(self, owner_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register a pet for an owner.

        Args:
            owner_id: Identifier of the owner.
            payload: ``name``, ``pet_type_id`` and optional ``birth_date``.
        """
        return self._request("POST", f"/owners/{owner_id}/pets/", json_body=payload)

    def add_visit(
        self, owner_id: Any, pet_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"/owners/{owner_id}/pets/{pet_id}/visits/", json_body=payload)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def list_vets(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/vets/")
        if error:
            return [], error
        return data or [], None

    def list_pet_types(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/pettypes/")
        if error:
            return [], error
        return data or [], None
