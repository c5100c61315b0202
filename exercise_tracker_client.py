"""Exercise Tracker API client.

This module defines a small client wrapper around the Exercise Tracker
REST API.  It uses the ``requests`` library internally and sends the
same form‑encoded payloads a browser form would.

The client exposes one method per endpoint:

* :meth:`create_user` – register a new user.
* :meth:`list_users` – return all users.
* :meth:`add_exercise` – log an exercise for a user.
* :meth:`get_log` – fetch a user's exercise log, optionally filtered.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list) and
``error`` is a dictionary with keys ``status_code`` and ``message``.
Transport errors are reported with ``status_code`` set to ``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ExerciseTrackerAPI:
    """Client for interacting with the Exercise Tracker API."""

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
                The ``/api`` prefix is added by the client.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        form: Dict[str, Any] | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to ``/api`` (e.g. ``/users``).
            params: Query parameters to include in the request.
            form: Form fields to send URL‑encoded in the body.
        Returns:
            A tuple ``(data, error)`` with the parsed JSON response or
            an error dictionary.
        """
        url = f"{self.base_url}/api{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                data=form,
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
                    message = err_json.get("detail") or str(err_json)
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
    # Users
    # ------------------------------------------------------------------
    def create_user(self, username: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register a user.  Returns ``({id, username}, None)`` on success."""
        return self._request("POST", "/users", form={"username": username})

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/users")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Exercises
    # ------------------------------------------------------------------
    def add_exercise(
        self,
        user_id: str,
        description: str,
        duration: Union[int, float, str],
        date: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log an exercise for ``user_id``.

        Args:
            user_id: Identifier returned by :meth:`create_user`.
            description: Free text description.
            duration: Duration in minutes.
            date: Optional ``YYYY-MM-DD`` date; the server uses the
                current time when omitted.
        """
        form: Dict[str, Any] = {"description": description, "duration": str(duration)}
        if date:
            form["date"] = date
        return self._request("POST", f"/users/{user_id}/exercises", form=form)

    def get_log(
        self,
        user_id: str,
        *,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch the exercise log of ``user_id``.

        Returns ``({username, count, id, log}, None)`` on success.
        """
        params: Dict[str, Any] = {}
        if date_from:
            params["from"] = date_from
        if date_to:
            params["to"] = date_to
        if limit is not None:
            params["limit"] = limit
        return self._request("GET", f"/users/{user_id}/logs", params=params or None)
