"""TSSE training API client.

A small wrapper around the REST API served by ``tsse_api``.  It uses the
``requests`` library and HTTP Basic authentication.  Every operation
returns a tuple ``(data, error)``: on success ``error`` is ``None``; on
failure ``data`` is ``None`` (or an empty list for collections) and
``error`` is a dictionary with ``status_code`` and ``message`` keys.
Network problems are reported the same way with ``status_code`` set to
``None``, so callers never have to catch ``requests`` exceptions.

Example::

    api = TsseAPI(base_url="http://localhost:8080", username="tsse", password="sport")
    workout, error = api.create_workout({"name": "Leg day", "description": "", "exercises": []})
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests
from requests.auth import HTTPBasicAuth

logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class TsseAPI:
    """Client for the schedule, workout and exercise endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        username: str,
        password: str,
        api_prefix: str = "/api",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            username: HTTP Basic user name.
            password: HTTP Basic password.
            api_prefix: Prefix the API routes are mounted under.
            timeout: Request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = HTTPBasicAuth(username, password)

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns ``(data, error)`` where ``data`` is the parsed JSON body
        (``None`` for empty responses).
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
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def _delete(self, path: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", path)
        return error is None, error

    # ------------------------------------------------------------------
    # Schedules
    # ------------------------------------------------------------------
    def list_schedules(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/schedule")

    def get_schedule(self, schedule_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/schedule/{schedule_id}")

    def create_schedule(self, schedule: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/schedule", json_body=schedule)

    def update_schedule(self, schedule: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace a schedule; ``schedule`` must carry its ``id``."""
        return self._request("PUT", "/schedule", json_body=schedule)

    def delete_schedule(self, schedule_id: int) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"/schedule/{schedule_id}")

    # ------------------------------------------------------------------
    # Workouts
    # ------------------------------------------------------------------
    def list_workouts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/workouts")

    def get_workout(self, workout_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/workouts/{workout_id}")

    def create_workout(self, workout: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/workouts", json_body=workout)

    def update_workout(self, workout: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", "/workouts", json_body=workout)

    def delete_workout(self, workout_id: int) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"/workouts/{workout_id}")

    # ------------------------------------------------------------------
    # Exercises
    # ------------------------------------------------------------------
    def list_exercises(self, name: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        params = {"name": name} if name is not None else None
        return self._list("/exercises", params=params)

    def get_exercise(self, exercise_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/exercises/{exercise_id}")
