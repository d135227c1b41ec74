"""ClickUp REST API client for the migration.

Read helpers never raise on upstream failures: a non-success response,
a transport error or an undecodable body is logged and reported as ``None``
(or an empty list), so callers can keep walking the hierarchy.
"""

from typing import Any

import requests

from clickup_migration.config_loader import DEFAULT_BASE_URL
from clickup_migration.display import logger
from clickup_migration.type_definitions import JsonData, MigrationConfig

HTTP_OK = 200
USER_AGENT = "ClickUp Task Migration"


class ClickUpClient:
    """Authenticated access to the ClickUp v2 API.

    All settings are passed in explicitly; the client holds no global state
    beyond its own ``requests.Session``.
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        *,
        include_closed: bool = False,
        subtasks: bool = False,
        session: requests.Session | None = None,
    ) -> None:
        if not api_token:
            msg = "ClickUp API token is required"
            raise ValueError(msg)

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.include_closed = include_closed
        self.subtasks = subtasks

        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": api_token,
                "Content-Type": "application/json",
                "User-Agent": USER_AGENT,
            },
        )

    @classmethod
    def from_config(cls, config: MigrationConfig, session: requests.Session | None = None) -> "ClickUpClient":
        """Build a client from a loaded migration configuration."""
        return cls(
            config["api_token"],
            base_url=config["base_url"],
            timeout=config["request_timeout"],
            include_closed=config["include_closed"],
            subtasks=config["subtasks"],
            session=session,
        )

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def get_json(self, endpoint: str, params: dict[str, Any] | None = None) -> JsonData | None:
        """GET an endpoint and return the decoded JSON object.

        Args:
            endpoint: Path relative to the API base URL
            params: Optional query parameters

        Returns:
            The decoded mapping, or None when no usable data was returned

        """
        url = self._url(endpoint)
        logger.info("Making request to: %s %s", url, params or "")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Request to %s failed: %s", url, e)
            return None

        if response.status_code != HTTP_OK:
            logger.error(
                "Error: %s - %s - while accessing %s",
                response.status_code,
                response.text,
                response.url or url,
            )
            return None

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Invalid JSON from %s: %s", url, e)
            return None

        if not isinstance(data, dict):
            logger.error("Unexpected payload type %s from %s", type(data).__name__, url)
            return None
        return data

    def _get_collection(self, endpoint: str, key: str) -> list[JsonData]:
        data = self.get_json(endpoint)
        if data is None:
            return []
        return data.get(key) or []

    def get_folders(self, space_id: str) -> list[JsonData]:
        """Get the folders directly under a space."""
        logger.info("Getting folders in space %s...", space_id)
        return self._get_collection(f"/space/{space_id}/folder", "folders")

    def get_folderless_lists(self, space_id: str) -> list[JsonData]:
        """Get the lists that live directly under a space."""
        logger.info("Getting folderless lists in space %s...", space_id)
        return self._get_collection(f"/space/{space_id}/list", "lists")

    def get_lists_in_folder(self, folder_id: str) -> list[JsonData]:
        """Get the lists inside a folder."""
        logger.info("Getting lists in folder %s...", folder_id)
        return self._get_collection(f"/folder/{folder_id}/list", "lists")

    def get_tasks_page(self, list_id: str, page: int) -> list[JsonData] | None:
        """Get one page of tasks from a list.

        Returns:
            The page's raw tasks, or None when the page yielded no usable payload

        """
        params: dict[str, Any] = {"page": page}
        if self.include_closed:
            params["include_closed"] = "true"
        if self.subtasks:
            params["subtasks"] = "true"

        data = self.get_json(f"/list/{list_id}/task", params=params)
        if data is None or data.get("tasks") is None:
            return None
        return data["tasks"]

    def get_space_statuses(self, space_id: str) -> list[str]:
        """Get the status names declared on a space."""
        logger.info("Getting statuses for space %s...", space_id)
        data = self.get_json(f"/space/{space_id}")
        if data is None:
            return []
        return [status["status"] for status in data.get("statuses") or [] if status.get("status")]

    def update_task_status(self, task_id: str, status: str) -> bool:
        """Set a task's status.

        Returns:
            True if ClickUp accepted the update

        """
        url = self._url(f"/task/{task_id}")
        logger.info("Updating task %s to status %s...", task_id, status)

        try:
            response = self.session.put(url, json={"status": status})
        except requests.RequestException as e:
            logger.error("Failed to update status of task %s: %s", task_id, e)
            return False

        if response.status_code != HTTP_OK:
            logger.error(
                "Failed to update status of task %s: %s - %s",
                task_id,
                response.status_code,
                response.text,
            )
            return False

        return True
