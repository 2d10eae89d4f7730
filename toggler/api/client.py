"""
TogglClient: A client for interacting with the Toggl Track API.
"""
import requests
from typing import Optional, Dict, Any, List
from datetime import datetime

from ..utils.date_utils import rfc3339

CREATED_WITH = "toggler"


class TogglAPIError(Exception):
    """Raised when a request to the Toggl API fails."""


class TogglClient:
    """A client for interacting with the Toggl Track API."""

    def __init__(self, api_token: str, base_url: str = "https://api.track.toggl.com/api/v9"):
        """Initialize the TogglClient.

        Args:
            api_token: Toggl API token
            base_url: API root (optional)
        """
        self.base_url = base_url
        self.session = requests.Session()
        self.session.auth = (api_token, "api_token")

    def api_request(self, method: str, url: str, params: Optional[dict] = None, body: Optional[dict] = None, decode: bool = True) -> Any:
        """Make a request to the Toggl API.

        Args:
            method: HTTP method
            url: API endpoint URL
            params: Query parameters (optional)
            body: JSON body (optional)
            decode: Whether to decode the response body (optional)

        Returns:
            API response as JSON, or None for an empty or undecoded body

        Raises:
            TogglAPIError: If the API request fails or the body is not JSON
        """
        try:
            resp = self.session.request(method, url, params=params, json=body)
            resp.raise_for_status()
            if not decode or not resp.content:
                return None
            return resp.json()
        except requests.RequestException as e:
            raise TogglAPIError(f"API request failed: {e}") from e
        except ValueError as e:
            raise TogglAPIError(f"API returned invalid JSON: {e}") from e

    def get_time_entries(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """Get the user's time entries in the given window.

        Args:
            start: Earliest start time (optional)
            end: Latest start time (optional)

        Returns:
            List of raw time entries
        """
        url = f"{self.base_url}/me/time_entries"
        params = {}
        if start:
            params["start_date"] = rfc3339(start)
        if end:
            params["end_date"] = rfc3339(end)

        data = self.api_request("GET", url, params)
        if not isinstance(data, list):
            raise TogglAPIError(f"Expected a list of time entries, got {type(data).__name__}")
        return data

    def update_duration(self, workspace_id: int, entry_id: int, duration_sec: int) -> None:
        """Write a new duration back to a time entry.

        Only the HTTP status is checked; the response body is ignored.

        Args:
            workspace_id: Workspace the entry belongs to
            entry_id: Time entry ID
            duration_sec: New duration in seconds
        """
        url = f"{self.base_url}/workspaces/{workspace_id}/time_entries/{entry_id}"
        body = {"duration": duration_sec, "created_with": CREATED_WITH}
        self.api_request("PUT", url, body=body, decode=False)
