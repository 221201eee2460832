"""Artifactory REST API client for build-info lookups."""

from __future__ import annotations

from urllib.parse import quote

import requests

from ArtiSum.loaders import build_info_from_dict
from ArtiSum.models import BuildInfo


class ArtifactoryError(Exception):
    """Raised for Artifactory API errors."""


class ArtifactoryClient:
    """Client for the build-info endpoints of a JFrog platform."""

    def __init__(self, platform_url: str, token: str | None = None):
        self.platform_url = platform_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers["Accept"] = "application/json"
        self.session.headers["User-Agent"] = "ArtiSum/1.0"
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    @property
    def api_base(self) -> str:
        return f"{self.platform_url}/artifactory/api"

    def _api_get(self, path: str) -> dict:
        url = f"{self.api_base}{path}"
        resp = self.session.get(url, timeout=30)

        if resp.status_code == 404:
            raise ArtifactoryError(
                "Build not found. Check the build name and number."
            )
        if resp.status_code == 401:
            raise ArtifactoryError("Authentication failed. Check your access token.")
        if resp.status_code == 403:
            raise ArtifactoryError(
                "Access denied. The token may lack read permission on builds."
            )
        resp.raise_for_status()
        return resp.json()

    def get_build_info(self, name: str, number: str) -> BuildInfo:
        data = self._api_get(f"/build/{quote(name, safe='')}/{quote(number, safe='')}")
        build = data.get("buildInfo")
        if not isinstance(build, dict):
            raise ArtifactoryError(f"Unexpected build-info response for {name}/{number}.")
        return build_info_from_dict(build)

    def list_build_numbers(self, name: str) -> list[str]:
        """Return the run numbers recorded for a build name."""
        data = self._api_get(f"/build/{quote(name, safe='')}")
        return [
            item["uri"].lstrip("/")
            for item in data.get("buildsNumbers", [])
            if item.get("uri")
        ]
