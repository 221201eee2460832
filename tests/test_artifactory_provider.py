"""Tests for Artifactory provider."""

import pytest
import requests
import responses

from ArtiSum.providers.artifactory import ArtifactoryClient, ArtifactoryError

PLATFORM = "https://acme.jfrog.io"
BUILD_URL = f"{PLATFORM}/artifactory/api/build/my-app/42"


class TestGetBuildInfo:
    @responses.activate
    def test_returns_build_info(self):
        responses.add(
            responses.GET,
            BUILD_URL,
            json={
                "uri": BUILD_URL,
                "buildInfo": {
                    "name": "my-app",
                    "number": "42",
                    "started": "2024-05-05T12:47:20.803+0300",
                    "url": "https://ci/my-app/42",
                },
            },
            status=200,
        )
        client = ArtifactoryClient(PLATFORM + "/")
        build = client.get_build_info("my-app", "42")
        assert build.name == "my-app"
        assert build.number == "42"
        assert build.build_url == "https://ci/my-app/42"

    @responses.activate
    def test_sends_token(self):
        responses.add(responses.GET, BUILD_URL, json={"buildInfo": {"name": "my-app", "number": "42"}})
        client = ArtifactoryClient(PLATFORM, token="secret")
        client.get_build_info("my-app", "42")
        assert responses.calls[0].request.headers["Authorization"] == "Bearer secret"

    @responses.activate
    def test_no_token_header_without_token(self):
        responses.add(responses.GET, BUILD_URL, json={"buildInfo": {"name": "my-app", "number": "42"}})
        ArtifactoryClient(PLATFORM).get_build_info("my-app", "42")
        assert "Authorization" not in responses.calls[0].request.headers

    @responses.activate
    def test_name_is_quoted(self):
        url = f"{PLATFORM}/artifactory/api/build/my%20app/1"
        responses.add(responses.GET, url, json={"buildInfo": {"name": "my app", "number": "1"}})
        build = ArtifactoryClient(PLATFORM).get_build_info("my app", "1")
        assert build.name == "my app"

    @responses.activate
    def test_404_raises(self):
        responses.add(responses.GET, BUILD_URL, json={"errors": []}, status=404)
        with pytest.raises(ArtifactoryError, match="not found"):
            ArtifactoryClient(PLATFORM).get_build_info("my-app", "42")

    @responses.activate
    def test_401_raises(self):
        responses.add(responses.GET, BUILD_URL, status=401)
        with pytest.raises(ArtifactoryError, match="Authentication failed"):
            ArtifactoryClient(PLATFORM, token="bad").get_build_info("my-app", "42")

    @responses.activate
    def test_403_raises(self):
        responses.add(responses.GET, BUILD_URL, status=403)
        with pytest.raises(ArtifactoryError, match="Access denied"):
            ArtifactoryClient(PLATFORM).get_build_info("my-app", "42")

    @responses.activate
    def test_500_raises_http_error(self):
        responses.add(responses.GET, BUILD_URL, status=500)
        with pytest.raises(requests.HTTPError):
            ArtifactoryClient(PLATFORM).get_build_info("my-app", "42")

    @responses.activate
    def test_unexpected_payload(self):
        responses.add(responses.GET, BUILD_URL, json={"uri": BUILD_URL})
        with pytest.raises(ArtifactoryError, match="Unexpected"):
            ArtifactoryClient(PLATFORM).get_build_info("my-app", "42")


class TestListBuildNumbers:
    @responses.activate
    def test_returns_numbers(self):
        responses.add(
            responses.GET,
            f"{PLATFORM}/artifactory/api/build/my-app",
            json={
                "uri": f"{PLATFORM}/artifactory/api/build/my-app",
                "buildsNumbers": [
                    {"uri": "/41", "started": "2024-05-04T10:00:00.000+0000"},
                    {"uri": "/42", "started": "2024-05-05T10:00:00.000+0000"},
                ],
            },
        )
        assert ArtifactoryClient(PLATFORM).list_build_numbers("my-app") == ["41", "42"]

    @responses.activate
    def test_no_builds(self):
        responses.add(responses.GET, f"{PLATFORM}/artifactory/api/build/my-app", json={})
        assert ArtifactoryClient(PLATFORM).list_build_numbers("my-app") == []
