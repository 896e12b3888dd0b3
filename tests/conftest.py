from typing import Dict, List

import pytest

from liberica_locator.types import MatchingRef, PlatformInfo, Release, ReleaseAsset


class FakeGitHubClient:
    """In-memory stand-in for the GitHub tag and release endpoints"""

    def __init__(self, tags: List[str], releases: Dict[str, List[str]] = None):
        self.tags = tags
        self.releases = releases or {}
        self.tag_queries: List[tuple] = []
        self.release_queries: List[tuple] = []

    async def list_matching_tags(self, owner, repo, ref_prefix):
        self.tag_queries.append((owner, repo, ref_prefix))
        return [
            MatchingRef(ref=f"refs/tags/{tag}")
            for tag in self.tags
            if tag.startswith(ref_prefix)
        ]

    async def get_tagged_release(self, owner, repo, tag):
        self.release_queries.append((owner, repo, tag))
        if tag not in self.releases:
            raise LookupError(f"No release for tag {tag}")
        return Release(
            tag_name=tag,
            assets=tuple(
                ReleaseAsset(name=name, browser_download_url=f"https://example.test/{name}")
                for name in self.releases[tag]
            ),
        )


@pytest.fixture
def linux_amd64():
    return PlatformInfo(os_name="linux", jdk_arch="x64", graalvm_arch="amd64")


@pytest.fixture
def linux_musl():
    return PlatformInfo(os_name="linux", jdk_arch="x64", graalvm_arch="amd64", is_musl=True)


@pytest.fixture
def windows_amd64():
    return PlatformInfo(
        os_name="windows", jdk_arch="x64", graalvm_arch="amd64", file_extension=".zip"
    )


@pytest.fixture
def fake_client_factory():
    return FakeGitHubClient
