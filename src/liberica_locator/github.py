"""GitHub REST client for tag listing and release lookup."""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple
from urllib.parse import quote

import aiohttp

from liberica_locator.config import Settings
from liberica_locator.constants import (
    GITHUB_REPOS_PATH,
    MATCHING_REFS_PATH,
    RELEASES_PATH,
    TAGS_PATH,
)
from liberica_locator.logging import get_logger, log_with_data
from liberica_locator.types import MatchingRef, Release, ReleaseAsset

logger = get_logger(__name__)

USER_AGENT = "liberica-locator"


class GitHubClient:
    """Lists matching tags and fetches tagged releases.

    A session passed in is reused for every request and left open;
    otherwise a fresh session is opened per call.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.settings = settings or Settings.from_env()
        self._session = session

    @property
    def headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
        }
        if self.settings.github_token:
            headers["Authorization"] = f"Bearer {self.settings.github_token}"
        return headers

    def repo_url(self, owner: str, repo: str) -> str:
        return f"{self.settings.api_base}/{GITHUB_REPOS_PATH}/{owner}/{repo}"

    @asynccontextmanager
    async def session(self) -> AsyncIterator[aiohttp.ClientSession]:
        if self._session is not None:
            yield self._session
            return
        async with aiohttp.ClientSession() as session:
            yield session

    async def _get(
        self,
        session: aiohttp.ClientSession,
        url: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Any, Optional[str]]:
        """GET a JSON document, returning it with the next page URL if any."""
        async with session.get(url, params=params, headers=self.headers) as response:
            if response.status != 200:
                log_with_data(logger, logging.ERROR, "GitHub request failed", {
                    "url": url,
                    "status": response.status,
                    "reason": response.reason,
                })
                response.raise_for_status()

            data = await response.json()
            next_link = response.links.get("next")
            next_url = str(next_link["url"]) if next_link else None
            return data, next_url

    async def list_matching_tags(
        self, owner: str, repo: str, ref_prefix: str
    ) -> List[MatchingRef]:
        """List tags whose name starts with ``ref_prefix``, following pagination."""
        url: Optional[str] = (
            f"{self.repo_url(owner, repo)}/{MATCHING_REFS_PATH}/{quote(ref_prefix, safe='')}"
        )
        params: Optional[Dict[str, Any]] = {"per_page": self.settings.per_page}
        refs: List[MatchingRef] = []

        async with self.session() as session:
            while url:
                data, url = await self._get(session, url, params)
                # The next link already carries the query string
                params = None
                refs.extend(MatchingRef(ref=item["ref"]) for item in data)

        log_with_data(logger, logging.DEBUG, "Listed matching tags", {
            "owner": owner,
            "repo": repo,
            "prefix": ref_prefix,
            "count": len(refs),
        })
        return refs

    async def get_tagged_release(self, owner: str, repo: str, tag: str) -> Release:
        """Fetch the release for ``tag`` together with its assets."""
        url = f"{self.repo_url(owner, repo)}/{RELEASES_PATH}/{TAGS_PATH}/{quote(tag, safe='')}"

        async with self.session() as session:
            data, _ = await self._get(session, url)

        release = Release(
            tag_name=data.get("tag_name", tag),
            assets=tuple(
                ReleaseAsset(
                    name=asset["name"],
                    browser_download_url=asset["browser_download_url"],
                )
                for asset in data.get("assets", [])
            ),
        )
        log_with_data(logger, logging.DEBUG, "Fetched tagged release", {
            "owner": owner,
            "repo": repo,
            "tag": tag,
            "assets": len(release.assets),
        })
        return release
