"""Resolve a Liberica NIK download URL from a requested java version."""

import logging
from dataclasses import dataclass
from typing import Optional

from liberica_locator.assets import determine_tool_name, find_liberica_url
from liberica_locator.config import Settings
from liberica_locator.github import GitHubClient
from liberica_locator.logging import get_logger, log_with_data
from liberica_locator.matching import find_latest_java_version
from liberica_locator.platforms import PlatformProbe
from liberica_locator.types import PlatformInfo, ResolvedVersion

logger = get_logger(__name__)


@dataclass(frozen=True)
class LibericaDownload:
    """Download location of a resolved Liberica NIK distribution"""
    url: str
    resolved: ResolvedVersion
    tool_name: str


async def resolve_liberica_release(
    java_version: str,
    java_package: Optional[str],
    graalvm_version: Optional[str] = None,
    *,
    client=None,
    platform: Optional[PlatformInfo] = None,
    settings: Optional[Settings] = None,
) -> LibericaDownload:
    """Resolve the requested versions to a release asset.

    ``client`` must provide both ``list_matching_tags`` and
    ``get_tagged_release``; a GitHubClient is created when omitted. The host
    platform is probed unless ``platform`` is given.
    """
    client = client or GitHubClient(settings)
    platform = platform or await PlatformProbe().get()

    resolved = await find_latest_java_version(java_version, graalvm_version, client=client)
    url = await find_liberica_url(resolved, java_package, platform, client=client)
    tool_name = determine_tool_name(java_version, java_package, platform)

    log_with_data(logger, logging.INFO, "Resolved Liberica download", {
        "java_version": java_version,
        "graalvm_version": graalvm_version,
        "resolved": resolved.value,
        "platform": platform.platform_part,
        "url": url,
    })
    return LibericaDownload(url=url, resolved=resolved, tool_name=tool_name)


async def resolve_liberica_url(
    java_version: str,
    java_package: Optional[str],
    graalvm_version: Optional[str] = None,
    *,
    client=None,
    platform: Optional[PlatformInfo] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Return the download URL for the requested Liberica NIK distribution."""
    download = await resolve_liberica_release(
        java_version,
        java_package,
        graalvm_version,
        client=client,
        platform=platform,
        settings=settings,
    )
    return download.url
