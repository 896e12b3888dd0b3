"""Resolve Liberica NIK versions to downloadable GitHub release assets."""

from liberica_locator.assets import determine_tool_name, find_liberica_url
from liberica_locator.errors import AssetNotFoundError, LocatorError, NoMatchError
from liberica_locator.github import GitHubClient
from liberica_locator.liberica import (
    LibericaDownload,
    resolve_liberica_release,
    resolve_liberica_url,
)
from liberica_locator.matching import find_latest_java_version, is_prefix_continuation
from liberica_locator.platforms import PlatformProbe, get_platform_info
from liberica_locator.types import PlatformInfo, ResolvedVersion

__all__ = [
    "resolve_liberica_url",
    "resolve_liberica_release",
    "LibericaDownload",
    "find_latest_java_version",
    "find_liberica_url",
    "determine_tool_name",
    "is_prefix_continuation",
    "GitHubClient",
    "PlatformProbe",
    "get_platform_info",
    "PlatformInfo",
    "ResolvedVersion",
    "LocatorError",
    "NoMatchError",
    "AssetNotFoundError",
]
