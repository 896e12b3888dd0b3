"""Locating the downloadable asset inside a Liberica NIK release."""

from typing import Optional

from liberica_locator.constants import (
    JAVA_FX_MARKER,
    LIBERICA_FULL_VARIANT,
    LIBERICA_GH_USER,
    LIBERICA_RELEASES_REPO,
    LIBERICA_RUNTIME_MARKER,
    LIBERICA_VM_PREFIX,
)
from liberica_locator.errors import AssetNotFoundError
from liberica_locator.types import PlatformInfo, Release, ReleaseFetcher, ResolvedVersion


def determine_variant_part(java_package: Optional[str]) -> str:
    if java_package is not None and JAVA_FX_MARKER in java_package:
        return LIBERICA_FULL_VARIANT
    return ""


def asset_prefix(asset_version: str, java_package: Optional[str]) -> str:
    return (
        f"{LIBERICA_VM_PREFIX}{determine_variant_part(java_package)}"
        f"{LIBERICA_RUNTIME_MARKER}{asset_version}"
    )


def asset_suffix(platform: PlatformInfo) -> str:
    return f"-{platform.platform_part}{platform.file_extension}"


def determine_tool_name(
    java_version: str, java_package: Optional[str], platform: PlatformInfo
) -> str:
    """Name under which a tool cache would store this distribution."""
    return f"{asset_prefix(java_version, java_package)}-{platform.platform_part}"


def find_asset_url(
    release: Release,
    resolved: ResolvedVersion,
    java_package: Optional[str],
    platform: PlatformInfo,
) -> str:
    """Return the download URL of the first asset matching the name template."""
    prefix = asset_prefix(resolved.asset_version, java_package)
    suffix = asset_suffix(platform)

    for asset in release.assets:
        if asset.name.startswith(prefix) and asset.name.endswith(suffix):
            return asset.browser_download_url

    raise AssetNotFoundError(resolved.value, java_package, platform.platform_part)


async def find_liberica_url(
    resolved: ResolvedVersion,
    java_package: Optional[str],
    platform: PlatformInfo,
    *,
    client: ReleaseFetcher,
) -> str:
    """Fetch the release for ``resolved`` and locate the asset for ``platform``."""
    release = await client.get_tagged_release(
        LIBERICA_GH_USER, LIBERICA_RELEASES_REPO, resolved.tag_name
    )
    return find_asset_url(release, resolved, java_package, platform)
