"""Core type definitions"""

from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple

from liberica_locator.constants import LIBERICA_JDK_TAG_PREFIX


@dataclass(frozen=True)
class MatchingRef:
    """Remote tag reference, e.g. refs/tags/jdk-17.0.1"""
    ref: str


@dataclass(frozen=True)
class ReleaseAsset:
    """Downloadable file attached to a release"""
    name: str
    browser_download_url: str


@dataclass(frozen=True)
class Release:
    """Tagged GitHub release"""
    tag_name: str
    assets: Tuple[ReleaseAsset, ...] = ()


@dataclass(frozen=True)
class PlatformInfo:
    """Host platform facts used in asset names"""
    os_name: str
    jdk_arch: str
    graalvm_arch: str
    is_musl: bool = False
    file_extension: str = ".tar.gz"

    @property
    def platform_part(self) -> str:
        if self.is_musl:
            return f"linux-{self.jdk_arch}-musl"
        return f"{self.os_name}-{self.graalvm_arch}"


@dataclass(frozen=True)
class ResolvedVersion:
    """Version picked from the remote tags.

    Paired versions keep the tag order (companion first) in ``value`` and
    ``tag_name``, while ``asset_version`` puts the java version first, which
    is how the release assets are named.
    """
    java_version: str
    companion_version: Optional[str] = None

    @property
    def is_paired(self) -> bool:
        return self.companion_version is not None

    @property
    def value(self) -> str:
        if self.is_paired:
            return f"{self.companion_version}-{self.java_version}"
        return self.java_version

    @property
    def tag_name(self) -> str:
        if self.is_paired:
            return self.value
        return f"{LIBERICA_JDK_TAG_PREFIX}{self.java_version}"

    @property
    def asset_version(self) -> str:
        if self.is_paired:
            return f"{self.java_version}-{self.companion_version}"
        return self.java_version

    def __str__(self) -> str:
        return self.value


class TagLister(Protocol):
    async def list_matching_tags(
        self, owner: str, repo: str, ref_prefix: str
    ) -> List[MatchingRef]:
        ...


class ReleaseFetcher(Protocol):
    async def get_tagged_release(self, owner: str, repo: str, tag: str) -> Release:
        ...
