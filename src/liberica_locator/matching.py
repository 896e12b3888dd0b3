"""Matching of requested versions against remote Liberica tags.

A requested version acts as a prefix: ``17.0.1`` matches ``17.0.1`` and
``17.0.1+12`` but never ``17.0.10``. Among the accepted candidates the one
with the highest build-aware precedence wins, so build metadata counts when
ordering (``17.0.1+13`` beats ``17.0.1+12``, which beats ``17.0.1``).

Candidates with equal precedence keep the first one seen. GitHub does not
guarantee the listing order, so such ties are not deterministic.
"""

import string
from typing import Iterable, Optional, Sequence, Tuple, Union

import semantic_version

from liberica_locator.constants import (
    LIBERICA_GH_USER,
    LIBERICA_JDK_TAG_PREFIX,
    LIBERICA_RELEASES_REPO,
    REFS_TAGS_PREFIX,
)
from liberica_locator.errors import NoMatchError
from liberica_locator.types import MatchingRef, ResolvedVersion, TagLister


def is_valid_version(value: str) -> bool:
    return semantic_version.validate(value)


def is_prefix_continuation(candidate: str, requested: str) -> bool:
    """True when ``candidate`` carries on the last number of ``requested``."""
    return len(candidate) > len(requested) and candidate[len(requested)] in string.digits


def accepts(candidate: str, requested: str) -> bool:
    """A valid version that starts with ``requested`` without extending its last number."""
    return (
        candidate.startswith(requested)
        and is_valid_version(candidate)
        and not is_prefix_continuation(candidate, requested)
    )


def _compare_identifiers(a: str, b: str) -> int:
    a_numeric, b_numeric = a.isdigit(), b.isdigit()
    if a_numeric and b_numeric:
        a_value, b_value = int(a), int(b)
        return (a_value > b_value) - (a_value < b_value)
    if a_numeric:
        return -1
    if b_numeric:
        return 1
    return (a > b) - (a < b)


def _compare_identifier_lists(a: Sequence[str], b: Sequence[str]) -> int:
    for a_id, b_id in zip(a, b):
        result = _compare_identifiers(a_id, b_id)
        if result:
            return result
    return (len(a) > len(b)) - (len(a) < len(b))


def compare_build(a: str, b: str) -> int:
    """Compare two versions, taking build metadata into account.

    Returns -1, 0 or 1. Prerelease ordering follows semver: a version
    without prerelease ranks above its prereleases. Build metadata is
    compared last with the same identifier rules, and a version with
    build metadata ranks above the same version without it.
    """
    va, vb = semantic_version.Version(a), semantic_version.Version(b)

    main_a, main_b = (va.major, va.minor, va.patch), (vb.major, vb.minor, vb.patch)
    if main_a != main_b:
        return 1 if main_a > main_b else -1

    if va.prerelease != vb.prerelease:
        if not va.prerelease:
            return 1
        if not vb.prerelease:
            return -1
        result = _compare_identifier_lists(va.prerelease, vb.prerelease)
        if result:
            return result

    return _compare_identifier_lists(va.build, vb.build)


class SingleVersionStrategy:
    """Matches ``jdk-<version>`` tags against one requested java version."""

    def __init__(self, java_version: str):
        self.java_version = java_version

    @property
    def ref_prefix(self) -> str:
        return f"{LIBERICA_JDK_TAG_PREFIX}{self.java_version}"

    def select(self, refs: Iterable[MatchingRef]) -> Optional[ResolvedVersion]:
        tag_prefix = f"{REFS_TAGS_PREFIX}{LIBERICA_JDK_TAG_PREFIX}"
        best: Optional[str] = None

        for matching_ref in refs:
            if not matching_ref.ref.startswith(tag_prefix):
                continue
            candidate = matching_ref.ref[len(tag_prefix):]
            if not accepts(candidate, self.java_version):
                continue
            if best is None or compare_build(candidate, best) > 0:
                best = candidate

        return ResolvedVersion(java_version=best) if best is not None else None


class PairedVersionStrategy:
    """Matches ``<graalvm>-<java>`` tags against both requested versions.

    A candidate replaces the best match only when both of its halves beat
    the corresponding halves of the current best.
    """

    def __init__(self, java_version: str, graalvm_version: str):
        self.java_version = java_version
        self.graalvm_version = graalvm_version

    @property
    def ref_prefix(self) -> str:
        return self.graalvm_version

    def split(self, ref: str) -> Optional[Tuple[str, str]]:
        if not ref.startswith(REFS_TAGS_PREFIX):
            return None
        companion, sep, java = ref[len(REFS_TAGS_PREFIX):].partition("-")
        if not sep:
            return None
        return companion, java

    def select(self, refs: Iterable[MatchingRef]) -> Optional[ResolvedVersion]:
        best: Optional[Tuple[str, str]] = None

        for matching_ref in refs:
            halves = self.split(matching_ref.ref)
            if halves is None:
                continue
            companion, java = halves
            if not (accepts(companion, self.graalvm_version) and accepts(java, self.java_version)):
                continue
            if best is None or (
                compare_build(companion, best[0]) > 0 and compare_build(java, best[1]) > 0
            ):
                best = (companion, java)

        if best is None:
            return None
        return ResolvedVersion(java_version=best[1], companion_version=best[0])


def select_strategy(
    java_version: str, graalvm_version: Optional[str] = None
) -> Union[SingleVersionStrategy, PairedVersionStrategy]:
    if graalvm_version:
        return PairedVersionStrategy(java_version, graalvm_version)
    return SingleVersionStrategy(java_version)


def select_best_match(
    refs: Iterable[MatchingRef],
    java_version: str,
    graalvm_version: Optional[str] = None,
) -> ResolvedVersion:
    """Pick the best tag out of ``refs`` or raise NoMatchError."""
    resolved = select_strategy(java_version, graalvm_version).select(refs)
    if resolved is None:
        raise NoMatchError(java_version, graalvm_version)
    return resolved


async def find_latest_java_version(
    java_version: str,
    graalvm_version: Optional[str] = None,
    *,
    client: TagLister,
) -> ResolvedVersion:
    """Resolve the requested version against the Liberica NIK tags."""
    strategy = select_strategy(java_version, graalvm_version)
    refs = await client.list_matching_tags(
        LIBERICA_GH_USER, LIBERICA_RELEASES_REPO, strategy.ref_prefix
    )
    return select_best_match(refs, java_version, graalvm_version)
