"""Platform detection and mapping."""

import asyncio
import logging
import platform
from typing import NamedTuple, Optional

from liberica_locator.logging import get_logger, log_with_data
from liberica_locator.types import PlatformInfo

logger = get_logger(__name__)

MUSL_PROBE_COMMAND = ("ldd", "--version")
MUSL_MARKER = "musl"


class PlatformMapping(NamedTuple):
    """Platform-specific values."""
    os_name: str
    file_extension: str


class ArchMapping(NamedTuple):
    """Architecture names used by the JDK and GraalVM asset conventions."""
    jdk: str
    graalvm: str


PLATFORM_MAPPINGS = {
    "Linux": PlatformMapping(os_name="linux", file_extension=".tar.gz"),
    "Darwin": PlatformMapping(os_name="macos", file_extension=".tar.gz"),
    "Windows": PlatformMapping(os_name="windows", file_extension=".zip"),
}

ARCH_MAPPINGS = {
    "x86_64": ArchMapping(jdk="x64", graalvm="amd64"),
    "amd64": ArchMapping(jdk="x64", graalvm="amd64"),
    "aarch64": ArchMapping(jdk="aarch64", graalvm="aarch64"),
    "arm64": ArchMapping(jdk="aarch64", graalvm="aarch64"),
}


def get_platform_info(
    is_musl: bool = False,
    system: Optional[str] = None,
    machine: Optional[str] = None,
) -> PlatformInfo:
    """Get platform information for the current (or given) host."""
    system = system or platform.system()
    machine = (machine or platform.machine()).lower()

    if system not in PLATFORM_MAPPINGS:
        raise RuntimeError(f"Unsupported operating system: {system}")

    if machine not in ARCH_MAPPINGS:
        raise RuntimeError(f"Unsupported architecture: {machine}")

    platform_map = PLATFORM_MAPPINGS[system]
    arch_map = ARCH_MAPPINGS[machine]

    return PlatformInfo(
        os_name=platform_map.os_name,
        jdk_arch=arch_map.jdk,
        graalvm_arch=arch_map.graalvm,
        is_musl=is_musl and system == "Linux",
        file_extension=platform_map.file_extension,
    )


async def is_musl_based_linux(system: Optional[str] = None) -> bool:
    """Check whether the host is a musl libc Linux.

    musl's ldd prints its banner on stderr, so only stderr is inspected.
    """
    if (system or platform.system()) != "Linux":
        return False

    try:
        process = await asyncio.create_subprocess_exec(
            *MUSL_PROBE_COMMAND,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError:
        log_with_data(logger, logging.DEBUG, "ldd not available, assuming glibc", {
            "command": " ".join(MUSL_PROBE_COMMAND),
        })
        return False

    _, stderr = await process.communicate()
    output = stderr.decode("utf-8", errors="replace") if stderr else ""
    is_musl = MUSL_MARKER in output

    log_with_data(logger, logging.DEBUG, "Probed C library", {
        "returncode": process.returncode,
        "musl": is_musl,
    })
    return is_musl


class PlatformProbe:
    """Detects the host platform once per probe instance."""

    def __init__(self, system: Optional[str] = None, machine: Optional[str] = None):
        self.system = system
        self.machine = machine
        self._info: Optional[PlatformInfo] = None

    async def get(self) -> PlatformInfo:
        if self._info is None:
            is_musl = await is_musl_based_linux(self.system)
            self._info = get_platform_info(is_musl, self.system, self.machine)
        return self._info
