"""Tests for platform detection."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from liberica_locator.platforms import (
    PlatformProbe,
    get_platform_info,
    is_musl_based_linux,
)

SUBPROCESS = "liberica_locator.platforms.asyncio.create_subprocess_exec"


def fake_process(stderr: bytes, returncode: int = 0):
    process = MagicMock()
    process.returncode = returncode
    process.communicate = AsyncMock(return_value=(b"", stderr))
    return process


@pytest.mark.parametrize(
    "system,machine,os_name,jdk_arch,graalvm_arch,extension",
    [
        ("Linux", "x86_64", "linux", "x64", "amd64", ".tar.gz"),
        ("Linux", "aarch64", "linux", "aarch64", "aarch64", ".tar.gz"),
        ("Darwin", "arm64", "macos", "aarch64", "aarch64", ".tar.gz"),
        ("Windows", "AMD64", "windows", "x64", "amd64", ".zip"),
    ],
)
def test_get_platform_info(system, machine, os_name, jdk_arch, graalvm_arch, extension):
    info = get_platform_info(system=system, machine=machine)
    assert info.os_name == os_name
    assert info.jdk_arch == jdk_arch
    assert info.graalvm_arch == graalvm_arch
    assert info.file_extension == extension
    assert info.platform_part == f"{os_name}-{graalvm_arch}"


def test_get_platform_info_musl():
    info = get_platform_info(is_musl=True, system="Linux", machine="x86_64")
    assert info.platform_part == "linux-x64-musl"


def test_get_platform_info_musl_ignored_off_linux():
    info = get_platform_info(is_musl=True, system="Darwin", machine="x86_64")
    assert not info.is_musl
    assert info.platform_part == "macos-amd64"


def test_get_platform_info_unsupported():
    with pytest.raises(RuntimeError, match="Unsupported operating system"):
        get_platform_info(system="SunOS", machine="x86_64")
    with pytest.raises(RuntimeError, match="Unsupported architecture"):
        get_platform_info(system="Linux", machine="riscv64")


@pytest.mark.asyncio
async def test_is_musl_based_linux_detects_musl():
    process = fake_process(b"musl libc (x86_64)\nVersion 1.2.3\n", returncode=1)
    with patch(SUBPROCESS, new_callable=AsyncMock, return_value=process) as spawn:
        assert await is_musl_based_linux("Linux")
    spawn.assert_awaited_once()
    assert spawn.await_args.args == ("ldd", "--version")


@pytest.mark.asyncio
async def test_is_musl_based_linux_glibc():
    process = fake_process(b"")
    with patch(SUBPROCESS, new_callable=AsyncMock, return_value=process):
        assert not await is_musl_based_linux("Linux")


@pytest.mark.asyncio
async def test_is_musl_based_linux_without_ldd():
    with patch(SUBPROCESS, new_callable=AsyncMock, side_effect=FileNotFoundError("ldd")):
        assert not await is_musl_based_linux("Linux")


@pytest.mark.asyncio
async def test_is_musl_based_linux_skips_probe_off_linux():
    with patch(SUBPROCESS, new_callable=AsyncMock) as spawn:
        assert not await is_musl_based_linux("Darwin")
    spawn.assert_not_awaited()


@pytest.mark.asyncio
async def test_platform_probe_caches_per_instance():
    process = fake_process(b"musl libc\n")
    with patch(SUBPROCESS, new_callable=AsyncMock, return_value=process) as spawn:
        probe = PlatformProbe(system="Linux", machine="x86_64")
        first = await probe.get()
        second = await probe.get()

        assert first is second
        assert first.platform_part == "linux-x64-musl"
        assert spawn.await_count == 1

        await PlatformProbe(system="Linux", machine="x86_64").get()
        assert spawn.await_count == 2
