#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures for the LSC credential tests.

The external tools (ssh-keygen, openssl, the RPM generator script, alien)
are emulated by ``FakeToolRunner`` so the pipeline can run end to end
without any of them installed.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from lsccred.config import LscRuntimeConfig
from lsccred.exceptions import ToolLaunchError
from lsccred.packaging.capabilities import ToolProbe, reset_tool_probe
from lsccred.packaging.workspace import Workspace, WorkspaceAllocator
from lsccred.process import ProcessResult

RPM_PREFIX = "openvas-lsc-target-"
RPM_SUFFIX = "-0.5-1.noarch.rpm"


def _option(command: Sequence[str], flag: str) -> str:
    return command[list(command).index(flag) + 1]


class FakeToolRunner:
    """ProcessRunner that emulates the external tools on the local filesystem.

    ``failures`` maps a tool name to the return code it should produce;
    ``unlaunchable`` lists tools that cannot be started.
    """

    def __init__(
        self,
        failures: dict[str, int] | None = None,
        unlaunchable: Sequence[str] = (),
    ) -> None:
        self.failures = failures or {}
        self.unlaunchable = set(unlaunchable)
        self.calls: list[dict[str, Any]] = []

    @property
    def tools(self) -> list[str]:
        return [call["tool"] for call in self.calls]

    def execute(
        self,
        command: Sequence[str],
        cwd: Path | None = None,
        *,
        redact: Sequence[str] = (),
        env: Mapping[str, str] | None = None,
    ) -> ProcessResult:
        tool = self._tool_name(command)
        self.calls.append(
            {"tool": tool, "command": list(command), "cwd": cwd, "redact": list(redact), "env": dict(env or {})}
        )

        if tool in self.unlaunchable:
            raise ToolLaunchError(f"Failed to launch {tool}", command=tool)
        if tool in self.failures:
            return ProcessResult(returncode=self.failures[tool], stdout="", stderr=f"{tool} failed")

        handler = getattr(self, f"_run_{tool.replace('-', '_')}")
        return handler(list(command), Path(cwd) if cwd else None, dict(env or {}))

    @staticmethod
    def _tool_name(command: Sequence[str]) -> str:
        first = Path(command[0]).name
        if first == "fakeroot":
            return "alien"
        if first.endswith(".sh"):
            return "rpm-creator"
        return first

    def _run_ssh_keygen(self, command: list[str], cwd: Path | None, env: dict[str, str]) -> ProcessResult:
        key_path = Path(_option(command, "-f"))
        comment = _option(command, "-C")
        passphrase = _option(command, "-P").encode()

        key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        key_path.write_bytes(
            key.private_bytes(
                serialization.Encoding.PEM,
                serialization.PrivateFormat.TraditionalOpenSSL,
                serialization.BestAvailableEncryption(passphrase),
            )
        )
        public = key.public_key().public_bytes(
            serialization.Encoding.OpenSSH, serialization.PublicFormat.OpenSSH
        )
        Path(f"{key_path}.pub").write_bytes(public + b" " + comment.encode() + b"\n")
        return ProcessResult(returncode=0)

    def _run_openssl(self, command: list[str], cwd: Path | None, env: dict[str, str]) -> ProcessResult:
        source = Path(_option(command, "-in"))
        out = Path(_option(command, "-out"))
        passin = env[_option(command, "-passin").removeprefix("env:")].encode()
        passout = env[_option(command, "-passout").removeprefix("env:")].encode()
        if out.exists():
            return ProcessResult(returncode=1, stderr="refusing to overwrite")

        key = serialization.load_pem_private_key(source.read_bytes(), password=passin)
        out.write_bytes(
            key.private_bytes(
                serialization.Encoding.PEM,
                serialization.PrivateFormat.PKCS8,
                serialization.BestAvailableEncryption(passout),
            )
        )
        return ProcessResult(returncode=0)

    def _run_rpm_creator(self, command: list[str], cwd: Path | None, env: dict[str, str]) -> ProcessResult:
        target = Path(_option(command, "--target"))
        key_file = Path(command[-1])
        username = key_file.name.removesuffix(".pub")
        rpm = target / f"{RPM_PREFIX}{username}{RPM_SUFFIX}"
        rpm.write_bytes(b"\xed\xab\xee\xdb" + key_file.read_bytes())
        return ProcessResult(returncode=0, stdout=f"Wrote {rpm}")

    def _run_alien(self, command: list[str], cwd: Path | None, env: dict[str, str]) -> ProcessResult:
        assert cwd is not None
        rpm = cwd / command[-1]
        username = rpm.name.removeprefix(RPM_PREFIX).removesuffix(RPM_SUFFIX).lower()
        deb = cwd / f"{RPM_PREFIX}{username}_0.5-1_all.deb"
        deb.write_bytes(b"!<arch>\n" + rpm.read_bytes())
        return ProcessResult(returncode=0)


class CountingAllocator(WorkspaceAllocator):
    """WorkspaceAllocator that remembers every allocation and release."""

    def __init__(self, root: Path | None = None) -> None:
        super().__init__(root)
        self.allocated: list[Workspace] = []
        self.released: list[Workspace] = []

    def allocate(self, prefix: str) -> Workspace:
        workspace = super().allocate(prefix)
        self.allocated.append(workspace)
        return workspace

    def release(self, workspace: Workspace) -> None:
        self.released.append(workspace)
        super().release(workspace)


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    reset_tool_probe()
    yield
    reset_foundation_setup_for_testing()
    reset_tool_probe()


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    root = tmp_path / "tmp"
    root.mkdir()
    return root


@pytest.fixture
def lsc_config(tmp_path: Path, workspace_root: Path) -> LscRuntimeConfig:
    """Config with a generator script and an executable alien in tmp_path."""
    data_dir = tmp_path / "share"
    data_dir.mkdir()
    script = data_dir / "openvas-lsc-rpm-creator.sh"
    script.write_text("#!/bin/sh\nexit 0\n")
    script.chmod(0o755)

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    alien = bin_dir / "alien"
    alien.write_text("#!/bin/sh\nexit 0\n")
    alien.chmod(0o755)

    return LscRuntimeConfig(
        data_dir=str(data_dir),
        temp_dir=str(workspace_root),
        alien=str(alien),
    )


@pytest.fixture
def probe(lsc_config: LscRuntimeConfig) -> ToolProbe:
    return ToolProbe(lsc_config)


@pytest.fixture
def fake_runner() -> FakeToolRunner:
    return FakeToolRunner()


@pytest.fixture
def runner_factory() -> type[FakeToolRunner]:
    return FakeToolRunner


@pytest.fixture
def allocator(workspace_root: Path) -> CountingAllocator:
    return CountingAllocator(workspace_root)


# 🔑📦🔚
