#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Pipeline that turns a user name and password into keys and packages."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from enum import Enum

from attrs import evolve
from provide.foundation import logger

from lsccred.config import LscRuntimeConfig
from lsccred.config.defaults import KEY_WORKSPACE_PREFIX, PACKAGE_WORKSPACE_PREFIX
from lsccred.exceptions import ConfigurationError, ExternalToolError, FileOperationError, LscError
from lsccred.packaging.artifacts import ArtifactBundle, load_artifacts
from lsccred.packaging.capabilities import ToolProbe, get_tool_probe
from lsccred.packaging.deb import FormatConverter
from lsccred.packaging.keys import KeypairGenerator
from lsccred.packaging.login import CredentialRequest, LoginDescriptor
from lsccred.packaging.naming import native_package_name
from lsccred.packaging.rpm import NativePackageBuilder
from lsccred.packaging.workspace import WorkspaceAllocator
from lsccred.process import FoundationProcessRunner, ProcessRunner


class PipelineState(Enum):
    IDLE = "idle"
    KEY_DIR_ALLOCATED = "key_dir_allocated"
    KEYS_GENERATED = "keys_generated"
    PACKAGE_DIR_ALLOCATED = "package_dir_allocated"
    NATIVE_BUILT = "native_built"
    CONVERTED = "converted"
    ARTIFACTS_LOADED = "artifacts_loaded"
    DONE = "done"
    FAILED = "failed"


class CredentialPipeline:
    """Creates the keypair, the RPM and the .deb for one credential.

    Both temporary workspaces are removed before :meth:`run` returns, on
    success and on every failure. Errors leave :meth:`run` as
    :class:`LscError` subclasses whose ``stage`` names the state the
    pipeline was trying to reach.
    """

    def __init__(
        self,
        runner: ProcessRunner | None = None,
        config: LscRuntimeConfig | None = None,
        probe: ToolProbe | None = None,
        allocator: WorkspaceAllocator | None = None,
    ) -> None:
        if probe is None:
            probe = get_tool_probe() if config is None else ToolProbe(config)
        self.config = config or probe.config
        self.runner = runner or FoundationProcessRunner(timeout=self.config.command_timeout)
        self.probe = probe
        self.allocator = allocator or WorkspaceAllocator(root=self.config.workspace_root)
        self.keys = KeypairGenerator(self.runner, self.config)
        self.native_builder = NativePackageBuilder(self.runner, self.probe, self.config)
        self.converter = FormatConverter(self.runner, self.probe, self.config)
        self.state = PipelineState.IDLE

    @contextmanager
    def _transition(self, target: PipelineState) -> Iterator[None]:
        try:
            yield
        except LscError as e:
            self.state = PipelineState.FAILED
            e.stage = target
            logger.error("🧩❌ Pipeline failed", stage=target.value, error=str(e))
            raise
        except OSError as e:
            self.state = PipelineState.FAILED
            error = FileOperationError(str(e))
            error.stage = target
            logger.error("🧩❌ Pipeline failed", stage=target.value, error=str(e))
            raise error from e
        self.state = target
        logger.trace("🧩 Pipeline state", state=target.value)

    def run(self, request: CredentialRequest) -> ArtifactBundle:
        """Run every stage for ``request``.

        Raises:
            ValidationError: The request is unusable.
            ConfigurationError: alien or the RPM generator is missing.
            PreconditionError: A key file is missing or already present.
            ExternalToolError: An external tool failed.
            FileOperationError: A file could not be read, written or moved.
        """
        self.state = PipelineState.IDLE
        teardown_failures: list[str] = []
        login: LoginDescriptor | None = None

        with self._transition(PipelineState.IDLE):
            request.validate()
            if not self.converter.available():
                raise ConfigurationError(f"Package converter '{self.config.alien}' not found in PATH")

        try:
            with ExitStack() as stack:
                with self._transition(PipelineState.KEY_DIR_ALLOCATED):
                    key_ws = stack.enter_context(
                        self.allocator.scoped(KEY_WORKSPACE_PREFIX, teardown_failures)
                    )
                    login = LoginDescriptor.for_request(request, key_ws.path)

                with self._transition(PipelineState.KEYS_GENERATED):
                    self.keys.generate(login)

                with self._transition(PipelineState.PACKAGE_DIR_ALLOCATED):
                    package_ws = stack.enter_context(
                        self.allocator.scoped(PACKAGE_WORKSPACE_PREFIX, teardown_failures)
                    )

                native_name = native_package_name(login.username)
                native_path = package_ws.path / native_name
                with self._transition(PipelineState.NATIVE_BUILT):
                    self.native_builder.build(login, package_ws, native_path)

                with self._transition(PipelineState.CONVERTED):
                    converted_path = self.converter.convert(package_ws.path, native_name, login.username)
                    if converted_path is None:
                        raise ExternalToolError("Conversion to a Debian package failed")

                with self._transition(PipelineState.ARTIFACTS_LOADED):
                    bundle = load_artifacts(
                        login.public_key_path,
                        login.private_key_path,
                        native_path,
                        converted_path,
                    )
        finally:
            if login is not None:
                login.wipe()

        self.state = PipelineState.DONE
        if teardown_failures:
            logger.warning("🧩⚠️ Credential packages created, but cleanup was incomplete", problems=teardown_failures)
            bundle = evolve(bundle, warnings=tuple(teardown_failures))
        logger.info(
            "🧩✅ Credential packages created",
            user=request.name,
            rpm_size=bundle.native_package_size,
            deb_size=bundle.converted_package_size,
        )
        return bundle


# 🔑📦🔚
