from __future__ import annotations

import os
from typing import Optional

from .common import log
from .constants import CONFIG_FILE, CORE_RUN_ARGS, PROFILE_NAME, PROXY_TYPE
from .core import Core
from .errors import ExecutableNotFound, InstallFailed
from .models import ControllerInfo


def resolve_executable(core: Core) -> str:
    """Locate the core, installing it once when it is missing."""
    path = core.locate()
    if path:
        return path

    log(f"✖ {core.name} not found, try install...")
    if not core.install():
        raise InstallFailed(f"Failed to install {core.name}, please try: {core.install_hint}.")
    log(f"✅ Successfully installed {core.name}")

    path = core.locate()
    if not path:
        raise ExecutableNotFound(f"{core.name} was installed but is still not on PATH.")
    return path


def format_descriptor(exec_path: str, controller: ControllerInfo, config_path: str) -> str:
    fields = [
        f"{PROFILE_NAME} = {PROXY_TYPE}",
        f'exec = "{exec_path}"',
        f"local-port = {controller.port}",
    ]
    fields += [f'args = "{arg}"' for arg in CORE_RUN_ARGS]
    fields.append(f'args = "{config_path}"')
    fields.append(f"address = {controller.address}")
    return ', '.join(fields)


def make_external_config(controller: ControllerInfo, core: Core,
                         config_path: Optional[str] = None) -> str:
    """Build the Surge ``external`` proxy line that runs the core on the written config."""
    exec_path = resolve_executable(core)
    config_path = os.path.abspath(config_path or CONFIG_FILE)
    return format_descriptor(exec_path, controller, config_path)
