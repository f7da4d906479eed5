from __future__ import annotations

import os
import shutil
import subprocess
from typing import List, Optional, Protocol

from .common import debug
from .constants import CORE_NAME, CORE_OVERRIDE, INSTALL_COMMAND


class Core(Protocol):
    name: str
    install_hint: str

    def locate(self) -> Optional[str]:
        ...

    def install(self) -> bool:
        ...


class SingBoxCore:
    """Finds the sing-box executable and installs it through the package manager."""

    def __init__(self, name: str = CORE_NAME, override: str = CORE_OVERRIDE,
                 install_command: Optional[List[str]] = None) -> None:
        self.name = name
        self.override = override
        self.install_command = list(install_command or INSTALL_COMMAND)

    @property
    def install_hint(self) -> str:
        return ' '.join(self.install_command)

    def locate(self) -> Optional[str]:
        # Priority 1: explicit override, as a path or a PATH name
        if self.override:
            if os.path.isfile(self.override) and os.access(self.override, os.X_OK):
                return os.path.abspath(self.override)
            w = shutil.which(self.override)
            if w:
                return os.path.abspath(w)
            debug(f"SURGEBOX_CORE={self.override} is not executable, falling back to PATH")

        # Priority 2: PATH lookup
        w = shutil.which(self.name)
        return os.path.abspath(w) if w else None

    def install(self) -> bool:
        debug(f"running: {' '.join(self.install_command)}")
        try:
            proc = subprocess.run(self.install_command, stdout=subprocess.PIPE,
                                  stderr=subprocess.PIPE, check=False)
        except OSError as e:
            # Package manager itself is missing
            debug(f"install command failed to start: {e}")
            return False
        return proc.returncode == 0
