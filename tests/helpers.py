from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from typing import List, Optional


class FakeCore:
    """Scripted stand-in for SingBoxCore; records how often it was asked."""

    def __init__(self, paths: List[Optional[str]], install_ok: bool = True, name: str = 'sing-box',
                 install_hint: str = 'brew install sing-box') -> None:
        self.name = name
        self.install_hint = install_hint
        self._paths = list(paths)
        self.install_ok = install_ok
        self.locate_calls = 0
        self.install_calls = 0

    def locate(self) -> Optional[str]:
        self.locate_calls += 1
        return self._paths.pop(0) if self._paths else None

    def install(self) -> bool:
        self.install_calls += 1
        return self.install_ok


class TempCwdTestCase(unittest.TestCase):
    """Runs each test inside a fresh temporary working directory."""

    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        old = os.getcwd()
        os.chdir(tmp.name)
        self.addCleanup(os.chdir, old)
        self.tmp = Path(tmp.name).resolve()
