import os
import shlex
from typing import List, Optional

# Output artifacts
CONFIG_FILE = 'config.json'
PROFILE_NAME = 'External'
PROXY_TYPE = 'external'
INBOUND_TYPE = 'mixed'

# Some subscription servers only answer known client signatures
USER_AGENT = 'sing-box/1.6.0'

CORE_NAME = 'sing-box'
DEFAULT_CLIENT = 'sing-box'
CORE_RUN_ARGS: List[str] = ['run', '-c']


def _env_int(name: str, default: int, min_v: Optional[int] = None, max_v: Optional[int] = None) -> int:
    val = os.environ.get(name)
    if val is None:
        return default
    try:
        n = int(val)
    except ValueError:
        return default
    if min_v is not None and n < min_v:
        n = min_v
    if max_v is not None and n > max_v:
        n = max_v
    return n


def _env_str(name: str, default: str) -> str:
    val = (os.environ.get(name) or '').strip()
    return val or default


# 0 disables the timeout entirely
FETCH_TIMEOUT = _env_int('SURGEBOX_FETCH_TIMEOUT', 0, 0, 600)

# Explicit executable (path or PATH name), checked before the plain lookup
CORE_OVERRIDE = _env_str('SURGEBOX_CORE', '')

INSTALL_COMMAND: List[str] = shlex.split(_env_str('SURGEBOX_INSTALL_COMMAND', f'brew install {CORE_NAME}'))
