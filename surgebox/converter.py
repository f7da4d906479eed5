from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

from .common import log
from .constants import CONFIG_FILE, INBOUND_TYPE
from .errors import FileWriteError, MalformedInbound
from .models import ControllerInfo, Subscription


def _controller_from(index: int, inbound: Dict[str, Any]) -> ControllerInfo:
    listen = inbound.get('listen')
    if not isinstance(listen, str):
        raise MalformedInbound(index, "`listen` must be a string")
    port = inbound.get('listen_port')
    # bool is an int subclass but never a valid port
    if isinstance(port, bool) or not isinstance(port, (int, float, str)):
        raise MalformedInbound(index, "`listen_port` must be a number or string")
    if isinstance(port, float):
        if not port.is_integer():
            raise MalformedInbound(index, f"`listen_port` must be a whole number, got {port}")
        port = int(port)
    return ControllerInfo(address=listen, port=str(port))


def filter_mixed_inbounds(inbounds: List[Any]) -> Tuple[List[Any], ControllerInfo]:
    """Keep only mixed inbounds. The last one found supplies the controller endpoint."""
    kept: List[Any] = []
    controller = ControllerInfo()
    for idx, inbound in enumerate(inbounds):
        if not isinstance(inbound, dict):
            raise MalformedInbound(idx, f"expected an object, got {type(inbound).__name__}")
        if 'type' not in inbound:
            continue
        typ = inbound['type']
        if not isinstance(typ, str):
            raise MalformedInbound(idx, "`type` must be a string")
        if typ != INBOUND_TYPE:
            continue
        controller = _controller_from(idx, inbound)
        kept.append(inbound)
    return kept, controller


def write_config(path: str, data: Dict[str, Any]) -> None:
    # Plain overwrite: no temp file, no lock
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise FileWriteError(f"Failed to write {path}: {e}") from e


def save_config(data: Dict[str, Any], path: str = CONFIG_FILE) -> ControllerInfo:
    """Rewrite the document with mixed inbounds only and persist it to ``path``."""
    sub = Subscription.from_document(data)
    sub.inbounds, controller = filter_mixed_inbounds(sub.inbounds)
    write_config(path, sub.to_document())
    log(f"✅ Convert successfully, save to: {path}")
    return controller
