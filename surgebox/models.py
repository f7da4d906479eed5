from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .errors import MalformedSubscription, MissingInbounds


@dataclass
class ControllerInfo:
    """Bind endpoint of the retained mixed inbound. Empty when none was found."""

    address: str = ''
    port: str = ''

    def is_empty(self) -> bool:
        return not self.address and not self.port


@dataclass
class Subscription:
    """Typed view over a subscription document.

    Only ``inbounds`` is decoded; every other top-level key rides along in
    ``extra`` untouched so the document can be written back verbatim.
    """

    inbounds: List[Any]
    extra: Dict[str, Any] = field(default_factory=dict)
    # Position of "inbounds" among the original keys, kept for a stable write order
    inbounds_pos: int = 0

    @classmethod
    def from_document(cls, data: Dict[str, Any]) -> 'Subscription':
        if 'inbounds' not in data:
            raise MissingInbounds("Can't find any inbounds in target configuration.")
        inbounds = data['inbounds']
        if not isinstance(inbounds, list):
            raise MalformedSubscription(
                f"`inbounds` must be an array, got {type(inbounds).__name__}"
            )
        keys = list(data)
        extra = {k: v for k, v in data.items() if k != 'inbounds'}
        return cls(inbounds=inbounds, extra=extra, inbounds_pos=keys.index('inbounds'))

    def to_document(self) -> Dict[str, Any]:
        items = list(self.extra.items())
        items.insert(self.inbounds_pos, ('inbounds', self.inbounds))
        return dict(items)
