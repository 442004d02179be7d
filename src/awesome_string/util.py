"""Library version and the global namespace slot.

`no_conflict` is the only function in the package that touches process-wide
state. A host environment may publish the package under the name `awesome`
in the `builtins` namespace with `GLOBAL_SLOT.publish(awesome_string)`;
`no_conflict` gives that name back to whatever held it when the library was
imported.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'GlobalSlot',

    # Functions
    'version',
    'no_conflict'
]

import builtins
import logging
import sys
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, MutableMapping

logger = logging.getLogger(__name__)

VERSION = '1.1.0'

_EMPTY = object()

def version() -> str:
    """
    Get the library version.

    Example:
        >>> version()
        '1.1.0'
    """
    return VERSION

@dataclass
class GlobalSlot:
    """A named slot in a process-wide namespace.

    Attributes:
        namespace: Mapping holding the slot, the `builtins` namespace by default
        name: Name of the slot
        previous: Value held by the slot when it was captured
    """
    namespace: MutableMapping[str, Any] = field(default_factory=lambda: vars(builtins))
    name: str = 'awesome'
    previous: Any = field(default=_EMPTY, repr=False)

    def __post_init__(self):
        if self.previous is _EMPTY:
            self.previous = self.namespace.get(self.name, _EMPTY)

    def holds(self, value: Any) -> bool:
        return self.namespace.get(self.name, _EMPTY) is value

    def publish(self, value: Any) -> None:
        self.namespace[self.name] = value

    def restore(self) -> None:
        if self.previous is _EMPTY:
            self.namespace.pop(self.name, None)
        else:
            self.namespace[self.name] = self.previous

GLOBAL_SLOT = GlobalSlot()

def _library() -> ModuleType:
    return sys.modules['awesome_string']

def no_conflict(slot: GlobalSlot = GLOBAL_SLOT) -> ModuleType:
    """
    Give the global slot back to its previous owner.

    If `slot` currently holds the library, the value captured before the
    library was published is put back (or the slot is removed when it was
    empty). Otherwise the slot is left alone.

    Args:
        slot: Slot to release

    Returns:
        The `awesome_string` module

    Example:
        >>> import awesome_string
        >>> library = no_conflict()
        >>> library is awesome_string
        True
    """
    library = _library()
    if slot.holds(library):
        slot.restore()
        logger.debug('Restored global slot %r', slot.name)
    return library
