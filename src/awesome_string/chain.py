"""Chained calls over a wrapped subject.

Example:
    >>> wrap('Hello world').lower_case().words()
    ['hello', 'world']
    >>> chain('Hello world').lower_case().words().value()
    ['hello', 'world']
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'ChainWrapper',

    # Functions
    'wrap',
    'chain'
]

from functools import cache
from importlib import import_module
from typing import Any, Callable, Dict, Optional
from awesome_string.coercion import coerce_to_string

_CHAINABLE_MODULES = ['case', 'chop', 'count', 'escape', 'format', 'index', 'manipulate', 'query', 'split', 'strip']

@cache
def _functions() -> Dict[str, Callable]:
    registry = {}
    for module_name in _CHAINABLE_MODULES:
        module = import_module(f'awesome_string.{module_name}')
        for name in module.__all__:
            member = getattr(module, name)
            if not isinstance(member, type):
                registry[name] = member
    return registry

class ChainWrapper:
    """Wrapper that calls library functions with the wrapped value as subject.

    Every public function of the library is available as a method. In an
    implicit chain, functions returning something other than text end the
    chain and their result is returned as-is; an explicit chain keeps
    wrapping until `value` is called.

    Attributes:
        explicit: Whether the chain keeps wrapping non-text results
    """
    def __init__(self, subject: Any = None, explicit: bool = False):
        self._wrapped_value = subject
        self.explicit = explicit

    def value(self) -> Any:
        return self._wrapped_value

    def chain(self) -> 'ChainWrapper':
        """Get an explicit chain over the wrapped value."""
        return ChainWrapper(self._wrapped_value, True)

    def thru(self, changer: Optional[Callable[[Any], Any]] = None) -> 'ChainWrapper':
        """
        Pass the wrapped value through `changer` and wrap the result.

        Example:
            >>> wrap('sun and moon').thru(lambda subject: subject.replace('moon', 'stars')).value()
            'sun and stars'
        """
        if changer is None:
            return ChainWrapper(self._wrapped_value, self.explicit)
        return ChainWrapper(changer(self._wrapped_value), self.explicit)

    def __getattr__(self, name: str) -> Callable:
        if name.startswith('_'):
            raise AttributeError(name)
        function = _functions().get(name)
        if function is None:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

        def call(*args, **kwargs):
            result = function(self._wrapped_value, *args, **kwargs)
            if self.explicit or isinstance(result, str):
                return ChainWrapper(result, self.explicit)
            return result

        call.__name__ = name
        call.__doc__ = function.__doc__
        return call

    def __str__(self) -> str:
        return coerce_to_string(self._wrapped_value)

    def __repr__(self) -> str:
        return f'ChainWrapper({self._wrapped_value!r}, explicit={self.explicit})'

def wrap(subject: Any = None) -> ChainWrapper:
    """
    Start an implicit chain over `subject`.

    Example:
        >>> wrap('Back to School').is_blank()
        False
    """
    return ChainWrapper(subject)

def chain(subject: Any = None) -> ChainWrapper:
    """
    Start an explicit chain over `subject`.

    Example:
        >>> chain('Back to School').is_blank().value()
        False
    """
    return ChainWrapper(subject, True)
