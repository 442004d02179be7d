"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
import logging

from . import case as _case
from . import chain as _chain
from . import chop as _chop
from . import coercion as _coercion
from . import count as _count
from . import escape as _escape
from . import format as _format
from . import index as _index
from . import manipulate as _manipulate
from . import query as _query
from . import split as _split
from . import strip as _strip
from . import util as _util

from .case import *
from .chain import *
from .chop import *
from .coercion import *
from .count import *
from .escape import *
from .format import *
from .index import *
from .manipulate import *
from .query import *
from .split import *
from .strip import *
from .util import *

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _util.VERSION

__all__ = [
    name
    for module in (
        _case, _chain, _chop, _coercion, _count, _escape, _format,
        _index, _manipulate, _query, _split, _strip, _util
    )
    for name in module.__all__
]
