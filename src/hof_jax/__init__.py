"""hof-jax public API."""

import logging

from .compose import flow
from .errors import HOFError, InvalidArgument, InvalidState
from .fold import reduce
from .predicates import all, any
from .ranking import max, max_by, min, min_by, sort, sort_by
from .sequences import each, filter, map, reject

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "reduce",
    "map",
    "filter",
    "reject",
    "each",
    "max",
    "min",
    "max_by",
    "min_by",
    "sort",
    "sort_by",
    "all",
    "any",
    "flow",
    "HOFError",
    "InvalidArgument",
    "InvalidState",
]
