# fnkit/__init__.py
"""
fnkit public API surface.

Two engines carry the library:

    - Currying: Curried, curry, curry_n, declared_arity
    - Structural equivalence: equivalent, ValueKind, kind_of

Everything else is built on them:

    - Types: type_name and the is_* predicates
    - Functions: compose, apply, flip, identity, until, error
    - Operators: eq, ne, eqv, not_, and_, or_, lt, gt, le, ge,
                 max_, min_, compare, add, sub, mul, div, rem, mod
    - Lists: cons, append, head, last, tail, init, folds, take/drop, ...
    - Objects: has, get, set_, keys, values, pairs, clones, freeze
"""

from __future__ import annotations

from .errors import EmptyError

# ---------------------------------------------------------------------------
# Core engines
# ---------------------------------------------------------------------------

from .core.curry import Curried, curry, curry_n, declared_arity
from .core.equiv import equivalent
from .core.kinds import (
    ValueKind,
    kind_of,
    type_name,
    is_list,
    is_arguments,
    is_record,
    is_function,
    is_string,
    is_number,
    is_boolean,
    is_null,
    is_nan,
    is_bytes,
    is_datetime,
    is_pattern,
)

# ---------------------------------------------------------------------------
# Functions and operators
# ---------------------------------------------------------------------------

from .functions import compose, apply, flip, identity, until, error
from .operators import (
    eq,
    ne,
    eqv,
    not_,
    and_,
    or_,
    lt,
    gt,
    le,
    ge,
    max_,
    min_,
    compare,
    add,
    sub,
    mul,
    div,
    rem,
    mod,
)

# ---------------------------------------------------------------------------
# Lists and strings
# ---------------------------------------------------------------------------

from .lists import (
    cons,
    append,
    concat,
    replicate,
    range_,
    empty,
    length,
    head,
    last,
    tail,
    init,
    foldl,
    foldl1,
    foldr,
    foldr1,
    map_,
    filter_,
    reverse,
    concat_map,
    all_,
    any_,
    maximum,
    minimum,
    take,
    drop,
    split_at,
    take_while,
    drop_while,
    span,
    elem,
    not_elem,
    zip_with,
    zip_,
    nub,
    sort,
    join,
)

# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------

from .objects import (
    has,
    get,
    set_,
    keys,
    values,
    pairs,
    shallow_clone,
    deep_clone,
    json_clone,
    freeze,
    deep_freeze,
)


__all__ = [
    # errors
    "EmptyError",

    # currying
    "Curried",
    "curry",
    "curry_n",
    "declared_arity",

    # equivalence and kinds
    "equivalent",
    "ValueKind",
    "kind_of",
    "type_name",
    "is_list",
    "is_arguments",
    "is_record",
    "is_function",
    "is_string",
    "is_number",
    "is_boolean",
    "is_null",
    "is_nan",
    "is_bytes",
    "is_datetime",
    "is_pattern",

    # functions
    "compose",
    "apply",
    "flip",
    "identity",
    "until",
    "error",

    # operators
    "eq",
    "ne",
    "eqv",
    "not_",
    "and_",
    "or_",
    "lt",
    "gt",
    "le",
    "ge",
    "max_",
    "min_",
    "compare",
    "add",
    "sub",
    "mul",
    "div",
    "rem",
    "mod",

    # lists
    "cons",
    "append",
    "concat",
    "replicate",
    "range_",
    "empty",
    "length",
    "head",
    "last",
    "tail",
    "init",
    "foldl",
    "foldl1",
    "foldr",
    "foldr1",
    "map_",
    "filter_",
    "reverse",
    "concat_map",
    "all_",
    "any_",
    "maximum",
    "minimum",
    "take",
    "drop",
    "split_at",
    "take_while",
    "drop_while",
    "span",
    "elem",
    "not_elem",
    "zip_with",
    "zip_",
    "nub",
    "sort",
    "join",

    # objects
    "has",
    "get",
    "set_",
    "keys",
    "values",
    "pairs",
    "shallow_clone",
    "deep_clone",
    "json_clone",
    "freeze",
    "deep_freeze",
]
