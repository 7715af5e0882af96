"""
docroute utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the option map, the descriptors and the
  dispatcher so that "absent" is spelled the same way everywhere.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “no value in the option map” without
    conflating it with None, False, 0 or "".
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated wrappers for clean tracebacks and help.

- components(phrase)
  • Split a human-written command phrase into its grammar tokens.

Stability and contract
- These utilities are re-exported via __all__.
- Names not in __all__ are internal and may change without notice.

Quick examples
    >>> components("eags transform  rdbms erd")
    ('eags', 'transform', 'rdbms', 'erd')
"""
import builtins
import functools
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    The parser reports "valued option not given" as None and "command not given"
    as False, so neither can double as "this key is not in the map at all".
    A single instance, Unset, fills that role.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - Function form: rename(callable, name) -> callable
    - Decorator form: rename(name) -> (decorator)

    Some built-in or C-implemented callables are not updatable and raise TypeError.
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def components(phrase, /):
    """
    Split a command phrase into its grammar tokens.

    Parameters
    - phrase: str
      Whitespace-separated words, e.g. "eags transform rdbms erd".

    Returns
    - tuple[str, ...]: the non-empty tokens in declaration order.

    Raises
    - TypeError: when phrase is not a string.
    """
    if not isinstance(phrase, str):
        raise TypeError("components() argument must be a string")
    return tuple(phrase.split())


Unset = UnsetType()
"""
Internal sentinel for “not present in the option map”.

Notes
- Singleton: there is only one Unset instance.
- Distinct from None: equality and identity checks must not treat it as None.
- Falsey: bool(Unset) is False, but it is not equivalent to None or 0.
"""


__all__ = (
    # Functions
    "rename",
    "components",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
