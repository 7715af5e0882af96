"""
Reusable handler-argument suppliers.

required(key, name=key, transform=None, message=None) is the one place where
a user-facing validation failure is defined. It does not exit: it raises
RequiredArgumentError / InvalidArgumentError and lets the entry point
(CommandLine.run) decide how to surface them.
"""
from .commands import Supplier
from .faults import InvalidArgumentError, RequiredArgumentError
from .options import OptionMap
from .utils import rename


def required(key, /, name=None, transform=None, message=None):
    """
    Build a supplier for an argument that must be given.

    Parameters
    - key: str
      Option-map key to read.
    - name: str
      Human name used in diagnostics; defaults to key.
    - transform: Callable[[Any], Any]
      Applied to the raw value; a falsy result means the value is invalid.
    - message: Callable[[Any, str, str], str]
      Builds the invalid-value diagnostic from (value, key, name).

    Returns
    - Supplier producing the raw (or transformed) value.

    Raises (when the supplier runs)
    - RequiredArgumentError: the value is absent (see OptionMap.present).
    - InvalidArgumentError: transform returned a falsy result.
    """
    if not isinstance(key, str):
        raise TypeError("required() key must be a string")
    name = key if name is None else name

    @rename(f"required[{key}]")
    def supplier(options, *context):
        options = options if isinstance(options, OptionMap) else OptionMap(options)
        if not options.present(key):
            raise RequiredArgumentError(f"{name} is required.", key=key)
        value = options[key]
        if transform is None:
            return value
        transformed = transform(value)
        if not transformed:
            raise InvalidArgumentError(
                message(value, key, name) if message else f"{name} '{value}' is not valid.",
                key=key,
                value=value,
            )
        return transformed

    return Supplier(supplier)


__all__ = (
    "required",
)
