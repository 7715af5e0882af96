"""
Read-only view over a parsed option map.

The grammar parser hands back a flat dict keyed by grammar symbol: command
words ("eags"), switches ("--verbose") and positionals ("<spec-file.ts>").
OptionMap freezes that dict for the duration of a dispatch and answers two
different questions that the raw dict conflates:

- lookup(key): what did the parser store? (Unset when the key is unknown)
- present(key): does this token count toward a command match?

Presence rules
- absent keys, None, False and an empty list are not present.
- the int 0 is a repeat count ("-v..." or "go...") only for switches and
  commands; there it means "never given". Positionals ("<n>", "FILE") holding
  0 are present.
- everything else is present, including "" and "0".
"""
from collections.abc import Mapping
from types import MappingProxyType

from .utils import Unset


def _positional(key):
    # docopt arguments are "<name>" or ALL-CAPS words; switches start with "-".
    if not isinstance(key, str) or key.startswith("-"):
        return False
    return key.startswith("<") and key.endswith(">") or key.isupper()


class OptionMap(Mapping):
    __slots__ = ("_values",)

    def __init__(self, values=(), /):
        if isinstance(values, OptionMap):
            values = values._values
        object.__setattr__(self, "_values", MappingProxyType(dict(values)))

    def __getitem__(self, key):
        # Unknown symbols resolve to None, like an option the parser left unset.
        return self._values.get(key)

    def get(self, key, default=None, /):
        return self._values.get(key, default)

    def __contains__(self, key):
        return key in self._values

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__!r} object is read-only")

    def __repr__(self):
        return f"{type(self).__name__}({dict(self._values)!r})"

    def __rich_repr__(self):
        yield from self._values.items()

    def lookup(self, key, /):
        """
        return the raw parsed value for key, or Unset when the key is unknown.
        """
        return self._values.get(key, Unset)

    def present(self, key, /):
        """
        tell whether key counts as given on the command line.
        """
        value = self._values.get(key, Unset)
        if value is Unset or value is None or value is False:
            return False
        if isinstance(value, int) and not isinstance(value, bool) and not _positional(key):
            return value != 0
        if isinstance(value, list):
            return bool(value)
        return True

    def text(self, key, /):
        """
        return the value for key as text, or None when it was not given.
        """
        value = self._values.get(key)
        if value is None or isinstance(value, bool):
            return None
        return value if isinstance(value, str) else str(value)

    def number(self, key, /):
        """
        return the value for key as a number, or None when it was not given.

        integral text becomes an int, anything else numeric a float; text that
        is not numeric raises ValueError.
        """
        value = self._values.get(key)
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int | float):
            return value
        try:
            return int(value)
        except ValueError:
            return float(value)


__all__ = (
    "OptionMap",
)
