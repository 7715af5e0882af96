"""
docroute command layer: descriptors and handler-argument bindings.

What this module provides
- Literal(key): a handler argument read straight from the option map.
- Supplier(function): a handler argument computed from the option map and the
  caller's prepend arguments, as function(options, *prepend).
- Command(components, handler, handler_args): the immutable descriptor the
  registry stores and the dispatcher selects.
- binding(x): normalize a raw handler-argument entry into Literal/Supplier.

Core ideas
- components is the whitespace-split command phrase; its length is the
  command's specificity ("eags transform rdbms sql" beats "eags transform").
- handler_args is ordered: it is the positional order at invocation.
- Bindings are a tagged variant, so the dispatcher dispatches on kind with a
  match statement instead of probing with isinstance/callable at call time.

Quick start
    from docroute import Command, Literal

    def erd(cli, spec_file):
        ...

    cmd = Command("eags transform rdbms erd", erd, ["<spec-file.ts>"])
    cmd.components    # ('eags', 'transform', 'rdbms', 'erd')
    cmd.handler_args  # (Literal('<spec-file.ts>'),)
"""
from collections.abc import Iterable
from typing import final

from .utils import components as _components


@final
class Literal:
    """
    handler argument taken verbatim from the option map under `key`.
    """
    __slots__ = ("key",)
    __match_args__ = ("key",)

    def __init__(self, key, /):
        if not isinstance(key, str):
            raise TypeError("Literal() argument must be a string")
        if not key.strip():
            raise ValueError("Literal() argument must be a non-empty string")
        object.__setattr__(self, "key", key)

    def __setattr__(self, name, value):
        raise AttributeError("Literal bindings are immutable")

    def __eq__(self, other):
        if not isinstance(other, Literal):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash((Literal, self.key))

    def __repr__(self):
        return f"Literal({self.key!r})"


@final
class Supplier:
    """
    handler argument computed as function(options, *prepend).
    """
    __slots__ = ("function",)
    __match_args__ = ("function",)

    def __init__(self, function, /):
        if not callable(function):
            raise TypeError("Supplier() argument must be callable")
        object.__setattr__(self, "function", function)

    def __setattr__(self, name, value):
        raise AttributeError("Supplier bindings are immutable")

    def __call__(self, options, /, *prepend):
        return self.function(options, *prepend)

    def __eq__(self, other):
        if not isinstance(other, Supplier):
            return NotImplemented
        return self.function == other.function

    def __hash__(self):
        return hash((Supplier, self.function))

    def __repr__(self):
        return f"Supplier({getattr(self.function, '__qualname__', self.function)!r})"


def binding(x, /):
    """
    Normalize one raw handler-argument entry.

    Rules
    - Literal / Supplier instances are kept as-is.
    - str → Literal(x).
    - other callables → Supplier(x).
    - anything else is returned untouched; the dispatcher reports it with an
      UnknownBindingWarning and skips the slot.
    """
    match x:
        case Literal() | Supplier():
            return x
        case str():
            return Literal(x)
        case _ if callable(x):
            return Supplier(x)
        case _:
            return x


@final
class Command:
    """
    Immutable command descriptor.

    Attributes
    - components: tuple[str, ...]
      Grammar tokens that must all be present for this command to match.
    - handler: Callable[..., Any]
      Invoked positionally with the prepend arguments followed by the resolved
      handler arguments.
    - handler_args: tuple[Literal | Supplier, ...]
      Ordered bindings (unknown kinds are kept and skipped at dispatch).

    Construction rules
    - components may be a phrase ("eags transform") or an iterable of tokens.
      Tokens are stripped; an empty result raises ValueError.
    - handler must be callable (TypeError otherwise).
    """
    __slots__ = ("components", "handler", "handler_args")

    def __init__(self, components, handler, handler_args=(), /):
        if isinstance(components, str):
            tokens = _components(components)
        elif isinstance(components, Iterable):
            tokens = []
            for token in components:
                if not isinstance(token, str):
                    raise TypeError("Command() components must be strings")
                if token := token.strip():
                    tokens.append(token)
            tokens = tuple(tokens)
        else:
            raise TypeError("Command() components must be a string or an iterable of strings")
        if not tokens:
            raise ValueError("Command() components must contain at least one token")
        if not callable(handler):
            raise TypeError("Command() handler must be callable")
        if handler_args is None or isinstance(handler_args, str) or not isinstance(handler_args, Iterable):
            raise TypeError("Command() handler_args must be an iterable of bindings")

        object.__setattr__(self, "components", tokens)
        object.__setattr__(self, "handler", handler)
        object.__setattr__(self, "handler_args", tuple(map(binding, handler_args)))

    def __setattr__(self, name, value):
        raise AttributeError("Command descriptors are immutable")

    def __len__(self):
        return len(self.components)

    @property
    def phrase(self):
        return " ".join(self.components)

    def __repr__(self):
        name = getattr(self.handler, "__qualname__", repr(self.handler))
        return f"Command({self.phrase!r}, {name}, {list(self.handler_args)!r})"

    def __rich_repr__(self):
        yield "components", self.components
        yield "handler", getattr(self.handler, "__qualname__", self.handler)
        yield "handler_args", self.handler_args


__all__ = (
    "Literal",
    "Supplier",
    "Command",
    "binding",
)
