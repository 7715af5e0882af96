"""
Longest-match command dispatch.

Algorithm
1. Take registry.ordered(): a snapshot sorted by descending number of
   components (ties keep registration order).
2. The first descriptor whose every component is present in the option map
   is selected. Partial matches never count.
3. Nothing matched: the reporter's result is returned verbatim.
4. Otherwise build the argument list: the prepend arguments first, then one
   value per binding (Literal → options[key], Supplier → fn(options, *prepend)).
   Bindings of an unknown kind are reported with UnknownBindingWarning and
   left out.
5. Return handler(*arguments) verbatim.

The registry is never reordered, so repeated dispatches over the same option
map select the same descriptor.
"""
from .commands import Literal, Supplier
from .faults import UnknownBindingWarning, trigger
from .options import OptionMap


def _surface(context, fault):
    # A CommandLine merges its rendering flags; anything else warns plainly.
    if hasattr(context, "trigger") and callable(context.trigger):
        return context.trigger(fault)
    trigger(fault)


def match(registry, options, /):
    """
    return the most specific fully matched descriptor, or None.
    """
    options = options if isinstance(options, OptionMap) else OptionMap(options)
    for command in registry.ordered():
        found = sum(1 for component in command.components if options.present(component))
        if found == len(command.components):
            return command
    return None


def resolve(command, options, /, prepend=(), *, context=None):
    """
    build the positional arguments for command.handler.
    """
    options = options if isinstance(options, OptionMap) else OptionMap(options)
    arguments = list(prepend)
    for binding in command.handler_args:
        match binding:
            case Literal(key):
                arguments.append(options[key])
            case Supplier(function):
                arguments.append(function(options, *prepend))
            case _:
                _surface(context, UnknownBindingWarning(
                    f"don't know what to do with handler argument {binding!r} of {command.phrase!r}",
                    binding=binding,
                ))
    return tuple(arguments)


def dispatch(registry, options, /, *prepend, reporter, context=None):
    """
    Select and invoke exactly one handler.

    Parameters
    - registry: Registry (anything with ordered()).
    - options: OptionMap or a plain mapping from the grammar parser.
    - *prepend: arguments placed before the resolved handler arguments and
      forwarded to every supplier.
    - reporter: callable(context) used when nothing matches.
    - context: passed to the reporter; when it provides trigger(), warnings are
      surfaced through it.

    Returns
    - handler(*arguments) on a match, reporter(context) otherwise.
    """
    options = options if isinstance(options, OptionMap) else OptionMap(options)
    command = match(registry, options)
    if command is None:
        return reporter(context)
    return command.handler(*resolve(command, options, prepend, context=context))


__all__ = (
    "match",
    "resolve",
    "dispatch",
)
