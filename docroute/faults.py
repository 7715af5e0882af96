"""
docroute faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue
  raised while parsing, routing or resolving handler arguments.
- CommandException / CommandWarning: base types that carry message + options and
  know how to render themselves in a friendly, lowercased, and actionable way.
- trigger(): central entry point to surface any fault (respecting shell/deferred/fancy/colorful).

Taxonomy
- ParseError: the argv (or the usage text itself) was rejected by the grammar parser.
- UnhandledCommandError: the parse was valid but no registered command matched.
- RequiredArgumentError / InvalidArgumentError: raised by argument suppliers; they
  travel up to the entry point, which is the only place allowed to exit.
- UnknownBindingWarning: a handler argument binding of an unknown kind was skipped.

Integration
- Routing code builds a fault and calls trigger(fault, **ctx), usually through
  CommandLine.trigger() so that the context's rendering flags are merged in.
- In non-shell mode, exceptions are raised and warnings go through warnings.warn;
  in shell mode, both are rendered on stderr via rich.
"""
import copy
import inspect
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the router (stable identifiers).

    grouping
    - parsing (990): PARSE_ERROR
    - argument resolution (991-993): REQUIRED_ARGUMENT, INVALID_ARGUMENT, UNKNOWN_BINDING
    - routing (995): UNHANDLED_COMMAND

    normalize() renders the code as a searchable label ("E0995") unless the host
    application remaps it through a __codes__ mapping in __main__.
    """
    PARSE_ERROR       = 990
    REQUIRED_ARGUMENT = 991
    INVALID_ARGUMENT  = 992
    UNKNOWN_BINDING   = 993
    UNHANDLED_COMMAND = 995

    def normalize(self):
        """
        return a host-normalized string for this code.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, "E%04d" % self.value))


def _render(fault, kind, palette):
    main = __import__("__main__")
    options = fault.options

    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))

    def styler(style):
        return styles[style] if options.get("colorful") else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not options.get("colorful"):
            return Text(str(fragment))
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), style)

    prog = text(getattr(main, "__prog__", options.get("prog") or "docroute"), styler("prog-name"))

    header = Text.assemble(
        "[ ",
        prog,
        " — ",
        text(fault.code.normalize(), styler("code")),
        " | ",
        text(str(options.get("title", kind)).title(), styler("title")),
        " ]"
    )
    message = text(fault.message, styler("message"))
    renders = [message]
    if hint := options.get("hint"):
        renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

    if options.get("fancy"):
        return Panel(Group(*renders), title=header, title_align="left", width=console.width - 4)

    return Group(header, *renders)


class CommandException(Exception):
    """
    base error for every fault the router can raise.

    subclasses declare their defaults (code, title, hint) in __defaults__;
    keyword options given at construction or merged in by trigger() override them.
    """
    __defaults__ = MappingProxyType({"code": FaultCode.PARSE_ERROR, "title": "error"})

    def __init__(self, message, /, **options):
        assert isinstance(message, str | Text)
        super().__init__(str(message))
        self.message = message
        self.options = MappingProxyType({**type(self).__defaults__, **options})

    @property
    def code(self):
        return self.options["code"]

    def __rich__(self):
        return _render(self, "error", {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "title": "bold #FF4DA6",  # friendly pinky title
            "message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        })

    def __trigger__(self) -> None:
        if not self.options.get("shell"):
            raise self from None
        console.print(self)
        if self.options.get("deferred"):
            return
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ParseError(CommandException):
    __defaults__ = MappingProxyType({
        "code": FaultCode.PARSE_ERROR,
        "title": "invalid invocation",
        "hint": "run with --help to see the accepted forms",
    })


class UnhandledCommandError(CommandException):
    __defaults__ = MappingProxyType({
        "code": FaultCode.UNHANDLED_COMMAND,
        "title": "unhandled command",
        "hint": "the usage text accepts this command but nothing was registered for it",
    })


class RequiredArgumentError(CommandException):
    __defaults__ = MappingProxyType({
        "code": FaultCode.REQUIRED_ARGUMENT,
        "title": "missing argument",
    })


class InvalidArgumentError(CommandException):
    __defaults__ = MappingProxyType({
        "code": FaultCode.INVALID_ARGUMENT,
        "title": "invalid argument",
    })


class CommandWarning(Warning):
    """
    base warning for recoverable faults; rendered in shell mode, warned otherwise.
    """
    __defaults__ = MappingProxyType({"code": FaultCode.UNKNOWN_BINDING, "title": "warning"})

    def __init__(self, message, /, **options):
        assert isinstance(message, str | Text)
        super().__init__(str(message))
        self.message = message
        self.options = MappingProxyType({**type(self).__defaults__, **options})

    @property
    def code(self):
        return self.options["code"]

    def __rich__(self):
        return _render(self, "warning", {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code for warnings
            "title": "bold #FFC2E0",  # softer pinky title for warnings
            "message": "#D6D6DE",  # slightly lighter gray body
            "hint-arrow": "#B8EFAF dim",  # softer green arrow
            "hint": "italic #B8EFAF",  # softer green hint text
        })

    def __trigger__(self) -> None:
        if not self.options.get("shell"):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownBindingWarning(CommandWarning):
    __defaults__ = MappingProxyType({
        "code": FaultCode.UNKNOWN_BINDING,
        "title": "unknown binding",
        "hint": "handler arguments must be option keys or supplier callables",
    })


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via rich console; otherwise, exceptions are raised
      and warnings are emitted through the warnings module.

    typical options
    - prog, shell, fancy, colorful, deferred, title, code, hint.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "CommandException",
    "ParseError",
    "UnhandledCommandError",
    "RequiredArgumentError",
    "InvalidArgumentError",
    "CommandWarning",
    "UnknownBindingWarning",
    "trigger",
)
