"""
docroute command line: the spec-parse context around the docopt grammar parser.

What this module provides
- CommandLine: owns a Registry, parses argv against a docopt usage text, and
  routes the parsed options to the most specific registered handler.
- console_error_handler / console_unhandled_reporter: default collaborators
  that render ParseError / UnhandledCommandError (E0995) on stderr via rich.
- typical(spec, version, register): a CommandLine wired with the defaults.

Lifecycle
- CommandLine(...) calls register(self) once, before anything is parsed, then
  parses eagerly: is_valid and options reflect that first parse.
- handle(*prepend) parses again with the same usage text and init options and
  dispatches. Parse failures go through the error handler and return None.
- run(*prepend) is the entry-point boundary: faults raised by handlers or
  suppliers (RequiredArgumentError, InvalidArgumentError, ...) are triggered
  there, which in shell mode prints them and exits with status 1.

Quick start
    from docroute import typical

    USAGE = '''
    Usage:
      tool eags transform rdbms erd <spec-file.ts>
      tool -h | --help
    '''

    def setup(cli):
        @cli.command("eags transform rdbms erd", "<spec-file.ts>")
        def erd(cli, spec_file):
            return f"erd from {spec_file}"

    if __name__ == "__main__":
        cli = typical(USAGE, "1.0.0", setup)
        cli.run(cli)
"""
import os
import re
import shlex
from collections.abc import Iterable
from types import MappingProxyType

from docopt import DocoptExit, DocoptLanguageError, docopt

from .dispatcher import dispatch
from .faults import CommandException, ParseError, UnhandledCommandError, trigger
from .options import OptionMap
from .registry import Registry


def console_error_handler(cli, message, fatal, /, *extra):
    """
    Default error handler: render the parser's message as a ParseError.

    The fault is deferred, so nothing exits here; the caller marks the context
    invalid (construction) or skips dispatch (handle).
    """
    if extra:
        message = " ".join(map(str, (message, *extra)))
    fault = ParseError(message, fatal=bool(fatal))
    if cli is None:
        return trigger(fault, shell=True, deferred=True)
    cli.trigger(fault, shell=True, deferred=True)


def console_unhandled_reporter(cli, /):
    """
    Default unhandled-command reporter: render E0995 and return None.
    """
    fault = UnhandledCommandError("unable to find a command handler for a valid docopt command line")
    if cli is None:
        return trigger(fault, shell=True, deferred=True)
    cli.trigger(fault, shell=True, deferred=True)


class CommandLine:
    """
    Spec-parse context: one usage text, one registry, one logical invocation.

    Parameters
    - spec: str
      docopt usage text.
    - version: str
      Forwarded to docopt (printed on --version). An init["version"] takes precedence.
    - init: Mapping[str, Any]
      Extra docopt keyword arguments; "argv" may be a shell-like string or a
      sequence of tokens and defaults to sys.argv[1:].
    - error_handler: Callable[[CommandLine, str, bool], None] | None
    - unhandled_reporter: Callable[[CommandLine], Any]
    - register: Callable[[CommandLine], None] | None
      Called once, synchronously, before the first parse.
    - shell / colorful / fancy: rendering flags merged into every triggered fault.
    """

    def __init__(
            self,
            spec,
            version,
            init=None,
            /,
            *,
            error_handler=console_error_handler,
            unhandled_reporter=console_unhandled_reporter,
            register=None,
            shell=True,
            colorful=True,
            fancy=False,
    ):
        if not isinstance(spec, str):
            raise TypeError("CommandLine() spec must be a string")
        if not callable(unhandled_reporter):
            raise TypeError("CommandLine() unhandled_reporter must be callable")
        if error_handler is not None and not callable(error_handler):
            raise TypeError("CommandLine() error_handler must be callable")

        self.spec = spec
        self.version = version
        self.init = MappingProxyType(dict(init or {}))
        self.error_handler = error_handler
        self.unhandled_reporter = unhandled_reporter
        self.shell = bool(shell)
        self.colorful = bool(colorful)
        self.fancy = bool(fancy)
        self.registry = Registry()

        if register is not None:
            register(self)

        try:
            self.options = self._parse()
            self.is_valid = True
        except (DocoptExit, DocoptLanguageError) as exc:
            self.options = OptionMap()
            self.is_valid = False
            if self.error_handler:
                self.error_handler(self, str(exc), True)

    @property
    def name(self):
        """
        program name taken from the first usage line, or None.
        """
        if found := re.search(r"usage:\s*(\S+)", self.spec, re.IGNORECASE):
            return found.group(1)
        return None

    def _argv(self):
        argv = self.init.get("argv")
        if argv is None or isinstance(argv, list):
            return argv
        if isinstance(argv, str):
            return shlex.split(argv)
        if isinstance(argv, Iterable):
            return list(argv)
        raise TypeError("CommandLine() init argv must be a string or an iterable of strings")

    def _parse(self):
        init = {key: value for key, value in self.init.items() if key != "argv"}
        init.setdefault("version", self.version)
        return OptionMap(docopt(self.spec, self._argv(), **init))

    def register(self, command, /, *args):
        """
        forward to Registry.register(); see there for the accepted forms.
        """
        return self.registry.register(command, *args)

    def command(self, phrase, /, *handler_args):
        """
        forward to Registry.command(); returns a decorator.
        """
        return self.registry.command(phrase, *handler_args)

    def text_option(self, key, /):
        return self.options.text(key)

    def numeric_option(self, key, /):
        return self.options.number(key)

    def project_path(self):
        return os.getcwd()

    def trigger(self, fault, /, **options):
        """
        surface fault with this context's rendering flags (overridable per call).
        """
        trigger(fault, **{
            "prog": self.name,
            "shell": self.shell,
            "fancy": self.fancy,
            "colorful": self.colorful,
        } | options)

    def handle(self, *prepend):
        """
        Parse again and dispatch.

        Returns the selected handler's result, the unhandled reporter's result,
        or None when parsing failed.
        """
        try:
            options = self._parse()
        except (DocoptExit, DocoptLanguageError) as exc:
            if self.error_handler:
                self.error_handler(self, str(exc), True)
            return None
        return dispatch(self.registry, options, *prepend, reporter=self.unhandled_reporter, context=self)

    def run(self, *prepend):
        """
        Entry point: handle(*prepend), surfacing escaped faults.

        In shell mode a fault is rendered on stderr followed by sys.exit(1);
        otherwise it is raised to the caller.
        """
        try:
            return self.handle(*prepend)
        except CommandException as fault:
            self.trigger(fault, deferred=False)

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, valid={self.is_valid!r}, commands={len(self.registry)})"


def typical(spec, version, register, /, **options):
    """
    Build a CommandLine wired with the console error handler and reporter.

    Extra keyword options (init, shell, colorful, fancy) are forwarded.
    """
    init = options.pop("init", None)
    return CommandLine(
        spec,
        version,
        init,
        error_handler=console_error_handler,
        unhandled_reporter=console_unhandled_reporter,
        register=register,
        **options,
    )


__all__ = (
    "CommandLine",
    "console_error_handler",
    "console_unhandled_reporter",
    "typical",
)
