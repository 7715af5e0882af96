"""
Append-only command registry.

The registry keeps descriptors in registration order and never reorders or
drops them. Dispatch asks for ordered(), a fresh snapshot sorted by
descending specificity (number of components); equal lengths keep their
registration order, so the first registered of two equally specific commands
wins.
"""
from .commands import Command
from .utils import Unset, rename


class Registry:
    __slots__ = ("_commands",)

    def __init__(self, commands=(), /):
        self._commands = []
        for command in commands:
            self.register(command)

    def register(self, command, handler=Unset, /, *handler_args):
        """
        Append a descriptor.

        Forms
        - register(Command(...)) appends the descriptor as-is.
        - register("eags transform", handler, "<spec-file.ts>", ...) builds it first.

        Returns the registered descriptor.
        """
        if handler is not Unset:
            command = Command(command, handler, handler_args)
        elif not isinstance(command, Command):
            raise TypeError("register() argument must be a Command or a phrase followed by a handler")
        elif handler_args:
            raise TypeError("register() takes handler arguments only together with a handler")
        self._commands.append(command)
        return command

    def command(self, phrase, /, *handler_args):
        """
        Decorator form of register(): the decorated function becomes the handler
        and is returned unchanged.

            @registry.command("eags transform rdbms sql", "<dialect-name>", "<spec-file.ts>")
            def sql(cli, dialect, spec_file): ...
        """
        @rename("command")
        def decorator(handler):
            if not callable(handler):
                raise TypeError("@command() must be applied to a callable")
            self.register(Command(phrase, handler, handler_args))
            return handler
        return decorator

    def ordered(self):
        return tuple(sorted(self._commands, key=len, reverse=True))

    def __iter__(self):
        return iter(tuple(self._commands))

    def __len__(self):
        return len(self._commands)

    def __repr__(self):
        return f"{type(self).__name__}({self._commands!r})"


__all__ = (
    "Registry",
)
