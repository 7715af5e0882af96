from rich.pretty import pprint

from docroute import *

__prog__ = "eags"

USAGE = """
eags, the docopt command line router demo.

Usage:
  eags transform rdbms erd <spec-file.ts>
  eags transform rdbms sql <dialect-name> <spec-file.ts>
  eags transform test-optional-args <spec-file.ts> [--path=PATH] [--verbose]
  eags -h | --help
  eags -V | --version

Options:
  -h --help       Show this screen.
  -V --version    Show eags version.
"""


def setup(cli):
    cli.register("transform rdbms erd", lambda cli, spec: ("erd", spec), required("<spec-file.ts>", "spec file"))

    @cli.command("transform rdbms sql", "<dialect-name>", "<spec-file.ts>")
    def sql(cli, dialect, spec):
        return "sql", dialect, spec

    @cli.command("transform test-optional-args", "<spec-file.ts>", "--path", "--verbose")
    def optional(cli, spec, path, verbose):
        return "optional", spec, path, verbose


if __name__ == '__main__':
    cli = typical(USAGE, "0.0.0", setup)
    pprint(cli.registry)
    if cli.is_valid:
        pprint(cli.run(cli))
