"""Main CLI entry point with command groups"""

import click

from linepool.__version__ import __version__
from linepool.cli.collect import collect_command


class DefaultCommandGroup(click.Group):
    """Custom Click Group that allows a default command"""

    def parse_args(self, ctx, args):
        # During shell completion, don't redirect to default command
        if ctx.resilient_parsing:
            return super().parse_args(ctx, args)

        # If --help or --version is requested, show group help/version
        if args and args[0] in ('--help', '-h', '--version'):
            return super().parse_args(ctx, args)

        # Check if first arg is a known command
        if args and args[0] in self.commands:
            return super().parse_args(ctx, args)

        # Otherwise, treat as collect command (default)
        return super().parse_args(ctx, ['collect'] + args)


@click.group(cls=DefaultCommandGroup, context_settings={'help_option_names': ['-h', '--help']})
@click.version_option(version=__version__, prog_name='linepool')
def cli():
    """
    linepool - Collect uppercased lines from many files with a worker pool.

    \b
    Commands:
      linepool [files ...]            Collect lines (default command)
      linepool collect [files ...]    Same, explicit

    \b
    Examples:
      linepool data1.txt data2.txt
      linepool collect *.txt --workers 4 --json

    \b
    For more help:
      linepool collect --help
    """


cli.add_command(collect_command, name='collect')


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
