# -*- coding: utf-8 -*-
import sys
import functools
import click

from .config import load_config
from .i18n import set_language, t
from .store import TrashStore
from .engine import TrashEngine
from .errors import TrashError
from .prompts import confirm, make_asker
from .ui import print_error, E, R

FORCE_WORD = 'force'


class TrashGroup(click.Group):
    """Unknown commands print the usage on stderr and exit with status 1."""
    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError:
            click.echo(ctx.get_help(), err=True)
            ctx.exit(1)


def trash_operation(f):
    """Turns TrashError and user cancellation into a message and exit status 1."""
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except TrashError as e:
            print_error(e)
            sys.exit(1)
        except (KeyboardInterrupt, EOFError, click.Abort):
            click.echo(f"\n{E}» {t('operation_cancelled')}{R}", err=True)
            sys.exit(1)
    return wrapper

def build_engine(config):
    store = TrashStore(config)
    store.ensure_layout()
    return TrashEngine(
        store, confirm, make_asker(config, store),
        show_restore_help=config.restore_help,
    )


@click.group(cls=TrashGroup, invoke_without_command=True)
@click.pass_context
def trash(ctx):
    """
    Move files to a trash instead of deleting them, then list, restore
    or permanently dump them.

    The trash lives in $TRASH_ROOT (default ~/.local/share/trashman).
    NO_LINE_EDITOR disables line editing at the restore prompt and
    NO_RESTORE_HELP hides the expression help.
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help(), err=True)
        ctx.exit(1)
    config = load_config()
    set_language(config.language)
    ctx.obj = config

@trash.command(name='help')
@click.pass_context
def help_command(ctx):
    """Show this message."""
    click.echo(ctx.parent.get_help())

@trash.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path())
@click.pass_obj
@trash_operation
def add(config, paths):
    """Move PATHS to the trash."""
    build_engine(config).add(paths)

@trash.command(name='list')
@click.pass_obj
@trash_operation
def list_command(config):
    """List trashed items with their index."""
    build_engine(config).list()

@trash.command()
@click.option('-f', '--force', is_flag=True, help="Do not ask for confirmation.")
@click.argument('words', nargs=-1)
@click.pass_obj
@trash_operation
def dump(config, force, words):
    """
    Permanently delete trashed items: dump [force] [PATTERN].

    PATTERN is a regex that must match the whole original path; without it
    everything is dumped.
    """
    words = list(words)
    if words and words[0] == FORCE_WORD:
        force = True
        words = words[1:]
    if len(words) > 1:
        raise click.BadArgumentUsage("dump takes at most one pattern")
    build_engine(config).dump(force=force, pattern=words[0] if words else None)

@trash.command()
@click.pass_obj
@trash_operation
def restore(config):
    """Interactively choose trashed items and put them back."""
    build_engine(config).restore()

@trash.command()
@click.pass_obj
@trash_operation
def size(config):
    """Show how much space the trash takes."""
    build_engine(config).size()

@trash.command()
@click.option('--fix', is_flag=True, help="Quarantine orphaned files and drop broken records.")
@click.pass_obj
@trash_operation
def check(config, fix):
    """Look for half-written records left by interrupted operations."""
    report = build_engine(config).check(fix=fix)
    if report.problems and not fix:
        sys.exit(1)
