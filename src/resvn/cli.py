"""CLI for resvn."""

import sys

import click
import structlog

from resvn import __version__
from resvn.config.logging import configure_logging

logger = structlog.get_logger(__name__)

COMMAND_META_KEY = "resvn.command"

EPILOG = """\b
PARAMETERS
  @  repository URL (must be first character in word)
  ^  repository base name
  &  preceding URL/path argument
  $  last path component (basename) of "&"
  !  parent path component (basename of dirname) of "&"

\b
SERVICE URLs
  The default server URL is read from $RESVN_URL and used when -s is not
  given. The default REST API URL is read from $RESVN_API and used when -S
  is not given; it is only needed to refresh the repository cache (-u).
  URLs may include protocol and port, e.g. "http://server.com:3690".

\b
PARAMETER EXPANSIONS
  All arguments following the first "--" are forwarded, in order, to each
  generated "svn" command, with placeholders expanded per repository.
  For example, exporting a common tag from all repositories matching
  "DAPA", excluding any that match "Calc" or "DIOS":

\b
      > resvn ^DAPA \\! Calc DIOS -- export -r 123 @/tags/foo ./^/tags/foo

\b
  runs, for each match such as DAPA_Project:

\b
      > svn export -r 123 http://server.com:3690/svn/DAPA_Project/tags/foo \\
            ./DAPA_Project/tags/foo

\b
SVN GLOBAL OPTIONS
  Global svn options are given with $RESVN_ARG or -a (the flag wins) and
  default to "--force-interactive". Each -a value is split on whitespace
  and -a may be repeated.
"""


def split_patterns(args: list[str] | tuple[str, ...]) -> tuple[list[str], list[str]]:
    """Split positional arguments into include and exclude patterns.

    The first argument starting with "!" switches to the exclude list; the
    "!" itself is dropped and empty patterns are ignored.
    """
    include: list[str] = []
    exclude: list[str] = []
    target = include
    for arg in args:
        if arg.startswith("!"):
            target = exclude
            arg = arg[1:]
        if arg:
            target.append(arg)
    return include, exclude


class PassthroughCommand(click.Command):
    """Command that hands everything after the first "--" through untouched."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        command: list[str] = []
        for i, arg in enumerate(args):
            if arg.strip() == "--":
                command = [a for a in args[i + 1:] if a]
                args = args[:i]
                break
        ctx.meta[COMMAND_META_KEY] = command
        return super().parse_args(ctx, args)


def _split_args(values: tuple[str, ...]) -> list[str]:
    return [arg for value in values for arg in value.split()]


@click.command(
    cls=PassthroughCommand,
    epilog=EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("patterns", nargs=-1)
@click.option("-a", "svn_args", multiple=True, metavar="ARG", help="Append each [argument] ARG to all SVN commands.")
@click.option("-c", "case_sensitive", is_flag=True, help="Use [case]-sensitive matching.")
@click.option("-d", "dry_run", is_flag=True, help="Print commands which would be executed ([dry-run]).")
@click.option("-f", "repo_file", metavar="PATH", default=None, help="Use repository definitions from [file] PATH.")
@click.option("-l", "login", metavar="USER:PASS", default=None, help="Use USER:PASS to authenticate with the REST API ([login]).")
@click.option("-L", "auth_file", metavar="PATH", default=None, help="Use file PATH contents as [login] arguments.")
@click.option("-o", "match_any", is_flag=True, help="Use logical-[or] matching if multiple patterns given.")
@click.option("-q", "quiet", is_flag=True, help="Suppress all non-essential and error messages ([quiet]).")
@click.option("-s", "base_url", metavar="URL", default=None, help="Use [server] URL to construct all URLs.")
@click.option("-S", "api_url", metavar="URL", default=None, help="Use [server] URL to construct REST API queries.")
@click.option("-u", "update", is_flag=True, help="[update] cached repository definitions from server.")
@click.option("-w", "web", is_flag=True, help="Construct [web] URLs instead of repository URLs.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    patterns: tuple[str, ...],
    svn_args: tuple[str, ...],
    case_sensitive: bool,
    dry_run: bool,
    repo_file: str | None,
    login: str | None,
    auth_file: str | None,
    match_any: bool,
    quiet: bool,
    base_url: str | None,
    api_url: str | None,
    update: bool,
    web: bool,
    verbose: bool,
) -> None:
    """Run an svn command against every repository matching a pattern.

    \b
    resvn [flags] [match ...] [! ignore ...] [-- command ...]
    """
    from resvn.auth.credentials import from_auth_file, from_login
    from resvn.cache.inventory import RestInventorySource
    from resvn.cache.repository_cache import RepositoryCache, locate_file
    from resvn.config.settings import AUTH_FILE_NAME, CACHE_FILE_NAME, get_settings
    from resvn.core.exceptions import ConfigurationError, CredentialsError, ResvnError
    from resvn.core.models.config import SVN_URL_ROOT, WEB_URL_ROOT, RunConfig
    from resvn.core.models.repository import MatchMode, PatternSet
    from resvn.dispatch.dispatcher import Dispatcher
    from resvn.dispatch.executor import SubprocessExecutor
    from resvn.services.batch import BatchService

    settings = get_settings()
    configure_logging(log_level="DEBUG" if verbose else settings.log_level, quiet=quiet)

    command: list[str] = ctx.meta.get(COMMAND_META_KEY, [])
    include, exclude = split_patterns(patterns)

    global_args = _split_args(svn_args) if svn_args else settings.global_args

    if repo_file is None:
        repo_file = str(locate_file(CACHE_FILE_NAME, "."))
    if auth_file is None:
        located = locate_file(AUTH_FILE_NAME)
        auth_file = str(located) if located else ""
    if base_url is None:
        base_url = settings.url
    if api_url is None:
        api_url = settings.api

    try:
        credentials = None
        failures = []
        if auth_file:
            try:
                credentials = from_auth_file(auth_file)
            except CredentialsError as e:
                failures.append(e.message)
        if login:
            try:
                credentials = from_login(login)
            except CredentialsError as e:
                failures.append(e.message)
        if failures:
            raise CredentialsError("; ".join(failures))

        source = RestInventorySource(api_url) if api_url.strip() else None
        names = RepositoryCache(source).sync(repo_file, refresh=update, credentials=credentials)

        if not base_url.strip():
            raise ConfigurationError("undefined server URL: try help (-h)")

        config_kwargs = {}
        if global_args is not None:
            config_kwargs["global_args"] = global_args
        config = RunConfig(
            base_url=base_url,
            url_root=WEB_URL_ROOT if web else SVN_URL_ROOT,
            match_mode=MatchMode.ANY if match_any else MatchMode.ALL,
            dry_run=dry_run,
            **config_kwargs,
        )
        pattern_set = PatternSet(include=include, exclude=exclude, case_insensitive=not case_sensitive)

        dispatcher = Dispatcher(config, SubprocessExecutor())
        BatchService(config, dispatcher).run(names, pattern_set, command)
    except ResvnError as e:
        logger.error(f"error: {e.message}")
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
