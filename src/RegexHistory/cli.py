"""
Command line interface for the regex history tool.

Every command runs against a single HistoryQueryFacade, so patterns applied
within one invocation (or one interactive shell session) accumulate in the
same in-memory history.
"""
import logging
import shlex
import sys
from pathlib import Path
from typing import List, Optional

# Add the project root's 'src' directory to the Python path
# This allows for absolute imports from 'src' when running as a script
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

import typer
from typing_extensions import Annotated

from Configuration import AppSettings, RegexHistoryConfig
from FileSystem import FileSystem, LocalFileSystem
from RegexHistory.ConfigLoader import ConfigLoader
from RegexHistory.Exceptions import RegexHistoryError
from RegexHistory.HistoryQueryFacade import HistoryQueryFacade
from RegexHistory.Models import HistoryChange, PatternHistoryEntry
from Utils.logging import setup_logging
from Utils.textanalysis import summarize_text, word_frequency

app = typer.Typer(
    name="regex-history",
    help="Test regular expressions against text and keep a history of the patterns used.",
    add_completion=False,
)

logger = logging.getLogger(__name__)


class CliState:
    """Objects shared by the commands of one invocation."""

    def __init__(self, settings: AppSettings, filesystem: FileSystem) -> None:
        self.settings = settings
        self.filesystem = filesystem
        self.facade = HistoryQueryFacade()


def _resolve_text(state: CliState, text: Optional[str], file: Optional[Path]) -> str:
    if (text is None) == (file is None):
        raise typer.BadParameter("Provide exactly one of --text or --file.")
    if file is not None:
        return state.filesystem.read_text(file, encoding=state.settings.encoding)
    return text


def _format_entry(entry: PatternHistoryEntry) -> str:
    return f"{entry.usage_count:>5}  {entry.last_used_at:%Y-%m-%d %H:%M:%S}  {entry.pattern}"


def _echo_entries(entries: List[PatternHistoryEntry]) -> None:
    if not entries:
        typer.echo("(no history)")
    for entry in entries:
        typer.echo(_format_entry(entry))


def _echo_history_table(facade: HistoryQueryFacade, limit: int) -> None:
    table = facade.history_table(limit)
    if table.empty:
        typer.echo("(no history)")
    else:
        typer.echo(table.to_string(index=False))


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[Optional[Path], typer.Option(
        help=f"YAML settings file (e.g., '{RegexHistoryConfig.CONFIG_FILE_NAME}').",
        dir_okay=False,
        rich_help_panel="Configuration"
    )] = None,
    log_dir: Annotated[Optional[Path], typer.Option(
        help="Directory to store log files. Overrides the settings file.",
        file_okay=False,
        dir_okay=True,
        rich_help_panel="Logging Configuration"
    )] = None,
    log_level: Annotated[Optional[str], typer.Option(
        help="Set the logging level (e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        case_sensitive=False,
        rich_help_panel="Logging Configuration"
    )] = None,
):
    """Load settings and configure logging before running a command."""
    settings = ConfigLoader().load_settings(config)
    level_name = (log_level or settings.log_level).upper()
    directory = log_dir if log_dir is not None else Path(settings.log_dir)
    try:
        numeric_log_level = getattr(logging, level_name, None)
        if not isinstance(numeric_log_level, int):
            print(f"Warning: Invalid log level '{level_name}'. Defaulting to INFO.", file=sys.stderr)
            numeric_log_level = logging.INFO
        setup_logging(log_dir=str(directory), log_level=numeric_log_level)
        logger.info(f"Logging initialized. Level: {level_name}, Directory: {directory}")
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logger.error(f"Critical error setting up logging: {e}. Switched to basicConfig.", exc_info=True)

    ctx.obj = CliState(settings, LocalFileSystem())


@app.command()
def match(
    ctx: typer.Context,
    patterns: Annotated[List[str], typer.Argument(help="One or more patterns, applied in order.")],
    text: Annotated[Optional[str], typer.Option(help="Input text.")] = None,
    file: Annotated[Optional[Path], typer.Option(help="Read the input text from a file.", dir_okay=False)] = None,
):
    """Print the matches of each pattern, then the pattern history."""
    state: CliState = ctx.obj
    try:
        input_text = _resolve_text(state, text, file)
    except (OSError, RegexHistoryError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for pattern in patterns:
        matches = state.facade.record_and_match(pattern, input_text)
        if state.facade.get_history(pattern) is None:
            typer.echo(f"{pattern}: invalid pattern, skipped")
            continue
        typer.echo(f"{pattern}: {len(matches)} match(es)")
        for item in matches:
            typer.echo(f"  {item}")

    typer.echo("")
    _echo_history_table(state.facade, state.settings.recent_limit)


@app.command()
def replace(
    ctx: typer.Context,
    pattern: Annotated[str, typer.Argument(help="The pattern to replace.")],
    replacement: Annotated[str, typer.Option(help="Text inserted literally for each match.")],
    text: Annotated[Optional[str], typer.Option(help="Input text.")] = None,
    file: Annotated[Optional[Path], typer.Option(help="Read the input text from a file.", dir_okay=False)] = None,
):
    """Replace every match of the pattern and print the result."""
    state: CliState = ctx.obj
    try:
        input_text = _resolve_text(state, text, file)
    except (OSError, RegexHistoryError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    result = state.facade.record_and_replace(pattern, input_text, replacement)
    if result is None:
        typer.echo(f"Error: invalid pattern '{pattern}'", err=True)
        raise typer.Exit(code=1)
    typer.echo(result)


@app.command()
def analyze(
    ctx: typer.Context,
    text: Annotated[Optional[str], typer.Option(help="Input text.")] = None,
    file: Annotated[Optional[Path], typer.Option(help="Read the input text from a file.", dir_okay=False)] = None,
    top: Annotated[int, typer.Option(help="Number of word frequencies to print.", min=1)] = RegexHistoryConfig.DEFAULT_TOP_WORDS,
):
    """Print word frequencies and a short summary of the input text."""
    state: CliState = ctx.obj
    try:
        input_text = _resolve_text(state, text, file)
    except (OSError, RegexHistoryError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if file is not None:
        info = state.filesystem.file_info(file, encoding=state.settings.encoding)
        typer.echo(f"File: {info.file_name} ({info.file_size} bytes, {info.line_count} lines)")
    for word, count in word_frequency(input_text).most_common(top):
        typer.echo(f"{count:>5}  {word}")
    if input_text.strip():
        typer.echo(f"Summary: {summarize_text(input_text, state.settings.summary_word_limit)}")


SHELL_HELP = """Commands:
  text <text>                         set the input text
  load <file>                         load the input text from a file
  match <pattern> [text]              find matches (uses the input text if none given)
  replace <pattern> <replacement> [text]
  recent [n]                          most recently used patterns
  search <substring>                  patterns containing the substring
  top                                 most used patterns
  last                                last used pattern
  remove <pattern>                    forget a pattern
  clear                               forget every pattern
  history                             show the history table
  quit                                leave the shell"""


def _tokenize(line: str) -> List[str]:
    # Backslashes and '#' are regex syntax here, so only quotes group words
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.escape = ""
    lexer.commenters = ""
    return list(lexer)


class ShellSession:
    """Interprets shell command lines against one façade."""

    def __init__(self, state: CliState) -> None:
        self.state = state
        self.facade = state.facade
        self.current_text = ""
        self.logger = logging.getLogger(__name__)
        self.facade.subscribe(self._on_history_change)

    def _on_history_change(self, change: HistoryChange, entry: Optional[PatternHistoryEntry]) -> None:
        if entry is None:
            self.logger.info(f"History {change.value}")
        else:
            self.logger.info(f"History {change.value}: {entry.pattern} (count={entry.usage_count})")

    def _text_arg(self, args: List[str], index: int) -> str:
        return " ".join(args[index:]) if len(args) > index else self.current_text

    def execute(self, line: str) -> bool:
        """
        Run one command line.

        Args:
            line: The raw command line

        Returns:
            False when the session should end, True otherwise
        """
        args = _tokenize(line)
        if not args:
            return True
        command, rest = args[0].lower(), args[1:]

        if command in ("quit", "exit"):
            return False
        if command == "help":
            typer.echo(SHELL_HELP)
        elif command == "text":
            self.current_text = " ".join(rest)
        elif command == "load":
            self.current_text = self.state.filesystem.read_text(" ".join(rest), encoding=self.state.settings.encoding)
            typer.echo(f"Loaded {len(self.current_text)} characters")
        elif command == "match" and rest:
            matches = self.facade.record_and_match(rest[0], self._text_arg(rest, 1))
            if self.facade.get_history(rest[0]) is None:
                typer.echo("Invalid pattern")
            else:
                typer.echo(f"{len(matches)} match(es): {matches}")
        elif command == "replace" and len(rest) >= 2:
            result = self.facade.record_and_replace(rest[0], self._text_arg(rest, 2), rest[1])
            typer.echo("Invalid pattern" if result is None else result)
        elif command == "recent":
            limit = int(rest[0]) if rest else self.state.settings.recent_limit
            _echo_entries(self.facade.recent_history(limit))
        elif command == "search":
            _echo_entries(self.facade.search_history(" ".join(rest)))
        elif command == "top":
            _echo_entries(self.facade.most_used())
        elif command == "last":
            last = self.facade.last_used()
            _echo_entries([last] if last is not None else [])
        elif command == "remove" and rest:
            removed = self.facade.remove_history(rest[0])
            typer.echo("Removed" if removed is not None else "Not in history")
        elif command == "clear":
            self.facade.clear_history()
            typer.echo("History cleared")
        elif command == "history":
            _echo_history_table(self.facade, max(len(self.facade.store), 1))
        else:
            typer.echo(f"Unknown or incomplete command: {line.strip()}. Type 'help' for commands.")
        return True


@app.command()
def shell(ctx: typer.Context):
    """Start an interactive session that keeps pattern history until it ends."""
    session = ShellSession(ctx.obj)
    typer.echo("Type 'help' for commands, 'quit' to leave.")
    while True:
        try:
            line = typer.prompt(RegexHistoryConfig.SHELL_PROMPT, default="", show_default=False)
        except typer.Abort:
            break
        try:
            if not session.execute(line):
                break
        except (RegexHistoryError, OSError, ValueError) as e:
            typer.echo(f"Error: {e}")
    logger.info("Shell session ended")


if __name__ == "__main__":
    app()
