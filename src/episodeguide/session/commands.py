"""Parsing of lines typed at the interactive browse prompt.

Lines starting with ':' are commands; anything else is search text:

    :show 82          switch show
    :episode S01E02   jump to an episode
    :episode all      back to all episodes
    :shows            list shows
    :episodes         list episode codes of the current show
    :help             show help
    :quit             leave
"""

from dataclasses import dataclass
from enum import Enum

from episodeguide.view.models import ALL_EPISODES

COMMAND_PREFIX = ":"


class CommandKind(str, Enum):
    """Kinds of prompt input."""

    SEARCH = "search"
    SHOW = "show"
    EPISODE = "episode"
    SHOWS = "shows"
    EPISODES = "episodes"
    HELP = "help"
    QUIT = "quit"
    INVALID = "invalid"


@dataclass(frozen=True)
class PromptCommand:
    """One parsed line of prompt input."""

    kind: CommandKind
    argument: str = ""


ALIASES = {
    "s": CommandKind.SHOW,
    "show": CommandKind.SHOW,
    "e": CommandKind.EPISODE,
    "ep": CommandKind.EPISODE,
    "episode": CommandKind.EPISODE,
    "shows": CommandKind.SHOWS,
    "episodes": CommandKind.EPISODES,
    "h": CommandKind.HELP,
    "help": CommandKind.HELP,
    "?": CommandKind.HELP,
    "q": CommandKind.QUIT,
    "quit": CommandKind.QUIT,
    "exit": CommandKind.QUIT,
}

HELP_TEXT = """\
Type text to search episode names and summaries (empty line clears the search).

Commands:
  :show <id>         switch to another show
  :episode <code>    jump to one episode, e.g. :episode S01E02
  :episode all       show all episodes again
  :shows             list all shows with their ids
  :episodes          list the episodes of the current show
  :help              show this help
  :quit              leave"""


def normalize_code(value: str) -> str:
    """Normalize a typed episode code ("s01e02" becomes "S01E02", "ALL" becomes "all")."""
    value = value.strip()
    if value.lower() == ALL_EPISODES:
        return ALL_EPISODES
    # Codes are always produced in upper case
    return value.upper()


def parse_prompt(line: str) -> PromptCommand:
    """Parse one line of prompt input.

    Args:
        line: Raw line as typed

    Returns:
        The parsed command; unknown or malformed commands come back as INVALID
        with the offending text as argument
    """
    stripped = line.strip()
    if not stripped.startswith(COMMAND_PREFIX):
        return PromptCommand(CommandKind.SEARCH, stripped)

    name, _, argument = stripped[len(COMMAND_PREFIX) :].partition(" ")
    kind = ALIASES.get(name.lower())
    argument = argument.strip()

    if kind is None:
        return PromptCommand(CommandKind.INVALID, stripped)

    if kind == CommandKind.SHOW:
        if not argument.isdigit() or int(argument) <= 0:
            return PromptCommand(CommandKind.INVALID, stripped)
    elif kind == CommandKind.EPISODE:
        if not argument:
            return PromptCommand(CommandKind.INVALID, stripped)
        argument = normalize_code(argument)

    return PromptCommand(kind, argument)
