"""Command line interface for League Pairing.

Manages a JSON file of tournaments: create leagues, list fixtures, enter
results and print the table. Run without arguments in a terminal to get
an interactive prompt with completion.
"""

# League Pairing
# Copyright (C) 2025  League Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import shlex
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from leaguepairing.constants import (
    DEFAULT_ROUND_INTERVAL_DAYS,
    FORMATS,
    STORE_ENV_VAR,
)
from leaguepairing.exceptions import FileSaveException, LeaguePairingException
from leaguepairing.models.participant import create_participant
from leaguepairing.models.tournament import Tournament
from leaguepairing.storage import TournamentStore, default_store_path
from leaguepairing.utils import setup_logger
from leaguepairing.utils.print import (
    format_schedule,
    format_standings_table,
    generate_standings_html,
)

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "new": {
        "description": "Create a tournament and generate its fixtures",
        "options": {
            "<name>": "Tournament name",
            "<team>": "Two or more team names",
            "--format": "single or double round robin (default: single)",
            "--shuffle": "Randomise the order of rounds",
            "--seed": "Seed for the round shuffle",
            "--start": "Date of round 1 (YYYY-MM-DD), dates every round",
            "--interval-days": "Days between rounds (default: 7)",
        },
    },
    "list": {"description": "List stored tournaments", "options": {}},
    "show": {
        "description": "Show a tournament summary",
        "options": {"<tournament>": "Tournament id or name"},
    },
    "fixtures": {
        "description": "List fixtures round by round",
        "options": {
            "<tournament>": "Tournament id or name",
            "--round": "Only this round",
            "--team": "Only this team's schedule",
        },
    },
    "result": {
        "description": "Record the score of a fixture",
        "options": {
            "<tournament>": "Tournament id or name",
            "<fixture>": "Fixture number",
            "<home>": "Home goals",
            "<away>": "Away goals",
        },
    },
    "clear": {
        "description": "Reset a fixture to pending",
        "options": {"<tournament>": "Tournament id or name", "<fixture>": "Fixture number"},
    },
    "standings": {
        "description": "Print the league table",
        "options": {"<tournament>": "Tournament id or name"},
    },
    "rename": {
        "description": "Rename a team, keeping its results",
        "options": {
            "<tournament>": "Tournament id or name",
            "<team>": "Current team name",
            "<new_name>": "New team name",
        },
    },
    "delete": {
        "description": "Delete a tournament",
        "options": {"<tournament>": "Tournament id or name"},
    },
    "export": {
        "description": "Export a tournament as JSON or its standings as HTML",
        "options": {
            "<tournament>": "Tournament id or name",
            "--output": "Output file path",
            "--html": "Write the standings page instead of JSON",
        },
    },
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}League Pairing{Colors.ENDC} - round robin fixtures and standings

Type {Colors.BOLD}help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:12}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:18}{Colors.ENDC} {description}")
    print()


def create_completer():
    """Create autocomplete completer for interactive mode."""
    completions = {}
    for cmd, info in COMMANDS.items():
        flags = [option for option in info["options"] if option.startswith("--")]
        completions[cmd] = WordCompleter(flags) if flags else None
    completions["help"] = WordCompleter(list(COMMANDS))
    return NestedCompleter.from_nested_dict(completions)


# ========== Command implementations ==========


def parse_date(value: str) -> datetime:
    """Argparse type for ISO 8601 dates."""
    try:
        return isoparse(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a valid date: {value!r}")


def _open_store(args: argparse.Namespace) -> TournamentStore:
    return TournamentStore(args.store).load()


def _progress_line(tournament: Tournament) -> str:
    completed, total, percentage = tournament.progress
    line = f"{completed}/{total} matches ({percentage}%)"
    if tournament.is_finished:
        line += f" {Colors.OKGREEN}complete{Colors.ENDC}"
    return line


def run_new_command(args: argparse.Namespace) -> int:
    """Create a tournament from the command line arguments."""
    store = _open_store(args)
    participants = [
        create_participant(name, index=index) for index, name in enumerate(args.teams)
    ]
    tournament = Tournament.create(
        args.name,
        participants,
        format=args.format,
        shuffle_rounds=args.shuffle,
        seed=args.seed,
    )
    if args.start:
        tournament = tournament.with_round_dates(
            args.start, relativedelta(days=args.interval_days)
        )

    store.add(tournament)
    store.save()
    print(
        f"{Colors.OKGREEN}Created {tournament.name!r}{Colors.ENDC} "
        f"({tournament.id}): {len(tournament.participants)} teams, "
        f"{len(tournament.rounds)} rounds, {len(tournament.fixtures)} fixtures"
    )
    return 0


def run_list_command(args: argparse.Namespace) -> int:
    store = _open_store(args)
    if not len(store):
        print("No tournaments yet. Create one with 'new'.")
        return 0
    for tournament in store:
        print(
            f"{Colors.BOLD}{tournament.name}{Colors.ENDC}  [{tournament.id}]  "
            f"{tournament.config.format_name}, "
            f"{len(tournament.participants)} teams, {_progress_line(tournament)}"
        )
    return 0


def run_show_command(args: argparse.Namespace) -> int:
    tournament = _open_store(args).find(args.tournament)
    print(f"\n{Colors.BOLD}{tournament.name}{Colors.ENDC}  [{tournament.id}]")
    print(f"  Format:   {tournament.config.format_name}")
    print(f"  Created:  {tournament.created_at:%Y-%m-%d}")
    print(f"  Progress: {_progress_line(tournament)}")
    print(f"  Teams:    {', '.join(p.name for p in tournament.participants)}")
    print()
    return 0


def run_fixtures_command(args: argparse.Namespace) -> int:
    tournament = _open_store(args).find(args.tournament)

    if args.team:
        participant = tournament.find_participant(args.team)
        print(f"\n{Colors.BOLD}Schedule for {participant.name}{Colors.ENDC}")
        for round_number, opponent, is_home, fixture in tournament.schedule_for(
            participant.id
        ):
            if fixture is None:
                print(f"  Round {round_number:<3} rest")
                continue
            venue = "home" if is_home else "away"
            print(
                f"  Round {round_number:<3} #{fixture.id:<3} {opponent.name} ({venue})  "
                f"{fixture.result_display}"
            )
        print()
        return 0

    print(format_schedule(tournament.rounds, args.round))
    return 0


def run_result_command(args: argparse.Namespace) -> int:
    store = _open_store(args)
    tournament = store.find(args.tournament)
    tournament = tournament.record_result(args.fixture, args.home, args.away)
    store.replace(tournament)
    store.save()

    fixture = tournament.get_fixture(args.fixture)
    print(
        f"{Colors.OKGREEN}Recorded{Colors.ENDC} {fixture.home.name} "
        f"{fixture.result_display} {fixture.away.name}  "
        f"[{_progress_line(tournament)}]"
    )
    return 0


def run_clear_command(args: argparse.Namespace) -> int:
    store = _open_store(args)
    tournament = store.find(args.tournament).clear_result(args.fixture)
    store.replace(tournament)
    store.save()
    print(f"Fixture #{args.fixture} is pending again")
    return 0


def run_standings_command(args: argparse.Namespace) -> int:
    tournament = _open_store(args).find(args.tournament)
    print(f"\n{Colors.BOLD}{tournament.name}{Colors.ENDC}  {_progress_line(tournament)}\n")
    print(format_standings_table(tournament.standings))
    print()
    return 0


def run_rename_command(args: argparse.Namespace) -> int:
    store = _open_store(args)
    tournament = store.find(args.tournament)
    participant = tournament.find_participant(args.team)
    tournament = tournament.rename_participant(participant.id, args.new_name)
    store.replace(tournament)
    store.save()
    print(f"Renamed {participant.name!r} to {args.new_name.strip()!r}")
    return 0


def run_delete_command(args: argparse.Namespace) -> int:
    store = _open_store(args)
    tournament = store.delete(store.find(args.tournament).id)
    store.save()
    print(f"{Colors.WARNING}Deleted {tournament.name!r}{Colors.ENDC}")
    return 0


def run_export_command(args: argparse.Namespace) -> int:
    tournament = _open_store(args).find(args.tournament)
    if args.html:
        completed, total, _ = tournament.progress
        content = generate_standings_html(
            tournament.name,
            tournament.standings,
            subtitle=f"{completed}/{total} matches played",
        )
    else:
        content = json.dumps(tournament.to_dict(), indent=2)

    if not args.output:
        print(content)
        return 0

    export_path = Path(args.output)
    try:
        export_path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.exception(f"Error exporting to {export_path}")
        raise FileSaveException(f"Could not write {export_path}: {e}") from e
    print(f"{Colors.OKGREEN}Exported to: {export_path}{Colors.ENDC}")
    return 0


# ========== Parsers ==========


def create_main_parser():
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="league-pairing",
        description="Round robin fixtures and standings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Interactive mode
  league-pairing

  # Create a double round robin
  league-pairing new "Spring Cup" Lions Tigers Bears --format double

  # Record a score and print the table
  league-pairing result "Spring Cup" 1 2 1
  league-pairing standings "Spring Cup"

The store file defaults to ./tournaments.json or ${STORE_ENV_VAR}.
        """,
    )

    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )
    parser.add_argument(
        "--store",
        type=Path,
        default=None,
        help=f"Tournament store file (default: {default_store_path()})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    new_parser = subparsers.add_parser("new", help="Create a tournament")
    new_parser.add_argument("name")
    new_parser.add_argument("teams", nargs="+", metavar="team")
    new_parser.add_argument("--format", choices=FORMATS, default="single")
    new_parser.add_argument("--shuffle", action="store_true")
    new_parser.add_argument("--seed", type=int)
    new_parser.add_argument(
        "--start", type=parse_date, help="Date of round 1 (ISO 8601)"
    )
    new_parser.add_argument(
        "--interval-days", type=int, default=DEFAULT_ROUND_INTERVAL_DAYS
    )
    new_parser.set_defaults(func=run_new_command)

    list_parser = subparsers.add_parser("list", help="List tournaments")
    list_parser.set_defaults(func=run_list_command)

    show_parser = subparsers.add_parser("show", help="Show a tournament")
    show_parser.add_argument("tournament")
    show_parser.set_defaults(func=run_show_command)

    fix_parser = subparsers.add_parser("fixtures", help="List fixtures")
    fix_parser.add_argument("tournament")
    fix_parser.add_argument("--round", type=int)
    fix_parser.add_argument("--team")
    fix_parser.set_defaults(func=run_fixtures_command)

    res_parser = subparsers.add_parser("result", help="Record a score")
    res_parser.add_argument("tournament")
    res_parser.add_argument("fixture", type=int)
    res_parser.add_argument("home", type=int)
    res_parser.add_argument("away", type=int)
    res_parser.set_defaults(func=run_result_command)

    clear_parser = subparsers.add_parser("clear", help="Reset a fixture to pending")
    clear_parser.add_argument("tournament")
    clear_parser.add_argument("fixture", type=int)
    clear_parser.set_defaults(func=run_clear_command)

    table_parser = subparsers.add_parser("standings", help="Print the league table")
    table_parser.add_argument("tournament")
    table_parser.set_defaults(func=run_standings_command)

    rename_parser = subparsers.add_parser("rename", help="Rename a team")
    rename_parser.add_argument("tournament")
    rename_parser.add_argument("team")
    rename_parser.add_argument("new_name")
    rename_parser.set_defaults(func=run_rename_command)

    del_parser = subparsers.add_parser("delete", help="Delete a tournament")
    del_parser.add_argument("tournament")
    del_parser.set_defaults(func=run_delete_command)

    exp_parser = subparsers.add_parser("export", help="Export a tournament")
    exp_parser.add_argument("tournament")
    exp_parser.add_argument("--output")
    exp_parser.add_argument("--html", action="store_true")
    exp_parser.set_defaults(func=run_export_command)

    return parser


def execute(args: argparse.Namespace) -> int:
    """Run a parsed subcommand, reporting domain errors as exit status 1."""
    try:
        return args.func(args)
    except LeaguePairingException as e:
        logger.debug(f"Command {args.command} failed: {e}")
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}", file=sys.stderr)
        return 1


def run_interactive_mode(store: Optional[Path] = None) -> int:
    """Run interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )
    parser = create_main_parser()

    while True:
        try:
            user_input = session.prompt("league> ").strip()

            if not user_input:
                continue

            if user_input in ["exit", "quit", "q"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if user_input in ["help", "?"]:
                print_commands_list()
                continue

            if user_input.startswith("help "):
                print_command_help(user_input.split()[1])
                continue

            try:
                parts = shlex.split(user_input)
            except ValueError as e:
                print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
                continue

            if parts[0] not in COMMANDS:
                print(f"{Colors.FAIL}Unknown command: {parts[0]}{Colors.ENDC}")
                print(f"Type {Colors.BOLD}help{Colors.ENDC} to see available commands")
                continue

            try:
                args = parser.parse_args(parts)
            except SystemExit:
                # argparse calls sys.exit on error, catch it
                continue
            if args.store is None:
                args.store = store
            execute(args)

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

    return 0


def run_standard_mode(argv: Optional[List[str]] = None) -> int:
    """Run in standard CLI mode (non-interactive)."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        return run_interactive_mode(args.store)

    if hasattr(args, "func"):
        return execute(args)
    parser.print_help()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the league-pairing CLI."""
    if argv is None:
        argv = sys.argv[1:]

    # No arguments in a terminal starts the prompt
    if not argv and sys.stdin.isatty():
        return run_interactive_mode()

    return run_standard_mode(argv)


if __name__ == "__main__":
    sys.exit(main())
