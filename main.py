#!/usr/bin/env python3

import argparse
import sys
from typing import Optional

from src.core.data import CombatAction
from src.game.army_loader import DEFAULT_ARMY_PATH, ArmyLoader
from src.game.log_manager import LogManager, LogLevel
from src.game.skirmish import Skirmish

EXIT_OK = 0
EXIT_ACTION_FAILED = 1
EXIT_ROSTER_ERROR = 2
EXIT_LOG_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Skirmish - order an army and tally its damage")
    parser.add_argument("--army", default=DEFAULT_ARMY_PATH,
                        help="Path to a YAML army roster (default: bundled roster)")
    parser.add_argument("--target", type=int, default=None,
                        help="Index of the unit to select (omit for no target)")
    parser.add_argument("--action", choices=[action.value for action in CombatAction],
                        default=None, help="Action to order the selected target to perform")
    parser.add_argument("--debug", action="store_true", help="Show debug log messages")
    parser.add_argument("--save-log", action="store_true", help="Save the battle log to logs/")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log = LogManager(default_level=LogLevel.DEBUG if args.debug else LogLevel.INFO)

    try:
        army = ArmyLoader.load_from_file(args.army)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ROSTER_ERROR

    log.roster(f"Loaded {army.name} from {args.army}")
    skirmish = Skirmish(army, log)

    print(f"{army.name}: {', '.join(str(c) for c in army.characters) or 'no units'}")
    print(f"Volley: {skirmish.volley().format()}")

    exit_code = EXIT_OK

    if args.target is not None:
        try:
            skirmish.select(args.target)
        except IndexError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_ROSTER_ERROR

    if args.action is not None:
        result = skirmish.perform(CombatAction.from_name(args.action))
        print(result.fold(
            lambda failure: f"Failed: {failure.format()}",
            lambda damage: f"Hit: {damage.value}",
        ))
        if result.is_err():
            exit_code = EXIT_ACTION_FAILED

    # Save before printing so the save outcome is part of the printed log
    if args.save_log and log.save_log_to_file() is None:
        print(f"Error: {log.get_messages(count=1)[0].text}", file=sys.stderr)
        exit_code = EXIT_LOG_ERROR

    print()
    for message in log.get_messages():
        print(message.format())

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
