"""
Console Front End for Marina Boat Manager

This is the screen the marina office works from: a one-letter menu
over the fleet loaded from a data file.

    marina boats.csv

DESIGN PRINCIPLES:
1. One keystroke per command, upper or lower case
2. Every mistake gets a one-line message and the menu comes back
3. The data file is written back on exit, even if nothing changed

Structured logs go to stderr; everything the operator reads goes to stdout.
"""

import argparse
import sys
from typing import Callable, Optional, TextIO

from marina.audit import configure_logging
from marina.config import get_settings, validate_all_settings
from marina.models.vessel import LocationCategory, Vessel
from marina.orchestrator import MarinaSession, create_session
from marina.services.billing import PaymentExceedsBalanceError
from marina.services.storage import CapacityExceededError, NotFoundError
from marina.validation.line_codec import RecordError, parse_decimal


MENU_PROMPT = "(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth, e(X)it : "
ADD_PROMPT = "Please enter the boat data in CSV format                 : "
NAME_PROMPT = "Please enter the boat name                               : "
AMOUNT_PROMPT = "Please enter the amount to be paid                       : "

SETTINGS_GROUPS = ("fleet", "billing", "app")


def format_inventory_line(vessel: Vessel) -> str:
    """One fixed-width inventory row for a vessel."""
    location = vessel.location
    category = vessel.location_category

    if category == LocationCategory.SLIP:
        where = f"{'slip':>8}   # {location.slip_number:2d}"
    elif category == LocationCategory.LAND:
        where = f"{'land':>8}      {location.bay_label}"
    elif category == LocationCategory.TRAILER:
        where = f"{'trailor':>8} {location.tag:>6}"
    else:
        where = f"{'storage':>8}   # {location.spot:2d}"

    return (
        f"{vessel.name:<20} {vessel.length_feet:3.0f}' "
        f"{where}   Owes ${vessel.outstanding_fees:7.2f}"
    )


class Console:
    """Interactive menu loop over one session."""

    def __init__(self, session: MarinaSession, stdin: TextIO, stdout: TextIO):
        self._session = session
        self._in = stdin
        self._out = stdout
        self._commands: dict[str, Callable[[], None]] = {
            "I": self.show_inventory,
            "A": self.add_vessel,
            "R": self.remove_vessel,
            "P": self.take_payment,
            "M": self.bill_month,
        }

    def _write(self, text: str = "") -> None:
        self._out.write(f"{text}\n")

    def _prompt(self, text: str) -> Optional[str]:
        """Show a prompt and read one line. None at end of input."""
        self._out.write(text)
        self._out.flush()
        line = self._in.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def run(self) -> None:
        """Loop until X or end of input."""
        while True:
            reply = self._prompt(MENU_PROMPT)
            if reply is None:
                self._write()
                return

            choice = reply[:1].upper()
            if choice == "X":
                return

            handler = self._commands.get(choice)
            if handler is None:
                self._write(f"Invalid option {choice}")
                self._write()
                continue
            handler()

    def show_inventory(self) -> None:
        for vessel in self._session.inventory():
            self._write(format_inventory_line(vessel))
        self._write()

    def add_vessel(self) -> None:
        line = self._prompt(ADD_PROMPT)
        if line is None:
            return
        try:
            self._session.add_from_line(line)
        except CapacityExceededError:
            self._write("Error: Maximum capacity reached.")
            self._write()
        except RecordError as e:
            self._write(f"Error: {e}.")
            self._write()

    def remove_vessel(self) -> None:
        name = self._prompt(NAME_PROMPT)
        if name is None:
            return
        try:
            self._session.remove(name)
        except NotFoundError:
            self._write("No boat with that name")
            self._write()

    def take_payment(self) -> None:
        name = self._prompt(NAME_PROMPT)
        if name is None:
            return
        try:
            self._session.find_vessel(name, operation="payment")
        except NotFoundError:
            self._write("No boat with that name")
            self._write()
            return

        reply = self._prompt(AMOUNT_PROMPT)
        if reply is None:
            return
        try:
            self._session.record_payment(name, parse_decimal(reply))
        except RecordError as e:
            self._write(f"Error: {e}.")
            self._write()
        except PaymentExceedsBalanceError as e:
            self._write(str(e))
            self._write()
        except NotFoundError:
            self._write("No boat with that name")
            self._write()

    def bill_month(self) -> None:
        self._session.apply_monthly_fees()
        self._write()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marina",
        description="Manage the boats kept at the marina.",
    )
    parser.add_argument(
        "data_file",
        nargs="?",
        help="CSV data file to load at start and save on exit",
    )
    return parser


def main(
    argv: Optional[list[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Run one console session.

    Returns the process exit code: 1 without a data file or with invalid
    settings, otherwise 0.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    parser = build_parser()
    args, extra = parser.parse_known_args(argv)
    if args.data_file is None or extra:
        parser.print_usage(sys.stderr)
        return 1

    status = validate_all_settings()
    failed = [name for name in SETTINGS_GROUPS if not status.get(name, False)]
    if failed:
        for name in failed:
            error = status.get(f"{name}_error", "Not configured")
            sys.stderr.write(f"Configuration error ({name}): {error}\n")
        return 1

    app_settings = get_settings().app
    configure_logging(app_settings.effective_log_level, app_settings.log_json)

    session = create_session(args.data_file)
    if not session.load():
        stdout.write(f"Warning: {session.last_error}\n")

    stdout.write("\nWelcome to the Marina Boat Manager\n")
    stdout.write("--------------------------------------------\n\n")

    Console(session, stdin, stdout).run()

    if not session.save():
        stdout.write(f"Error: {session.last_error}\n")

    stdout.write("\nExiting Boat Management System\n")
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
