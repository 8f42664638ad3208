# main.py
"""Command line entry point for the date range picker."""

import sys
from datetime import date
from typing import Optional

from config import Config
from core import DateInfo, DateRange, PickerController, QuickOption
from core.types import DATE_RANGE_EVENT
from logger.logger import Logger
from utils import ConsoleReporter


def create_controller(config: Config) -> PickerController:
    """Build a controller from environment configuration."""
    controller = PickerController(config.to_picker_config())
    controller.events.add_listener(
        DATE_RANGE_EVENT,
        lambda range_data: Logger.debug(f"date-range-event: {range_data}"),
    )
    return controller


def report_range(controller: PickerController, reporter: ConsoleReporter,
                 range_data: Optional[DateRange]):
    """Print the outcome of an apply."""
    if range_data is None:
        reporter.print_error("Selection incomplete, nothing applied")
        return

    reporter.print_success(f"Applied {controller.label}")
    active = controller.active_quick_option()
    reporter.print_range_summary(
        range_data,
        label=controller.label,
        token=controller.date_range_token,
        quick_option_label=active.label if active else None,
    )


def pick_dates(controller: PickerController, reporter: ConsoleReporter,
               *values: str) -> bool:
    """Feed ISO dates into the controller as picks."""
    for value in values:
        day = DateInfo.from_date(date.fromisoformat(value), controller.locale)
        if not controller.pick(day):
            reporter.print_warning(
                f"{value} is after the max date "
                f"{controller.max_date.value:%Y-%m-%d}, ignored"
            )
    return controller.is_complete


def get_user_selection(controller: PickerController, reporter: ConsoleReporter):
    """Ask for a quick option or two dates."""
    reporter.print_info("\n📅 Date Range Selection")
    for index, option in enumerate(controller.quick_options, start=1):
        reporter.print_info(f"  {index}. {option.label}")
    reporter.print_info("Choose a quick option number, or press Enter to type dates")

    choice = input("\nQuick option: ").strip()
    if choice:
        try:
            index = int(choice)
            if index < 1:
                raise IndexError(index)
            controller.select_quick_option(controller.quick_options[index - 1])
            return
        except (ValueError, IndexError):
            reporter.print_error("Invalid option, falling back to manual dates")

    while not controller.is_complete:
        value = input("Enter a date (YYYY-MM-DD): ").strip()
        try:
            pick_dates(controller, reporter, value)
        except ValueError:
            reporter.print_error(f"Invalid date: {value!r}")


def main():
    """Main entry point for the application."""
    reporter = ConsoleReporter()

    try:
        config = Config()
        Logger.setup(level=config.log_level)

        reporter.print_header("Date Range Picker")
        controller = create_controller(config)

        get_user_selection(controller, reporter)
        report_range(controller, reporter, controller.apply())

    except KeyboardInterrupt:
        reporter.print_warning("\n\nInterrupted by user")
        Logger.warning("Interrupted by user")
    except Exception as e:
        reporter.print_error(f"[bold red]Picker error: {str(e)}[/bold red]")
        Logger.error(f"Picker failed: {str(e)}", exc_info=True)
        raise


def run_batch_mode(args) -> int:
    """Apply a range given on the command line without prompting."""
    config = Config()
    Logger.setup(level=config.log_level)
    reporter = ConsoleReporter()
    controller = create_controller(config)

    if args[0] == "--quick":
        controller.select_quick_option(QuickOption(args[1]))
    else:
        pick_dates(controller, reporter, *args)

    range_data = controller.apply()
    report_range(controller, reporter, range_data)
    return 0 if range_data else 1


if __name__ == "__main__":
    # Two arguments: START END dates or --quick KEY
    if len(sys.argv) == 3:
        try:
            sys.exit(run_batch_mode(sys.argv[1:]))
        except ValueError:
            print("Usage: python main.py [START END | --quick KEY]")
            sys.exit(1)
    else:
        main()
