#!/usr/bin/env python3
"""
ConsoleTools demo - walks through every formatter and prompt.

Run it in a terminal to see the colors; pass --no-pause to skip the
Enter prompts and --fast to shorten the animations.
"""

import argparse
import sys
import time
from pathlib import Path

from consoletools import (
    Colors,
    ConsoleIO,
    ConsoleSettings,
    SettingsError,
    spacing,
    header,
    advanced_header,
    progress_bar,
    advanced_progress_bar,
    error,
    warning,
    notification,
    print_typing_text_effect,
    print_spinner,
    pause_console,
    prompt_numbered_menu,
)
from consoletools.logging_setup import configure_logging

MENU_OPTIONS = ["Option A", "Option B", "Option C"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Demonstrate the ConsoleTools formatters")
    parser.add_argument("--settings", type=Path, help="Path to a settings JSON file")
    parser.add_argument("--no-pause", action="store_true", help="Do not wait for Enter")
    parser.add_argument("--fast", action="store_true", help="Shorten animations")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run_demo(settings: ConsoleSettings, io: ConsoleIO, pause: bool = True, fast: bool = False) -> int:
    """Run every demonstration in order. Returns the process exit code."""
    step_delay = 0 if fast else 0.1
    width = settings.progress_width

    io.write(f"{Colors.GREEN}Welcome to the ConsoleTools demo!{Colors.RESET}\n")

    if pause:
        pause_console("Press ENTER to show some spacing...", io=io)
    io.write(f"Here is some spacing below:{spacing(3)}[End of spacing]\n")

    io.write(header("=", 5, "HEADER", " ", Colors.CYAN, Colors.YELLOW, Colors.GREEN) + "\n")
    io.write(advanced_header(
        "=", 3, "-", 3, "ADVANCED HEADER", " ",
        Colors.LIGHT_BLUE, Colors.LIGHT_PURPLE, Colors.GREEN, Colors.YELLOW,
        reset_on_end=True,
    ) + "\n")

    io.write("ProgressBar demonstration:\n")
    for i in range(11):
        io.write("\r" + progress_bar(i, 10, width, Colors.GREEN, True, Colors.LIGHT_CYAN), flush=True)
        time.sleep(step_delay)
    io.write("\nDone!\n")

    io.write("AdvancedProgressBar demonstration:\n")
    for i in range(11):
        io.write("\r" + advanced_progress_bar(
            i, 10, width,
            prefix_text="Loading",
            suffix_text="Complete",
            fill_color=Colors.GREEN,
            unfilled_color=Colors.GRAY,
            text_color=Colors.WHITE,
            prefix_color=Colors.YELLOW,
            suffix_color=Colors.LIGHT_BLUE,
            bracket_color=Colors.RED,
        ), flush=True)
        time.sleep(step_delay)
    io.write("\nDone!\n")

    io.write(error("This is an error message!") + f"{Colors.RESET}\n")
    io.write(warning("This is a warning message!") + f"{Colors.RESET}\n")

    io.write(Colors.LIGHT_PURPLE)
    low, high = (0, 0) if fast else (settings.typing_min_delay_ms, settings.typing_max_delay_ms)
    print_typing_text_effect("Typing text effect demonstration...\n", low, high, io=io)
    io.write(Colors.RESET)

    io.write(notification(
        "[", "!", "]", "INFO", "This is a notification message!",
        Colors.LIGHT_CYAN, Colors.GREEN, Colors.WHITE,
    ) + "\n")

    duration = 300 if fast else settings.spinner_duration_ms
    io.write(f"Showing a spinner for {duration / 1000:g} seconds...\n")
    print_spinner(duration, settings.spinner_speed_ms, io=io)

    io.write("Numbered Menu demonstration:\n")
    choice = prompt_numbered_menu(
        MENU_OPTIONS, ". ",
        "Please select an option:", "Enter choice: ",
        Colors.CYAN, Colors.YELLOW, Colors.GRAY, Colors.WHITE,
        Colors.LIGHT_GREEN, Colors.LIGHT_RED,
        io=io,
    )
    if choice is None:
        io.write("No valid option was selected.\n")
        return 1

    io.write(f"You selected: {MENU_OPTIONS[choice]}\n")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = ConsoleSettings.from_env(args.settings)
    except SettingsError as e:
        ConsoleIO().write_err(error(f"Invalid settings: {e}") + f"{Colors.RESET}\n")
        return 2
    io = ConsoleIO(use_color=settings.use_color)

    try:
        return run_demo(settings, io, pause=not args.no_pause, fast=args.fast)
    except KeyboardInterrupt:
        io.write(f"{Colors.RESET}\nInterrupted.\n")
        return 130


if __name__ == "__main__":
    sys.exit(main())
