"""
Command-line interface for housing analytics.

Loads the three input files once, then answers menu-driven queries:

    housing-analytics csv violations.csv properties.csv population.txt
"""

import argparse
import logging
import os
import re
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO

from . import __version__
from .config import constants
from .config.settings import Settings
from .data.loaders import load_properties, load_populations, load_violations
from .data.sources import InMemoryRecordSource, InMemoryPopulationSource
from .engine.facade import HousingEngine, acquire
from .processors.population import PopulationProcessor
from .processors.violations import ParkingViolationProcessor
from .utils.exceptions import ConfigurationError, DataSourceError
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)

ZIP_PATTERN = re.compile(r"^\d{5}$")


class Menu:
    """Interactive menu over the loaded datasets."""

    def __init__(self,
                 engine: HousingEngine,
                 population_processor: PopulationProcessor,
                 violation_processor: ParkingViolationProcessor,
                 input_stream: TextIO = sys.stdin,
                 output_stream: TextIO = sys.stdout,
                 top_violation_types: int = constants.TOP_VIOLATION_TYPES):
        self.engine = engine
        self.population_processor = population_processor
        self.violation_processor = violation_processor
        self.input = input_stream
        self.output = output_stream
        self.top_violation_types = top_violation_types

        self._handlers: Dict[str, Callable[[], None]] = {
            "1": self.show_total_population,
            "2": self.show_fines_per_capita,
            "3": self.show_average_market_value,
            "4": self.show_average_livable_area,
            "5": self.show_market_value_per_capita,
            "6": self.show_property_value_summary,
            "7": self.show_most_common_violations
        }

    def run(self) -> None:
        """Prompt until the user selects 0 or input ends."""
        while True:
            self._print_menu()
            selection = self._read_line()
            if selection is None or selection == "0":
                self._write("Goodbye!")
                return

            handler = self._handlers.get(selection)
            if handler is None:
                self._write("Invalid selection. Please try again.")
            else:
                handler()
            self._write("")

    def show_total_population(self) -> None:
        self._write(f"Total population: {self.population_processor.total_population()}")

    def show_fines_per_capita(self) -> None:
        for zip_code, per_capita in self.violation_processor.fines_per_capita().items():
            self._write(f"{zip_code} {per_capita:.4f}")

    def show_average_market_value(self) -> None:
        zip_code = self._prompt_zip()
        if zip_code is None:
            return
        average = self.engine.average_market_value(zip_code)
        if average <= 0:
            self._write(f"No valid residential market value data found for ZIP code {zip_code}.")
        else:
            self._write(f"Average residential market value for {zip_code}: ${average}")

    def show_average_livable_area(self) -> None:
        zip_code = self._prompt_zip()
        if zip_code is None:
            return
        average = self.engine.average_livable_area(zip_code)
        if average <= 0:
            self._write(f"No valid livable area data found for ZIP code {zip_code}.")
        else:
            self._write(f"Average residential total livable area for {zip_code}: "
                        f"{average} square feet")

    def show_market_value_per_capita(self) -> None:
        zip_code = self._prompt_zip()
        if zip_code is None:
            return
        per_capita = self.engine.market_value_per_capita(zip_code)
        if per_capita <= 0:
            self._write(f"No valid market value or population data available "
                        f"for ZIP code {zip_code}.")
        else:
            self._write(f"Residential market value per capita for {zip_code}: ${per_capita}")

    def show_property_value_summary(self) -> None:
        zip_code = self._prompt_zip()
        if zip_code is None:
            return
        summary = self.engine.property_value_summary(zip_code)
        if summary.is_empty:
            self._write(f"No valid residential market value data found for ZIP code {zip_code}.")
        else:
            self._write(f"{summary.min}, {summary.max}, {summary.median}")

    def show_most_common_violations(self) -> None:
        zip_code = self._prompt_zip()
        if zip_code is None:
            return
        top = self.violation_processor.top_violation_types(zip_code, self.top_violation_types)
        if not top:
            self._write(f"No violations found for ZIP code {zip_code}")
            return

        total = sum(self.violation_processor.violation_types_for_zip(zip_code).values())
        self._write(f"=== Violation Summary for ZIP {zip_code} ===")
        self._write(f"Total violations: {total}")
        self._write("Top violation types:")
        for rank, entry in enumerate(top, start=1):
            self._write(f"{rank}. {entry.violation}: {entry.count} ({entry.percentage:.2f}%)")

    def _prompt_zip(self) -> Optional[int]:
        self._write("Enter ZIP code: ", end="")
        text = self._read_line()
        if text is None or not ZIP_PATTERN.match(text):
            self._write("Invalid ZIP code. Please enter a 5-digit ZIP code.")
            return None
        return int(text)

    def _print_menu(self) -> None:
        self._write("==== Main Menu ====")
        for option, label in constants.MENU_OPTIONS.items():
            self._write(f"{option}. {label}")
        self._write("Enter selection: ", end="")

    def _read_line(self) -> Optional[str]:
        line = self.input.readline()
        if not line:
            return None
        return line.strip()

    def _write(self, text: str, end: str = "\n") -> None:
        print(text, end=end, file=self.output, flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="housing-analytics",
        description="ZIP-level statistics over property, parking and population data"
    )
    parser.add_argument("format", help='Parking violations file format ("csv" or "json")')
    parser.add_argument("violations", help="Parking violations file")
    parser.add_argument("properties", help="Properties CSV file")
    parser.add_argument("population", help="Population file")
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument("--log-level", help="Logging level (overrides settings)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Merge the optional settings file with the command-line arguments."""
    settings = Settings.from_json(args.config) if args.config else Settings()
    settings.violations_format = args.format
    settings.violations_path = args.violations
    settings.properties_path = args.properties
    settings.population_path = args.population
    if args.log_level:
        settings.log_level = args.log_level
    settings.validate()
    return settings


def main(argv: Optional[List[str]] = None,
         input_stream: TextIO = sys.stdin,
         output_stream: TextIO = sys.stdout) -> int:
    """Entry point for the housing-analytics command."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
    except ConfigurationError as e:
        print(f"Error: {e}.", file=output_stream)
        return 1
    except (OSError, ValueError, TypeError) as e:
        print(f"Error: Cannot load settings file {args.config}: {e}", file=output_stream)
        return 1

    configure_logging(settings.log_level, settings.log_file)

    for label, path in (("parking violations", settings.violations_path),
                        ("properties", settings.properties_path),
                        ("population", settings.population_path)):
        if not _can_read(path):
            print(f"Error: Cannot open {label} file: {path}", file=output_stream)
            return 1

    try:
        violations = load_violations(settings.violations_path, settings.violations_format)
        records = load_properties(settings.properties_path)
        populations = load_populations(settings.population_path)
    except DataSourceError as e:
        logger.error(f"Failed to load input data: {e}")
        print(f"Error reading data files: {e}", file=output_stream)
        return 1

    engine = acquire(
        InMemoryRecordSource(records),
        InMemoryPopulationSource(populations),
        settings.max_workers
    )
    menu = Menu(
        engine,
        PopulationProcessor(populations),
        ParkingViolationProcessor(violations, populations, settings.fines_state),
        input_stream=input_stream,
        output_stream=output_stream,
        top_violation_types=settings.top_violation_types
    )
    menu.run()
    return 0


def _can_read(path: Optional[str]) -> bool:
    return path is not None and Path(path).is_file() and os.access(path, os.R_OK)


if __name__ == "__main__":
    sys.exit(main())
