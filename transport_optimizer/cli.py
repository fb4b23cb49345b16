"""Interactive menu for the Transport Optimizer.

Loads the seed files, then loops over a numbered menu until the user
picks Exit. Every menu entry is a thin wrapper over TransportService;
domain errors are printed and the loop goes on.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence

from .config import AppConfig, GraphConfig, get_config
from .container import Container
from .domain.errors import TransportOptimizerError
from .services import TransportService

InputFn = Callable[[str], str]

MENU = """
Transport Optimizer Menu:
1. Add New City
2. Add New Route
3. Find Shortest Route
4. Book a Ticket
5. View All Tickets
6. View All Cities
7. View All Routes
8. Delete a City
9. Delete a Route
10. Delete a Ticket
11. Exit"""

EXIT_CHOICE = 11


class Menu:
    """Console front-end bound to one TransportService."""

    def __init__(
        self,
        service: TransportService,
        input_fn: InputFn = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.service = service
        self._input = input_fn
        self._print = output_fn
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.add_city,
            2: self.add_route,
            3: self.find_shortest_route,
            4: self.book_ticket,
            5: self.view_tickets,
            6: self.view_cities,
            7: self.view_routes,
            8: self.delete_city,
            9: self.delete_route,
            10: self.delete_ticket,
        }

    def run(self) -> None:
        while True:
            self._print(MENU)
            choice = self._ask_int("Enter choice: ")
            if choice == EXIT_CHOICE:
                self._print("Goodbye!")
                return

            action = self._actions.get(choice)
            if action is None:
                self._print("Invalid choice!")
                continue

            try:
                action()
            except TransportOptimizerError as e:
                self._print(f"Error: {e}")
            except ValueError as e:
                self._print(f"Invalid value: {e}")

    # ---------- prompts ----------

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_int(self, prompt: str) -> int:
        while True:
            answer = self._ask(prompt)
            try:
                return int(answer)
            except ValueError:
                self._print(f"Please enter a whole number, got {answer!r}")

    def _show_available_cities(self) -> None:
        self._print("Available Cities:")
        for city in self.service.list_cities():
            self._print(f"{city.id}. {city.name}")

    # ---------- actions ----------

    def add_city(self) -> None:
        name = self._ask("Enter City Name: ")
        if not name:
            self._print("City name cannot be empty.")
            return
        population = self._ask_int("Enter Population: ")
        city = self.service.create_city(name, population)
        self._print(f"City added successfully! (ID {city.id})")

    def add_route(self) -> None:
        self._show_available_cities()
        source_id = self._ask_int("Select Source City ID: ")
        destination_id = self._ask_int("Select Destination City ID: ")
        distance = self._ask_int("Enter Distance (in km): ")
        time = self._ask_int("Enter Time (in mins): ")
        self.service.add_route(source_id, destination_id, distance, time)
        self._print("Route added successfully!")

    def find_shortest_route(self) -> None:
        self._show_available_cities()
        start_id = self._ask_int("Select Start City ID: ")
        end_id = self._ask_int("Select End City ID: ")
        result = self.service.find_shortest_route(start_id, end_id)
        self._print("Shortest Route:")
        self._print(str(result))
        self._print(
            f"Total distance: {result.total_distance} km, "
            f"total time: {result.total_time} mins"
        )

    def book_ticket(self) -> None:
        self._show_available_cities()
        source_id = self._ask_int("Select Start City ID: ")
        destination_id = self._ask_int("Select End City ID: ")
        ticket = self.service.book_ticket(source_id, destination_id)
        self._print(f"Ticket booked successfully! Fare: ${ticket.fare} (ID {ticket.id})")

    def view_tickets(self) -> None:
        self._print("All booked tickets:")
        for ticket in self.service.list_tickets():
            self._print(str(ticket))

    def view_cities(self) -> None:
        for city in self.service.list_cities():
            self._print(str(city))

    def view_routes(self) -> None:
        for city, routes in self.service.list_routes().items():
            self._print(f"Routes from {city}:")
            for route in routes:
                self._print(str(route))

    def delete_city(self) -> None:
        city_id = self._ask_int("Enter City ID to delete: ")
        tickets_removed = self.service.delete_city(city_id)
        self._print("City deleted successfully!")
        if tickets_removed:
            self._print(f"{tickets_removed} ticket(s) for this city were cancelled.")

    def delete_route(self) -> None:
        self._show_available_cities()
        source_id = self._ask_int("Select Source City ID: ")
        destination_id = self._ask_int("Select Destination City ID: ")
        if self.service.delete_route(source_id, destination_id):
            self._print("Route deleted successfully!")
        else:
            self._print("No route between these cities.")

    def delete_ticket(self) -> None:
        ticket_id = self._ask_int("Enter Ticket ID to delete: ")
        self.service.delete_ticket(ticket_id)
        self._print("Ticket deleted successfully!")


def configure_logging(config: AppConfig, level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or config.observability.level).upper(),
        format=config.observability.format,
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="transport-optimizer",
        description="Edit a city network, find shortest routes and book tickets.",
    )
    p.add_argument("--data-dir", type=Path, help="Directory holding the seed files")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    p.add_argument(
        "--no-seed", action="store_true", help="Start with an empty network"
    )
    return p


def main(argv: Optional[Sequence[str]] = None, input_fn: InputFn = input) -> None:
    args = build_parser().parse_args(argv)

    config = get_config()
    if args.data_dir is not None:
        config = config.model_copy(
            update={"graph": GraphConfig(data_dir=args.data_dir)}
        )
    configure_logging(config, args.log_level)

    service: TransportService = Container.create_default(config).resolve(
        TransportService
    )
    if not args.no_seed:
        report = service.load_seed_data()
        for reason in report.rejected:
            print(reason)

    Menu(service, input_fn=input_fn).run()


if __name__ == "__main__":
    main()
