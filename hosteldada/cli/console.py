"""Console menu for the Hostel Dada toolkit.

The menu owns all prompting and printing; every computation is delegated to
HostelWorkflowService so the algorithms stay testable without a terminal.
"""

from __future__ import annotations

import math
import sys
from typing import Callable, Optional, TextIO

from hosteldada.domain.models import StockItem
from hosteldada.services.booking_service import BookingValidationError, SlotConflictError
from hosteldada.services.hostel_service import HostelWorkflowService
from hosteldada.services.stock_service import OutOfStockError, StockValidationError
from hosteldada.services.task_service import TaskValidationError
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)

RUPEE = "₹"


class InputClosedError(Exception):
    """Raised when standard input reaches end of file."""


class InvalidMenuChoiceError(Exception):
    """Raised when a menu selection is outside the offered options."""

    def __init__(self, choice: int) -> None:
        super().__init__(f"invalid menu choice {choice}")
        self.choice = choice


def format_stock_item(item: StockItem) -> str:
    return f" - {item.name} x{item.quantity} {RUPEE}{item.price} | Expires: {item.expiry}"


class ConsoleMenu:
    def __init__(
        self,
        service: Optional[HostelWorkflowService] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self._service = service or HostelWorkflowService()
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._modules: list[tuple[str, Callable[[], None]]] = [
            ("SnackCart \U0001f36b", self.run_snack_cart),
            ("RoomieMatcher \U0001f46f", self.run_roomie_matcher),
            ("MessyMess \U0001f35b", self.run_messy_mess),
            ("LaundryLoad \U0001f45a", self.run_laundry_load),
            ("HostelFixer \U0001f6e0", self.run_hostel_fixer),
            ("FoodFight \U0001f357", self.run_food_fight),
        ]

    # --- input helpers ---

    def _write(self, text: str = "") -> None:
        self._stdout.write(text + "\n")

    def _read(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise InputClosedError("standard input closed")
        return line.strip()

    def _read_int(self, prompt: str) -> int:
        """Re-prompt until the user types a whole number."""
        while True:
            raw = self._read(prompt)
            try:
                return int(raw)
            except ValueError:
                logger.debug("Rejected non-numeric input | raw=%r", raw)
                self._write("Please enter a whole number.")

    def _select(self, choice: int) -> Callable[[], None]:
        if not 1 <= choice <= len(self._modules):
            raise InvalidMenuChoiceError(choice)
        return self._modules[choice - 1][1]

    # --- main loop ---

    def run(self) -> int:
        self._write("\nWelcome to Hostel Dada \U0001f44b")
        while True:
            self._write("\nChoose an Option:")
            for index, (label, _) in enumerate(self._modules, start=1):
                self._write(f"  {index}. {label}")
            self._write("  0. Exit")
            choice = self._read_int("> ")
            if choice == 0:
                break
            try:
                handler = self._select(choice)
            except InvalidMenuChoiceError:
                self._write("Invalid option. Please try again.")
                continue
            handler()
        self._write("\nThank you for using Hostel Dada!")
        return 0

    # --- modules ---

    def run_snack_cart(self) -> None:
        self._write("\n[SnackCart] Welcome to the SnackCart module!")
        while True:
            self._write(
                "\n1. View Stock\n2. Buy Snack\n3. View Profit\n"
                "4. Low Stock Alerts\n5. Search Snacks\n0. Back"
            )
            option = self._read_int("> ")
            if option == 0:
                return
            if option == 1:
                self._write("> Stock:")
                for item in self._service.list_stock():
                    self._write(format_stock_item(item))
            elif option == 2:
                name = self._read("Enter snack name: ")
                quantity = self._read_int("Enter quantity: ")
                try:
                    self._service.purchase_snack(name, quantity)
                except (OutOfStockError, StockValidationError):
                    self._write("Not enough stock or invalid snack.")
                else:
                    self._write("Purchased!")
            elif option == 3:
                report = self._service.profit_report()
                self._write("Profit History:")
                for record in report.records:
                    self._write(f" - {record.name}: {RUPEE}{record.profit}")
                self._write(f"Total Profit: {RUPEE}{report.total_profit}")
            elif option == 4:
                items = self._service.low_stock()
                if not items:
                    self._write("All snacks are well stocked.")
                for item in items:
                    self._write(format_stock_item(item))
            elif option == 5:
                prefix = self._read("Search prefix: ")
                matches = self._service.search_snacks(prefix)
                if not matches:
                    self._write("No snacks match.")
                for item in matches:
                    self._write(format_stock_item(item))
            else:
                self._write("Invalid option.")

    def run_roomie_matcher(self) -> None:
        self._write("\n[RoomieMatcher] Welcome to the RoomieMatcher module!")
        result = self._service.assign_rooms()
        self._write("Room Assignments:")
        for room in self._service.matching.rooms:
            self._write(f" - {room}: {result.assignments.get(room, '[Unassigned]')}")
        if result.unassigned_students:
            self._write("Waiting for a room: " + ", ".join(result.unassigned_students))

    def run_messy_mess(self) -> None:
        self._write("\n[MessyMess] Welcome to the MessyMess module!")
        self._write("Top Dishes (by rating):")
        for dish in self._service.top_dishes():
            self._write(f" - {dish.name} ({dish.rating}/5)")
        self._write("\nWeek Planner:")
        for day, dish in self._service.week_plan():
            self._write(f" - {day}: {dish}")

    def run_laundry_load(self) -> None:
        self._write("\n[LaundryLoad] Welcome to the LaundryLoad module!")
        self._write("Available slots:")
        for slot in self._service.list_laundry_slots():
            self._write(f" - {slot.start}:00 to {slot.end}:00")
        start = self._read_int("Book a slot (start hour): ")
        end = self._read_int("End hour: ")
        try:
            self._service.book_laundry_slot(start, end)
        except SlotConflictError:
            self._write("Clash detected! Choose another slot.")
        except BookingValidationError as exc:
            self._write(f"Invalid slot: {exc}.")
        else:
            self._write("Slot booked!")

    def run_hostel_fixer(self) -> None:
        self._write("\n[HostelFixer] Welcome to the HostelFixer module!")
        description = self._read("Add a maintenance task (desc): ")
        urgency = self._read_int("Urgency (1-10): ")
        try:
            self._service.add_task(description, urgency)
        except TaskValidationError as exc:
            self._write(f"Task not added: {exc}.")

        self._write("\nUrgent Tasks:")
        for task in self._service.list_tasks():
            self._write(f" - {task.description} (Urgency: {task.urgency})")

        route = self._service.shortest_route()
        if math.isinf(route.distance):
            self._write(f"\nNo path from {route.source} to {route.destination}")
            return
        self._write(
            f"\nShortest path from {route.source} to {route.destination}: "
            f"{route.distance:g} units ({' -> '.join(route.nodes)})"
        )

    def run_food_fight(self) -> None:
        self._write("\n[FoodFight] Welcome to the FoodFight module!")
        report = self._service.queue_report()
        self._write(f"Queue prediction (sliding window {report.window_size} hours):")
        for window in report.windows:
            self._write(
                f" - Time {window.start_time} to {window.end_time}: {window.count} people"
            )
        if report.best_entry_time is None:
            self._write("\nNot enough entries to predict the queue.")
            return
        self._write(
            f"\nBest time to enter: {report.best_entry_time} "
            f"({report.minimum_count} people in queue)"
        )
