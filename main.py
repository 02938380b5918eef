"""
main.py: Console launcher and entry point.

Run this file to open the Hostel Dada menu:

    python main.py

This file does NOT contain application logic. See hosteldada/cli/console.py
for the menu and hosteldada/services/ for the module algorithms.

The same modules are served over HTTP by app.py:
    uvicorn app:app --reload
"""

from __future__ import annotations

from hosteldada.cli.console import ConsoleMenu, InputClosedError
from hosteldada.services.hostel_service import HostelWorkflowService
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)


def main() -> int:
    """Run the menu until the user picks Exit; non-zero when input runs out."""
    service = HostelWorkflowService()
    menu = ConsoleMenu(service=service)
    try:
        return menu.run()
    except InputClosedError:
        logger.error("Input stream closed before Exit was selected")
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
