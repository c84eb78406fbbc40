"""Main entry point — launches the Terminal UI.

1. Load config
2. Configure file logging
3. Check the API key
4. Start Terminal UI (one conversation per run)
"""

import logging
import sys
from pathlib import Path

from config.settings import Settings
from ui.terminal_app import MoneyBuddyApp


def setup_logging(settings: Settings) -> None:
    """Log to a file so output never lands on top of the TUI."""
    log_path = Path(settings.LOG_PATH)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
        ],
    )
    # Claude API calls at DEBUG level
    logging.getLogger("conversation.completion").setLevel(logging.DEBUG)


def main() -> None:
    """Launch the MoneyBuddy TUI."""
    settings = Settings()
    setup_logging(settings)

    if not settings.ANTHROPIC_API_KEY:
        print("ERROR: ANTHROPIC_API_KEY not found in .env file.")
        print("Please create a .env file: ANTHROPIC_API_KEY=sk-...")
        sys.exit(1)

    app = MoneyBuddyApp(settings=settings)
    app.run()


if __name__ == "__main__":
    main()
