"""Entry point for slashline."""

import logging

from textual.logging import TextualHandler

from slashline.app import SlashlineApp
from slashline.config import get_config


def main() -> None:
    """Run the slashline application."""
    config = get_config()
    logging.basicConfig(level=config.log_level, handlers=[TextualHandler()])
    app = SlashlineApp(config=config)
    app.run()


if __name__ == "__main__":
    main()
