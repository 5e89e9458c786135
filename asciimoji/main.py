"""Application entrypoint."""

from __future__ import annotations

import sys

from asciimoji.config import get_settings
from asciimoji.logging import configure_logging, logger
from asciimoji.services.dataset import load_dataset
from asciimoji.tui.app import LookupApp


def main() -> int:
    settings = get_settings()
    # The terminal belongs to the UI while it runs, so logs go to a file.
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    try:
        with settings.log_file.open("a", encoding="utf-8") as log_stream:
            configure_logging(settings.log_level_value, stream=log_stream)

            provider = load_dataset(settings.dataset_path)
            app = LookupApp(provider, settings)

            logger.info("lookup_starting", environment=settings.environment, entries=len(provider))
            entry = app.run()
            if entry is not None:
                app.selection.paste(entry)
            logger.info("lookup_finished", pasted=entry is not None)
    finally:
        # never leave loggers pointing at the closed log file
        configure_logging(settings.log_level_value, stream=sys.stderr)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
