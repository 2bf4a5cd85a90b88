"""Entry point for Job Search application."""

import locale
import logging
import sys

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the application."""
    from .data.database import get_log_path
    from .logging_config import setup_logging

    setup_logging(log_path=get_log_path())

    # Short dates in the roles table follow the host locale
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error:
        logger.warning("Host locale unavailable, using the default date format")

    try:
        # Initialize database
        from .data.database import get_db
        get_db()

        # Run the GUI application
        from .gui.app import run_app
        run_app()
    except Exception:
        logger.exception("Job Search stopped after an unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
