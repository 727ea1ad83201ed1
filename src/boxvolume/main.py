"""
Application Initialization
==========================
This module wires the model, presenter and view together and starts the Qt
event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging.
2. Creates the ViewModelStore that owns presenter lifetimes.
3. Passes the store into the Main Window (View).
4. Ends the presenter scope once the event loop returns.
"""
import logging

from boxvolume.app.application import create_app
from boxvolume.app.scope import ViewModelStore
from boxvolume.logging_config import setup_logging
from boxvolume.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging (BOXVOLUME_LOG_LEVEL, optional BOXVOLUME_LOG_FILE)
    setup_logging()

    # 2. Create the Qt Application
    app = create_app()

    # 3. Presenters live in this scope, not in the window
    view_models = ViewModelStore()

    # 4. Initialize the Main Window
    window = MainWindow(view_models)
    window.show()
    logger.info("Application started.")

    # 5. Start Event Loop
    try:
        exit_code = app.exec()
    finally:
        view_models.clear()
    logger.info("Application exited with code %d.", exit_code)
    return exit_code
