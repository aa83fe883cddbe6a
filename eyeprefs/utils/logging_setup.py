"""
Logging setup for Eye on Cursor preferences.
"""
import os
import sys
import logging
import traceback
from datetime import datetime

from eyeprefs.constants import APP_NAME, CONFIG_DIR_NAME, VERSION


def default_log_dir() -> str:
    state_home = os.environ.get('XDG_STATE_HOME') or os.path.join(os.path.expanduser('~'), '.local', 'state')
    return os.path.join(state_home, CONFIG_DIR_NAME, 'logs')


def setup_logging(debug: bool = False, log_dir: str = None):
    """Setup logging to file and console for crash debugging."""
    log_dir = log_dir or default_log_dir()
    os.makedirs(log_dir, exist_ok=True)

    log_file = os.path.join(log_dir, f'prefs_{datetime.now().strftime("%Y%m%d")}.log')

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )

    def exception_handler(exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return
        logging.critical("Uncaught exception:", exc_info=(exc_type, exc_value, exc_tb))
        logging.critical("".join(traceback.format_exception(exc_type, exc_value, exc_tb)))

    sys.excepthook = exception_handler
    logging.info(f"{APP_NAME} preferences v{VERSION} started")
    logging.info(f"Log file: {log_file}")

    return log_file
