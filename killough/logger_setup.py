# killough/logger_setup.py
import logging
import os
from datetime import datetime

FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DATEFMT = "%H:%M:%S"


def setup_logging(log_dir="logs", level=logging.DEBUG, console=True) -> logging.Logger:
    """File log per run under `log_dir` plus a console handler on the root logger."""
    # Create the log directory if it doesn't exist
    os.makedirs(log_dir, exist_ok=True)

    # File name with date/time stamp
    log_filename = os.path.join(log_dir, datetime.now().strftime("drive_run_%Y%m%d_%H%M%S.log"))

    logging.basicConfig(
        filename=log_filename,
        filemode="w",   # overwrite each run
        level=level,
        format=FORMAT,
        datefmt=DATEFMT,
    )

    root = logging.getLogger()
    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(FORMAT, DATEFMT))
        root.addHandler(console_handler)

    logging.info("=== New Drive Session Started ===")
    return root
