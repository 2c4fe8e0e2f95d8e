"""
utils.py
--------
Helpers shared across the standalone tools, starting with the logging setup
used by every entry point. Keeps migrate.py and client.py simpler.
"""

import logging


LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(log_file="supply_tools.log", level=logging.INFO):
    """Log to `log_file` and the console with one shared format."""
    logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    console.setFormatter(formatter)
    logging.getLogger('').addHandler(console)

