from __future__ import annotations

import logging

from supply_tools.utils import DATE_FORMAT, setup_logging


def test_console_handler_uses_file_date_format(tmp_path):
    root = logging.getLogger('')
    before = list(root.handlers)
    try:
        setup_logging(log_file=str(tmp_path / "tools.log"))
        added = [h for h in root.handlers if h not in before]
        console = [h for h in added if type(h) is logging.StreamHandler]
        assert len(console) == 1
        assert console[0].formatter.datefmt == DATE_FORMAT
    finally:
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
                handler.close()
