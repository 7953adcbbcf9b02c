# logger.py

import os, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class Logger:
    """
    Per-component logger. Silent unless enabled, in which case every record
    goes to logs/<filename> under the project root.
    """
    def __init__(self, name: str, logging_enabled: bool = False,
                 filename: str = 'termgrid_debug.log'):
        self.name = name
        self._logger = logging.getLogger(name)
        if logging_enabled:
            log_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'logs')
            os.makedirs(log_dir, exist_ok=True)
            logging.basicConfig(level=logging.DEBUG,
                              format=LOG_FORMAT,
                              filename=os.path.join(log_dir, filename))
        elif not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
