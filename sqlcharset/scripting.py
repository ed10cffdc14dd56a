"""
sqlcharset.scripting - frame for main scripts

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import os
import sys
import logging
from contextlib import contextmanager


class ScriptError(Exception):
    """Script ends with a non-zero exit status."""

    def __init__(self, message='', status=1):
        super().__init__(message)
        self.status = status


@contextmanager
def wrap_main(debug=False):
    """Main script context."""
    # set log level
    if debug:
        loglevel = logging.DEBUG
    else:
        loglevel = logging.WARNING
    logging.basicConfig(level=loglevel, format='%(levelname)s: %(message)s', force=True)
    # run main script
    try:
        yield
    except BrokenPipeError:
        # happens e.g. when piping to `head`
        sys.stdout = os.fdopen(1)
    except ScriptError as exc:
        if str(exc):
            logging.error(exc)
        sys.exit(exc.status)
    except Exception as exc:
        logging.error(exc)
        if debug:
            raise
        sys.exit(2)
