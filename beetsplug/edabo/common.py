# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

import logging
import os

# Get values as: plg_ns['__PLUGIN_NAME__']
plg_ns = {}
about_path = os.path.join(os.path.dirname(__file__), u'about.py')
with open(about_path) as about_file:
    exec(about_file.read(), plg_ns)

__logger__ = logging.getLogger('beets.{plg}'.format(
    plg=plg_ns['__PLUGIN_NAME__']))


def logger(log=None):
    """Return the given logger, or the plugin logger if there is none."""
    return log if log is not None else __logger__
