"""Name of the logger used by ``dualdiff`` modules.

Logging is based on the standard library `logging` module. ``taylor_check``
reports each step at ``DEBUG`` and a failed check at ``WARNING``. Only
``WARNING`` and above are shown unless the calling application configures
``dualdiff.logger.dualdiff_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(level=logging.DEBUG)
"""
import logging

logger_name = "dualdiff"
dualdiff_logger = logging.getLogger(logger_name)
