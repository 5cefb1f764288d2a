# log/priority.py

from enum import IntEnum


class Priority(IntEnum):
    """Syslog severities; lower values are more severe."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARN = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7
