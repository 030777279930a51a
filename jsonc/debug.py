"""Process-wide debug and error message output."""

import sys

try:
    import syslog as _syslog_mod
except ImportError:  # not available on every platform
    _syslog_mod = None

_debug_enabled = False
_syslog_enabled = False


def set_debug(enabled) -> None:
    """Turn debug output on or off."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


def get_debug() -> bool:
    """Return whether debug output is on."""
    return _debug_enabled


def set_syslog(enabled) -> None:
    """Send messages to the system log instead of the standard streams."""
    global _syslog_enabled
    _syslog_enabled = bool(enabled)


def _format(msg: str, args: tuple) -> str:
    return msg % args if args else msg


def _emit(priority_name: str, stream, msg: str, args: tuple) -> None:
    text = _format(msg, args)
    if _syslog_enabled and _syslog_mod is not None:
        _syslog_mod.syslog(getattr(_syslog_mod, priority_name), text)
    else:
        stream.write(text)


def debug(msg: str, *args) -> None:
    """Write a printf-style message to standard output when debugging is on."""
    if _debug_enabled:
        _emit("LOG_DEBUG", sys.stdout, msg, args)


def error(msg: str, *args) -> None:
    """Write a printf-style error message to standard error."""
    _emit("LOG_ERR", sys.stderr, msg, args)


def info(msg: str, *args) -> None:
    """Write a printf-style informational message to standard error."""
    _emit("LOG_INFO", sys.stderr, msg, args)