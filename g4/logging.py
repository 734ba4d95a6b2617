"""
Logging for G4 Terminal.

Two kinds of output:

- Console lines from per-module loggers (``get_logger('rings')``). They go
  to stderr, or to a file while the curses screen is in use.
- Structured records (``emit_record('session', {...})``) handed to the sink
  registered for that module. A FileSink appends JSON lines, a NullSink
  drops them.

Environment:
    G4_LOG_LEVEL=DEBUG                # default level for every module
    G4_LOG_<MODULE>=TRACE             # level for one module (G4_LOG_RINGS)
    G4_LOG_FILE=/tmp/g4.log           # console lines to a file
    G4_LOG_DIR=~/g4-logs              # where FileSinks write
    G4_LOGGING_SESSION_ENABLED=true   # give 'session' a FileSink
    G4_LOGGING_SESSION_DIR=/tmp/runs  # ... in this directory
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TextIO


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


_LEVEL_NAMES = {
    'TRACE': LogLevel.TRACE,
    'DEBUG': LogLevel.DEBUG,
    'INFO': LogLevel.INFO,
    'WARN': LogLevel.WARNING,
    'WARNING': LogLevel.WARNING,
    'ERROR': LogLevel.ERROR,
    'OFF': LogLevel.OFF,
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},     # module -> LogLevel
    'log_file': None,        # console lines go here instead of stderr
    'log_dir': None,         # FileSink directory override
    'modules': {},           # module -> settings from G4_LOGGING_<MODULE>_<KEY>
}

_output: Optional[TextIO] = None


# =============================================================================
# Configuration
# =============================================================================

def _level_from_string(name: str) -> LogLevel:
    """Unknown names fall back to INFO."""
    return _LEVEL_NAMES.get(name.upper(), LogLevel.INFO)


def _parse_env_value(value: str) -> Any:
    lowered = value.lower()
    if lowered in ('true', 'yes', 'on', '1'):
        return True
    if lowered in ('false', 'no', 'off', '0'):
        return False
    return value


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_file: Optional[str] = None,
) -> None:
    """Set the default level, per-module levels and optionally a log file.

    Args:
        level: Level name for modules without their own level
        modules: Module name -> level name
        log_file: Write console lines to this file instead of stderr
    """
    _config['default_level'] = _level_from_string(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][module] = _level_from_string(module_level)
    if log_file is not None:
        set_log_file(log_file)


def set_log_file(path: Optional[str]) -> None:
    """Send console lines to path, or back to stderr with None."""
    global _output
    if _output is not None:
        _output.close()
        _output = None
    _config['log_file'] = path


def get_log_dir() -> str:
    """Directory for log files.

    Configured log_dir, then G4_LOG_DIR, then the user data directory
    (~/.local/share/g4/logs, honoring XDG_DATA_HOME).
    """
    configured = _config.get('log_dir') or os.environ.get('G4_LOG_DIR')
    if configured:
        return str(Path(configured).expanduser())

    data_home = os.environ.get('XDG_DATA_HOME') or str(Path.home() / '.local' / 'share')
    return str(Path(data_home) / 'g4' / 'logs')


def get_module_config(module: str) -> Dict[str, Any]:
    """Settings collected from G4_LOGGING_<MODULE>_<KEY> variables."""
    return _config['modules'].get(module.lower(), {})


def _load_env_config() -> None:
    env = os.environ
    if 'G4_LOG_LEVEL' in env:
        _config['default_level'] = _level_from_string(env['G4_LOG_LEVEL'])
    _config['log_dir'] = env.get('G4_LOG_DIR')
    _config['log_file'] = env.get('G4_LOG_FILE')

    for key, value in env.items():
        if key.startswith('G4_LOGGING_'):
            # G4_LOGGING_SESSION_ENABLED -> modules['session']['enabled']
            module, _, setting = key[len('G4_LOGGING_'):].lower().partition('_')
            if module and setting:
                _config['modules'].setdefault(module, {})[setting] = _parse_env_value(value)
        elif key.startswith('G4_LOG_') and key not in ('G4_LOG_LEVEL', 'G4_LOG_DIR', 'G4_LOG_FILE'):
            _config['module_levels'][key[len('G4_LOG_'):].lower()] = _level_from_string(value)


_load_env_config()


# =============================================================================
# Console loggers
# =============================================================================

def _write(line: str) -> None:
    global _output
    path = _config.get('log_file')
    if not path:
        print(line, file=sys.stderr)
        return

    if _output is None:
        target = Path(path).expanduser()
        target.parent.mkdir(parents=True, exist_ok=True)
        _output = open(target, 'a')
    _output.write(line + "\n")
    _output.flush()


class G4Logger:
    """Console logger for one module; arguments use %-formatting."""

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower().replace('.', '_')

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def _log(self, level: LogLevel, label: str, msg: str, args: tuple) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        _write(f"[{self.module}] {label}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, 'TRACE', msg, args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> G4Logger:
    """Logger for module; repeated calls return the same instance."""
    return G4Logger(module)


# =============================================================================
# Structured records
# =============================================================================

class LogSink(ABC):
    """Destination for structured records (JSON-serializable dicts)."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def flush(self) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class FileSink(LogSink):
    """Appends records to ``<log_dir>/<session_name>_<module>.jsonl``.

    Each file starts with a header record and gets a footer record on
    close(). Records without a wall_time are stamped on write.

    Args:
        log_dir: Target directory (default: get_log_dir(), resolved on first write)
        session_name: File name prefix (default: start time, YYYYmmdd_HHMMSS)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def _path(self, module: str) -> Path:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        return self._log_dir / f"{self._session_name}_{module}.jsonl"

    def _open(self, module: str) -> TextIO:
        handle = self._files.get(module)
        if handle is None:
            path = self._path(module)
            path.parent.mkdir(parents=True, exist_ok=True)
            handle = self._files[module] = open(path, 'a')
            self._write(handle, {
                'type': 'header',
                'module': module,
                'session_name': self._session_name,
                'start_time': time.time(),
            })
        return handle

    @staticmethod
    def _write(handle: TextIO, record: Dict[str, Any]) -> None:
        handle.write(json.dumps(record) + "\n")

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        self._write(self._open(module), {'wall_time': time.time(), **record})

    def flush(self) -> None:
        for handle in self._files.values():
            handle.flush()

    def close(self) -> None:
        for module, handle in self._files.items():
            self._write(handle, {'type': 'footer', 'module': module, 'end_time': time.time()})
            handle.close()
        self._files.clear()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Files written so far, by module."""
        return {module: self._path(module) for module in self._files}


class NullSink(LogSink):
    """Drops every record."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    _sinks[module] = sink


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """Send a record to the module's sink.

    Returns:
        False when no sink is registered for the module
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def create_sink_for_module(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if G4_LOGGING_<MODULE>_ENABLED is set, NullSink otherwise.

    G4_LOGGING_<MODULE>_DIR overrides the directory.
    """
    settings = get_module_config(module)
    if not settings.get('enabled'):
        return NullSink()
    return FileSink(log_dir=settings.get('dir'), session_name=session_name)
