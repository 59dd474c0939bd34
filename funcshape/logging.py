from datetime import datetime, timezone
import inspect
import json
import logging
import pathlib
import traceback
from typing import Callable, Dict, List, Optional, TextIO, Union


class FuncshapeLogger:
    """Wraps a logging.Logger so that it's easy to use str.format syntax.

    Formatting is delayed until a handler asks for the message, and the
    calling frame is only looked up when the level is enabled, so logging
    from inside a curry chain costs almost nothing when nobody listens."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def debug(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log(logging.DEBUG, format_string, args, kwargs)

    def info(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log(logging.INFO, format_string, args, kwargs)

    def warning(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log(logging.WARNING, format_string, args, kwargs)

    def error(
        self, format_string: str, *args: object, **kwargs: object
    ) -> None:
        self._log(logging.ERROR, format_string, args, kwargs)

    def _log(
        self,
        level: int,
        format_string: str,
        args: tuple,
        kwargs: Dict[str, object],
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        # skip _log and the public method
        frame = inspect.currentframe()
        caller = inspect.getframeinfo(frame.f_back.f_back, context=0)  # type: ignore
        del frame
        _log(
            self._logger.log,
            level,
            format_string,
            caller,
            list(args),
            dict(kwargs),
        )


def get_logger(name: str) -> FuncshapeLogger:
    python_logger = logging.getLogger(name)
    python_logger.addHandler(logging.NullHandler())
    return FuncshapeLogger(python_logger)


class _LogRecordEncoder(json.JSONEncoder):
    """A JSON Encoder that supports logging.LogRecord objects."""

    def default(self, obj: object):
        if isinstance(obj, logging.LogRecord):
            caller = getattr(obj, 'caller', None)
            return {
                'name': obj.name,
                'message': obj.getMessage(),
                'level_name': obj.levelname,
                'path_name': caller.filename if caller else obj.pathname,
                'file_name': pathlib.Path(
                    caller.filename if caller else obj.pathname
                ).name,
                'exception': (
                    traceback.format_exception(*obj.exc_info)
                    if obj.exc_info
                    else None
                ),
                'line_number': caller.lineno if caller else obj.lineno,
                'function_name': caller.function if caller else obj.funcName,
                'created': datetime.fromtimestamp(
                    obj.created, timezone.utc
                ).isoformat(),
                'thread': obj.thread,
                'thread_name': obj.threadName,
                'process': obj.process,
            }
        return super().default(obj)


class JSONFormatter(logging.Formatter):
    """A logging formatter for producing structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(record, cls=_LogRecordEncoder)


def configure(
    level: Union[int, str] = logging.WARNING,
    *,
    json: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Send funcshape's logs to a stream (stderr by default).

    Calling this again replaces the handler installed by the previous call
    instead of adding a second one."""
    package_logger = logging.getLogger('funcshape')
    for old_handler in list(package_logger.handlers):
        if getattr(old_handler, '_funcshape_configured', False):
            package_logger.removeHandler(old_handler)
    handler = logging.StreamHandler(stream)
    if json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter('%(levelname)s %(name)s: %(message)s')
        )
    handler._funcshape_configured = True  # type: ignore
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler


def _log(
    logging_method: Callable,
    level: int,
    format_string: str,
    caller: inspect.Traceback,
    args: List[object],
    kwargs: Dict[str, object],
) -> None:
    exc_info = kwargs.pop('exc_info', None)
    logging_method(
        level,
        _DelayedFormat(format_string, args, kwargs),
        exc_info=exc_info,
        extra={'caller': caller},
    )


class _DelayedFormat:
    def __init__(
        self, format_string: str, args: List[object], kwargs: Dict[str, object]
    ) -> None:
        self._format_string, self._args, self._kwargs = (
            format_string,
            args,
            kwargs,
        )

    def __str__(self) -> str:
        return self._format_string.format(*self._args, **self._kwargs)
