"""Logger that attaches session context and timing data to records."""

import logging
from contextvars import ContextVar
from typing import Dict, Optional

# Set by callers that want every record of one reasoning session correlated
session_context: ContextVar[Optional[str]] = ContextVar('session_id', default=None)


class StructuredLogger(logging.Logger):
    """Logger whose records always carry a ``context`` dict.

    The dict holds the active session id (when set) plus anything passed as
    ``extra={'context': {...}}``. Timing data goes in ``extra={'performance': ...}``
    and ends up on ``record.performance``.
    """

    def _log(self, level, msg, args, exc_info=None, extra=None, stack_info=False, **kwargs):
        fields = dict(extra or {})
        context = {'logger_name': self.name}
        session_id = session_context.get()
        if session_id is not None:
            context['session_id'] = session_id
        context.update(fields.pop('context', None) or {})

        fields['context'] = context
        fields.setdefault('performance', None)

        super()._log(level, msg, args, exc_info=exc_info, extra=fields,
                     stack_info=stack_info, **kwargs)

    def log_performance(self, operation: str, duration: float, **metrics):
        """Log how long ``operation`` took, with a rate when items_processed is given."""
        performance = {'operation': operation, 'duration_seconds': round(duration, 6), **metrics}
        if duration > 0 and 'items_processed' in metrics:
            performance['items_per_second'] = round(metrics['items_processed'] / duration, 2)

        self.info(f"{operation} took {duration:.3f}s", extra={'performance': performance})


_loggers: Dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """Return the StructuredLogger registered under ``name``, creating it once."""
    if name not in _loggers:
        previous = logging.getLoggerClass()
        logging.setLoggerClass(StructuredLogger)
        try:
            _loggers[name] = logging.getLogger(name)
        finally:
            logging.setLoggerClass(previous)
    return _loggers[name]
