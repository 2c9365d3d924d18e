"""Run-scoped logging for tag-shape enumeration.

Records are tagged with the emitting component and the run's correlation ID,
so the debug trail of one run can be told apart when several documents are
aggregated.
"""

import logging
from typing import Any, Dict, Optional


class CorrelationLogger:
    """Thin wrapper that stamps ``component`` and ``correlation_id`` on records."""

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        """Wrap the standard logger called ``name``.

        Args:
            name: Dotted logger name, normally the module's ``__name__``
            correlation_id: Identifier shared by every record of one run
            component: Short label for the emitter; the last segment of
                ``name`` when omitted
        """
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.split('.')[-1]

    def _get_extra(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        combined_extra = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }

        if extra:
            combined_extra.update(extra)

        return combined_extra

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        """Emit a DEBUG record with the run fields merged into ``extra``."""
        self.logger.debug(message, extra=self._get_extra(extra))


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Return a ``CorrelationLogger`` for ``name`` bound to one run."""
    return CorrelationLogger(name, correlation_id, component)
