"""Validate parsed requests and turn them into reply lines."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from .errors import RequestParseError
from .formatting import PARSE_ERROR, UNKNOWN, format_impossible, format_result
from .request import parse_request
from .units.base import UnitDomain
from .units.registry import DOMAINS
from .utils.logging import log_event

__all__ = [
    "STATUS_CONVERTED",
    "STATUS_INCOMPATIBLE",
    "STATUS_OUT_OF_RANGE",
    "STATUS_PARSE_ERROR",
    "STATUS_UNKNOWN_UNIT",
    "DispatchResult",
    "UnitConverter",
    "convert_line",
]

STATUS_CONVERTED = "converted"
STATUS_PARSE_ERROR = "parse_error"
STATUS_UNKNOWN_UNIT = "unknown_unit"
STATUS_INCOMPATIBLE = "incompatible"
STATUS_OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class DispatchResult:
    """Reply printed for one request together with its outcome."""

    message: str
    status: str
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_CONVERTED


class UnitConverter:
    """Stateless request handler over a fixed set of unit domains."""

    def __init__(
        self,
        domains: Sequence[UnitDomain] = DOMAINS,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.domains = tuple(domains)
        self.logger = logger

    def find_domain(self, text: str) -> Optional[UnitDomain]:
        for domain in self.domains:
            if domain.is_member(text):
                return domain
        return None

    def _describe(self, text: str, domain: Optional[UnitDomain]) -> str:
        if domain is None:
            return UNKNOWN
        return domain.plural(domain.parse(text))

    def resolve(self, line: str) -> DispatchResult:
        """Compute the reply for ``line`` without logging it."""

        try:
            request = parse_request(line)
        except RequestParseError as exc:
            return DispatchResult(PARSE_ERROR, STATUS_PARSE_ERROR, {"reason": exc.reason})

        source_domain = self.find_domain(request.source)
        target_domain = self.find_domain(request.target)
        details: Dict[str, Any] = {
            "value": request.value,
            "source": request.source,
            "target": request.target,
        }

        if source_domain is None or target_domain is None:
            message = format_impossible(
                self._describe(request.source, source_domain),
                self._describe(request.target, target_domain),
            )
            return DispatchResult(message, STATUS_UNKNOWN_UNIT, details)

        if source_domain is not target_domain:
            message = format_impossible(
                self._describe(request.source, source_domain),
                self._describe(request.target, target_domain),
            )
            return DispatchResult(message, STATUS_INCOMPATIBLE, details)

        domain = source_domain
        rejection = domain.check_value(request.value)
        if rejection is not None:
            return DispatchResult(rejection, STATUS_OUT_OF_RANGE, details)

        source = domain.parse(request.source)
        target = domain.parse(request.target)
        result = domain.convert(request.value, source, target)
        details.update(domain=domain.name, source=source.key, target=target.key, result=result)
        return DispatchResult(format_result(request.value, source, result, target), STATUS_CONVERTED, details)

    def handle(self, line: str, *, trace_id: Optional[str] = None) -> DispatchResult:
        """Resolve ``line`` and record the outcome on the configured logger."""

        outcome = self.resolve(line)
        if self.logger is not None:
            if outcome.ok:
                log_event(self.logger, "request.converted", trace_id=trace_id, line=line, **outcome.details)
            else:
                log_event(
                    self.logger,
                    "request.rejected",
                    trace_id=trace_id,
                    level=logging.WARNING,
                    line=line,
                    status=outcome.status,
                    reply=outcome.message,
                    **outcome.details,
                )
        return outcome


def convert_line(line: str) -> str:
    """Return the reply printed for ``line`` by the interactive loop."""

    return UnitConverter().handle(line).message
