"""Shared helpers for the unitconv command line."""

from .logging import configure_json_logger, flush_handlers, generate_trace_id, log_event

__all__ = ["configure_json_logger", "flush_handlers", "generate_trace_id", "log_event"]
