import logging


class RedactionFilter(logging.Filter):
    """Mask credentials passed to loggers through ``extra``."""

    BLOCKED_KEYS = {"password", "password_hash", "token", "authorization"}

    def filter(self, record: logging.LogRecord) -> bool:
        for key in self.BLOCKED_KEYS:
            if hasattr(record, key):
                setattr(record, key, "[REDACTED]")
        return True


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # Handler-level so records propagated from child loggers are covered too.
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, RedactionFilter) for f in handler.filters):
            handler.addFilter(RedactionFilter())
