from transcriber_common.logging import LOG_FORMAT, setup_logging

__all__ = ["setup_logging", "LOG_FORMAT"]
