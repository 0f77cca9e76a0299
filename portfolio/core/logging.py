import logging
import sys
import structlog
from typing import Any, Mapping


SENSITIVE_KEYS = {
    "authorization",
    "cookie",
    "set-cookie",
    "token",
    "access_token",
    "secret",
}


def _mask(value: str) -> str:
    if not isinstance(value, str):
        return "***"
    if len(value) <= 8:
        return "***"
    return value[:2] + "***" + value[-2:]


def _redact_mapping(d: Mapping[str, Any]) -> dict:
    out = {}
    for k, v in d.items():
        lk = str(k).lower()
        if lk in SENSITIVE_KEYS:
            out[k] = _mask(str(v))
        elif isinstance(v, Mapping):
            out[k] = _redact_mapping(v)
        else:
            out[k] = v
    return out


def redact_processor(logger, method_name, event_dict):  # type: ignore[no-untyped-def]
    # Mascara chaves sensíveis no nível raiz e em containers (headers etc.)
    return _redact_mapping(event_dict)


def configure_logging(level: str = "INFO") -> None:
    timestamper = structlog.processors.TimeStamper(fmt="iso")
    numeric_level = logging.getLevelName(str(level or "INFO").upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            timestamper,
            redact_processor,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.getLogger("uvicorn.error").setLevel(numeric_level)
    logging.getLogger("uvicorn.access").setLevel(numeric_level)
