"""Key=value logging for the filter panel and its admin-ajax traffic."""

import logging
from typing import Any, Optional

from safequote.infrastructure.config.settings import settings

# Field names whose values never reach the log
REDACTED_FIELDS = frozenset({"nonce"})

_logger = logging.getLogger("safequote_filters")
_logger.setLevel(settings.log_level.upper())

if not _logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setLevel(logging.DEBUG)
    _handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    _logger.addHandler(_handler)


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: "***" if key in REDACTED_FIELDS else _redact(item) for key, item in value.items()
        }
    return value


def format_fields(fields: dict[str, Any]) -> str:
    """
    Render fields as `key=value` pairs joined by ` | `.

    Nonces are masked, including inside nested dicts such as request params.

    Args:
        fields: Ordered fields to render

    Returns:
        Log message
    """
    return " | ".join(f"{key}={value!r}" for key, value in _redact(fields).items())


def log_event(
    component: str,
    action: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log one filter panel or backend event.

    Args:
        component: Emitting component ('http', 'filter_sync', 'admin_ajax', 'events', 'notifier')
        action: Event name (e.g., 'options_loaded', 'request_failed')
        level: Log level (default: INFO)
        **kwargs: Extra fields, rendered after component and action
    """
    _logger.log(level, format_fields({"component": component, "action": action, **kwargs}))


def log_option_fetch(
    backend_action: str,
    params: dict[str, Any],
    options_count: Optional[int] = None,
    **kwargs: Any,
) -> None:
    """
    Log an option list request to the backend.

    Args:
        backend_action: Admin-ajax action (get_years, get_makes, get_models)
        params: Filter parameters sent (nonce excluded)
        options_count: Number of options returned, if known
        **kwargs: Additional fields
    """
    fields: dict[str, Any] = {"params": params}
    if options_count is not None:
        fields["options_count"] = options_count
    fields.update(kwargs)

    log_event(
        component="admin_ajax",
        action=backend_action,
        **fields,
    )


def log_vehicle_search(
    filters: dict[str, Any],
    results_count: int,
    **kwargs: Any,
) -> None:
    """
    Log vehicle search event.

    Args:
        filters: Search filters applied
        results_count: Number of results
        **kwargs: Additional fields
    """
    log_event(
        component="admin_ajax",
        action="search_vehicles",
        search_filters=filters,
        search_results_count=results_count,
        **kwargs,
    )


def log_fetch_failure(
    backend_action: str,
    error: str,
    **kwargs: Any,
) -> None:
    """
    Log a failed backend request.

    Args:
        backend_action: Admin-ajax action
        error: Error description
        **kwargs: Additional fields
    """
    log_event(
        component="admin_ajax",
        action="request_failed",
        level=logging.WARNING,
        backend_action=backend_action,
        error=error,
        **kwargs,
    )


# Export logger instance for modules logging free-form messages
logger = _logger
