"""Admin-ajax context value object."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AjaxContext:
    """Endpoint and security token supplied by the page environment."""

    ajax_url: str
    nonce: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate endpoint."""
        if not self.ajax_url:
            raise ValueError("ajax_url is required")

    @property
    def has_nonce(self) -> bool:
        """Whether an auth token is available."""
        return bool(self.nonce)
