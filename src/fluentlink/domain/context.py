"""ExecutionContext — one frame of ambient resolution state."""

from __future__ import annotations

from pydantic import BaseModel


class ExecutionContext(BaseModel):
    """Ambient state consulted by link and status resolution.

    Attributes:
        locale: Active locale code, or None for non-localised requests.
        is_domain_mode: Whether locales are disambiguated by hostname.
        is_frontend: Frontend (public site) vs admin request.
        active_hostname: Hostname the current request is served on.
    """

    model_config = {"frozen": True}

    locale: str | None = None
    is_domain_mode: bool = False
    is_frontend: bool = False
    active_hostname: str | None = None
