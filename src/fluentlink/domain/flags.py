"""Status flag names, descriptors, and admin message keys.

Flag descriptors are opaque to the core: it only adds or removes keys.
Human readable text here is the untranslated default.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class StatusFlag(StrEnum):
    """Flag keys the localisation layer reads or writes."""

    MODIFIED = "modified"
    ARCHIVED = "archived"
    INVISIBLE = "invisible"
    NO_SOURCE = "no-source"


class FlagDescriptor(BaseModel):
    """Display payload attached to a status flag."""

    model_config = {"frozen": True}

    text: str = ""
    title: str = ""


INVISIBLE_DESCRIPTOR = FlagDescriptor()

NO_SOURCE_DESCRIPTOR = FlagDescriptor(
    text="No source",
    title="This page exists in a different locale but the content is not inherited",
)


class LocaleStatusMessage(StrEnum):
    """Key of the admin notice explaining a node's state in the current locale."""

    INVISIBLE = "invisible"  # publish required, not published here
    INHERITED = "inherited"  # no draft here, content comes from a fallback
    UNKNOWN = "unknown"  # no draft here and no fallback source
    DRAFT = "draft"  # drafted here, not yet published


class LinkingMode(StrEnum):
    """How a locale entry relates to the locale currently being viewed."""

    CURRENT = "current"
    LINK = "link"
