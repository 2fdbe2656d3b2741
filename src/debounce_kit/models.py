"""Pydantic model for debounce options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils.coerce import to_delay, to_flag


class DebounceOptions(BaseModel):
    """
    Immutable configuration of a debounced callable.

    All fields are coerced rather than rejected: non-numeric delays become 0
    and flags take the truthiness of whatever was passed. ``max_wait`` turns
    the ceiling on as soon as it is supplied, even with a junk value.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    wait: float = 0.0
    leading: bool = False
    trailing: bool = True
    max_wait: float | None = Field(default=None, alias="maxWait")

    @field_validator("wait", "max_wait", mode="before")
    @classmethod
    def coerce_delay(cls, v: Any) -> float:
        """Read delays leniently (see ``to_delay``)."""
        return to_delay(v)

    @field_validator("leading", "trailing", mode="before")
    @classmethod
    def coerce_flag(cls, v: Any) -> bool:
        return to_flag(v)

    @property
    def maxing(self) -> bool:
        """Whether a max-wait ceiling was supplied."""
        return "max_wait" in self.model_fields_set

    @property
    def effective_max_wait(self) -> float | None:
        """The ceiling actually enforced; never tighter than ``wait``."""
        if not self.maxing:
            return None
        return max(self.max_wait or 0.0, self.wait)

    @classmethod
    def from_any(cls, options: Any = None, **overrides: Any) -> DebounceOptions:
        """
        Build options from a mapping, an existing model, or anything else.

        Values that are not a mapping or a ``DebounceOptions`` are ignored and
        defaults apply. Keyword overrides win over the options when they are
        not None. A ``wait`` key inside a mapping is ignored; the wait comes
        from the ``wait`` override only.
        """
        if isinstance(options, DebounceOptions):
            data = {name: getattr(options, name) for name in options.model_fields_set}
        elif isinstance(options, Mapping):
            data = {str(key): value for key, value in options.items()}
            data.pop("wait", None)
            if "maxWait" in data:
                data.setdefault("max_wait", data.pop("maxWait"))
        else:
            data = {}

        for key, value in overrides.items():
            if value is not None:
                data[key] = value

        return cls.model_validate(data)
