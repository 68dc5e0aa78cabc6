from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import TagType


@dataclass(frozen=True)
class SearchTag:
    """One parsed filter criterion from the search box.

    Invalid tags (keywords matching no record) are kept and shown, but add no
    filtering constraint.
    """

    value: str
    display_value: str
    type: TagType
    is_valid: bool

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "display_value": self.display_value,
            "type": self.type.value,
            "is_valid": self.is_valid,
        }
