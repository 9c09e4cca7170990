from typing import Literal

from pydantic import Field, field_validator

from legends.core.constants import Attribute

from .base_item import BaseItem


class Potion(BaseItem):
    """
    Represents a single-use potion raising one or more hero attributes.
    """

    kind: Literal["potion"] = "potion"
    attribute_increase: float = Field(
        ge=0,
        description="The amount added to each affected attribute.",
    )
    affected_attributes: frozenset[Attribute] = Field(
        min_length=1,
        description="The attributes raised by the potion.",
    )

    @field_validator("affected_attributes", mode="before")
    @classmethod
    def _parse_attributes(cls, value):
        # Data files list attributes by name, e.g. "Health/Mana".
        if isinstance(value, str):
            value = [part for part in value.split("/") if part]
        return frozenset(
            Attribute[v.upper()] if isinstance(v, str) else v for v in value
        )

    def affects(self, attribute: Attribute) -> bool:
        """Returns True if the potion raises the given attribute."""
        return attribute in self.affected_attributes

    def describe(self) -> str:
        names = "/".join(
            a.display_name for a in sorted(self.affected_attributes, key=lambda a: a.value)
        )
        return f"+{self.attribute_increase:.0f} {names}"
