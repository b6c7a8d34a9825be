"""
Record types handed to the host.

Every record is a frozen pydantic model with an explicit ``to_host()``
serializer producing the exact mapping the host registration functions
expect. Field names and nesting are part of the host contract.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Every host rule grammar uses equality only
EQUALS = "=="


# =============================================================================
# Rules
# =============================================================================


class ConditionalRule(BaseModel):
    """
    Show a control only when another control holds an expected value.

    Example:
        ConditionalRule(field="field_show_cta", value=1)
    """

    field: str = Field(description="Key of the control this rule depends on")
    operator: str = EQUALS
    value: Any = None

    model_config = ConfigDict(frozen=True)

    def to_host(self) -> list[list[dict[str, Any]]]:
        """Wrap the clause as one OR group holding one AND clause."""
        return [[{"field": self.field, "operator": self.operator, "value": self.value}]]


class LocationClause(BaseModel):
    """One clause of a field group location rule."""

    param: str = "block"
    operator: str = EQUALS
    value: str

    model_config = ConfigDict(frozen=True)

    def to_host(self) -> dict[str, str]:
        return {"param": self.param, "operator": self.operator, "value": self.value}


class LocationRule(BaseModel):
    """
    Where a field group is shown, as OR groups of AND clauses.

    Modules always bind to exactly one block, so the rule holds a single
    group with a single clause.
    """

    groups: tuple[tuple[LocationClause, ...], ...]

    model_config = ConfigDict(frozen=True)

    @classmethod
    def for_block(cls, block_id: str) -> LocationRule:
        """Build the rule binding a field group to one block identifier."""
        return cls(groups=((LocationClause(value=block_id),),))

    @property
    def block_id(self) -> str:
        """Value of the first clause of the first group."""
        return self.groups[0][0].value

    def to_host(self) -> list[list[dict[str, str]]]:
        return [[clause.to_host() for clause in group] for group in self.groups]


# =============================================================================
# Categories
# =============================================================================


class Category(BaseModel):
    """A block picker category."""

    slug: str
    title: str

    model_config = ConfigDict(frozen=True)

    def to_host(self) -> dict[str, str]:
        return {"slug": self.slug, "title": self.title}


# =============================================================================
# Registration records
# =============================================================================


class BlockRecord(BaseModel):
    """
    Block registration payload.

    Example:
        BlockRecord(
            name="group_hero-banner",
            title="Hero Banner",
            render_callback=builder.render_block,
            category="layout",
        )
    """

    name: str
    title: str
    render_callback: Callable[..., Any]
    category: str
    description: str | None = None
    mode: str = "edit"

    model_config = ConfigDict(frozen=True)

    def to_host(self) -> dict[str, Any]:
        record: dict[str, Any] = {"name": self.name, "title": self.title}
        if self.description is not None:
            record["description"] = self.description
        record["render_callback"] = self.render_callback
        record["category"] = self.category
        record["mode"] = self.mode
        return record


class FieldGroupRecord(BaseModel):
    """Field group registration payload."""

    key: str
    title: str
    location: LocationRule
    fields: tuple[dict[str, Any], ...] = ()

    model_config = ConfigDict(frozen=True)

    def to_host(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "title": self.title,
            "location": self.location.to_host(),
            "fields": [copy.deepcopy(field) for field in self.fields],
        }
