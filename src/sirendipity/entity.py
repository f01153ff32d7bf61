"""
Siren document model.

Entities are parsed once from the response body and then only queried;
every model is frozen. String lookups accept either an exact value or a
compiled regular expression (matched with ``search``).
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Pattern, Union

from pydantic import BaseModel, ConfigDict, Field as ModelField, field_validator

FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"

Matcher = Union[str, Pattern[str]]


def _matches(value: Optional[str], matcher: Matcher) -> bool:
    if value is None:
        return False
    if isinstance(matcher, re.Pattern):
        return matcher.search(value) is not None
    return value == matcher


def _any_match(values: List[str], matcher: Matcher) -> bool:
    return any(_matches(v, matcher) for v in values)


class SirenModel(BaseModel):
    classes: List[str] = ModelField(default_factory=list, alias="class")
    title: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    def has_class(self, cls: Matcher) -> bool:
        return _any_match(self.classes, cls)


class Field(SirenModel):
    name: str
    type: str = "text"
    value: Any = None

    @property
    def has_value(self) -> bool:
        """True when the document carries a value key, even a null one."""
        return "value" in self.model_fields_set


class Action(SirenModel):
    name: str
    href: str
    method: str = "GET"
    type: str = FORM_MEDIA_TYPE
    fields: List[Field] = ModelField(default_factory=list)

    @field_validator("method", mode="before")
    @classmethod
    def upper_method(cls, v: Any) -> Any:
        if v is None:
            return "GET"
        return v.upper() if isinstance(v, str) else v

    @field_validator("type", mode="before")
    @classmethod
    def default_type(cls, v: Any) -> Any:
        return FORM_MEDIA_TYPE if v is None else v

    def has_field_by_name(self, name: Matcher) -> bool:
        return self.get_field_by_name(name) is not None

    def get_field_by_name(self, name: Matcher) -> Optional[Field]:
        return next((f for f in self.fields if _matches(f.name, name)), None)


class Link(SirenModel):
    rel: List[str]
    href: str
    type: Optional[str] = None


class Entity(SirenModel):
    rel: List[str] = ModelField(default_factory=list)
    type: Optional[str] = None
    properties: Optional[Dict[str, Any]] = None
    actions: List[Action] = ModelField(default_factory=list)
    links: List[Link] = ModelField(default_factory=list)
    entities: List["SubEntity"] = ModelField(default_factory=list)

    @classmethod
    def parse(cls, payload: Any) -> "Entity":
        """Validate a decoded JSON document; raises pydantic.ValidationError."""
        return cls.model_validate(payload)

    @classmethod
    def empty(cls) -> "Entity":
        """Entity with no properties, links, actions or sub-entities."""
        return cls()

    def with_rel(self, rel: List[str]) -> "Entity":
        return self.model_copy(update={"rel": list(rel)})

    def has_property(self, name: str) -> bool:
        return self.properties is not None and name in self.properties

    # --- Actions ---

    def has_action_by_name(self, name: Matcher) -> bool:
        return self.get_action_by_name(name) is not None

    has_action = has_action_by_name

    def has_action_by_class(self, cls: Matcher) -> bool:
        return self.get_action_by_class(cls) is not None

    def get_action_by_name(self, name: Matcher) -> Optional[Action]:
        return next((a for a in self.actions if _matches(a.name, name)), None)

    get_action = get_action_by_name

    def get_action_by_class(self, cls: Matcher) -> Optional[Action]:
        return next(iter(self.get_actions_by_class(cls)), None)

    def get_actions_by_class(self, cls: Matcher) -> List[Action]:
        return [a for a in self.actions if a.has_class(cls)]

    # --- Links ---

    def has_link_by_rel(self, rel: Matcher) -> bool:
        return bool(self.get_links_by_rel(rel))

    def has_link_by_class(self, cls: Matcher) -> bool:
        return bool(self.get_links_by_class(cls))

    def has_link_by_type(self, media_type: Matcher) -> bool:
        return bool(self.get_links_by_type(media_type))

    def get_link_by_rel(self, rel: Matcher) -> Optional[Link]:
        return next(iter(self.get_links_by_rel(rel)), None)

    get_link = get_link_by_rel

    def get_link_by_class(self, cls: Matcher) -> Optional[Link]:
        return next(iter(self.get_links_by_class(cls)), None)

    def get_link_by_type(self, media_type: Matcher) -> Optional[Link]:
        return next(iter(self.get_links_by_type(media_type)), None)

    def get_links_by_rel(self, rel: Matcher) -> List[Link]:
        return [link for link in self.links if _any_match(link.rel, rel)]

    get_links = get_links_by_rel

    def get_links_by_class(self, cls: Matcher) -> List[Link]:
        return [link for link in self.links if link.has_class(cls)]

    def get_links_by_type(self, media_type: Matcher) -> List[Link]:
        return [link for link in self.links if _matches(link.type, media_type)]

    # --- Sub-entities ---

    def has_entity_by_rel(self, rel: Matcher) -> bool:
        return bool(self.get_sub_entities_by_rel(rel))

    def has_entity_by_class(self, cls: Matcher) -> bool:
        return bool(self.get_sub_entities_by_class(cls))

    def has_entity_by_type(self, media_type: Matcher) -> bool:
        return bool(self.get_sub_entities_by_type(media_type))

    def get_sub_entity_by_rel(self, rel: Matcher) -> Optional["SubEntity"]:
        return next(iter(self.get_sub_entities_by_rel(rel)), None)

    get_sub_entity = get_sub_entity_by_rel

    def get_sub_entity_by_class(self, cls: Matcher) -> Optional["SubEntity"]:
        return next(iter(self.get_sub_entities_by_class(cls)), None)

    def get_sub_entity_by_type(self, media_type: Matcher) -> Optional["SubEntity"]:
        return next(iter(self.get_sub_entities_by_type(media_type)), None)

    def get_sub_entities_by_rel(self, rel: Matcher) -> List["SubEntity"]:
        return [e for e in self.entities if _any_match(e.rel, rel)]

    get_sub_entities = get_sub_entities_by_rel

    def get_sub_entities_by_class(self, cls: Matcher) -> List["SubEntity"]:
        return [e for e in self.entities if e.has_class(cls)]

    def get_sub_entities_by_type(self, media_type: Matcher) -> List["SubEntity"]:
        return [e for e in self.entities if _matches(e.type, media_type)]


class SubEntity(Entity):
    """
    Entity nested in another entity's ``entities`` list.
    Without ``href`` it is an embedded representation; with one it is a
    link that has to be fetched.
    """

    rel: List[str]
    href: Optional[str] = None

    @property
    def is_linked(self) -> bool:
        return self.href is not None


Entity.model_rebuild()
SubEntity.model_rebuild()


__all__ = ["Action", "Entity", "Field", "Link", "Matcher", "SubEntity"]
