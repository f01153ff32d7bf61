from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from .entity import Action, Entity, Link, Matcher, SubEntity


class SirenResponse:
    """
    A transport response paired with the Siren entity parsed from its body.

    Transport fields (status, headers, url, ...) come from the httpx
    response; everything else is delegated to the entity.
    """

    __slots__ = ("_response", "_entity")

    def __init__(self, response: httpx.Response, entity: Entity):
        self._response = response
        self._entity = entity

    def __repr__(self) -> str:
        return f"<SirenResponse [{self.status}] {self.url} class={self.classes!r}>"

    @property
    def raw(self) -> httpx.Response:
        return self._response

    @property
    def entity(self) -> Entity:
        return self._entity

    def with_rel(self, rel: List[str]) -> "SirenResponse":
        return SirenResponse(self._response, self._entity.with_rel(rel))

    # --- Transport fields ---

    @property
    def url(self) -> str:
        return str(self._response.url)

    @property
    def redirected(self) -> bool:
        return bool(self._response.history)

    @property
    def status(self) -> int:
        return self._response.status_code

    @property
    def ok(self) -> bool:
        return self._response.is_success

    @property
    def status_text(self) -> str:
        return self._response.reason_phrase

    @property
    def headers(self) -> httpx.Headers:
        return self._response.headers

    # --- Entity fields ---

    @property
    def rel(self) -> List[str]:
        return self._entity.rel

    @property
    def title(self) -> Optional[str]:
        return self._entity.title

    @property
    def type(self) -> Optional[str]:
        return self._entity.type

    @property
    def properties(self) -> Optional[Dict[str, Any]]:
        return self._entity.properties

    @property
    def classes(self) -> List[str]:
        return self._entity.classes

    @property
    def actions(self) -> List[Action]:
        return self._entity.actions

    @property
    def links(self) -> List[Link]:
        return self._entity.links

    @property
    def entities(self) -> List[SubEntity]:
        return self._entity.entities

    # --- Entity queries ---

    def has_class(self, cls: Matcher) -> bool:
        return self._entity.has_class(cls)

    def has_property(self, name: str) -> bool:
        return self._entity.has_property(name)

    def has_action_by_name(self, name: Matcher) -> bool:
        return self._entity.has_action_by_name(name)

    def has_action(self, name: Matcher) -> bool:
        return self._entity.has_action(name)

    def has_action_by_class(self, cls: Matcher) -> bool:
        return self._entity.has_action_by_class(cls)

    def has_entity_by_rel(self, rel: Matcher) -> bool:
        return self._entity.has_entity_by_rel(rel)

    def has_entity_by_class(self, cls: Matcher) -> bool:
        return self._entity.has_entity_by_class(cls)

    def has_entity_by_type(self, media_type: Matcher) -> bool:
        return self._entity.has_entity_by_type(media_type)

    def has_link_by_rel(self, rel: Matcher) -> bool:
        return self._entity.has_link_by_rel(rel)

    def has_link_by_class(self, cls: Matcher) -> bool:
        return self._entity.has_link_by_class(cls)

    def has_link_by_type(self, media_type: Matcher) -> bool:
        return self._entity.has_link_by_type(media_type)

    def get_action_by_name(self, name: Matcher) -> Optional[Action]:
        return self._entity.get_action_by_name(name)

    def get_action(self, name: Matcher) -> Optional[Action]:
        return self._entity.get_action(name)

    def get_action_by_class(self, cls: Matcher) -> Optional[Action]:
        return self._entity.get_action_by_class(cls)

    def get_actions_by_class(self, cls: Matcher) -> List[Action]:
        return self._entity.get_actions_by_class(cls)

    def get_link_by_rel(self, rel: Matcher) -> Optional[Link]:
        return self._entity.get_link_by_rel(rel)

    def get_link(self, rel: Matcher) -> Optional[Link]:
        return self._entity.get_link(rel)

    def get_link_by_class(self, cls: Matcher) -> Optional[Link]:
        return self._entity.get_link_by_class(cls)

    def get_link_by_type(self, media_type: Matcher) -> Optional[Link]:
        return self._entity.get_link_by_type(media_type)

    def get_links_by_rel(self, rel: Matcher) -> List[Link]:
        return self._entity.get_links_by_rel(rel)

    def get_links(self, rel: Matcher) -> List[Link]:
        return self._entity.get_links(rel)

    def get_links_by_class(self, cls: Matcher) -> List[Link]:
        return self._entity.get_links_by_class(cls)

    def get_links_by_type(self, media_type: Matcher) -> List[Link]:
        return self._entity.get_links_by_type(media_type)

    def get_sub_entity_by_rel(self, rel: Matcher) -> Optional[SubEntity]:
        return self._entity.get_sub_entity_by_rel(rel)

    def get_sub_entity(self, rel: Matcher) -> Optional[SubEntity]:
        return self._entity.get_sub_entity(rel)

    def get_sub_entity_by_class(self, cls: Matcher) -> Optional[SubEntity]:
        return self._entity.get_sub_entity_by_class(cls)

    def get_sub_entity_by_type(self, media_type: Matcher) -> Optional[SubEntity]:
        return self._entity.get_sub_entity_by_type(media_type)

    def get_sub_entities_by_rel(self, rel: Matcher) -> List[SubEntity]:
        return self._entity.get_sub_entities_by_rel(rel)

    def get_sub_entities(self, rel: Matcher) -> List[SubEntity]:
        return self._entity.get_sub_entities(rel)

    def get_sub_entities_by_class(self, cls: Matcher) -> List[SubEntity]:
        return self._entity.get_sub_entities_by_class(cls)

    def get_sub_entities_by_type(self, media_type: Matcher) -> List[SubEntity]:
        return self._entity.get_sub_entities_by_type(media_type)


__all__ = ["SirenResponse"]
