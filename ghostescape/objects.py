"""Base node of the scene tree."""

from __future__ import annotations

from typing import Any, List

from .defs import ObjectType
from .game import Game


class Object:
    """A node with children that are updated, drawn and cleaned with it."""

    def __init__(self) -> None:
        self.object_type = ObjectType.NONE
        self.children: List["Object"] = []
        self._to_add: List["Object"] = []
        self.is_active = True
        self.need_remove = False

    @property
    def game(self) -> Game:
        return Game.instance()

    def init(self) -> None:
        """Set the object up; called once after construction."""

    def handle_events(self, event: Any) -> bool:
        """Pass ``event`` to active children; True once one consumes it."""
        return self._handle_list(self.children, event)

    def update(self, dt: float) -> None:
        """Adopt pending children, drop removed ones and update the rest."""
        pending, self._to_add = self._to_add, []
        for child in pending:
            self.add_child(child)
        self._update_list(self.children, dt)

    def render(self) -> None:
        """Draw active children."""
        self._render_list(self.children)

    def clean(self) -> None:
        """Clean and drop every child."""
        self._clean_list(self.children)

    def safe_add_child(self, child: "Object") -> None:
        """Queue ``child`` to be added at the next update."""
        self._to_add.append(child)

    def add_child(self, child: "Object") -> None:
        self.children.append(child)

    def remove_child(self, child: "Object") -> None:
        """Take ``child`` out of the tree without cleaning it."""
        self.children[:] = [c for c in self.children if c is not child]

    @staticmethod
    def _handle_list(children: List[Any], event: Any) -> bool:
        return any(child.handle_events(event) for child in list(children) if child.is_active)

    @staticmethod
    def _update_list(children: List[Any], dt: float) -> None:
        for child in list(children):
            if child.need_remove:
                children[:] = [c for c in children if c is not child]
                child.clean()
            elif child.is_active:
                child.update(dt)

    @staticmethod
    def _render_list(children: List[Any]) -> None:
        for child in children:
            if child.is_active:
                child.render()

    @staticmethod
    def _clean_list(children: List[Any]) -> None:
        for child in children:
            child.clean()
        children.clear()