"""Pydantic models shared across the search and presentation layers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Entry(BaseModel):
    """A keyword and the text it renders to."""

    model_config = ConfigDict(frozen=True)

    keyword: str
    rendered_text: str


class SearchState(BaseModel):
    """Snapshot published by the search controller.

    Instances are frozen and replaced wholesale on every update, so
    observers can hold on to them without copying.
    """

    model_config = ConfigDict(frozen=True)

    results: tuple[Entry, ...] = ()
    is_loading: bool = True

    def loading(self) -> SearchState:
        return self.model_copy(update={"is_loading": True})

    def ready(self, results: tuple[Entry, ...] | None = None) -> SearchState:
        update: dict = {"is_loading": False}
        if results is not None:
            update["results"] = results
        return self.model_copy(update=update)


__all__ = ["Entry", "SearchState"]
