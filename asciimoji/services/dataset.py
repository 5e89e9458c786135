"""Read-only keyword to text lookup table."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

from asciimoji.domain.models import Entry
from asciimoji.logging import logger
from asciimoji.services.exceptions import DatasetError, LookupFailure

BUNDLED_DATASET_PATH = Path(__file__).resolve().parent.parent / "data" / "asciimoji.json"


class DatasetProvider:
    """Static lookup table built once from an insertion-ordered mapping."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        self._table: Mapping[str, str] = MappingProxyType(dict(mapping))
        self._keywords: tuple[str, ...] = tuple(self._table)

    @classmethod
    def from_json(cls, path: str | Path) -> DatasetProvider:
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as fp:
                payload = json.load(fp)
        except FileNotFoundError as exc:
            raise DatasetError(f"Dataset file not found: {path}") from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise DatasetError(f"Could not read dataset {path}: {exc}") from exc

        if not isinstance(payload, dict):
            raise DatasetError(f"Dataset {path} must be a JSON object")
        for keyword, text in payload.items():
            if not isinstance(text, str):
                raise DatasetError(f"Dataset {path}: value for {keyword!r} is not a string")

        mixed_case = [keyword for keyword in payload if keyword != keyword.lower()]
        if mixed_case:
            logger.warning("dataset_mixed_case_keywords", path=str(path), keywords=mixed_case[:10])

        provider = cls(payload)
        logger.info("dataset_loaded", path=str(path), entries=len(provider))
        return provider

    def all_keywords(self) -> tuple[str, ...]:
        return self._keywords

    def render(self, keyword: str) -> str:
        try:
            return self._table[keyword]
        except KeyError as exc:
            raise LookupFailure(keyword) from exc

    def entries(self) -> Iterator[Entry]:
        for keyword, text in self._table.items():
            yield Entry(keyword=keyword, rendered_text=text)

    def __len__(self) -> int:
        return len(self._keywords)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._table


def load_dataset(path: str | Path | None = None) -> DatasetProvider:
    """Load ``path`` or, when it is ``None``, the bundled dataset."""

    return DatasetProvider.from_json(path or BUNDLED_DATASET_PATH)


__all__ = ["BUNDLED_DATASET_PATH", "DatasetProvider", "load_dataset"]
