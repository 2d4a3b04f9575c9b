"""Storage query-language filters for related-record lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class CqlQuery:
    """Equality over an OR'd id list, OR'd again across ``fields``.

    ``CqlQuery(("a", "b"), ("1", "2"))`` renders as
    ``a==(1 or 2) or b==(1 or 2)``.
    """

    fields: tuple[str, ...]
    values: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.fields:
            raise ValueError("A query needs at least one field")
        if not self.values:
            raise ValueError("A query needs at least one value")

    def __str__(self) -> str:
        value_list = " or ".join(self.values)
        return " or ".join(f"{field}==({value_list})" for field in self.fields)


def related_records_query(fields: Iterable[str], instance_ids: Iterable[str]) -> CqlQuery:
    """Match records whose either direction field references any of ``instance_ids``."""

    distinct_ids = tuple(dict.fromkeys(instance_ids))
    return CqlQuery(fields=tuple(fields), values=distinct_ids)
