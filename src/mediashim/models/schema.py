"""Field schema model."""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from .stream import StreamKind


class FieldSchema(BaseModel):
    """Queryable fields per stream kind, as reported by the library.

    Built once per session from the library's field catalog and never
    modified afterwards. Field order inside each section is the catalog
    order, which drives the order of keys in every stream record.
    """

    model_config = ConfigDict(frozen=True)

    sections: dict[StreamKind, dict[str, str]] = Field(default_factory=dict)

    def fields(self, kind: StreamKind) -> Mapping[str, str]:
        """Return a read-only field name -> description view for a stream kind."""
        return MappingProxyType(self.sections.get(kind, {}))

    def __contains__(self, kind: object) -> bool:
        return kind in self.sections

    def __len__(self) -> int:
        return sum(len(fields) for fields in self.sections.values())
