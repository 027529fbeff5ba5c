"""The bundled example element type for a store.

Any hashable value works as a store element, but a `Record` mirrors the
shape a game engine binding wants: a unique id, a free-form model name and an
opaque attributes payload (typically JSON text).
"""

from dataclasses import dataclass, replace
import uuid as uuid_lib

from mashumaro import DataClassDictMixin

__all__ = [
    "Record",
]


@dataclass(frozen=True)
class Record(DataClassDictMixin):
    """A single stored record.

    Records are immutable values. Equality and hashing cover every field, so
    two records only collide in a store when all three fields match.
    """

    uuid: str
    """Globally unique identifier, a random uuid4 in canonical form."""

    model: str
    """Caller assigned category of the record."""

    attributes: str = ""
    """Caller assigned payload, opaque to the store."""

    @classmethod
    def new(cls, model: str, attributes: str = "") -> "Record":
        """Create a record with a freshly generated uuid."""
        return cls(uuid=str(uuid_lib.uuid4()), model=model, attributes=attributes)

    def with_attributes(self, attributes: str) -> "Record":
        """Return a copy of this record with the attributes replaced."""
        return replace(self, attributes=attributes)
