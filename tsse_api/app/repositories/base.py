"""
Storage capabilities required by the service layer.
"""

from typing import List, Optional, Protocol, TypeVar

EntityT = TypeVar("EntityT")


class Repository(Protocol[EntityT]):
    """
    Protocol for entity storage.

    ``save`` assigns a fresh id when the entity's id is 0 and otherwise
    writes the row with that id, inserting it if it does not exist.
    ``delete_by_id`` is idempotent.
    """

    def find_by_id(self, entity_id: int) -> Optional[EntityT]: ...

    def find_all(self) -> List[EntityT]: ...

    def save(self, entity: EntityT) -> EntityT: ...

    def delete_by_id(self, entity_id: int) -> None: ...
