"""
Item Use Cases - Application Layer

Create, read, list and delete items through the item repository.
"""

from typing import List, Optional
from uuid import UUID

from src.domain.entities.errors import ItemNotFoundError
from src.domain.entities.item import Item
from src.domain.repositories.item_repository import IItemRepository
from src.shared import get_logger

from ..dtos.item_dto import ItemCreateDTO, ItemResponseDTO

logger = get_logger(__name__)


def _to_response_dto(item: Item) -> ItemResponseDTO:
    return ItemResponseDTO(
        id=item.id,
        name=item.name,
        description=item.description,
        attributes=item.attributes,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


class CreateItemUseCase:
    """Use case for creating an item."""

    def __init__(self, item_repository: IItemRepository):
        self.item_repository = item_repository

    async def execute(self, item_dto: ItemCreateDTO) -> ItemResponseDTO:
        """
        Create a new item with a generated identifier.

        Raises:
            ItemValidationError: If the item fails domain validation
            ItemOperationError: If the repository rejects the item
        """
        item = Item(
            name=item_dto.name,
            description=item_dto.description,
            attributes=dict(item_dto.attributes),
        )
        item.validate()

        created = await self.item_repository.create(item)
        logger.info("item.created", item_id=str(created.id))
        return _to_response_dto(created)


class GetItemsUseCase:
    """Use case for listing items."""

    def __init__(self, item_repository: IItemRepository):
        self.item_repository = item_repository

    async def execute(
        self, skip: int = 0, limit: int = 100, name: Optional[str] = None
    ) -> List[ItemResponseDTO]:
        items = await self.item_repository.find_all(skip=skip, limit=limit, name=name)
        return [_to_response_dto(item) for item in items]


class GetItemByIdUseCase:
    """Use case for retrieving a single item."""

    def __init__(self, item_repository: IItemRepository):
        self.item_repository = item_repository

    async def execute(self, item_id: UUID) -> ItemResponseDTO:
        item = await self.item_repository.find_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(str(item_id))
        return _to_response_dto(item)


class DeleteItemUseCase:
    """Use case for deleting an item."""

    def __init__(self, item_repository: IItemRepository):
        self.item_repository = item_repository

    async def execute(self, item_id: UUID) -> None:
        deleted = await self.item_repository.delete(item_id)
        if not deleted:
            raise ItemNotFoundError(str(item_id))
        logger.info("item.deleted", item_id=str(item_id))
