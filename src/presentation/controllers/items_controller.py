"""
Items Router - Presentation Layer

This module defines the FastAPI router for item endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import UUID4

from src.application.dtos.item_dto import ItemCreateDTO, ItemResponseDTO
from src.application.use_cases.item_use_cases import (
    CreateItemUseCase,
    DeleteItemUseCase,
    GetItemByIdUseCase,
    GetItemsUseCase,
)
from src.domain.entities.errors import (
    ItemNotFoundError,
    ItemOperationError,
    ItemValidationError,
)
from src.presentation.dependencies import provide
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/items", tags=["Items"])


@router.get("", response_model=List[ItemResponseDTO])
async def get_items(
    skip: int = Query(0, ge=0, description="Number of items to skip"),
    limit: int = Query(
        100, ge=1, le=1000, description="Maximum number of items to return"
    ),
    name: Optional[str] = Query(None, description="Filter by item name"),
    get_items_use_case: GetItemsUseCase = Depends(provide("get_items_use_case")),
) -> List[ItemResponseDTO]:
    """Get a page of items, oldest first."""
    try:
        return await get_items_use_case.execute(skip=skip, limit=limit, name=name)
    except Exception as e:
        logger.error("Failed to list items", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("/{item_id}", response_model=ItemResponseDTO)
async def get_item_by_id(
    item_id: UUID4,
    get_item_use_case: GetItemByIdUseCase = Depends(
        provide("get_item_by_id_use_case")
    ),
) -> ItemResponseDTO:
    """Get a single item by its ID."""
    try:
        return await get_item_use_case.execute(item_id=item_id)
    except ItemNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except Exception as e:
        logger.error("Failed to retrieve item", item_id=str(item_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post(
    "",
    response_model=ItemResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_item(
    item_dto: ItemCreateDTO,
    create_item_use_case: CreateItemUseCase = Depends(
        provide("create_item_use_case")
    ),
) -> ItemResponseDTO:
    """Create a new item; the response carries its generated ID."""
    try:
        return await create_item_use_case.execute(item_dto=item_dto)
    except ItemValidationError as e:
        logger.error("Failed to create item", error=str(e), details=e.details)
        detail = {"message": e.message, **e.details} if e.details else str(e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )
    except ItemOperationError as e:
        logger.error("Failed to create item", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error("Unexpected error creating item", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: UUID4,
    delete_item_use_case: DeleteItemUseCase = Depends(
        provide("delete_item_use_case")
    ),
) -> None:
    """Delete an item by its ID."""
    try:
        await delete_item_use_case.execute(item_id=item_id)
    except ItemNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ItemOperationError as e:
        logger.error("Failed to delete item", item_id=str(item_id), error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(
            "Unexpected error deleting item", item_id=str(item_id), error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
