"""
Use Cases Package - Application Layer

Use cases orchestrate the flow of data between the presentation layer,
the domain entities and the repositories/services behind them.
"""

from .health_use_cases import GetApplicationInfoUseCase, GetHealthReportUseCase
from .item_use_cases import (
    CreateItemUseCase,
    DeleteItemUseCase,
    GetItemByIdUseCase,
    GetItemsUseCase,
)

__all__ = [
    "GetHealthReportUseCase",
    "GetApplicationInfoUseCase",
    "CreateItemUseCase",
    "GetItemsUseCase",
    "GetItemByIdUseCase",
    "DeleteItemUseCase",
]
