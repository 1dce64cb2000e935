"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .health_dto import (
    ApplicationInfoDTO,
    CheckResultDTO,
    HealthReportDTO,
    format_duration,
)
from .item_dto import ItemCreateDTO, ItemResponseDTO

__all__ = [
    "ApplicationInfoDTO",
    "CheckResultDTO",
    "HealthReportDTO",
    "format_duration",
    "ItemCreateDTO",
    "ItemResponseDTO",
]
