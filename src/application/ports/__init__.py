"""Application ports package."""

from .database import DatabaseEnginePort
from .debt_repository import DebtRepositoryPort
from .text_generation import TextGenerationPort

__all__ = [
    "DatabaseEnginePort",
    "DebtRepositoryPort",
    "TextGenerationPort",
]
