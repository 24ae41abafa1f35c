from hospital.repositories.base import QueryShaper, Repository
from hospital.repositories.generic import GenericRepository, get_repository

__all__ = [
    "QueryShaper",
    "Repository",
    "GenericRepository",
    "get_repository",
]
