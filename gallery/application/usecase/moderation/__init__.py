"""Moderation use cases."""

from .common import TrashItem
from .delete_design import DeleteDesignRequest, DeleteDesignUseCase
from .list_trash import ListTrashRequest, ListTrashResponse, ListTrashUseCase
from .purge_design import PurgeDesignRequest, PurgeDesignResponse, PurgeDesignUseCase
from .restore_design import RestoreDesignRequest, RestoreDesignUseCase

__all__ = [
    "DeleteDesignRequest",
    "DeleteDesignUseCase",
    "ListTrashRequest",
    "ListTrashResponse",
    "ListTrashUseCase",
    "PurgeDesignRequest",
    "PurgeDesignResponse",
    "PurgeDesignUseCase",
    "RestoreDesignRequest",
    "RestoreDesignUseCase",
    "TrashItem",
]
