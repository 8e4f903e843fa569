"""Administrator routes.

Every route requires a signed-in principal on the moderation allow-list.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request

from gallery.application.usecase.common import DesignItem
from gallery.application.usecase.moderation import (
    DeleteDesignRequest,
    DeleteDesignUseCase,
    ListTrashRequest,
    ListTrashResponse,
    ListTrashUseCase,
    PurgeDesignRequest,
    PurgeDesignResponse,
    PurgeDesignUseCase,
    RestoreDesignRequest,
    RestoreDesignUseCase,
    TrashItem,
)
from gallery.config import AuthSettings
from gallery.domain.service import JWTService
from gallery.interface.api.session import current_principal

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.delete("/designs/{design_id}", response_model=TrashItem)
async def delete_design(
    design_id: UUID,
    request: Request,
    delete_design_use_case: FromDishka[DeleteDesignUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> TrashItem:
    """Move a design and its votes to the trash."""
    principal = current_principal(request, jwt_service, auth_settings)
    return await delete_design_use_case.execute(
        DeleteDesignRequest(design_id=str(design_id), principal=principal)
    )


@router.get("/trash", response_model=ListTrashResponse)
async def list_trash(
    request: Request,
    list_trash_use_case: FromDishka[ListTrashUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> ListTrashResponse:
    """List trashed designs, most recently deleted first."""
    principal = current_principal(request, jwt_service, auth_settings)
    return await list_trash_use_case.execute(ListTrashRequest(principal=principal))


@router.post("/trash/{design_id}/restore", response_model=DesignItem)
async def restore_design(
    design_id: UUID,
    request: Request,
    restore_design_use_case: FromDishka[RestoreDesignUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> DesignItem:
    """Put a trashed design back in the gallery with its votes."""
    principal = current_principal(request, jwt_service, auth_settings)
    return await restore_design_use_case.execute(
        RestoreDesignRequest(design_id=str(design_id), principal=principal)
    )


@router.delete("/trash/{design_id}", response_model=PurgeDesignResponse)
async def purge_design(
    design_id: UUID,
    request: Request,
    purge_design_use_case: FromDishka[PurgeDesignUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    confirm: bool = Query(default=False),
) -> PurgeDesignResponse:
    """Permanently erase a trashed design.

    Requires ``?confirm=true``; without it the request is rejected (409).
    """
    principal = current_principal(request, jwt_service, auth_settings)
    return await purge_design_use_case.execute(
        PurgeDesignRequest(
            design_id=str(design_id), confirm=confirm, principal=principal
        )
    )
