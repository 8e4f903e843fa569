"""Design routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, Query, Request, UploadFile, status

from gallery.application.usecase.common import DesignItem
from gallery.application.usecase.design import (
    GetDesignRequest,
    GetDesignUseCase,
    GetTopDesignsRequest,
    GetTopDesignsResponse,
    GetTopDesignsUseCase,
    ListDesignsRequest,
    ListDesignsResponse,
    ListDesignsUseCase,
    SubmitDesignRequest,
    SubmitDesignUseCase,
)
from gallery.config import AuthSettings
from gallery.domain.service import JWTService
from gallery.interface.api.session import current_principal

router = APIRouter(prefix="/designs", tags=["designs"], route_class=DishkaRoute)


@router.get("", response_model=ListDesignsResponse)
async def list_designs(
    request: Request,
    list_designs_use_case: FromDishka[ListDesignsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> ListDesignsResponse:
    """List every design, newest first, with the current leaderboard.

    Authenticated callers also get their own reaction on each design.
    """
    principal = current_principal(request, jwt_service, auth_settings)
    return await list_designs_use_case.execute(
        ListDesignsRequest(user_id=str(principal.id) if principal else None)
    )


@router.get("/top", response_model=GetTopDesignsResponse)
async def get_top_designs(
    get_top_designs_use_case: FromDishka[GetTopDesignsUseCase],
    n: int | None = Query(default=None, ge=0, le=50),
) -> GetTopDesignsResponse:
    """Highest-scoring designs.

    Args:
        n: How many designs to return (defaults to the configured size)
    """
    return await get_top_designs_use_case.execute(GetTopDesignsRequest(n=n))


@router.get("/{design_id}", response_model=DesignItem)
async def get_design(
    design_id: UUID,
    request: Request,
    get_design_use_case: FromDishka[GetDesignUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> DesignItem:
    """Get a single design.

    Raises:
        NotFoundError: If the design does not exist (404)
    """
    principal = current_principal(request, jwt_service, auth_settings)
    return await get_design_use_case.execute(
        GetDesignRequest(
            design_id=str(design_id),
            user_id=str(principal.id) if principal else None,
        )
    )


@router.post("", response_model=DesignItem, status_code=status.HTTP_201_CREATED)
async def submit_design(
    request: Request,
    submit_design_use_case: FromDishka[SubmitDesignUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    title: str = Form(max_length=200),
    image: UploadFile = File(),
) -> DesignItem:
    """Upload an image and add it to the gallery.

    Requires authentication. The new design starts with a score of 0.

    Raises:
        UnauthenticatedError: If not signed in (401)
        ValidationError: If the title is blank (422)
        UploadFailedError: If the image host rejects the upload (502)
    """
    principal = current_principal(request, jwt_service, auth_settings)
    data = await image.read()
    return await submit_design_use_case.execute(
        SubmitDesignRequest(
            title=title,
            image=data,
            filename=image.filename,
            principal=principal,
        )
    )
