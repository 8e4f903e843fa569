"""Submit design use case."""

import logfire
from pydantic import BaseModel

from gallery.adapter.imagehost import ImageHostClient
from gallery.application.usecase.base import BaseUseCase
from gallery.application.usecase.common import (
    DesignItem,
    publish_snapshot,
    require_principal,
)
from gallery.domain.error import ValidationError
from gallery.domain.repository import UnitOfWork
from gallery.domain.service import DesignService, GalleryFeed
from gallery.domain.value import Principal


class SubmitDesignRequest(BaseModel):
    """Submit design request."""

    title: str
    image: bytes
    filename: str | None = None
    principal: Principal | None = None  # Authenticated submitter


class SubmitDesignUseCase(BaseUseCase):
    """Use case for uploading an image and adding it to the gallery."""

    def __init__(
        self,
        design_service: DesignService,
        image_host: ImageHostClient,
        feed: GalleryFeed,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize submit design use case.

        Args:
            design_service: Design domain service
            image_host: Image host client
            feed: Gallery snapshot feed
            unit_of_work: Commits changes before a snapshot is published
        """
        self.design_service = design_service
        self.image_host = image_host
        self.feed = feed
        self.unit_of_work = unit_of_work

    async def execute(self, request: SubmitDesignRequest) -> DesignItem:
        """Execute submit design flow.

        Steps:
        1. Require an authenticated principal
        2. Reject blank titles before spending an upload
        3. Upload the image to the image host
        4. Create the design with a score of 0
        5. Commit, then publish a fresh gallery snapshot

        Raises:
            UnauthenticatedError: If no principal is present
            ValidationError: If the title or image URL is invalid
            UploadFailedError: If the image host rejects the upload
        """
        principal = require_principal(request.principal, "submit designs")

        if not request.title.strip():
            raise ValidationError("Title must not be blank")

        with logfire.span(
            "submit_design.execute",
            owner_id=str(principal.id),
            size=len(request.image),
        ):
            image_url = await self.image_host.upload(request.image, request.filename)
            design = await self.design_service.submit_design(
                principal, request.title, image_url
            )

            await publish_snapshot(self.feed, self.design_service, self.unit_of_work)

            return DesignItem.from_design(design)
