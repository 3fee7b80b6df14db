"""Photo endpoints."""

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from portfolio_cms.api.deps import require_admin
from portfolio_cms.api.models import CreatePhotoRequest, UpdatePhotoRequest
from portfolio_cms.api.serializers import serialize_photo
from portfolio_cms.services.photos import MAX_PAGE_SIZE

if TYPE_CHECKING:
    from portfolio_cms.containers import AppContainer

router = APIRouter(prefix="/api/photos", tags=["photos"])


@router.get("")
def list_photos(
    request: Request,
    category_id: int | None = None,
    limit: int = Query(default=20, ge=1, le=MAX_PAGE_SIZE),
    page: int = Query(default=1, ge=1),
) -> list[dict[str, object]]:
    """Return a page of photos, newest first."""
    container: AppContainer = request.app.state.container
    photos = container.photo_service.list_photos(
        category_id=category_id, limit=limit, page=page
    )
    return [serialize_photo(photo) for photo in photos]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_photo(payload: CreatePhotoRequest, request: Request) -> dict[str, object]:
    """Create a photo together with its tags."""
    container: AppContainer = request.app.state.container
    photo_id = container.photo_service.create_photo(
        title=payload.title,
        category_id=payload.category_id,
        file_url=payload.file_url,
        thumbnail_url=payload.thumbnail_url,
        description=payload.description,
        width=payload.width,
        height=payload.height,
        tags=payload.tags,
    )
    return {"message": "Photo created successfully", "photoId": photo_id}


@router.get("/{photo_id}")
def get_photo(photo_id: int, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return serialize_photo(container.photo_service.get_photo(photo_id))


@router.put("/{photo_id}", dependencies=[Depends(require_admin)])
def update_photo(
    photo_id: int, payload: UpdatePhotoRequest, request: Request
) -> dict[str, str]:
    """Update the fields present in the body; tags replace the existing set."""
    container: AppContainer = request.app.state.container
    changes = payload.model_dump(exclude_unset=True)
    tags = changes.pop("tags", None)
    container.photo_service.update_photo(photo_id, changes, tags)
    return {"message": "Photo updated successfully"}


@router.delete("/{photo_id}", dependencies=[Depends(require_admin)])
def delete_photo(photo_id: int, request: Request) -> dict[str, str]:
    container: AppContainer = request.app.state.container
    container.photo_service.delete_photo(photo_id)
    return {"message": "Photo deleted successfully"}
