"""Category endpoints."""

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from portfolio_cms.api.deps import require_admin
from portfolio_cms.api.models import CategoryRequest
from portfolio_cms.api.serializers import serialize_category

if TYPE_CHECKING:
    from portfolio_cms.containers import AppContainer

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("")
def list_categories(request: Request) -> list[dict[str, object]]:
    """Return all categories ordered by name."""
    container: AppContainer = request.app.state.container
    return [
        serialize_category(category)
        for category in container.category_service.list_categories()
    ]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_category(payload: CategoryRequest, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    category_id = container.category_service.create_category(
        payload.name, payload.description
    )
    return {"message": "Category created successfully", "categoryId": category_id}


@router.get("/{category_id}")
def get_category(category_id: int, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return serialize_category(container.category_service.get_category(category_id))


@router.put("/{category_id}", dependencies=[Depends(require_admin)])
def update_category(
    category_id: int, payload: CategoryRequest, request: Request
) -> dict[str, str]:
    container: AppContainer = request.app.state.container
    container.category_service.update_category(
        category_id, payload.name, payload.description
    )
    return {"message": "Category updated successfully"}


@router.delete("/{category_id}", dependencies=[Depends(require_admin)])
def delete_category(category_id: int, request: Request) -> dict[str, str]:
    """Delete a category that no photo references."""
    container: AppContainer = request.app.state.container
    container.category_service.delete_category(category_id)
    return {"message": "Category deleted successfully"}
