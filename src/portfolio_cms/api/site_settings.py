"""Site settings endpoints."""

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from portfolio_cms.api.deps import require_admin
from portfolio_cms.api.models import SiteSettingsRequest
from portfolio_cms.api.serializers import serialize_settings

if TYPE_CHECKING:
    from portfolio_cms.containers import AppContainer

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("")
def get_settings(request: Request) -> dict[str, object]:
    """Return the stored settings, or the defaults before the first save."""
    container: AppContainer = request.app.state.container
    return serialize_settings(container.settings_service.get_settings())


@router.put("", dependencies=[Depends(require_admin)])
def update_settings(
    payload: SiteSettingsRequest, request: Request
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    settings = container.settings_service.update_settings(
        payload.model_dump(exclude_unset=True)
    )
    return {
        "message": "Settings updated successfully",
        "settings": serialize_settings(settings),
    }
