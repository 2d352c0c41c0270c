from fastapi import APIRouter, Depends

from src.auth.dependencies import get_current_user
from src.routes.schemas import RouteSearchRequest, RouteSearchResponse
from src.routes.service import RouteService

router = APIRouter()

@router.post("/search", response_model=RouteSearchResponse)
def search_routes(
    request: RouteSearchRequest,
    current_user=Depends(get_current_user)
):
    """Suggest ranked routes between two locations for the caller's preference"""

    route_service = RouteService()
    routes = route_service.generate_routes(
        origin=request.origin,
        destination=request.destination,
        preference=request.preference
    )

    return RouteSearchResponse(routes=routes)
