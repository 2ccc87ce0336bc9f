"""Page generation router."""

from fastapi import APIRouter, Depends
import structlog

from ..dependencies import get_generation_service
from ..generation import GenerationService
from ..schemas import GeneratePageRequest, GeneratePageResponse

logger = structlog.get_logger()

router = APIRouter(tags=["generation"])


@router.post("/generate-page", response_model=GeneratePageResponse)
async def generate_page(
    request_in: GeneratePageRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GeneratePageResponse:
    """Generate a page for a new project, or refine an existing one.

    Creates the project when ``projectId`` is omitted and records the prompt
    in the project's history either way.
    """
    result = await service.generate(
        user_id=request_in.user_id,
        prompt=request_in.prompt,
        project_id=request_in.project_id,
        project_name=request_in.project_name,
    )
    return GeneratePageResponse(project_id=result.project_id, html=result.html, react=result.react)
