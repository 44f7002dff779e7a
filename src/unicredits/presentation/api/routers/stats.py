"""Statistics router: credit and GPA progress."""

from fastapi import APIRouter

from unicredits.application.queries.academics import CreditSummaryQuery
from unicredits.presentation.api.dependencies import RepoFactory
from unicredits.presentation.api.schemas.stats import CreditSummaryResponse

router = APIRouter()


@router.get(
    "/summary",
    summary="Credit summary",
    responses={
        200: {"description": "Earned and remaining credits with overall GPA"},
        401: {"description": "Not authenticated"},
    },
)
async def get_summary(factory: RepoFactory) -> CreditSummaryResponse:
    query = CreditSummaryQuery.from_factory(factory)
    summary = await query.execute()
    return CreditSummaryResponse.model_validate(summary)
