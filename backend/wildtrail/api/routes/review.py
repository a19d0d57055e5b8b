"""Review endpoint - LLM write-up of a finished run."""

from fastapi import APIRouter, Depends, HTTPException

from wildtrail.api.deps import get_review_service
from wildtrail.core.errors import UpstreamUnavailable
from wildtrail.schemas.review import ReviewRequest, ReviewResponse
from wildtrail.services.review_service import MissingApiKey, ReviewService

router = APIRouter()


@router.post("/generate-review", response_model=ReviewResponse, response_model_exclude_none=True)
async def generate_review(req: ReviewRequest, reviews: ReviewService = Depends(get_review_service)):
    """Generate a review for the submitted journey log and gallery."""
    try:
        review = await reviews.generate_review(req)
    except MissingApiKey as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    except UpstreamUnavailable as exc:
        raise HTTPException(status_code=502, detail=f"Failed to generate review: {exc}")
    return ReviewResponse(success=True, review=review)
