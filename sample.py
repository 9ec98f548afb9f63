from fastapi import APIRouter

from schemas import SampleResponse

router = APIRouter()


@router.get("/", response_model=SampleResponse)
async def get_sample_data():
    return SampleResponse(message="This is a sample response")
