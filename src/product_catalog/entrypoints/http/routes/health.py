from fastapi import APIRouter

router = APIRouter(tags=["General"])


@router.get("/health", summary="Liveness probe")
def health() -> dict[str, str]:
    return {"status": "ok"}
