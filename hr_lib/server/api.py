from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from hr_lib.config.health import get_health
from hr_lib.services.resolver import resolve_optional_service

router = APIRouter()


@router.get('/', response_class=PlainTextResponse)
async def root():
    return "HR Candidate Server is running"


@router.get('/health', response_class=PlainTextResponse)
async def health():
    return "OK"


@router.get('/api/health')
async def api_health(request: Request):
    storage = resolve_optional_service(request, 'candidate_storage')
    store = resolve_optional_service(request, 'candidate_store')
    return get_health(storage=storage, candidate_count=len(store) if store is not None else None)
