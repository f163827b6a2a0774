from fastapi import APIRouter, Request, HTTPException, Body
from typing import Optional
from hr_lib.candidates.models import Candidate, CandidateUpdate
from hr_lib.services.resolver import resolve_service
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


def _dump(candidates):
    return [c.model_dump(exclude_none=True) for c in candidates]


@router.get('/candidates')
async def api_list_candidates(request: Request):
    store = resolve_service(request, 'candidate_store')
    return _dump(store.list())


@router.get('/candidates/search')
async def api_search_candidates(request: Request, q: Optional[str] = None):
    """Case-insensitive substring search over names, email, role, skills and languages."""
    store = resolve_service(request, 'candidate_store')
    logger.debug("Searching candidates for %r", q)
    return _dump(store.search(q))


@router.post('/candidates')
async def api_add_candidate(request: Request, payload: Candidate):
    store = resolve_service(request, 'candidate_store')
    if not payload.email or not payload.email.strip():
        raise HTTPException(status_code=400, detail={'error': 'invalid_email', 'message': 'Email is required'})
    if not store.add(payload):
        raise HTTPException(status_code=409, detail={
            'error': 'duplicate',
            'message': f"A candidate with email {payload.email} already exists",
        })
    return {'ok': True, 'message': f"Candidate {payload.full_name} added successfully"}


@router.patch('/candidates/{email}')
async def api_update_candidate(request: Request, email: str, payload: CandidateUpdate = Body(...)):
    store = resolve_service(request, 'candidate_store')
    try:
        updated = store.update(email, payload.as_mutation())
    except ValueError as e:
        raise HTTPException(status_code=400, detail={'error': 'invalid_request', 'message': str(e)})
    if not updated:
        raise HTTPException(status_code=404, detail={'error': 'not_found', 'message': f"No candidate with email {email}"})
    return {'ok': True, 'message': f"Candidate {email} updated successfully"}


@router.delete('/candidates/{email}')
async def api_remove_candidate(request: Request, email: str):
    store = resolve_service(request, 'candidate_store')
    try:
        removed = store.remove(email)
    except ValueError as e:
        raise HTTPException(status_code=400, detail={'error': 'invalid_request', 'message': str(e)})
    if not removed:
        raise HTTPException(status_code=404, detail={'error': 'not_found', 'message': f"No candidate with email {email}"})
    return {'ok': True, 'message': f"Candidate {email} removed successfully"}
