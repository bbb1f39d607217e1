"""
Domain Registry API - Domain Management Endpoints

Thin HTTP layer over DomainService. Cancellation by an event listener
is reported as 409 Conflict together with the listener messages.
"""
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
import logging

from cms_domains.application.domain_service import DomainService
from cms_domains.domain.entities import Domain, DomainNotFoundError, DuplicateDomainError
from cms_domains.domain.operation_status import OperationStatus

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================
# Pydantic Models
# ============================================

class DomainRequest(BaseModel):
    """Request to create or update a domain"""
    name: str = Field(..., min_length=1, max_length=255, description="Hostname or hostname + path")
    root_content_id: Optional[int] = Field(None, gt=0, description="Owning content item (omit for wildcard)")
    language_iso_code: Optional[str] = Field(None, max_length=14, description="Culture, e.g. en-US")


class DomainResponse(BaseModel):
    """Domain details response"""
    id: int
    name: str
    root_content_id: Optional[int]
    language_iso_code: Optional[str]
    is_wildcard: bool

    model_config = ConfigDict(from_attributes=True)


class EventMessageResponse(BaseModel):
    category: str
    message: str
    message_type: str


# ============================================
# Dependencies
# ============================================

def get_domain_service(request: Request) -> DomainService:
    """DomainService created by the application lifespan"""
    service = getattr(request.app.state, "domain_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Domain service not initialized"
        )
    return service


def _cancelled(operation: str, result: OperationStatus) -> HTTPException:
    messages = [
        EventMessageResponse(
            category=m.category,
            message=m.message,
            message_type=m.message_type.value
        ).model_dump()
        for m in result.event_messages
    ]
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={"status": "cancelled", "operation": operation, "messages": messages}
    )


def _build_domain(request: DomainRequest, domain_id: Optional[int] = None) -> Domain:
    try:
        return Domain(
            id=domain_id,
            name=request.name,
            root_content_id=request.root_content_id,
            language_iso_code=request.language_iso_code,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


async def _save(service: DomainService, domain: Domain) -> DomainResponse:
    try:
        result = await service.save(domain)
    except DuplicateDomainError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except DomainNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    if result.is_cancelled:
        raise _cancelled("save", result)

    return DomainResponse.model_validate(domain)


# ============================================
# Endpoints
# ============================================

@router.get("/domains", response_model=List[DomainResponse])
async def list_domains(
    include_wildcards: bool = False,
    service: DomainService = Depends(get_domain_service)
):
    """List all domains (wildcards only when include_wildcards=true)"""
    domains = await service.get_all(include_wildcards)
    return [DomainResponse.model_validate(d) for d in domains]


@router.get("/content/{content_id}/domains", response_model=List[DomainResponse])
async def list_assigned_domains(
    content_id: int,
    include_wildcards: bool = False,
    service: DomainService = Depends(get_domain_service)
):
    """List domains whose root content item is content_id"""
    domains = await service.get_assigned_domains(content_id, include_wildcards)
    return [DomainResponse.model_validate(d) for d in domains]


@router.get("/domains/by-name/{name:path}", response_model=DomainResponse)
async def get_domain_by_name(name: str, service: DomainService = Depends(get_domain_service)):
    domain = await service.get_by_name(name)
    if domain is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Domain '{name}' not found")
    return DomainResponse.model_validate(domain)


@router.head("/domains/by-name/{name:path}")
async def domain_exists(name: str, service: DomainService = Depends(get_domain_service)):
    """200 if a domain with this exact name exists, 404 otherwise"""
    found = await service.exists(name)
    return Response(status_code=status.HTTP_200_OK if found else status.HTTP_404_NOT_FOUND)


@router.get("/domains/{domain_id}", response_model=DomainResponse)
async def get_domain(domain_id: int, service: DomainService = Depends(get_domain_service)):
    domain = await service.get_by_id(domain_id)
    if domain is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Domain {domain_id} not found")
    return DomainResponse.model_validate(domain)


@router.post("/domains", response_model=DomainResponse, status_code=status.HTTP_201_CREATED)
async def create_domain(request: DomainRequest, service: DomainService = Depends(get_domain_service)):
    """
    Create a new domain.

    Returns 409 if the name is taken or a listener cancelled the save.
    """
    logger.info(f"Creating domain: {request.name}")
    return await _save(service, _build_domain(request))


@router.put("/domains/{domain_id}", response_model=DomainResponse)
async def update_domain(
    domain_id: int,
    request: DomainRequest,
    service: DomainService = Depends(get_domain_service)
):
    """Update an existing domain"""
    logger.info(f"Updating domain {domain_id}: {request.name}")
    return await _save(service, _build_domain(request, domain_id))


@router.delete("/domains/{domain_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_domain(domain_id: int, service: DomainService = Depends(get_domain_service)):
    domain = await service.get_by_id(domain_id)
    if domain is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Domain {domain_id} not found")

    try:
        result = await service.delete(domain)
    except DomainNotFoundError as e:
        # Removed between lookup and delete
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    if result.is_cancelled:
        raise _cancelled("delete", result)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
