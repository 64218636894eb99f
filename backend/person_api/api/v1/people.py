from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response, status
from typing import List, Optional
import logging

from person_api.api.deps import get_person_service
from person_api.core.config import settings
from person_api.schemas import PersonCreate, PersonRead, PersonUpdate
from person_api.services import PersonService

logger = logging.getLogger(__name__)

router = APIRouter()

# ids and page numbers are 32-bit ints
MAX_INT = 2**31 - 1

def _not_found(person_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Person with ID {person_id} not found")

@router.get("/", response_model=List[PersonRead])
def list_persons(
    response: Response,
    page_number: int = Query(default=1, alias="pageNumber", le=MAX_INT),
    page_size: int = Query(default=settings.DEFAULT_PAGE_SIZE, alias="pageSize"),
    service: PersonService = Depends(get_person_service),
):
    """
    list persons one page at a time, ordered by id

    page size is capped at MAX_PAGE_SIZE rather than rejected. totals go in
    the X-Total-Count / X-Page-Number / X-Page-Size headers
    """
    logger.info(f"getting persons - page: {page_number}, size: {page_size}")

    page_size = min(page_size, settings.MAX_PAGE_SIZE)
    if page_number <= 0 or page_size <= 0:
        raise HTTPException(status_code=400, detail="Page number and page size must be greater than 0")

    persons = service.get_paged(page_number, page_size)
    total = service.count()

    response.headers["X-Total-Count"] = str(total)
    response.headers["X-Page-Number"] = str(page_number)
    response.headers["X-Page-Size"] = str(page_size)
    return persons

# declared before /{person_id} so "search" isn't read as an id
@router.get("/search", response_model=List[PersonRead])
def search_persons(
    name: Optional[str] = Query(default=None),
    service: PersonService = Depends(get_person_service),
):
    """case-insensitive substring search on name"""
    if name is None or not name.strip():
        raise HTTPException(status_code=400, detail="Search term cannot be empty")

    logger.info(f"searching persons by name: {name}")
    return service.search_by_name(name)

@router.get("/{person_id}", response_model=PersonRead)
def get_person(person_id: int = Path(..., le=MAX_INT), service: PersonService = Depends(get_person_service)):
    logger.info(f"getting person with id: {person_id}")

    person = service.get_by_id(person_id)
    if person is None:
        logger.warning(f"person with id {person_id} not found")
        raise _not_found(person_id)
    return person

@router.post("/", response_model=PersonRead, status_code=status.HTTP_201_CREATED)
def create_person(
    data: PersonCreate,
    request: Request,
    response: Response,
    service: PersonService = Depends(get_person_service),
):
    logger.info(f"creating new person: {data.name}")

    person = service.create(data)
    response.headers["Location"] = str(request.url_for("get_person", person_id=person.id))
    return person

@router.put("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_person(
    data: PersonUpdate,
    person_id: int = Path(..., le=MAX_INT),
    service: PersonService = Depends(get_person_service),
):
    """replace name, age, dateOfBirth and skills of an existing person"""
    logger.info(f"updating person with id: {person_id}")

    if service.update(person_id, data) is None:
        logger.warning(f"person with id {person_id} not found for update")
        raise _not_found(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_person(person_id: int = Path(..., le=MAX_INT), service: PersonService = Depends(get_person_service)):
    logger.info(f"deleting person with id: {person_id}")

    if not service.delete(person_id):
        logger.warning(f"person with id {person_id} not found for deletion")
        raise _not_found(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
