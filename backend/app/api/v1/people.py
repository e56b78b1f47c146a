from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.db import get_session
from app.schemas.people import (
    BatchCreateResult,
    PersonCreate,
    PersonRead,
    PersonUpdate,
    SearchRequest,
)
from app.services.people import PeopleService

router = APIRouter()


def get_people_service(session: Session = Depends(get_session)) -> PeopleService:
    return PeopleService(session)


@router.get("", response_model=List[PersonRead])
def get_people(service: PeopleService = Depends(get_people_service)):
    return service.list_people()


@router.get("/{person_id}", response_model=PersonRead)
def get_person(person_id: str, service: PeopleService = Depends(get_people_service)):
    """get person by id, 404 when no record matches"""
    return service.get_person(person_id)


@router.patch("/{person_id}", response_model=PersonRead)
def update_person(
    person_id: str,
    person: PersonUpdate,
    service: PeopleService = Depends(get_people_service),
):
    """replace only the fields present in the body"""
    return service.update_person(person_id, person)


@router.post("", response_model=PersonRead)
def create_person(person: PersonCreate, service: PeopleService = Depends(get_people_service)):
    return service.create_person(person)


@router.post("/batch/create", response_model=BatchCreateResult)
def create_people_batch(
    people: List[PersonCreate],
    service: PeopleService = Depends(get_people_service),
):
    """create a batch of records in a single request"""
    return BatchCreateResult(count=service.create_people(people))


@router.post("/search", response_model=List[PersonRead])
def search_people(search: SearchRequest, service: PeopleService = Depends(get_people_service)):
    """search records by a text property, sort by another property asc or desc"""
    return service.search_people(
        property=search.property,
        query=search.query,
        sort_by=search.sort_by,
        order=search.order,
    )


@router.delete("/{person_id}", response_model=PersonRead)
def delete_person(person_id: str, service: PeopleService = Depends(get_people_service)):
    return service.delete_person(person_id)
