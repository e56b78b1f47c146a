"""
person record service

every operation is a single round trip to the store through the injected
session. store failures are logged, rolled back and re-raised as StoreError;
mapping errors to HTTP responses happens once, in app.main.
"""
from contextlib import contextmanager
from typing import Iterator, List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.core.errors import (
    BAD_REQUEST_MESSAGE,
    CLIENT_ERROR_MESSAGE,
    InvalidFieldError,
    PersonNotFoundError,
    StoreError,
    handle_store_error,
)
from app.core.logging_config import get_logger
from app.models import Person, utc_now
from app.schemas.people import PersonCreate, PersonRead, PersonUpdate

logger = get_logger(__name__)

# fields a substring search may target, by wire name and attribute name
SEARCHABLE_FIELDS = {
    "name": Person.name,
    "favoriteFood": Person.favorite_food,
    "favorite_food": Person.favorite_food,
    "favoriteMovie": Person.favorite_movie,
    "favorite_movie": Person.favorite_movie,
    "status": Person.status,
}

SORTABLE_FIELDS = {
    **SEARCHABLE_FIELDS,
    "id": Person.id,
    "active": Person.active,
    "createdAt": Person.created_at,
    "created_at": Person.created_at,
    "updatedAt": Person.updated_at,
    "updated_at": Person.updated_at,
}

SORT_ORDERS = ("asc", "desc")


def parse_person_id(person_id: str, message: str = CLIENT_ERROR_MESSAGE) -> UUID:
    try:
        return UUID(person_id)
    except ValueError as e:
        logger.warning(f"malformed person id: {person_id!r}")
        raise StoreError(message) from e


class PeopleService:
    """CRUD and search over Person records"""

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _store_call(self, operation: str, message: str = CLIENT_ERROR_MESSAGE) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.session.rollback()
            handle_store_error(operation, e)
            raise StoreError(message) from e

    @staticmethod
    def _to_read(person: Person) -> PersonRead:
        return PersonRead.model_validate(person.model_dump())

    def list_people(self) -> List[PersonRead]:
        with self._store_call("list people"):
            people = self.session.exec(select(Person)).all()
        return [self._to_read(p) for p in people]

    def get_person(self, person_id: str) -> PersonRead:
        """
        fetch one person by id
        a well-formed id with no row is PersonNotFoundError, anything the
        store can't handle (including a malformed id) is StoreError
        """
        pid = parse_person_id(person_id, BAD_REQUEST_MESSAGE)
        with self._store_call("get person", BAD_REQUEST_MESSAGE):
            person = self.session.exec(select(Person).where(Person.id == pid)).first()
        if person is None:
            raise PersonNotFoundError(person_id)
        return self._to_read(person)

    def create_person(self, data: PersonCreate) -> PersonRead:
        person = Person(**data.model_dump())
        with self._store_call("create person"):
            self.session.add(person)
            self.session.commit()
            self.session.refresh(person)
        logger.info(f"created person {person.id}")
        return self._to_read(person)

    def create_people(self, batch: List[PersonCreate]) -> int:
        """insert the whole batch in one commit and return how many rows were created"""
        people = [Person(**item.model_dump()) for item in batch]
        with self._store_call("batch create people"):
            self.session.add_all(people)
            self.session.commit()
        logger.info(f"batch created {len(people)} people")
        return len(people)

    def update_person(self, person_id: str, data: PersonUpdate) -> PersonRead:
        pid = parse_person_id(person_id)
        changes = data.model_dump(exclude_unset=True)
        with self._store_call("update person"):
            person = self.session.get(Person, pid)
            if person is None:
                # the store's "no row matched" is not told apart from other failures
                logger.warning(f"update failed: no person {person_id}")
                raise StoreError("Error Updating Record")
            for key, value in changes.items():
                setattr(person, key, value)
            person.updated_at = utc_now()
            self.session.add(person)
            self.session.commit()
            self.session.refresh(person)
        logger.info(f"updated person {person.id}: {sorted(changes)}")
        return self._to_read(person)

    def delete_person(self, person_id: str) -> PersonRead:
        """remove a person permanently and return its state before deletion"""
        pid = parse_person_id(person_id)
        with self._store_call("delete person"):
            person = self.session.get(Person, pid)
            if person is None:
                logger.warning(f"delete failed: no person {person_id}")
                raise StoreError()
            deleted = self._to_read(person)
            self.session.delete(person)
            self.session.commit()
        logger.info(f"deleted person {person_id}")
        return deleted

    def search_people(
        self,
        property: Optional[str] = None,
        query: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> List[PersonRead]:
        """
        filter by substring on one text field and/or sort by one field

        the filter applies only when both property and query are given,
        the sort only when both sort_by and order are given. field names
        are resolved through a fixed allow-list.
        """
        statement = select(Person)

        if property and query:
            column = SEARCHABLE_FIELDS.get(property)
            if column is None:
                raise InvalidFieldError(f"Unknown search property: {property}")
            statement = statement.where(self._contains(column, query))

        if sort_by and order:
            column = SORTABLE_FIELDS.get(sort_by)
            if column is None:
                raise InvalidFieldError(f"Unknown sort field: {sort_by}")
            direction = order.lower()
            if direction not in SORT_ORDERS:
                raise InvalidFieldError(f"Order must be one of {', '.join(SORT_ORDERS)}")
            statement = statement.order_by(column.asc() if direction == "asc" else column.desc())

        with self._store_call("search people"):
            people = self.session.exec(statement).all()
        return [self._to_read(p) for p in people]

    def _contains(self, column, query: str):
        # sqlite's LIKE ignores case; instr keeps containment case-sensitive
        if self.session.get_bind().dialect.name == "sqlite":
            return func.instr(column, query) > 0
        return column.contains(query, autoescape=True)
