import pytest
from uuid import uuid4

from app.core.errors import InvalidFieldError, PersonNotFoundError, StoreError
from app.models import Person
from app.schemas.people import PersonCreate, PersonUpdate
from app.services.people import PeopleService, parse_person_id


@pytest.fixture(name="service")
def service_fixture(session):
    return PeopleService(session)


@pytest.fixture
def seeded(service, batch):
    service.create_people([PersonCreate(**item) for item in batch])
    return service


def test_parse_person_id_rejects_garbage():
    with pytest.raises(StoreError):
        parse_person_id("not-a-uuid")


def test_create_and_get(service, rocky):
    created = service.create_person(PersonCreate(**rocky))

    fetched = service.get_person(str(created.id))
    assert fetched == created
    assert fetched.active is True
    assert fetched.created_at <= fetched.updated_at


def test_get_missing_raises_not_found(service):
    with pytest.raises(PersonNotFoundError):
        service.get_person(str(uuid4()))


def test_create_people_returns_count(service, batch):
    count = service.create_people([PersonCreate(**item) for item in batch])
    assert count == 3
    assert len(service.list_people()) == 3


def test_create_people_empty_batch(service):
    assert service.create_people([]) == 0


def test_update_leaves_unset_fields(service, rocky):
    created = service.create_person(PersonCreate(**rocky))

    updated = service.update_person(str(created.id), PersonUpdate(status="Active"))
    assert updated.status == "Active"
    assert updated.name == created.name
    assert updated.favorite_food == created.favorite_food
    assert updated.favorite_movie == created.favorite_movie
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


def test_update_missing_raises_store_error(service):
    with pytest.raises(StoreError):
        service.update_person(str(uuid4()), PersonUpdate(name="Nobody"))


def test_delete_returns_prior_state(service, rocky):
    created = service.create_person(PersonCreate(**rocky))

    deleted = service.delete_person(str(created.id))
    assert deleted == created
    with pytest.raises(PersonNotFoundError):
        service.get_person(str(created.id))


def test_delete_missing_raises_store_error(service):
    with pytest.raises(StoreError):
        service.delete_person(str(uuid4()))


def test_search_is_case_sensitive(seeded):
    assert {p.name for p in seeded.search_people("status", "Active")} == {"Miroslav", "Donny"}
    assert seeded.search_people("status", "aCTIVE") == []
    assert seeded.search_people("name", "donny") == []


def test_search_treats_wildcards_literally(seeded):
    assert seeded.search_people("name", "%") == []
    assert seeded.search_people("name", "_") == []


def test_search_snake_case_names(seeded):
    people = seeded.search_people("favorite_food", "Tacos", "favorite_movie", "asc")
    assert [p.name for p in people] == ["Matt"]


def test_search_order_is_case_insensitive(seeded):
    people = seeded.search_people(sort_by="name", order="DESC")
    assert [p.name for p in people] == ["Miroslav", "Matt", "Donny"]


@pytest.mark.parametrize("kwargs", [
    {"property": "id", "query": "1"},
    {"property": "active", "query": "1"},
    {"sort_by": "password", "order": "asc"},
    {"sort_by": "name", "order": "up"},
])
def test_search_rejects_fields_outside_allow_list(seeded, kwargs):
    with pytest.raises(InvalidFieldError):
        seeded.search_people(**kwargs)


def test_default_timestamps_are_timezone_aware():
    person = Person(name="Ada")
    assert person.created_at.tzinfo is not None
    assert person.updated_at.tzinfo is not None
    assert person.created_at <= person.updated_at


def test_stored_timestamps_keep_order(service, rocky):
    created = service.create_person(PersonCreate(**rocky))
    assert created.created_at <= created.updated_at

    updated = service.update_person(str(created.id), PersonUpdate(name="Balboa"))
    assert updated.created_at <= updated.updated_at
