from concurrent.futures import ThreadPoolExecutor

from mocking_api.users.models import UserPayload


def make_payload(first_name="Ada", last_name="Lovelace", **fields):
    return UserPayload(first_name=first_name, last_name=last_name, **fields)


def test_create_assigns_increasing_ids(store):
    first = store.create(make_payload())
    second = store.create(make_payload(first_name="Grace"))
    store.delete(second.id)
    third = store.create(make_payload(first_name="Linus"))

    assert first.id == 1
    assert second.id > first.id
    assert third.id > second.id


def test_get_returns_created_record(store):
    payload = make_payload(email="ada@example.com", city="London", country="UK")
    created = store.create(payload)

    fetched = store.get(created.id)
    assert fetched == created
    assert fetched.model_dump(exclude={"id"}) == payload.model_dump()


def test_get_missing_returns_none(store):
    assert store.get(42) is None


def test_list_returns_all_records_in_insertion_order(store):
    ids = [store.create(make_payload(first_name=name)).id for name in ("A", "B", "C")]
    assert [user.id for user in store.list()] == ids


def test_update_replaces_all_fields_and_keeps_id(store):
    created = store.create(make_payload(email="old@example.com", phone="123"))

    updated = store.update(created.id, UserPayload(first_name="New"))

    assert updated.id == created.id
    assert updated.first_name == "New"
    assert updated.last_name is None
    assert updated.phone is None
    assert store.get(created.id) == updated


def test_update_missing_does_not_insert(store):
    assert store.update(7, make_payload()) is None
    assert store.get(7) is None
    assert store.count() == 0


def test_delete_then_get_is_not_found(store):
    created = store.create(make_payload())

    assert store.delete(created.id) is True
    assert store.get(created.id) is None
    assert store.delete(created.id) is False


def test_returned_records_are_copies(store):
    created = store.create(make_payload())
    created.first_name = "Mutated"

    assert store.get(created.id).first_name == "Ada"


def test_concurrent_creates_get_unique_ids(store):
    with ThreadPoolExecutor(max_workers=8) as pool:
        users = list(pool.map(lambda i: store.create(make_payload(first_name=f"user{i}")), range(200)))

    ids = {user.id for user in users}
    assert ids == set(range(1, 201))
    assert store.count() == 200
