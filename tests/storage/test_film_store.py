from datetime import date

import pytest

from filmgraph.domain.errors import DuplicateConflictError, InvalidArgumentError, NotFoundError
from filmgraph.storage.film_store import FilmStore


def _add_likes(store, film_id, *user_ids):
    def _mutate(rows):
        rows[film_id].likes.update(user_ids)
        return [film_id]
    store.modify([film_id], _mutate)


def test_create_ignores_candidate_id_and_assigns_increasing_ids(make_film):
    store = FilmStore()
    a = store.create(make_film("Alien", id=999))
    b = store.create(make_film("Aliens", 1986))
    assert a.id == 1
    assert b.id == 2
    assert a.likes == set()


def test_configured_id_start(make_film):
    store = FilmStore(id_start=100)
    assert store.create(make_film()).id == 100


def test_get_by_id_missing_or_null_returns_none():
    store = FilmStore()
    assert store.get_by_id(1) is None
    assert store.get_by_id(None) is None
    assert store.get_by_id("1") is None  # type: ignore[arg-type]
    assert store.exists_by_id(None) is False


def test_returned_records_are_copies(make_film):
    store = FilmStore()
    created = store.create(make_film())
    created.likes.add(42)
    created.title = "Mutated"
    again = store.get_by_id(created.id)
    assert again.likes == set()
    assert again.title == "Alien"


def test_lookup_by_title_and_year_is_case_insensitive(make_film):
    store = FilmStore()
    f = store.create(make_film("The Thing", 1982))
    assert store.exists_by_title_and_year("the  THING", 1982)
    assert store.get_by_title_and_year("THE THING", 1982).id == f.id
    assert not store.exists_by_title_and_year("The Thing", 2011)
    assert not store.exists_by_title_and_year(None, 1982)
    assert not store.exists_by_title_and_year("The Thing", None)


def test_store_rejects_duplicate_on_create(make_film):
    store = FilmStore()
    store.create(make_film("Alien", 1979))
    with pytest.raises(DuplicateConflictError):
        store.create(make_film("ALIEN", 1979, release_date=date(1979, 12, 1)))
    assert store.count() == 1


def test_update_unknown_id_raises(make_film):
    store = FilmStore()
    with pytest.raises(NotFoundError):
        store.update(make_film(id=3))
    with pytest.raises(NotFoundError):
        store.update(make_film())  # id None


def test_update_preserves_likes_when_not_supplied(make_film):
    store = FilmStore()
    f = store.create(make_film())
    _add_likes(store, f.id, 7, 8)

    updated = store.update(make_film("Alien: Director's Cut", id=f.id))
    assert updated.likes == {7, 8}
    assert updated.title == "Alien: Director's Cut"


def test_update_replaces_likes_when_supplied(make_film):
    store = FilmStore()
    f = store.create(make_film())
    _add_likes(store, f.id, 7)

    assert store.update(make_film(id=f.id, likes={1})).likes == {1}
    assert store.update(make_film(id=f.id, likes=set())).likes == set()


def test_update_moves_index_entry(make_film):
    store = FilmStore()
    f = store.create(make_film("Alien", 1979))
    store.update(make_film("Alien 3", 1992, id=f.id))
    assert not store.exists_by_title_and_year("Alien", 1979)
    assert store.get_by_title_and_year("alien 3", 1992).id == f.id
    # the old key is free again
    assert store.create(make_film("Alien", 1979)).id == 2


def test_update_into_taken_key_rejected(make_film):
    store = FilmStore()
    store.create(make_film("Alien", 1979))
    other = store.create(make_film("Aliens", 1986))
    with pytest.raises(DuplicateConflictError):
        store.update(make_film("Alien", 1979, id=other.id))
    assert store.get_by_id(other.id).title == "Aliens"


def test_modify_refuses_indexed_field_changes(make_film):
    store = FilmStore()
    f = store.create(make_film())

    def _rename(rows):
        rows[f.id].title = "Other"
        return [f.id]

    with pytest.raises(InvalidArgumentError):
        store.modify([f.id], _rename)
    assert store.get_by_id(f.id).title == "Alien"


def test_modify_unknown_id(make_film):
    store = FilmStore()
    with pytest.raises(NotFoundError):
        store.modify([1], lambda rows: [])


def test_all_is_ordered_snapshot(make_film):
    store = FilmStore()
    for t in ("C", "A", "B"):
        store.create(make_film(t))
    assert [f.id for f in store.all()] == [1, 2, 3]
    assert len(store) == 3


def test_none_candidate_is_invalid_argument():
    store = FilmStore()
    with pytest.raises(InvalidArgumentError):
        store.create(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        store.update(None)  # type: ignore[arg-type]
    assert store.allocator.peek() == 1


def test_store_duplicate_message_uses_caller_title(make_film):
    store = FilmStore()
    store.create(make_film("Alien", 1979))
    with pytest.raises(DuplicateConflictError) as exc:
        store.create(make_film("ALIEN", 1979))
    assert exc.value.message == "Film with title 'ALIEN' and release year 1979 already exists"
