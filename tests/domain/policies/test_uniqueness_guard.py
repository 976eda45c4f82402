from datetime import date

import pytest

from filmgraph.domain.errors import DuplicateConflictError, NotFoundError
from filmgraph.domain.policies.uniqueness_guard import FilmGuard, UserGuard
from filmgraph.storage.film_store import FilmStore
from filmgraph.storage.user_store import UserStore


class SpyUserStore(UserStore):
    """Records which uniqueness probes ran."""

    def __init__(self):
        super().__init__()
        self.probes = []

    def exists_by_email(self, email):
        self.probes.append(("email", email))
        return super().exists_by_email(email)

    def exists_by_login(self, login):
        self.probes.append(("login", login))
        return super().exists_by_login(login)


# ---------------- films ----------------

def test_film_duplicate_message_embeds_title_and_year(make_film):
    store = FilmStore()
    store.create(make_film("Alien", 1979))
    guard = FilmGuard(store)

    with pytest.raises(DuplicateConflictError) as exc:
        guard.validate_for_create(make_film("ALIEN", 1979))
    assert "ALIEN" in exc.value.message
    assert "1979" in exc.value.message

    # same title, other year is fine
    guard.validate_for_create(make_film("Alien", 1980))


def test_film_update_unknown_id(make_film):
    guard = FilmGuard(FilmStore())
    with pytest.raises(NotFoundError, match="Film with id 42 not found"):
        guard.validate_for_update(make_film(id=42))


def test_film_update_same_key_does_not_collide_with_itself(make_film):
    store = FilmStore()
    stored = store.create(make_film("Alien", 1979))
    guard = FilmGuard(store)
    # case-only change keeps the normalized key
    existing = guard.validate_for_update(stored.clone(title="ALIEN", release_date=date(1979, 1, 1)))
    assert existing.id == stored.id


def test_film_update_to_taken_key(make_film):
    store = FilmStore()
    store.create(make_film("Alien", 1979))
    other = store.create(make_film("Aliens", 1986))
    with pytest.raises(DuplicateConflictError):
        FilmGuard(store).validate_for_update(other.clone(title="Alien", release_date=date(1979, 2, 2)))


# ---------------- users ----------------

def test_user_create_checks_email_before_login(make_user):
    store = UserStore()
    store.create(make_user("ripley", "ripley@nostromo.space"))
    guard = UserGuard(store)

    with pytest.raises(DuplicateConflictError, match="email RIPLEY@nostromo.space"):
        guard.validate_for_create(make_user("ripley", "RIPLEY@nostromo.space"))

    with pytest.raises(DuplicateConflictError, match="login RIPLEY"):
        guard.validate_for_create(make_user("RIPLEY", "other@nostromo.space"))


def test_user_create_short_circuits_after_email(make_user):
    store = SpyUserStore()
    store.create(make_user("ripley"))
    store.probes.clear()
    with pytest.raises(DuplicateConflictError):
        UserGuard(store).validate_for_create(make_user("ripley"))
    assert store.probes == [("email", "ripley@nostromo.space")]


def test_user_update_probes_only_changed_fields(make_user):
    store = SpyUserStore()
    stored = store.create(make_user("ripley"))
    store.probes.clear()

    UserGuard(store).validate_for_update(stored.clone(name="Ellen"))
    assert store.probes == []

    UserGuard(store).validate_for_update(stored.clone(login="Ellen_R"))
    assert store.probes == [("login", "Ellen_R")]


def test_user_update_unknown_id(make_user):
    with pytest.raises(NotFoundError, match="User with id 7 not found"):
        UserGuard(UserStore()).validate_for_update(make_user(id=7))


def test_require_none_id():
    with pytest.raises(NotFoundError):
        UserGuard(UserStore()).require(None)
