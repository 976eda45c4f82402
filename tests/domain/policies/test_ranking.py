from datetime import date

from filmgraph.domain.entities.film import Film
from filmgraph.domain.policies.ranking import RankingEngine, effective_count, rank_by_likes
from filmgraph.storage.film_store import FilmStore


def _film(fid, likes):
    return Film(id=fid, title=f"F{fid}", release_date=date(2000, 1, 1), likes=set(likes))


def test_effective_count():
    assert effective_count(None) == 10
    assert effective_count(0) == 10
    assert effective_count(-3) == 10
    assert effective_count(4) == 4
    assert effective_count(None, default=2) == 2


def test_rank_orders_by_like_count_desc():
    a, b, c = _film(1, {1}), _film(2, {1, 2, 3}), _film(3, {1, 2})
    assert [f.id for f in rank_by_likes([a, b, c], 3)] == [2, 3, 1]


def test_ties_broken_by_id_ascending():
    films = [_film(5, {1}), _film(2, {1}), _film(9, {1, 2}), _film(3, set())]
    assert [f.id for f in rank_by_likes(films, 10)] == [9, 2, 5, 3]


def test_engine_over_store(make_film):
    store = FilmStore()
    assert RankingEngine(store).popular(3) == []

    for i in range(12):
        store.create(make_film(title=f"Film {i}"))
    assert len(RankingEngine(store).popular(None)) == 10
    assert len(RankingEngine(store).popular(0)) == 10
    assert len(RankingEngine(store, default_count=4).popular(-1)) == 4
    assert len(RankingEngine(store).popular(50)) == 12

    first = [f.id for f in RankingEngine(store).popular(12)]
    assert first == [f.id for f in RankingEngine(store).popular(12)]
    assert first == sorted(first)
