import pytest

from darktimer.models import Player


def make_player(name, first_perfect_attempt, **kwargs):
    return Player(
        name=name,
        total_attempts=first_perfect_attempt or 0,
        perfect_attempts=1 if first_perfect_attempt else 0,
        first_perfect_attempt=first_perfect_attempt,
        **kwargs,
    )


def test_create_assigns_id_and_lookup_by_name(store):
    created = store.create_player(make_player("Ada", 4))

    assert created.id is not None
    assert store.get_player(created.id).name == "Ada"
    assert store.get_player_by_name("Ada").id == created.id
    assert store.get_player_by_name("ada") is None
    assert store.count_players() == 1


def test_list_ranked_orders_and_skips_unranked(store):
    store.create_player(make_player("C", 9))
    store.create_player(make_player("NoPerfect", None))
    store.create_player(make_player("A", 2))
    store.create_player(make_player("B", 5))

    ranked = store.list_ranked()

    assert [p.name for p in ranked] == ["A", "B", "C"]
    assert store.top_player().name == ranked[0].name


def test_rank_positions_and_unranked(store):
    c = store.create_player(make_player("C", 9))
    lurker = store.create_player(make_player("NoPerfect", None))
    a = store.create_player(make_player("A", 2))
    b = store.create_player(make_player("B", 5))

    assert store.rank(a.id) == 1
    assert store.rank(b.id) == 2
    assert store.rank(c.id) == 3
    assert store.rank(lurker.id) is None
    assert store.rank(9999) is None


def test_tie_goes_to_earliest_created(store):
    first = store.create_player(make_player("First", 3))
    second = store.create_player(make_player("Second", 3))

    assert store.top_player().id == first.id
    assert store.rank(first.id) == 1
    assert store.rank(second.id) == 2


def test_top_player_empty(store):
    assert store.top_player() is None
    assert store.list_ranked() == []


def test_update_player_persists_changes(store):
    created = store.create_player(make_player("Ada", 8))
    created.first_perfect_attempt = 3
    created.message = "gg"

    updated = store.update_player(created)

    assert updated.first_perfect_attempt == 3
    fetched = store.get_player_by_name("Ada")
    assert fetched.first_perfect_attempt == 3
    assert fetched.message == "gg"


def test_memory_store_hands_out_copies():
    from darktimer.store import MemoryPlayerStore

    store = MemoryPlayerStore()
    created = store.create_player(make_player("Ada", 8))
    created.first_perfect_attempt = 1

    assert store.get_player_by_name("Ada").first_perfect_attempt == 8


def test_memory_store_rejects_duplicate_names():
    from darktimer.store import MemoryPlayerStore

    store = MemoryPlayerStore()
    store.create_player(make_player("Ada", 8))
    with pytest.raises(ValueError):
        store.create_player(make_player("Ada", 2))
