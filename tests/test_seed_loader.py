import pytest

from transport_optimizer.adapters.graph import InMemoryGraphStore
from transport_optimizer.adapters.seed import TextSeedLoader
from transport_optimizer.config import GraphConfig


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "cities.txt").write_text(
        "1 Mumbai 12442373\n"
        "2 Delhi 11007835\n"
        "\n"
        "3 New Delhi 249998\n",
        encoding="utf-8",
    )
    (tmp_path / "routes.txt").write_text(
        "1 2 1400 130\n"
        "2 3 5 15\n",
        encoding="utf-8",
    )
    return tmp_path


def test_loads_cities_and_routes(data_dir):
    store = InMemoryGraphStore()

    report = TextSeedLoader(GraphConfig(data_dir=data_dir)).load_into(store)

    assert report.cities_loaded == 3
    assert report.routes_loaded == 2
    assert report.is_clean
    assert [city.name for city in store.get_cities()] == ["Mumbai", "Delhi", "New Delhi"]
    assert store.get_city_by_id(1).population == 12442373

    mumbai, delhi = store.get_city_by_id(1), store.get_city_by_id(2)
    assert store.get_route(delhi, mumbai).distance == 1400


def test_bad_records_are_reported_not_fatal(tmp_path):
    (tmp_path / "cities.txt").write_text(
        "1 Paris 2100000\n"
        "two Lyon 500000\n"
        "3 Nice\n"
        "1 Duplicate 5\n"
        "4 Lille -3\n"
        "5 Nantes 320000\n",
        encoding="utf-8",
    )
    (tmp_path / "routes.txt").write_text(
        "1 5 380 120\n"
        "1 9 100 60\n"
        "1 5 abc 10\n"
        "1 5 0 10\n"
        "5 1\n",
        encoding="utf-8",
    )
    store = InMemoryGraphStore()

    report = TextSeedLoader(GraphConfig(data_dir=tmp_path)).load_into(store)

    assert report.cities_loaded == 2
    assert report.routes_loaded == 1
    assert len(report.rejected) == 8
    assert any("Invalid city ID in route data" in reason for reason in report.rejected)
    assert store.get_city_by_id(1).name == "Paris"
    assert len(store.get_routes_from_city(store.get_city_by_id(5))) == 1


def test_missing_files_leave_store_empty(tmp_path):
    store = InMemoryGraphStore()

    report = TextSeedLoader(GraphConfig(data_dir=tmp_path)).load_into(store)

    assert report.cities_loaded == 0
    assert report.routes_loaded == 0
    assert len(report.rejected) == 2
    assert len(store) == 0


def test_missing_routes_file_keeps_cities(data_dir):
    (data_dir / "routes.txt").unlink()
    store = InMemoryGraphStore()

    report = TextSeedLoader(GraphConfig(data_dir=data_dir)).load_into(store)

    assert report.cities_loaded == 3
    assert report.routes_loaded == 0
    assert len(store) == 3


def test_undecodable_cities_file_is_reported_not_fatal(tmp_path):
    (tmp_path / "cities.txt").write_bytes(b"1 Paris 2100000\n2 Lyon\xff\xfe 500000\n")
    (tmp_path / "routes.txt").write_text("1 2 460 120\n", encoding="utf-8")
    store = InMemoryGraphStore()

    report = TextSeedLoader(GraphConfig(data_dir=tmp_path)).load_into(store)

    assert report.cities_loaded <= 1
    assert report.routes_loaded == 0
    assert f"Cannot read {tmp_path / 'cities.txt'}: not valid UTF-8" in report.rejected
    assert len(store) == report.cities_loaded


def test_unreadable_path_reports_the_os_error(tmp_path):
    (tmp_path / "cities.txt").mkdir()
    store = InMemoryGraphStore()

    report = TextSeedLoader(GraphConfig(data_dir=tmp_path)).load_into(store)

    cities_reason, routes_reason = report.rejected
    assert cities_reason.startswith(f"Cannot read {tmp_path / 'cities.txt'}: ")
    assert routes_reason == f"File not found: {tmp_path / 'routes.txt'}"
