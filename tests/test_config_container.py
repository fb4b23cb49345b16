from pathlib import Path

import pytest

from transport_optimizer.config import AppConfig, GraphConfig, get_config, reset_config
from transport_optimizer.container import Container
from transport_optimizer.ports.graph import GraphStorePort
from transport_optimizer.ports.ledger import TicketLedgerPort
from transport_optimizer.services import TransportService


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = get_config()

    assert config.fare.base_rate_per_km == 10
    assert config.fare.population_unit == 1_000_000
    assert config.graph.cities_path.name == "cities.txt"
    assert config.graph.routes_path.name == "routes.txt"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TRANSPORT_FARE_BASE_RATE_PER_KM", "12")
    monkeypatch.setenv("TRANSPORT_GRAPH_DATA_DIR", str(tmp_path))

    config = get_config()

    assert config.fare.base_rate_per_km == 12
    assert config.graph.cities_path == tmp_path / "cities.txt"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_default_container_builds_a_working_service(tmp_path):
    config = AppConfig(graph=GraphConfig(data_dir=tmp_path))
    (tmp_path / "cities.txt").write_text("1 A 10\n2 B 20\n", encoding="utf-8")
    (tmp_path / "routes.txt").write_text("1 2 3 4\n", encoding="utf-8")

    container = Container.create_default(config)
    service = container.resolve(TransportService)
    report = service.load_seed_data()

    assert report.cities_loaded == 2
    assert service.book_ticket(1, 2).fare == 30
    assert container.resolve(TransportService) is service
    assert container.resolve(GraphStorePort) is service.graph_store


def test_separate_containers_do_not_share_state(tmp_path):
    config = AppConfig(graph=GraphConfig(data_dir=Path(tmp_path)))
    first = Container.create_default(config).resolve(TransportService)
    second = Container.create_default(config).resolve(TransportService)

    first.create_city("Only here", 1)

    assert len(first.list_cities()) == 1
    assert second.list_cities() == []


def test_register_override_and_unknown_type():
    container = Container.create_default(AppConfig())
    sentinel = object()
    container.register(TicketLedgerPort, lambda: sentinel)

    assert container.resolve(TicketLedgerPort) is sentinel
    with pytest.raises(KeyError):
        Container(config=AppConfig()).resolve(TicketLedgerPort)


def test_clear_singletons_gives_fresh_session():
    container = Container.create_default(AppConfig())
    service = container.resolve(TransportService)
    service.create_city("A", 1)

    container.clear_singletons()

    assert container.resolve(TransportService).list_cities() == []
