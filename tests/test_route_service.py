"""Tests for the route query service, the wiring factories and the terminal pipeline."""

from __future__ import annotations

import pytest

from metro_router.adapters.graph import DijkstraRouteSolver, TextGraphRepository
from metro_router.config import AppConfig, GraphConfig, SolverConfig
from metro_router.container import (
    create_graph_repository,
    create_route_service,
    create_route_solver,
)
from metro_router.domain.errors import (
    ConfigurationError,
    EmptyStationNameError,
    SourceNotFoundError,
    StationNotFoundError,
)
from metro_router.domain.models import RouteResult
from metro_router.pipeline import PATH_FINDER_STRATEGIES, find_route, run_pipeline
from metro_router.services import RouteQueryService, normalize_station_name


@pytest.fixture
def service(graph_config) -> RouteQueryService:
    return RouteQueryService(
        graph_repository=TextGraphRepository(graph_config),
        route_solver=DijkstraRouteSolver(),
    )


@pytest.fixture
def app_config(graph_config) -> AppConfig:
    return AppConfig(graph=graph_config)


class TestNormalizeStationName:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("avtovo", "AVTOVO"),
            ("  Kirovsky Zavod \n", "KIROVSKY ZAVOD"),
            ("   ", ""),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_station_name(raw) == expected


class TestRouteQueryService:
    """Test suite for RouteQueryService."""

    def test_query_normalizes_input(self, service):
        result = service.query(" a ", "c")

        assert result == RouteResult(source=0, target=2, distance=7)

    def test_same_station(self, service):
        assert service.query("b", "B").distance == 0

    def test_unreachable_is_a_result(self, write_network):
        stations, edges = write_network(["A", "B"])
        config = GraphConfig(
            data_dir=stations.parent,
            stations_file=stations.name,
            edges_file=edges.name,
        )
        service = RouteQueryService(TextGraphRepository(config), DijkstraRouteSolver())

        result = service.query("A", "B")

        assert not result.is_reachable
        assert service.format_result(result) == "No route between these stations"

    def test_empty_name_raises(self, service):
        with pytest.raises(EmptyStationNameError):
            service.query("", "A")

    def test_unknown_name_raises(self, service):
        with pytest.raises(StationNotFoundError) as exc_info:
            service.query("A", "zzz")

        assert exc_info.value.station_name == "ZZZ"

    def test_query_after_failed_query(self, service):
        with pytest.raises(StationNotFoundError):
            service.query("A", "Z")

        assert service.query("A", "C").distance == 7

    def test_query_safe_success(self, service):
        result, error = service.query_safe("a", "c")

        assert error is None
        assert result is not None and result.distance == 7

    @pytest.mark.parametrize(
        "departure, arrival, message",
        [
            ("", "C", "Error: Please fill in both stations"),
            ("A", "  ", "Error: Please fill in both stations"),
            ("A", "Z", "Error: Station 'Z' not found"),
        ],
    )
    def test_query_safe_lookup_errors(self, service, departure, arrival, message):
        result, error = service.query_safe(departure, arrival)

        assert result is None
        assert error == message

    def test_query_safe_load_error(self, tmp_path):
        config = GraphConfig(data_dir=tmp_path / "nowhere")
        service = RouteQueryService(TextGraphRepository(config), DijkstraRouteSolver())

        result, error = service.query_safe("A", "B")

        assert result is None
        assert error is not None and error.startswith("Error: Network data could not be loaded")

    def test_query_propagates_load_error(self, tmp_path):
        config = GraphConfig(data_dir=tmp_path / "nowhere")
        service = RouteQueryService(TextGraphRepository(config), DijkstraRouteSolver())

        with pytest.raises(SourceNotFoundError):
            service.query("A", "B")

    def test_format_result(self, service):
        assert service.format_result(service.query("A", "C")) == "Shortest travel time: 7 min"


class TestFactories:
    def test_default_adapters(self, app_config):
        service = create_route_service(app_config)

        assert isinstance(service.graph_repository, TextGraphRepository)
        assert isinstance(service.route_solver, DijkstraRouteSolver)
        assert service.query("a", "c").distance == 7

    def test_repository_uses_configured_paths(self, app_config, graph_config):
        repository = create_graph_repository(app_config)

        assert repository.config.edges_path == graph_config.edges_path

    def test_solver_strategy_from_config(self, graph_config):
        config = AppConfig(graph=graph_config, solver=SolverConfig(strategy="heap"))

        assert create_route_solver(config).strategy == "heap"

    def test_explicit_strategy_wins(self, app_config):
        assert create_route_solver(app_config, strategy="heap").strategy == "heap"

    def test_unknown_strategy(self, app_config):
        with pytest.raises(ConfigurationError):
            create_route_solver(app_config, strategy="bellman-ford")

    def test_adapter_override(self, app_config):
        class FixedSolver:
            def solve(self, adjacency, source, target):
                return RouteResult(source=source, target=target, distance=42)

        service = create_route_service(app_config, route_solver=FixedSolver())

        assert service.query("A", "C").distance == 42

    def test_default_config_uses_bundled_data(self):
        service = create_route_service()

        assert service.query("devyatkino", "avtovo").distance == 40


class TestPipeline:
    def test_find_route(self, app_config):
        assert find_route("a", "c", config=app_config) == "Shortest travel time: 7 min"

    def test_find_route_error_message(self, app_config):
        assert find_route("a", "x", config=app_config) == "Error: Station 'X' not found"

    def test_find_route_reuses_service(self, service):
        assert find_route("a", "c", service=service) == "Shortest travel time: 7 min"

    def test_strategy_registry(self):
        assert set(PATH_FINDER_STRATEGIES) == {"dense", "heap"}

    @pytest.mark.parametrize("path_name", sorted(PATH_FINDER_STRATEGIES))
    def test_find_route_with_named_strategy(self, app_config, path_name):
        message = find_route("a", "c", path_name, config=app_config)

        assert message == "Shortest travel time: 7 min"

    def test_named_strategy_keeps_loaded_network(self, service):
        store = service.graph_repository.load()

        find_route("a", "c", "heap", service=service)

        assert service.graph_repository.load() is store

    def test_find_route_unknown_strategy(self, app_config):
        message = find_route("a", "c", "astar", config=app_config)

        assert message == "Unknown path-finding strategy: 'astar'"

    def test_run_pipeline_answers_until_empty_input(self, app_config, monkeypatch, capsys):
        answers = iter(["a", "c", "b", "nowhere", ""])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        exit_code = run_pipeline(app_config)

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "3 stations" in out
        assert "Shortest travel time: 7 min" in out
        assert "Error: Station 'NOWHERE' not found" in out

    def test_run_pipeline_stops_on_eof(self, app_config, monkeypatch):
        def raise_eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", raise_eof)

        assert run_pipeline(app_config) == 0

    def test_run_pipeline_load_failure(self, tmp_path, capsys):
        config = AppConfig(graph=GraphConfig(data_dir=tmp_path / "nowhere"))

        exit_code = run_pipeline(config)

        assert exit_code == 1
        assert "Network data could not be loaded" in capsys.readouterr().out
