# tests/e2e/test_mapper_round_trip.py
"""
Propriedades E2E de round-trip e idempotência do ConfigMapper.

Invariantes:
    - build → save → build produz uma instância equivalente
    - save aplicado duas vezes sem edições produz o mesmo texto
    - containers com profundidade ≥ 2 sobrevivem ao ciclo completo
"""

from collections import OrderedDict, deque

from atlas_configmap import ConfigMapper

from tests.fixtures.schemas import (
    AppConfig,
    ContainerZoo,
    Level,
    MapConfig,
    Point,
    PointCodec,
    Window,
)


def _state(config: AppConfig):
    return (
        config.retries,
        config.level,
        config.server.host,
        config.server.port,
        config.server.tags,
        config.users,
        config.windows,
    )


def test_save_is_idempotent(write_yaml, app_defaults_yaml, app_user_yaml):
    path = write_yaml("app.yml", app_user_yaml)
    mapper = ConfigMapper.of(AppConfig).file(path).load_defaults_text(app_defaults_yaml)

    mapper.save(mapper.build())
    first = path.read_text(encoding="utf-8")
    mapper.save(mapper.build())
    second = path.read_text(encoding="utf-8")

    assert first == second


def test_round_trip_preserves_values(write_yaml, app_defaults_yaml):
    path = write_yaml("app.yml", "")
    mapper = ConfigMapper.of(AppConfig).file(path).load_defaults_text(app_defaults_yaml)

    config = mapper.build()
    config.retries = 9
    config.level = Level.LOW
    config.windows.append(Window(1024, 768))
    mapper.save(config)

    assert _state(mapper.build()) == _state(config)


def test_round_trip_nested_containers(tmp_path):
    path = tmp_path / "zoo.yml"
    mapper = ConfigMapper.of(ContainerZoo).file(path)

    zoo = ContainerZoo(
        items=[3, 1],
        names={"b", "a"},
        frozen=frozenset({"f"}),
        pair=(1, 2, 3),
        queue=deque(["x", "y"]),
        ordered=OrderedDict([("z", 1), ("a", 2)]),
        matrix=[[1, 2], [3]],
        by_level={Level.MEDIUM: [Window(1, 2), Window(3, 4)], Level.LOW: []},
        ports={80: "http", 443: "https"},
        raw=[{"k": [1, 2]}, "s"],
    )
    mapper.save(zoo)

    assert mapper.build() == zoo


def test_round_trip_with_codecs(tmp_path):
    path = tmp_path / "map.yml"
    mapper = ConfigMapper.of(MapConfig).file(path).with_codec(PointCodec())

    config = MapConfig()
    config.spawn = Point(1, 2)
    config.at = Point(-3, 4)
    config.route = [Point(5, 6), Point(7, 8)]
    mapper.save(config)

    loaded = mapper.build()
    assert (loaded.spawn, loaded.at, loaded.route) == (config.spawn, config.at, config.route)
