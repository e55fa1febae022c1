"""Tests for LayoutEngine and the shared default engine."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from calday import RFC3339, CacheConfig, Date, LayoutEngine
from calday.enums import FormatOp
from calday.runtime import engine as engine_module
from calday.runtime import get_default_engine
from calday.syntax import Instruction


class TestCacheConfig:
    """CacheConfig validation."""

    def test_default_size(self) -> None:
        assert CacheConfig().size == 1024

    @pytest.mark.parametrize("size", [0, -5])
    def test_size_must_be_positive(self, size: int) -> None:
        with pytest.raises(ValueError, match="size must be positive"):
            CacheConfig(size=size)

    def test_engine_uses_config(self) -> None:
        config = CacheConfig(size=3)
        engine = LayoutEngine(cache=config)
        assert engine.cache_config is config
        assert engine.cache_stats()["maxsize"] == 3


class TestEngineOperations:
    """format, parse and compile through the cache."""

    def test_compile_is_memoized(self, engine: LayoutEngine) -> None:
        first = engine.compile(RFC3339)
        assert engine.compile(RFC3339) is first
        assert first[0] == Instruction(FormatOp.LONG_YEAR)

    def test_format(self, engine: LayoutEngine) -> None:
        assert engine.format(Date.of(2023, 10, 25), "Jan 2, 2006") == "Oct 25, 2023"

    def test_parse(self, engine: LayoutEngine) -> None:
        assert engine.parse(RFC3339, "2023-10-25") == (Date.of(2023, 10, 25), ())

    def test_format_and_parse_share_cache(self, engine: LayoutEngine) -> None:
        engine.format(Date.of(2023, 10, 25), RFC3339)
        engine.parse(RFC3339, "2023-10-25")
        stats = engine.cache_stats()
        assert stats["entries"] == 1
        assert stats["hits"] == 1
        assert stats["misses"] == 1

    def test_date_methods_accept_engine(self, engine: LayoutEngine) -> None:
        d = Date.parse(RFC3339, "2023-10-25", engine=engine)
        assert d.format("02/01/2006", engine=engine) == "25/10/2023"
        assert engine.cache_stats()["entries"] == 2

    def test_clear_cache(self, engine: LayoutEngine) -> None:
        engine.format(Date.of(2023, 10, 25), RFC3339)
        engine.clear_cache()
        stats = engine.cache_stats()
        assert stats["entries"] == 0
        assert stats["misses"] == 0

    def test_evict(self, engine: LayoutEngine) -> None:
        engine.compile(RFC3339)
        engine.compile("Jan")
        engine.evict(RFC3339)
        engine.evict("never compiled")
        assert engine.cache_stats()["entries"] == 1

    def test_small_cache_keeps_working(self) -> None:
        engine = LayoutEngine(cache=CacheConfig(size=1))
        d = Date.of(2023, 10, 25)
        for layout in (RFC3339, "Jan 2", RFC3339, "Jan 2"):
            assert engine.parse(layout, engine.format(d, layout))[1] == ()
        assert engine.cache_stats()["entries"] == 1


class TestDefaultEngine:
    """Process-wide engine."""

    def test_identity(self) -> None:
        assert get_default_engine() is get_default_engine()

    def test_first_use_race_builds_one_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        built: list[LayoutEngine] = []

        class CountingEngine(LayoutEngine):
            __slots__ = ()

            def __init__(self) -> None:
                time.sleep(0.02)
                super().__init__()
                built.append(self)

        monkeypatch.setattr(engine_module, "_DEFAULT_ENGINE", None)
        monkeypatch.setattr(engine_module, "LayoutEngine", CountingEngine)
        barrier = threading.Barrier(8)

        def first_use(_i: int) -> LayoutEngine:
            barrier.wait()
            return get_default_engine()

        with ThreadPoolExecutor(max_workers=8) as pool:
            engines = list(pool.map(first_use, range(8)))

        assert len(built) == 1
        assert all(engine is built[0] for engine in engines)

    def test_date_format_uses_default_engine(self) -> None:
        engine = get_default_engine()
        Date.of(2023, 10, 25).format("2006 Jan")
        assert "2006 Jan" in engine._cache  # noqa: SLF001


class TestLogging:
    """Log output of the engine."""

    def test_construction_logged_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="calday.runtime.engine"):
            LayoutEngine(cache=CacheConfig(size=7))
        assert "cache size=7" in caplog.text

    def test_parse_failure_logged_at_debug(
        self, engine: LayoutEngine, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="calday.runtime.engine"):
            engine.parse(RFC3339, "2023-02-30")
        assert "day out of range" in caplog.text

    def test_success_not_logged(
        self, engine: LayoutEngine, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="calday.runtime.engine"):
            engine.parse(RFC3339, "2023-02-28")
        assert [r for r in caplog.records if r.name == "calday.runtime.engine"] == []

    def test_cache_miss_logged(self, engine: LayoutEngine, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="calday.runtime.cache"):
            engine.compile("Mon Jan")
        assert "Layout cache miss: 'Mon Jan'" in caplog.text
