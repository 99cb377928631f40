"""Unit tests for health checks."""

import pytest
from core.health import (
    CheckResult,
    HealthChecker,
    Status,
    create_random_source_check,
    create_sortable_check,
)
from helpers import FrozenClock, ScriptedSource
from idgen.random_id import RandomSegmentGenerator
from idgen.sortable import SortableIdGenerator


def _broken(size):
    raise OSError("no entropy")


class TestChecks:
    """Tests for individual checks."""

    @pytest.mark.asyncio
    async def test_random_source_ok(self, random_generator):
        """Working source reports healthy."""
        result = await create_random_source_check(random_generator)()
        assert result.status == Status.OK

    @pytest.mark.asyncio
    async def test_sortable_ok(self, sortable):
        """Generator without overflows is healthy."""
        sortable.generate()
        result = await create_sortable_check(sortable)()
        assert result.status == Status.OK
        assert result.msg == "1issued"

    @pytest.mark.asyncio
    async def test_sortable_degraded_after_overflow(self):
        """Any overflow degrades the generator check."""
        random_generator = RandomSegmentGenerator(batch_size=8, source=ScriptedSource([61] * 8))
        generator = SortableIdGenerator(random_generator=random_generator, clock=FrozenClock())
        generator.generate()
        with pytest.raises(OverflowError):
            generator.generate()

        result = await create_sortable_check(generator)()
        assert result.status == Status.DEGRADED


class TestHealthChecker:
    """Tests for HealthChecker aggregation."""

    @pytest.mark.asyncio
    async def test_all_ok(self, random_generator, sortable):
        """Healthy checks give a healthy report."""
        checker = HealthChecker()
        checker.register("random_source", create_random_source_check(random_generator))
        checker.register("sortable_generator", create_sortable_check(sortable), critical=False)

        report = await checker.check()
        assert report.status == Status.OK
        assert [check["name"] for check in report.to_dict()["checks"]] == ["random_source", "sortable_generator"]

    @pytest.mark.asyncio
    async def test_critical_failure(self):
        """A failing random source fails the report."""
        checker = HealthChecker()
        checker.register("random_source", create_random_source_check(RandomSegmentGenerator(source=_broken)))

        report = await checker.check()
        assert report.status == Status.FAIL
        assert report.checks[0].status == Status.FAIL

    @pytest.mark.asyncio
    async def test_non_critical_degrades(self):
        """A failing non-critical check only degrades."""
        async def failing():
            return CheckResult("extra", Status.FAIL, "down")

        checker = HealthChecker()
        checker.register("extra", failing, critical=False)

        report = await checker.check()
        assert report.status == Status.DEGRADED

    @pytest.mark.asyncio
    async def test_report_is_cached(self, random_generator):
        """Reports are reused within the ttl."""
        checker = HealthChecker(ttl=60)
        checker.register("random_source", create_random_source_check(random_generator))
        assert await checker.check() is await checker.check()
