import logging

import pytest

from symorder.core.domain.interfaces.order_detector import OrderDetector
from symorder.core.domain.models.census_record import ClassificationPath
from symorder.core.domain.models.coordinate_set import CoordinateSet
from symorder.core.exceptions import OrderDetectionFailedError
from symorder.core.services.census_service import CensusJob, CensusService
from symorder.core.utils.benchmarking import Timer, TimingStats


class FixedOrderDetector(OrderDetector):
    """Returns the number of points, or fails for empty sets."""

    def calculate_order(self, coords_a, coords_b, axis):
        if len(coords_a) == 0:
            raise OrderDetectionFailedError("Order detection failed: empty")
        return len(coords_a)


@pytest.fixture
def classification():
    return ClassificationPath("b.69", "b.69.8", "b.69.8.1")


@pytest.fixture
def jobs(c3_pair, classification):
    coords_a, coords_b, axis = c3_pair
    return [
        CensusJob("d1abca_", coords_a, coords_b, axis, classification),
        CensusJob(
            "d2xyza_",
            coords_a,
            CoordinateSet(coords_b.coordinates[:10]),
            axis,
            classification,
        ),
    ]


def test_failed_detection_is_recorded_without_order(jobs, caplog):
    """A failing structure is logged and the census carries on."""
    service = CensusService()
    with caplog.at_level(logging.ERROR):
        records = service.run(jobs, progress=False)

    assert [record.structure_id for record in records] == ["d1abca_", "d2xyza_"]
    assert records[0].order == 3
    assert records[1].order is None
    assert records[1].classification.superfamily == "b.69.8"
    assert "d2xyza_" in caplog.text
    assert service.timings.count == 2


def test_custom_detector(c3_pair, classification):
    coords_a, coords_b, axis = c3_pair
    empty = CoordinateSet([])
    jobs = [
        CensusJob("a", empty, empty, axis, classification),
        CensusJob("b", coords_a, coords_b, axis, classification),
    ]
    records = CensusService(FixedOrderDetector()).run(jobs, progress=False)
    assert [record.order for record in records] == [None, len(coords_a)]


def test_worker_processes_keep_input_order(jobs):
    records = CensusService(max_workers=2).run(jobs * 2, progress=False)
    assert [record.order for record in records] == [3, None, 3, None]


def test_empty_census():
    assert CensusService().run([], progress=False) == []


class TestTiming:
    """Tests for the timing helpers."""

    def test_timer(self):
        with Timer("block") as timer:
            pass
        assert timer.elapsed() >= 0.0

    def test_timing_stats(self):
        stats = TimingStats("op")
        assert str(stats) == "op: No timing data"
        for elapsed in (1.0, 3.0, 2.0):
            stats.add_timing(elapsed)
        assert stats.count == 3
        assert stats.avg_time == pytest.approx(2.0)
        assert stats.median_time == 2.0
        assert stats.max_time == 3.0
        assert str(stats).startswith("op: Total: 6.00s")


def test_timings_cover_the_latest_run_only(jobs):
    service = CensusService()
    service.run(jobs, progress=False)
    service.run(jobs[:1], progress=False)
    assert service.timings.count == 1
