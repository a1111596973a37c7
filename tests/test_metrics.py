import math
from datetime import datetime, timedelta

import pytest

from tcxkit import metrics
from tcxkit.formats.tcx import parse_tcx_file, parse_tcx_string
from tcxkit.models import ActivityRecord, TrackPoint

START = datetime(2023, 5, 1, 10, 0, 0)


def make_record(points=(), distance=10000.0, duration=3600.0):
    return ActivityRecord(START, "", "Running", distance, duration, 0, tuple(points))


def point(seconds, lat, lon, alt=0.0):
    return TrackPoint(START + timedelta(seconds=seconds), lat, lon, 0, alt, 0.0)


def test_static_values_pass_through():
    record = make_record(distance=4200.0, duration=1500.0)
    assert metrics.distance_static(record) == 4200.0
    assert metrics.duration_static(record) == 1500.0


def test_average_speed_and_pace():
    record = make_record()
    assert metrics.average_speed(record) == 10.0
    assert metrics.average_pace(record) == 6.0


def test_activity_type_passes_through():
    assert metrics.activity_type(make_record()) == "Running"


def test_average_speed_without_duration():
    assert metrics.average_speed(make_record(duration=0.0)) == math.inf
    assert metrics.average_pace(make_record(duration=0.0)) == 0.0


def test_average_pace_without_distance(tcx_builder):
    record = parse_tcx_string(tcx_builder()).record
    assert record.distance_static == 0.0
    assert metrics.average_pace(record) == math.inf
    assert metrics.average_speed(record) == 0.0


def test_rates_without_any_totals():
    record = make_record(distance=0.0, duration=0.0)
    assert math.isnan(metrics.average_speed(record))
    assert math.isnan(metrics.average_pace(record))


def test_distance_recomputed_empty_and_single_point():
    assert metrics.distance_recomputed(make_record()) == 0
    assert metrics.distance_recomputed(make_record([point(0, 1.0, 1.0)])) == 0


def test_distance_recomputed_one_degree_on_equator():
    record = make_record([point(0, 0.0, 0.0), point(60, 0.0, 1.0)])
    assert metrics.distance_recomputed(record) == pytest.approx(111319.49, rel=1e-4)


def test_distance_recomputed_includes_climb():
    record = make_record([point(0, 45.0, 7.0, 100.0), point(60, 45.0, 7.0, 130.0)])
    assert metrics.distance_recomputed(record) == pytest.approx(30.0)


def test_distance_recomputed_sums_consecutive_pairs():
    a, b, c = point(0, 0.0, 0.0), point(60, 0.0, 1.0), point(120, 0.0, 2.0)
    expected = metrics.point_distance(a, b) + metrics.point_distance(b, c)
    assert metrics.distance_recomputed(make_record([a, b, c])) == pytest.approx(expected)
    assert expected == pytest.approx(2 * 111319.49, rel=1e-4)


def test_distance_recomputed_on_sample(sample_tcx_path):
    record = parse_tcx_file(sample_tcx_path).record
    assert metrics.distance_recomputed(record) > 0
