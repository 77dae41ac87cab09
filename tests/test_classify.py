# tests/test_classify.py

import pytest
from datetime import datetime, timedelta, timezone

from moonphase.core.errors import InvalidModelError
from moonphase.core.types import LunarModel, ModelId, PhaseDescriptor, PhaseThreshold
from moonphase.engines.age import compute_age
from moonphase.engines.classify import classify, phase_index
from moonphase.engines.presets import MEAN, MEAN_BOUNDS, OCTANTS, SYNODIC_MONTH

EPOCH = datetime(2000, 1, 6, 18, 14, tzinfo=timezone.utc)

NAMES = [
    "New Moon", "Waxing Crescent", "First Quarter", "Waxing Gibbous",
    "Full Moon", "Waning Gibbous", "Last Quarter", "Waning Crescent", "New Moon",
]


def test_literal_table():
    assert [p.threshold for p in MEAN.phases] == list(MEAN_BOUNDS)
    assert [p.name for p in MEAN.phases] == NAMES
    assert MEAN.phases[0].glyph == "\U0001F311"
    assert MEAN.phases[4].glyph == "\U0001F315"
    assert MEAN.phases[-1].glyph == MEAN.phases[0].glyph


def test_new_moon_boundary():
    assert classify(1.84566).name == "New Moon"
    assert classify(1.84567).name == "Waxing Crescent"


@pytest.mark.parametrize("i", range(8))
def test_each_bound_is_inclusive(i):
    bound = MEAN_BOUNDS[i]
    assert classify(bound).name == NAMES[i]
    assert classify(bound + 1e-6).name == NAMES[i + 1]


def test_zero_age_is_new_moon():
    assert classify(0.0) == PhaseDescriptor("New Moon", "\U0001F311")


def test_tail_past_last_bound_falls_back_to_new_moon():
    # 29.53058 < age < 29.53058867
    age = 29.530585
    assert phase_index(age) is None
    assert classify(age) == MEAN.default_phase
    assert classify(1e9).name == "New Moon"


def test_negative_age_lands_in_first_bucket():
    assert phase_index(-3.0) == 0
    assert classify(-3.0).name == "New Moon"


def test_same_bucket_same_name():
    lo = 0.0
    for bound, name in zip(MEAN_BOUNDS, NAMES):
        step = (bound - lo) / 25
        names = {classify(lo + step * k + 1e-9).name for k in range(25)}
        assert names == {name}
        lo = bound


def test_end_to_end_epoch_is_new_moon():
    age = compute_age(EPOCH)
    assert age == 0.0
    assert classify(age).name == "New Moon"


def test_end_to_end_half_cycle_is_full_moon():
    age = compute_age(EPOCH + timedelta(days=14.7653))
    assert 12.91963 < age <= 16.61096
    assert classify(age).name == "Full Moon"


def test_octants_bounds_are_odd_sixteenths():
    L = SYNODIC_MONTH
    bounds = [p.threshold for p in OCTANTS.phases]
    assert bounds[0] == pytest.approx(L / 16)
    assert bounds[4] == pytest.approx(9 * L / 16)
    assert bounds[-1] == L
    # rounded literal table agrees to ~1e-5 d
    for a, b in zip(bounds, MEAN_BOUNDS):
        assert a == pytest.approx(b, abs=1e-5)


def test_octants_covers_whole_cycle():
    assert phase_index(SYNODIC_MONTH - 1e-9, model=OCTANTS) == 8
    assert classify(SYNODIC_MONTH / 2, model=OCTANTS).name == "Full Moon"


def _model(phases, **kw):
    args = dict(
        id=ModelId("custom", "t", "0"),
        epoch=EPOCH,
        synodic_month=SYNODIC_MONTH,
        phases=phases,
        default_phase=PhaseDescriptor("New Moon", "\U0001F311"),
    )
    args.update(kw)
    return LunarModel(**args)


def test_model_rejects_decreasing_thresholds():
    with pytest.raises(InvalidModelError):
        _model((PhaseThreshold(5.0, "A", "a"), PhaseThreshold(4.0, "B", "b")))


def test_model_rejects_naive_epoch():
    with pytest.raises(InvalidModelError):
        _model((PhaseThreshold(30.0, "A", "a"),), epoch=datetime(2000, 1, 6, 18, 14))


def test_model_rejects_empty_table_and_bad_cycle():
    with pytest.raises(ValueError):
        _model(())
    with pytest.raises(ValueError):
        _model((PhaseThreshold(30.0, "A", "a"),), synodic_month=0.0)


def test_model_allows_equal_thresholds():
    m = _model((PhaseThreshold(1.0, "A", "a"), PhaseThreshold(1.0, "B", "b"), PhaseThreshold(30.0, "C", "c")))
    assert classify(1.0, model=m).name == "A"
    assert classify(1.5, model=m).name == "C"
