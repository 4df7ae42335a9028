import math

import pytest

from rwpe import InvalidConfigurationError, estimate
from rwpe.config import BudgetConfig, PriorConfig
from rwpe.oracles import CountingOracle, SimulatedPhaseOracle
from rwpe.pe import INV_SQRT_E, PREFACTOR, RandomWalkPhaseEstimator


def _run(oracle, *, mean=0.0, std=1.0, n=5, max_m=100, unwind=1, **kw):
    return RandomWalkPhaseEstimator(**kw).run(
        oracle,
        prior=PriorConfig(initial_mean=mean, initial_std_dev=std),
        budget=BudgetConfig(n_measurements=n, max_measurements=max_m, unwind_depth=unwind),
    )


def test_single_update_reference_value(scripted_oracle):
    oracle = scripted_oracle(default=0)
    phi = estimate(oracle, 0.0, 1.0, 1, 2, 1)
    assert phi == pytest.approx(-0.60653065971263342, abs=1e-15)
    assert len(oracle.calls) == 2


def test_always_zero_accepts_every_update(scripted_oracle):
    oracle = scripted_oracle(default=0)
    res = _run(oracle, n=5, max_m=100)

    assert len(oracle.calls) == 10
    assert res.samples_used == 10
    assert res.accepted_updates == 5
    assert res.rollback_passes == 0
    assert res.terminated_by == "target_reached"
    assert res.std_dev == pytest.approx(PREFACTOR**5)

    expected_mean = -sum(INV_SQRT_E * PREFACTOR**k for k in range(5))
    assert res.estimate == pytest.approx(expected_mean)


def test_oracle_call_pattern_alternates_sampling_and_validation(scripted_oracle):
    oracle = scripted_oracle(default=0)
    _run(oracle, n=2, max_m=100)

    (o1, s1), (o2, s2), (o3, s3), _ = oracle.calls
    assert o1 == pytest.approx(-math.pi / 2)
    assert s1 == pytest.approx(1.0)
    # validation probes sit at the updated mean with scale 1/spread
    assert o2 == pytest.approx(-INV_SQRT_E)
    assert s2 == pytest.approx(1.0 / PREFACTOR)
    assert o3 == pytest.approx(-INV_SQRT_E - math.pi * PREFACTOR / 2)
    assert s3 == pytest.approx(s2)


def test_target_reached_exactly_at_budget(scripted_oracle):
    oracle = scripted_oracle(default=0)
    res = _run(oracle, n=5, max_m=10)
    assert res.samples_used == 10
    assert res.accepted_updates == 5
    assert res.terminated_by == "target_reached"


def test_budget_below_target_terminates_early(scripted_oracle):
    oracle = scripted_oracle(default=0)
    res = _run(oracle, n=10, max_m=4)
    assert len(oracle.calls) == 4
    assert res.accepted_updates == 2
    assert res.terminated_by == "budget_exhausted"


def test_budget_checked_before_validation(scripted_oracle):
    oracle = scripted_oracle(default=0)
    res = _run(oracle, n=1, max_m=1)
    assert len(oracle.calls) == 1
    assert res.accepted_updates == 0
    assert res.estimate == pytest.approx(-INV_SQRT_E)
    assert res.terminated_by == "budget_exhausted"


def test_single_failed_validation_rolls_back_once(scripted_oracle):
    # sample ZERO, validation ONE (fail), re-validation ZERO, then all ZERO
    oracle = scripted_oracle([0, 1, 0], default=0)
    res = _run(oracle, n=2, max_m=100, unwind=1)

    assert len(oracle.calls) == 2 * 2 + 1
    assert res.rollback_passes == 1
    assert res.entries_unwound == 1
    assert res.accepted_updates == 2
    # The rolled-back step leaves a single effective update from the prior.
    assert res.estimate == pytest.approx(-INV_SQRT_E)
    assert res.std_dev == pytest.approx(PREFACTOR)
    # the re-validation probe is made at the restored prior
    assert oracle.calls[2] == (pytest.approx(0.0, abs=1e-12), pytest.approx(1.0))


def test_unwind_depth_bounded_by_available_history(scripted_oracle):
    oracle = scripted_oracle([0, 1, 0], default=0)
    res = _run(oracle, n=1, max_m=100, unwind=5)

    assert len(oracle.calls) == 3
    assert res.entries_unwound == 1
    assert res.estimate == pytest.approx(0.0, abs=1e-12)
    assert res.std_dev == pytest.approx(1.0)


def test_unwind_depth_undoes_several_updates(scripted_oracle):
    # three accepted steps, then a failed check after the fourth update undoes two
    seq = [0, 0, 1, 0, 0, 0, 1, 1, 0]
    oracle = scripted_oracle(seq, default=0)
    res = _run(oracle, n=4, max_m=100, unwind=2)

    assert res.rollback_passes == 1
    assert res.entries_unwound == 2
    assert res.accepted_updates == 4
    # 4 sampling + 4 validation + 1 re-validation
    assert res.samples_used == 9


def test_persistent_failure_consumes_budget_without_exceeding_it(scripted_oracle):
    oracle = scripted_oracle([0], default=1)
    res = _run(oracle, n=1, max_m=6, unwind=1)

    assert len(oracle.calls) == 6
    assert res.samples_used == 6
    assert res.terminated_by == "budget_exhausted"
    assert res.accepted_updates == 0
    assert res.entries_unwound == 1
    assert res.rollback_passes == 5
    assert res.estimate == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("seed", range(8))
@pytest.mark.parametrize("n, max_m, unwind", [(5, 7, 1), (20, 25, 2), (50, 400, 3), (3, 1, 1)])
def test_never_exceeds_budget(seed, n, max_m, unwind):
    oracle = CountingOracle(SimulatedPhaseOracle(0.7, seed=seed))
    res = _run(oracle, mean=0.0, std=1.0, n=n, max_m=max_m, unwind=unwind)
    assert oracle.calls == res.samples_used
    assert res.samples_used <= max_m
    assert res.accepted_updates <= n
    assert math.isfinite(res.estimate)
    assert res.std_dev > 0


def test_bool_outcomes_are_accepted():
    res = _run(lambda offset, scale: False, n=3, max_m=100)
    assert res.accepted_updates == 3
    assert res.samples_used == 6


def test_oracle_exceptions_propagate():
    def broken(offset, scale):
        raise RuntimeError("device offline")

    with pytest.raises(RuntimeError, match="device offline"):
        estimate(broken, 0.0, 1.0, 5, 10, 1)


def test_invalid_outcome_value_propagates():
    with pytest.raises(ValueError, match="0 or 1"):
        estimate(lambda offset, scale: 3, 0.0, 1.0, 5, 10, 1)


@pytest.mark.parametrize(
    "args",
    [
        (0.0, 0.0, 5, 10, 1),
        (0.0, -1.0, 5, 10, 1),
        (0.0, float("nan"), 5, 10, 1),
        (float("inf"), 1.0, 5, 10, 1),
        (0.0, 1.0, 0, 10, 1),
        (0.0, 1.0, 5, 0, 1),
        (0.0, 1.0, 5, 10, 0),
        (0.0, 1.0, 5, 10, -2),
        (0.0, 1.0, 5, 10, 1.5),
        (0.0, 1.0, True, 10, 1),
    ],
)
def test_invalid_configuration_rejected_before_sampling(scripted_oracle, args):
    oracle = scripted_oracle(default=0)
    with pytest.raises(InvalidConfigurationError):
        estimate(oracle, *args)
    assert oracle.calls == []


def test_invalid_history_depth_rejected():
    with pytest.raises(InvalidConfigurationError, match="history_depth"):
        RandomWalkPhaseEstimator().run(
            lambda o, s: 0,
            prior=PriorConfig(),
            budget=BudgetConfig(n_measurements=2, max_measurements=4, history_depth=0),
        )


def test_history_depth_limits_rollback_reach(scripted_oracle):
    # two accepted steps, then a failing check; history remembers only the last step
    seq = [0, 0, 0, 0, 0, 1, 1, 0]
    oracle = scripted_oracle(seq, default=0)
    res = RandomWalkPhaseEstimator().run(
        oracle,
        prior=PriorConfig(),
        budget=BudgetConfig(
            n_measurements=3, max_measurements=100, unwind_depth=3, history_depth=1
        ),
    )
    assert res.entries_unwound == 1
    assert res.rollback_passes == 2
    assert res.accepted_updates == 3


def test_trace_records_every_step(scripted_oracle):
    oracle = scripted_oracle([0, 1, 0], default=0)
    res = _run(oracle, n=2, max_m=100, record_trace=True)
    kinds = [step["kind"] for step in res.diagnostics["trace"]]
    assert kinds == ["sample", "validate", "rollback", "validate", "sample", "validate"]


def test_simulated_oracle_converges_near_phase():
    phase = 0.42
    errors = []
    for seed in range(11):
        res = _run(SimulatedPhaseOracle(phase, seed=seed), n=60, max_m=600, unwind=2)
        errors.append(abs(res.estimate - phase))
    assert sorted(errors)[len(errors) // 2] < 0.1
