from types import MappingProxyType

import numpy as np
import pytest

import lwbn.examples.networks as networks
import lwbn.sample.lw as lw
import lwbn.sample.outcomes as outcomes
from lwbn.bn.bn import BN
from lwbn.bn.node import Node
from lwbn.utils.errors import ConfigurationError, DegenerateResult, InvalidArgument

EVIDENCE = {"sprinkler": True, "wet_grass": True}


class CountingRNG:
    """Wraps a generator and counts the uniform draws made from it."""

    def __init__(self, seed):
        self.rng = np.random.default_rng(seed)
        self.draws = 0

    def random(self):
        self.draws += 1
        return self.rng.random()


def _skip_level():
    # a -> b -> c and a -> c: c has parents at different depths
    a = Node("a", cpt=[0.6, 0.4])
    b = Node("b", parents=[a], cpt=[[0.7, 0.3], [0.2, 0.8]])
    c = Node("c", parents=[a, b], cpt=[[[0.9, 0.1], [0.5, 0.5]],
                                       [[0.4, 0.6], [0.05, 0.95]]])
    net = BN("skip", seed=3)
    for n in (a, b, c):
        net.add(n)
    return net


def test_weighted_sample_visits_every_node_once(sprinkler):
    sprinkler.validate()
    rng = CountingRNG(0)
    assignment, weight = lw.weighted_sample(sprinkler.roots(), {}, rng)

    assert set(assignment) == {"cloudy", "rain", "sprinkler", "wet_grass"}
    assert rng.draws == 4
    assert weight == 1.0


def test_weighted_sample_skips_draws_for_evidence(sprinkler):
    sprinkler.validate()
    rng = CountingRNG(0)
    assignment, weight = lw.weighted_sample(sprinkler.roots(), EVIDENCE, rng)

    assert set(assignment) == {"cloudy", "rain", "sprinkler", "wet_grass"}
    assert assignment["sprinkler"] is True and assignment["wet_grass"] is True
    assert rng.draws == 2
    assert 0 < weight <= 0.5


def test_weighted_sample_with_parents_at_different_depths():
    net = _skip_level()
    net.validate()
    for seed in range(20):
        rng = CountingRNG(seed)
        assignment, _ = lw.weighted_sample(net.roots(), {}, rng)
        assert set(assignment) == {"a", "b", "c"}
        assert rng.draws == 3


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_weighted_sample_covers_random_networks(seed):
    net = networks.random(15, 3, 6, seed=seed)
    net.validate()
    rng = CountingRNG(seed)
    evidence = {"v14": True}
    assignment, weight = lw.weighted_sample(net.roots(), evidence, rng)

    assert set(assignment) == {n.name for n in net.nodes}
    assert rng.draws == 14
    assert 0 <= weight <= 1


def test_fully_evidenced_weight_is_product_of_cpt_entries():
    evidence = {"cloudy": True, "rain": True, "sprinkler": True, "wet_grass": True}
    expected = 0.5 * 0.8 * 0.1 * 0.99
    for seed in range(5):
        net = networks.sprinkler(seed=seed)
        net.validate()
        assignment, weight = lw.weighted_sample(net.roots(), evidence, net.rng)
        assert assignment == evidence
        assert weight == pytest.approx(expected)


def test_fully_evidenced_query_with_one_sample():
    evidence = {"cloudy": False, "rain": True, "sprinkler": True, "wet_grass": True}
    net = networks.sprinkler(seed=0)
    assert net.likelihood_weight("cloudy", evidence, 1) == [0.0, 1.0]


def test_seeded_queries_are_repeatable():
    first = networks.sprinkler(seed=5).likelihood_weight("cloudy", EVIDENCE, 300)
    second = networks.sprinkler(seed=5).likelihood_weight("cloudy", EVIDENCE, 300)
    assert first == second


def test_explicit_rng_overrides_network_generator(sprinkler):
    first = sprinkler.likelihood_weight("cloudy", EVIDENCE, 300, rng=np.random.default_rng(9))
    second = sprinkler.likelihood_weight("cloudy", EVIDENCE, 300, rng=np.random.default_rng(9))
    assert first == second


def test_posterior_matches_exact_inference(sprinkler, exact):
    truth = exact(sprinkler, "cloudy", EVIDENCE)
    assert truth[0] == pytest.approx(0.0486 / 0.2781)

    estimate = sprinkler.likelihood_weight("cloudy", EVIDENCE, 20000)
    assert estimate[0] == pytest.approx(truth[0], abs=0.02)
    assert sum(estimate) == pytest.approx(1.0, abs=1e-3)


def test_posterior_with_parents_at_different_depths(exact):
    net = _skip_level()
    evidence = {"c": True}
    truth = exact(net, "a", evidence)
    estimate = net.likelihood_weight("a", evidence, 20000)
    assert estimate[0] == pytest.approx(truth[0], abs=0.02)


def test_posterior_without_evidence_is_the_prior(sprinkler):
    estimate = sprinkler.likelihood_weight("rain", {}, 20000)
    assert estimate[0] == pytest.approx(0.5, abs=0.02)


def test_query_that_is_evidence(sprinkler):
    assert sprinkler.likelihood_weight("sprinkler", EVIDENCE, 50) == [1.0, 0.0]


def test_counts_of_network_are_not_changed(sprinkler):
    sprinkler.init_outcome_space()
    sprinkler.likelihood_weight("cloudy", EVIDENCE, 100)
    assert len(sprinkler.counts) == 16
    assert sprinkler.counts.total() == 0


def test_prepopulated_counts_give_same_answer():
    plain = networks.sprinkler(seed=4)
    populated = networks.sprinkler(seed=4)
    populated.init_outcome_space()
    assert plain.likelihood_weight("cloudy", EVIDENCE, 500) == \
        populated.likelihood_weight("cloudy", EVIDENCE, 500)


@pytest.mark.parametrize("sample_count", [0, -5, 2.5, True, "10"])
def test_sample_count_must_be_positive_int(sprinkler, sample_count):
    with pytest.raises(InvalidArgument):
        sprinkler.likelihood_weight("cloudy", EVIDENCE, sample_count)


def test_unknown_query_is_reported(sprinkler):
    with pytest.raises(ConfigurationError, match="query snow"):
        sprinkler.likelihood_weight("snow", EVIDENCE, 10)


def test_unknown_evidence_is_reported(sprinkler):
    with pytest.raises(ConfigurationError, match="evidence snow"):
        sprinkler.likelihood_weight("cloudy", {"snow": True}, 10)


def test_evidence_values_must_be_boolean(sprinkler):
    with pytest.raises(InvalidArgument):
        sprinkler.likelihood_weight("cloudy", {"sprinkler": 1}, 10)
    with pytest.raises(InvalidArgument):
        sprinkler.likelihood_weight("cloudy", [("sprinkler", True)], 10)


def test_impossible_evidence_is_degenerate(sprinkler):
    evidence = {"sprinkler": False, "rain": False, "wet_grass": True}
    with pytest.raises(DegenerateResult):
        sprinkler.likelihood_weight("cloudy", evidence, 100)


def test_bad_cpt_is_reported_before_sampling():
    a = Node("a", cpt=[0.5, 0.5])
    b = Node("b", parents=[a], cpt=[({"a": True, "b": True}, 0.5),
                                    ({"a": True, "b": False}, 0.5)])
    net = BN("net")
    net.add(a)
    net.add(b)
    with pytest.raises(ConfigurationError, match="missing entry"):
        net.likelihood_weight("a", {"b": True}, 10)


def test_normalize():
    counts = outcomes.OutcomeCounts()
    counts.add({"x": True, "y": True}, 0.2)
    counts.add({"x": True, "y": False}, 0.1)
    counts.add({"x": False, "y": True}, 0.7)

    result = lw.normalize("x", counts)
    np.testing.assert_allclose(result, [0.3, 0.7])
    assert result.sum() == pytest.approx(1.0)
    np.testing.assert_allclose(lw.normalize("y", counts), [0.9, 0.1])


def test_normalize_ignores_zero_weight_outcomes():
    counts = outcomes.OutcomeCounts()
    for row in outcomes.space([Node("x"), Node("y")]):
        counts.init(row)
    counts.add({"x": False, "y": False}, 0.4)
    np.testing.assert_allclose(lw.normalize("x", counts), [0.0, 1.0])


def test_normalize_without_weight_is_degenerate():
    counts = outcomes.OutcomeCounts()
    with pytest.raises(DegenerateResult):
        lw.normalize("x", counts)
    counts.init({"x": True})
    with pytest.raises(DegenerateResult):
        lw.normalize("x", counts)


def test_evidence_may_be_any_mapping():
    plain = networks.sprinkler(seed=6).likelihood_weight("cloudy", EVIDENCE, 200)
    proxied = networks.sprinkler(seed=6).likelihood_weight("cloudy", MappingProxyType(EVIDENCE), 200)
    assert plain == proxied
