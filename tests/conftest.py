import os

os.environ.setdefault("MPLBACKEND", "Agg")

import numpy as np
import pytest

import lwbn.bn.cpt as cpt
import lwbn.sample.outcomes as outcomes
import lwbn.utils.precision as p
import lwbn.utils.utils as u
import lwbn.examples.networks as networks


@pytest.fixture(autouse=True)
def _restore_globals():
    """The command line flips module-level settings; put them back after each test."""
    yield
    u.set_verbose()
    p.set_low_precision()


@pytest.fixture
def sprinkler():
    return networks.sprinkler(seed=0)


def _exact(bn, query, evidence):
    # brute force over the joint distribution, used as ground truth
    bn.validate()
    weights = np.zeros(2)
    for a in outcomes.space(bn.nodes):
        if any(a[e] != v for e, v in evidence.items()):
            continue
        joint = np.prod([n.probability(a[n.name], a) for n in bn.nodes])
        weights[cpt.index(a[query])] += joint
    return weights / weights.sum()


@pytest.fixture
def exact():
    return _exact
