import numpy as np
from collections.abc import Mapping

import lwbn.utils.precision as p
import lwbn.utils.utils as u
from lwbn.utils.errors import DegenerateResult

"""
Likelihood weighting.

Evidence variables are clamped to their observed values instead of being
sampled. Every other variable is sampled from its cpt given the values of its
parents, visiting parents before children. Each sample is weighted by the
product of P(e | parents(e)) over the evidence variables e, and the posterior
of the query variable is read off the normalized weighted counts.
"""

# -returns [P(query=True | evidence), P(query=False | evidence)] estimated
#  from sample_count weighted samples
# -evidence maps node names to True/False
# -the counts of bn are not changed: samples are added to a copy holding the
#  outcomes of bn.counts that agree with evidence
def likelihood_weight(bn,query,evidence,sample_count,rng=None):
    u.input_check(type(sample_count) is int and sample_count > 0,
        f'sample count must be a positive integer, not {sample_count!r}')
    u.input_check(isinstance(evidence,Mapping),
        f'evidence must be a mapping from node names to True/False')
    u.input_check(all(type(v) is bool for v in evidence.values()),
        f'evidence values must be True or False: {evidence}')
    u.check(bn.is_node_name(query),
        f'query {query} is not a node of network {bn.name}',
        'likelihood weighting')
    unknown = [e for e in evidence if not bn.is_node_name(e)]
    u.check(not unknown,
        f'evidence {u.unpack(unknown)} are not nodes of network {bn.name}',
        'likelihood weighting')
    u.warning(query in evidence,
        f'query {query} is also evidence')

    bn.validate()
    rng    = bn.rng if rng is None else rng
    roots  = bn.roots()     # sampling always starts at the roots
    counts = bn.counts.consistent(evidence)

    for _ in range(sample_count):
        # every sample starts from a fresh assignment holding only the evidence
        assignment, weight = weighted_sample(roots,evidence,rng)
        counts.add(assignment,weight)

    return [round(float(x),p.digits) for x in normalize(query,counts)]


# -samples all nodes reachable from frontier, parents before children
# -returns the assignment of all visited nodes and its weight
# -frontier: nodes whose parents have all been visited (the roots for a
#  fresh sample, where assignment holds only the evidence)
# -a node enters the next frontier once all its parents have values, so each
#  node is visited exactly once even when its parents are at different depths
def weighted_sample(frontier,evidence,rng,assignment=None,weight=1.):
    assignment = dict(evidence) if assignment is None else assignment
    # nodes the caller already sampled count as visited, evidence does not
    visited    = set(assignment) - set(evidence)

    while frontier:
        children = []
        for node in frontier:
            visited.add(node.name)
            if node.name in evidence:
                # clamped: correct the weight by P(node=value | parents)
                value   = evidence[node.name]
                weight *= node.probability(value,assignment)
            else:
                # sampled from P(node | parents): weight is unchanged
                r     = rng.random()
                value = node.probability(True,assignment) > r
            assignment[node.name] = bool(value)
            children.extend(node.children)

        ready = lambda n: n.name not in visited and \
                    all(p.name in visited for p in n.parents)
        frontier = [n for n in u.unique(children) if ready(n)]

    return assignment, weight


# -returns [P(x=True), P(x=False)] as np array, according to weighted counts
# -raises DegenerateResult if no outcome has positive weight
def normalize(x,counts):
    weights = np.zeros(2)
    for assignment, w in counts.items():
        weights[0 if assignment.get(x) is True else 1] += w
    total = np.sum(weights)
    if total == 0:
        raise DegenerateResult(
            f'cannot normalize over {x}: all samples have zero weight')
    return weights/total
