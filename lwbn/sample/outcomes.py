import lwbn.bn.cpt as cpt
import lwbn.utils.utils as u

"""
The outcome space of a network and weighted counts over it.

An outcome is a complete assignment {name: value} to the network nodes. Counts
are keyed by the canonical key of an outcome (cpt.key), so two assignments
with the same pairs always share an entry.
"""

# -returns every complete assignment of boolean values to nodes (2^k of them)
# -built one node at a time: each partial assignment is extended with the
#  node set to True and to False
# -the empty set of nodes has a single, empty assignment
def space(nodes):
    rows = [{}]
    for node in nodes:
        rows = [{**row, node.name: v} for row in rows for v in (True,False)]
    return rows


"""
Accumulated weights of outcomes. Unseen outcomes have weight 0, and reading
them does not add them.
"""
class OutcomeCounts:

    def __init__(self,counts=None):
        self._counts = {} if counts is None else dict(counts)

    def __len__(self):
        return len(self._counts)

    def __contains__(self,assignment):
        return cpt.key(assignment) in self._counts

    def __str__(self):
        return f'OutcomeCounts: {len(self)} outcomes, total weight {self.total()}'

    # weight of assignment (0 if never counted)
    def get(self,assignment):
        return self._counts.get(cpt.key(assignment),0.)

    # adds weight to assignment (accumulates)
    def add(self,assignment,weight):
        u.input_check(weight >= 0.,
            f'outcome weights must be non-negative, not {weight}')
        k = cpt.key(assignment)
        self._counts[k] = self._counts.get(k,0.) + weight

    # records assignment with zero weight if it is not already counted
    def init(self,assignment):
        self._counts.setdefault(cpt.key(assignment),0.)

    # (assignment, weight) pairs
    def items(self):
        for k, w in self._counts.items():
            yield dict(k), w

    def total(self):
        return sum(self._counts.values())

    def copy(self):
        return OutcomeCounts(self._counts)

    # -returns a copy holding only outcomes that agree with evidence
    # -outcomes that do not assign an evidence variable are kept
    def consistent(self,evidence):
        keep = lambda k: all(dict(k).get(name,value) == value
                             for name, value in evidence.items())
        return OutcomeCounts({k: w for k, w in self._counts.items() if keep(k)})
