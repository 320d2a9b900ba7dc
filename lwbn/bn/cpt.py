import numpy as np
from numbers import Number
from itertools import product
from collections.abc import Mapping

import lwbn.utils.utils as u
from lwbn.utils.errors import ConfigurationError

"""
Utilities for manipulating cpts.

A cpt of node X with parents P1..Pn is held as an np array of shape (2,..,2),
one axis per member of the family [P1,..,Pn,X]. Index 0 stands for value True
and index 1 for value False, so cpt[i1,..,in,:] is the distribution of X
given the parents instantiation (i1,..,in).

Users may specify cpts in three forms:
  # nested lists or np arrays, following the axes above
  # a mapping from assignment keys to probabilities, where a key is a tuple
    or frozenset of (name,value) pairs over the whole family
  # a sequence of (assignment dict, probability) rows

Exposes the following functions:
  # key():
    Canonical, hashable key of an assignment (sorted name/value pairs).
  # index():
    Axis index of a boolean value.
  # random():
    Returns a random cpt as np array.
  # expand():
    Validates a cpt in any of the forms above and expands it into np array.
"""

# -canonical key of an assignment {name: value}
# -the same assignment always maps to the same key, whatever the order in
#  which its pairs were written
def key(assignment):
    return tuple(sorted(dict(assignment).items()))

# index of value along a cpt axis (values are (True,False))
def index(value):
    u.input_check(type(value) is bool,
        f'node values must be True or False, not {value!r}')
    return 0 if value else 1

# returns a random cpt for a binary node whose family has size fsize
def random(fsize,rng=None):
    rng = np.random.default_rng() if rng is None else rng
    p   = rng.uniform(0,1,size=(2,)*(fsize-1))
    return np.stack([p,1.-p],axis=-1)


# -validates a cpt and expands it into a read-only np array
# -raises ConfigurationError if the cpt does not define a proper conditional
#  distribution for every instantiation of the node parents
def expand(node,cpt):
    context = f'specifying cpt of node {node.name}'
    u.check(cpt is not None, f'node {node.name} has no cpt', context)

    if __is_table(cpt):
        cpt = __expand_table(node,__rows(cpt,context),context)
    else:
        try:
            cpt = np.array(cpt,dtype=float)
        except (TypeError,ValueError) as e:
            raise ConfigurationError(f'{context}: cpt is not a proper array ({e})') from e

    u.check(cpt.shape == node.shape(),
        f'cpt has shape {cpt.shape} but family {u.unpack(node.family,"name")} needs {node.shape()}',
        context)
    u.check(np.all((cpt >= 0.) & (cpt <= 1.)),
        f'cpt has entries outside [0,1]:\n  {cpt}',
        context)
    u.check(np.allclose(1.,np.sum(cpt,axis=-1)),
        f'cpt is not normalized:\n  {cpt}',
        context)

    cpt.flags.writeable = False # read only
    return cpt


# whether cpt is given as a table (mapping or rows) rather than nested lists
def __is_table(cpt):
    if isinstance(cpt,Mapping):
        return True
    if isinstance(cpt,np.ndarray) or not isinstance(cpt,(list,tuple)) or not cpt:
        return False
    return all(isinstance(row,tuple) and len(row)==2 and isinstance(row[0],Mapping)
               for row in cpt)

# table as a list of (assignment dict, probability)
def __rows(cpt,context):
    if isinstance(cpt,Mapping):
        for k in cpt:
            u.check(__is_pairs(k),
                f'entry key {k!r} is not a set of (name,value) pairs',
                context)
        return [(dict(k),p) for k,p in cpt.items()]
    return [(dict(a),p) for a,p in cpt]

# whether k is a tuple or frozenset of (name,value) pairs
def __is_pairs(k):
    return isinstance(k,(tuple,frozenset)) and \
        all(isinstance(pair,tuple) and len(pair)==2 for pair in k)

# -constructs a tabular cpt from (assignment, probability) rows
# -every row must assign exactly the family of node, every instantiation of
#  the family must appear exactly once
def __expand_table(node,rows,context):
    names = u.map('name',node.family)
    table = {}
    for assignment, p in rows:
        u.check(set(assignment) == set(names),
            f'entry {assignment} must assign exactly {u.unpack(names)}',
            context)
        u.check(all(type(v) is bool for v in assignment.values()),
            f'entry {assignment} has non-boolean values',
            context)
        u.check(isinstance(p,Number) and type(p) is not bool,
            f'entry {assignment} has probability {p!r} which is not a number',
            context)
        k = key(assignment)
        u.check(k not in table,
            f'duplicate entry for {assignment}',
            context)
        table[k] = p

    cpt = np.zeros(node.shape())
    for values in product((True,False),repeat=len(names)):
        assignment = dict(zip(names,values))
        k = key(assignment)
        u.check(k in table,
            f'missing entry for {assignment}',
            context)
        cpt[tuple(index(v) for v in values)] = table[k]
    return cpt
