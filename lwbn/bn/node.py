from copy import copy
from itertools import count

import lwbn.bn.cpt
import lwbn.utils.utils as u

"""
Nodes of boolean bayesian networks.

Edges can be specified when constructing a node (parents=[...]) or later by
calling parent.add_child(child). Either way the edge is recorded once, in the
parents of the child and in the children of the parent.

Nodes carry no sampled values: samplers keep values in their own assignments,
so a node is never changed by inference.
"""
class Node:

    ID     = count() # for generating node IDs
    values = (True,False)
    card   = 2

    # only node name is positional, everything else is keyword only
    def __init__(self, name, *, parents=[], cpt=None):

        # copy potentially mutable arguments in case they get changed by the user
        parents, cpt = copy(parents), copy(cpt)

        # check integrity of arguments
        u.input_check(type(name) is str and name != '',
            f'node name must be a nonempty string')
        u.input_check(type(parents) is list,
            f'node parents must be a list')
        u.input_check(all(type(p) is Node for p in parents),
            f'node parents must be bayesian network nodes')
        u.input_check(len(parents) == len(set(parents)),
            f'node parents must be unique')

        # populate node attributes
        self._id       = next(Node.ID)
        self._name     = name   # a unique string identifier of node
        self._parents  = []     # parents before children
        self._children = []
        self._cpt      = cpt    # as specified by the user
        self._tabular  = None   # np array, set when network is validated
        self._bn       = None   # set when node added to a network

        for p in parents:
            p.add_child(self)

    # for printing
    def __str__(self):
        parents = u.unpack(self.parents,'name')
        return "%s. Node %s: children %s, parents %s" % \
            (self.id, self.name, len(self.children), parents)

    # read only attributes (exposed to user)
    @property
    def id(self):       return self._id
    @property
    def name(self):     return self._name
    @property
    def parents(self):  return tuple(self._parents)
    @property
    def children(self): return tuple(self._children)
    @property
    def family(self):   return (*self._parents,self)
    @property
    def cpt(self):      return self._cpt
    @property
    def bn(self):       return self._bn


    """ public functions """

    # -adds an edge from self to child
    # -the edge is recorded in the children of self and the parents of child
    def add_child(self,child):
        u.input_check(type(child) is Node,
            f'{child} is not a bayesian network node')
        u.input_check(child is not self,
            f'node {self.name} cannot be its own child')
        u.input_check(child not in self._children,
            f'node {child.name} is already a child of node {self.name}')
        self._children.append(child)
        child._parents.append(self)
        # parents changed, so the cpt of child must be validated again
        child._changed()
        self._changed()

    # sets the cpt of self (see cpt.py for accepted forms)
    def set_cpt(self,cpt):
        self._cpt = copy(cpt)
        self._changed()

    # the shape of cpt for self
    def shape(self):
        return tuple(n.card for n in self.family)

    # whether self is root
    def root(self):
        return not self._parents

    # whether self is leaf
    def leaf(self):
        return not self._children

    # returns nodes connected to self (as a set)
    def connected_nodes(self):
        visited = {self}
        stack   = [self]
        while stack:
            n = stack.pop()
            for m in (*n._parents,*n._children):
                if m not in visited:
                    visited.add(m)
                    stack.append(m)
        return visited

    # returns the cpt of self as a read-only np array, validating it if needed
    def tabular_cpt(self):
        if self._tabular is None:
            self._tabular = lwbn.bn.cpt.expand(self,self._cpt)
        return self._tabular

    # -returns P(self=value | parents), where assignment holds the values of
    #  parents (may hold values of other nodes too)
    # -a parent without a value in assignment is a configuration error
    def probability(self,value,assignment):
        cpt = self.tabular_cpt()
        missing = [p.name for p in self._parents if p.name not in assignment]
        u.check(not missing,
            f'parents {u.unpack(missing)} of node {self.name} have no values',
            'looking up cpt')
        index = lwbn.bn.cpt.index
        i = tuple(index(assignment[p.name]) for p in self._parents)
        return float(cpt[(*i,index(value))])


    # drops the validated cpt and marks the network of self as changed
    def _changed(self):
        self._tabular = None
        if self._bn is not None:
            self._bn._validated = False
