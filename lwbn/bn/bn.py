import numpy as np
from graphviz import Digraph

import lwbn.sample.lw as lw
import lwbn.sample.outcomes as outcomes
import lwbn.utils.paths as paths
import lwbn.utils.utils as u
from lwbn.bn.node import Node

"""
BN class: a bayesian network over boolean nodes, queried by likelihood weighting.

Nodes may be added in any order. The network is validated before it is first
queried, and again after any change to its nodes, edges or cpts.
"""

class BN:

    def __init__(self,name='bn',*,seed=None):
        u.input_check(type(name) is str,
            f'network name must be a string')
        self.name       = name
        self.nodes      = []                          # in the order they were added
        self.counts     = outcomes.OutcomeCounts()    # weighted outcome counts
        self.rng        = np.random.default_rng(seed) # shared by all queries
        self._n2o       = {}    # maps node name to node object
        self._validated = False # whether network is ready for sampling

    def __str__(self):
        return 'BN ' + self.name + ": " + str(len(self.nodes)) + ' nodes'

    # adds node to network
    def add(self,node):
        u.input_check(type(node) is Node,
            f'{node} is not a bayesian network node')
        u.check(node.bn is None or node.bn is self, '' if node.bn is None else \
            f'node {node.name} is already in a different network {node.bn.name}',
            'building network')
        u.check(not node.name in self._n2o,
            f'a node with name {node.name} already exists in network {self.name}',
            'building network')

        node._bn             = self
        self._n2o[node.name] = node
        self.nodes.append(node)
        self._validated      = False

    # returns a node object given a node name
    def node(self,name):
        node = self._n2o.get(name,None)
        u.check(node,f'node {name} does not exist in network {self.name}','looking up node')
        return node

    # checks if name is the name of a network node
    def is_node_name(self,name):
        return name in self._n2o

    # nodes without parents, in the order they were added
    def roots(self):
        return [n for n in self.nodes if n.root()]

    def leaves(self):
        return [n for n in self.nodes if n.leaf()]

    # whether network is connected
    def is_connected(self):
        return not self.nodes or self.nodes[0].connected_nodes() == set(self.nodes)

    # reseeds the random generator used by queries
    def seed(self,seed):
        self.rng = np.random.default_rng(seed)

    # -returns the nodes ordered parents before children
    # -raises ConfigurationError if the network has a cycle
    def topological_order(self):
        pending = {n: len(n.parents) for n in self.nodes}
        order   = [n for n in self.nodes if pending[n] == 0]
        for n in order: # order grows while iterating
            for c in n.children:
                if c not in pending: continue # not in network
                pending[c] -= 1
                if pending[c] == 0: order.append(c)
        cyclic = [n.name for n in self.nodes if pending[n] > 0]
        u.check(not cyclic,
            f'nodes {u.unpack(cyclic)} are on a cycle',
            'validating network')
        return order

    # -checks that the network can be sampled:
    #   edges only connect nodes of this network, there are no cycles, and the
    #   cpt of every node covers all instantiations of its family
    # -expands cpts into np arrays (see cpt.py)
    def validate(self):
        if self._validated: return
        for n in self.nodes:
            for m in (*n.parents,*n.children):
                u.check(m.bn is self,
                    f'node {m.name} is connected to {n.name} but was not added to network {self.name}',
                    'validating network')
        self.topological_order()
        for n in self.nodes:
            n.tabular_cpt()
        self._validated = True

    # records every complete assignment to the nodes with zero weight
    def init_outcome_space(self):
        u.warning(len(self.nodes) > 20,
            f'outcome space of network {self.name} has 2^{len(self.nodes)} assignments')
        for assignment in outcomes.space(self.nodes):
            self.counts.init(assignment)

    # -returns [P(query=True | evidence), P(query=False | evidence)] estimated
    #  using likelihood weighting (see lw.py)
    # -rng defaults to the generator of the network
    def likelihood_weight(self,query,evidence,sample_count,*,rng=None):
        return lw.likelihood_weight(self,query,evidence,sample_count,rng)

    # returns a graphviz digraph of the network, with evidence nodes filled
    def digraph(self,evidence=None):
        evidence = {} if evidence is None else evidence
        d = Digraph(self.name)
        d.attr(rankdir='TD')
        d.attr('node', shape='circle')
        d.attr('node', fontsize='20')
        d.attr('node', style='filled')

        for n in self.nodes:
            fcolor = 'lightyellow' if n.name in evidence else 'transparent'
            label  = f'{n.name}={evidence[n.name]}' if n.name in evidence else n.name
            d.node(n.name,label=label,color='black',fillcolor=fcolor)
            for p in n.parents:
                d.edge(p.name,n.name)
        return d

    # visualizes network using graphviz
    def dot(self,fname='bn.gv',view=True,evidence=None):
        fname = paths.ensure(paths.dot) / fname
        d     = self.digraph(evidence)
        d.render(fname,view=view)
        return fname
