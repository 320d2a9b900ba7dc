import numpy as np

import lwbn.bn.cpt as cpt
from lwbn.bn.bn import BN
from lwbn.bn.node import Node

"""
Example networks.

# sprinkler: cloudy -> rain, sprinkler   rain, sprinkler -> wet_grass
# chain:     v0 -> v1 -> .. -> v(size-1)
# random:    random dag over vcount nodes
"""

def sprinkler(seed=None):

    cloudy    = Node('cloudy')
    rain      = Node('rain')
    sprinkler = Node('sprinkler')
    wet_grass = Node('wet_grass')

    cloudy.add_child(sprinkler)
    cloudy.add_child(rain)
    sprinkler.add_child(wet_grass)
    rain.add_child(wet_grass)

    cloudy.set_cpt([({'cloudy': True},  .5),
                    ({'cloudy': False}, .5)])

    rain.set_cpt([({'cloudy': True,  'rain': True},  .8),
                  ({'cloudy': True,  'rain': False}, .2),
                  ({'cloudy': False, 'rain': True},  .2),
                  ({'cloudy': False, 'rain': False}, .8)])

    sprinkler.set_cpt([({'cloudy': True,  'sprinkler': True},  .1),
                       ({'cloudy': True,  'sprinkler': False}, .9),
                       ({'cloudy': False, 'sprinkler': True},  .5),
                       ({'cloudy': False, 'sprinkler': False}, .5)])

    wet_grass.set_cpt([({'sprinkler': True,  'rain': True,  'wet_grass': True},  .99),
                       ({'sprinkler': True,  'rain': True,  'wet_grass': False}, .01),
                       ({'sprinkler': True,  'rain': False, 'wet_grass': True},  .90),
                       ({'sprinkler': True,  'rain': False, 'wet_grass': False}, .10),
                       ({'sprinkler': False, 'rain': True,  'wet_grass': True},  .90),
                       ({'sprinkler': False, 'rain': True,  'wet_grass': False}, .10),
                       ({'sprinkler': False, 'rain': False, 'wet_grass': True},  0.),
                       ({'sprinkler': False, 'rain': False, 'wet_grass': False}, 1.)])

    net = BN('sprinkler',seed=seed)
    net.add(cloudy)
    net.add(rain)
    net.add(sprinkler)
    net.add(wet_grass)

    return net


def chain(size,seed=None):
    assert size >= 1

    rng   = np.random.default_rng(seed)
    net   = BN(f'chain-{size}',seed=seed)
    last  = None
    for i in range(size):
        parents = [] if last is None else [last]
        node    = Node(f'v{i}',parents=parents,cpt=cpt.random(len(parents)+1,rng))
        net.add(node)
        last = node

    return net


"""
A generator for random bayesian networks.

# vcount: number of variables
# pcount: maximum number of parents per node
# back:   maximum distance between node and its parents in natural var order
"""

def random(vcount,pcount,back,seed=None):
    assert vcount >= 1 and pcount < vcount
    assert back < vcount and pcount <= back

    rng          = np.random.default_rng(seed)
    net          = BN(f'random-{vcount}-{pcount}-{back}',seed=seed)
    parents_pool = []

    for i in range(vcount):
        pc      = int(rng.integers(1+min(i,pcount))) # number of parents
        picks   = rng.choice(len(parents_pool),pc,replace=False) if pc else []
        parents = [parents_pool[k] for k in picks]
        node    = Node(f'v{i}',parents=parents,cpt=cpt.random(pc+1,rng))
        net.add(node)

        parents_pool.append(node)
        if len(parents_pool) > back:
            parents_pool.pop(0)

    return net
