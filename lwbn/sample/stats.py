import numpy as np
from collections import namedtuple
from tqdm import tqdm

import lwbn.utils.precision as p
import lwbn.utils.utils as u

"""
Statistics of the likelihood weighting estimator.

The estimate of a posterior is itself a random quantity. Repeating the same
query over many independent trials gives the average and the variance of the
estimate, and shows how the variance shrinks as the sample count grows.
"""

# mean and variance are np arrays [true, false]
Stats = namedtuple('Stats',['sample_count','trials','mean','variance'])

# -runs bn.likelihood_weight() trials times and returns the average and the
#  (Bessel-corrected) variance of both posterior components
# -shows a progress bar in verbose mode if progress is True
def estimate(bn,query,evidence,sample_count,trials=1000,*,rng=None,progress=True):
    u.input_check(type(trials) is int and trials >= 2,
        f'at least two trials are needed to estimate a variance, not {trials!r}')

    sum     = np.zeros(2)
    sum_sqr = np.zeros(2)
    for _ in tqdm(range(trials),desc=f'n = {sample_count}',
                  disable=not (progress and u.verbose)):
        posterior = np.array(bn.likelihood_weight(query,evidence,sample_count,rng=rng))
        sum      += posterior
        sum_sqr  += posterior*posterior

    mean     = sum/trials
    variance = (sum_sqr - sum*sum/trials)/(trials-1)
    # rounding errors may push a zero variance slightly below zero
    variance = np.maximum(variance,0.)
    return Stats(sample_count,trials,
                 np.round(mean,p.mean_digits),np.round(variance,p.variance_digits))

# estimate() for each sample count
def sweep(bn,query,evidence,sample_counts=(10,100,500,1000),trials=1000,*,
          rng=None,progress=True):
    u.input_check(len(sample_counts) > 0,
        f'sample counts cannot be empty')
    return [estimate(bn,query,evidence,n,trials,rng=rng,progress=progress)
            for n in sample_counts]

# prints average and variance of stats, under title
def report(stats,title):
    u.show(f'\n{title}')
    u.show('=' * len(title))
    u.show(f'n = {stats.sample_count}, trials = {stats.trials}')
    u.show(f'Average (true, false): {stats.mean.tolist()}')
    u.show(f'Variance (true, false): {stats.variance.tolist()}')
