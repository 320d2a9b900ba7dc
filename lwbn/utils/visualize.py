import matplotlib.pyplot as plt

"""
Utilities for plotting how the estimates of likelihood weighting behave
"""

# -plots the variance of both posterior components against the sample count
# -stats is a list of stats.Stats, ordered by sample count
# -saves the plot into fname if given, otherwise shows it
def plot_variance(stats,title,fname=None):
    counts = [s.sample_count for s in stats]
    true   = [s.variance[0] for s in stats]
    false  = [s.variance[1] for s in stats]

    fig, ax = plt.subplots()
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('sample count')
    ax.set_ylabel('variance of estimate')
    ax.set_title(title)

    ax.plot(counts,true,marker='o',label='true')
    ax.plot(counts,false,marker='x',linestyle='--',label='false')
    ax.legend()

    if fname is None:
        plt.show()
    else:
        fig.savefig(fname)
    plt.close(fig)
    return fname
