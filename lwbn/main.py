import sys, getopt

import lwbn.examples.networks as networks
import lwbn.sample.stats as st
import lwbn.utils.paths as paths
import lwbn.utils.precision as p
import lwbn.utils.utils as u
import lwbn.utils.visualize as visualize
from lwbn.utils.errors import LWError

version = '1.0.0'

# the query answered by the command line
QUERY    = 'cloudy'
EVIDENCE = {'sprinkler': True, 'wet_grass': True}
TITLE    = 'P ( Cloudy | Sprinkler = true, WetGrass = true )'

# sample counts used with -a
SAMPLE_COUNTS = (10,100,500,1000)

# -a: all sample counts (10, 100, 500, 1000)
# -d: high precision when reporting results
# -g: render the network using graphviz
# -h: help
# -p: plot variance against sample count
# -s: silent (suppresses printing)
# -t: number of trials per sample count (default 1000)
# -r: seed of the random generator

usage = 'usage: lwbn -a -d -g -h -p -s -t trials -r seed [sample_count]'

def main(argv):

    try: opts, args = getopt.getopt(argv,'adghpst:r:',[])
    except getopt.GetoptError:
        print(usage)
        sys.exit(2)

    sample_counts = None
    trials        = 1000
    seed          = None
    graph         = False
    plot          = False

    try:
        for opt, arg in opts:
            if   opt == '-a':
                sample_counts = SAMPLE_COUNTS
            elif opt == '-d':
                p.set_high_precision()
            elif opt == '-g':
                graph = True
            elif opt == '-p':
                plot = True
            elif opt == '-s':
                u.set_silent()
            elif opt == '-t':
                trials = int(arg)
            elif opt == '-r':
                seed = int(arg)
            else: # covers -h
                print(usage)
                sys.exit()
        if sample_counts is None:
            sample_counts = (int(args[0]),) if args else (10,)
    except ValueError:
        print(usage)
        sys.exit(2)

    u.show(f'\nlwbn version {version}')
    u.show(f'RAM {u.system_RAM_GB():.1f} GB')
    u.show(f'{p.precision} precision')

    net = networks.sprinkler(seed)
    if graph:
        fname = net.dot('sprinkler.gv',view=False,evidence=EVIDENCE)
        u.show(f'network rendered into {fname}')

    stats = []
    for n in sample_counts:
        u.show(f'\nn = {n}')
        s = st.estimate(net,QUERY,EVIDENCE,n,trials)
        st.report(s,TITLE)
        stats.append(s)

    if plot:
        fname = paths.ensure(paths.plots) / u.time_stamp('variance','png')
        visualize.plot_variance(stats,TITLE,fname)
        u.show(f'\nvariance plot saved into {fname}')

    return stats

# console entry point: library errors are reported and end with exit code 1
def run():
    try:
        main(sys.argv[1:])
    except LWError as e:
        print(f'\nERROR: {e}',file=sys.stderr)
        sys.exit(1)

if __name__ == '__main__':
    run()
