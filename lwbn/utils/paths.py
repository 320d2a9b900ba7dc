from pathlib import Path

"""
Directories for files produced by lwbn (relative to the working directory).
Directories are created when first requested.
"""

logs  = Path('logs')
dot   = logs / 'dot'    # graphviz renderings of networks
plots = logs / 'plots'  # variance plots

def ensure(directory):
    directory.mkdir(parents=True,exist_ok=True)
    return directory
