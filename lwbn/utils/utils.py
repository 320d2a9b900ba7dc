from datetime import datetime
from psutil import virtual_memory

from lwbn.utils.errors import ConfigurationError, InvalidArgument

"""
Various utilities
"""

verbose = True # can be set by command line

# verbose and silent modes
# code uses show() instead of print() which adheres to verbose/silent modes
def set_verbose():
    global verbose
    verbose = True

def set_silent():
    global verbose
    verbose = False

# print only if verbose is True
def show(*args,**kwargs):
    if verbose: print(*args,**kwargs)

# raises InvalidArgument if function input fails a test
def input_check(assertion,message):
    if not assertion:
        raise InvalidArgument(message)

# raises ConfigurationError if assertion fails
# type describes what was being done when the error was found
def check(assertion,message,type):
    if not assertion:
        raise ConfigurationError(f'{type}: {message}')

# prints a warning message
def warning(cond,message):
    if verbose and cond: print(f'warning: {message}')

# returns system memory in GB
def system_RAM_GB():
    mem = virtual_memory()
    return mem.total/(1024**3)

# maps sequence to a list of element.attr or fn(element)
def map(attr_or_fn,seq):
    if type(attr_or_fn) is str:
        return [getattr(i,attr_or_fn) for i in seq]
    else:
        return [attr_or_fn(i) for i in seq]

# joins elements of itr with s separators
# if attr is supplied, joins element.attr instead
def unpack(itr,attr=None,s=' '):
    if attr:
        return s.join(str(getattr(i,attr)) for i in itr)
    else:
        return s.join(str(i) for i in itr)

# removes duplicates from seq while keeping the order of first occurrences
def unique(seq):
    seen = set()
    return [i for i in seq if not (i in seen or seen.add(i))]

# stamps a file name with current time
def time_stamp(fname,extension):
    now = datetime.now().strftime('day_%d_%m_%Y_time_%I_%M_%S_%p')
    return f'{fname}_{now}.{extension}'
