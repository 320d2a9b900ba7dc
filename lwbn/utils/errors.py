"""
Errors reported by lwbn.

 -- ConfigurationError: the network is not fit for sampling (bad cpts, unknown
    or duplicate names, cycles)
 -- InvalidArgument: a call received an argument it cannot accept
 -- DegenerateResult: no sample contributed weight, so nothing can be normalized
"""

class LWError(Exception):
    """Base class for lwbn exceptions."""


class ConfigurationError(LWError, ValueError):
    pass


class InvalidArgument(LWError, ValueError):
    pass


class DegenerateResult(LWError, ArithmeticError):
    pass
