"""
Number of decimal places used when reporting results.
High precision can be set on the command line (-d option).
"""

precision       = None
digits          = None # posteriors returned by likelihood weighting
mean_digits     = None # averages reported by the statistics driver
variance_digits = None # variances reported by the statistics driver

def set_low_precision():
    global precision, digits, mean_digits, variance_digits

    precision       = 'low'
    digits          = 3
    mean_digits     = 4
    variance_digits = 6

def set_high_precision():
    global precision, digits, mean_digits, variance_digits

    precision       = 'high'
    digits          = 4
    mean_digits     = 5
    variance_digits = 7


set_low_precision()
