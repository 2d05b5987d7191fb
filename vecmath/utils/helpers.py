import math

# --- Float Arithmetic Without Exceptions ---

def ieee_div(numerator, denominator):
    """
    Divides the way IEEE-754 floating point does.

    Python raises ZeroDivisionError where IEEE-754 yields an infinity or a NaN;
    this returns those values instead. x/0 is inf carrying the sign of x times
    the sign of the zero (so -0.0 flips it), while 0/0 and nan/0 are nan.
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)

def acos_or_nan(value) -> float:
    """Arc cosine in radians. Returns nan for input outside [-1, 1] instead of raising."""
    if -1.0 <= value <= 1.0:
        return math.acos(value)
    return math.nan

# --- Comparison ---

def approximately_equal(a: float, b: float, tolerance: float = 1e-6) -> bool:
    """Checks if two floats are approximately equal within a tolerance."""
    if a == b: # Matching infinities
        return True
    return abs(a - b) < tolerance
