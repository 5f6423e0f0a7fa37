import numpy as np

def is_scalar(value):
    return np.ndim(value) == 0

def is_linalg_type(array):
    nparr = np.asarray(array)
    try:
        return (np.can_cast(nparr.dtype, np.dtype("complex")) or
                np.can_cast(nparr.dtype, float))
    except TypeError:
        return False

def is_real_type(array):
    """Check whether an array holds real (not complex) numerical data."""
    nparr = np.asarray(array)
    return (is_linalg_type(nparr) and
            not np.issubdtype(nparr.dtype, np.complexfloating))
