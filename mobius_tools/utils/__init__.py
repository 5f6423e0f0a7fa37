"""Provide utility functions used by the various tools in this
package.

"""

from .extended import *

from . import extended, types, testing
