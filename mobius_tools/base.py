class GeometryError(Exception):
    """Thrown if there's an attempt to construct a geometric object with
    numerical data that doesn't make sense for that type of object.

    """
    pass

class NonFiniteCoefficient(GeometryError):
    """Thrown if a Mobius transformation is built from a coefficient which
    is infinite (or NaN).

    """
    def __init__(self, coefficients):
        self.coefficients = tuple(coefficients)
        GeometryError.__init__(
            self,
            "Coefficients must be finite: {}".format(self.coefficients)
        )

class SingularTransformation(GeometryError):
    """Thrown if the coefficients (a, b, c, d) of a Mobius transformation
    satisfy ad - bc = 0.

    """
    def __init__(self, coefficients):
        self.coefficients = tuple(coefficients)
        GeometryError.__init__(
            self,
            "Singularity detected: {}".format(self.coefficients)
        )

class DuplicatePoints(GeometryError):
    """Thrown if the three points used to build a normal form are not
    distinct.

    """
    def __init__(self, points):
        self.points = tuple(points)
        GeometryError.__init__(
            self,
            "Three points must be distinct: {}".format(self.points)
        )
