from py_ecc.utils import prime_field_inv

from .numbertype import FieldElement, DivisionByZero, memoize, typecheck


# so all IntegersModP are instances of the same base class
class _Modular(FieldElement):
    pass


@memoize
def IntegersModP(p):
    # assume p is prime

    class IntegerModP(_Modular):
        def __init__(self, n):
            if isinstance(n, _Modular):
                if n.p != IntegerModP.p:
                    raise TypeError(
                        "Can't cast %s to %s in __init__" % (type(n).__name__, IntegerModP.__name__)
                    )
                n = n.n

            try:
                self.n = int(n) % IntegerModP.p
            except (TypeError, ValueError):
                raise TypeError(
                    "Can't cast type %s to %s in __init__"
                    % (type(n).__name__, type(self).__name__)
                )

            self.field = IntegerModP

        @typecheck
        def __add__(self, other):
            return IntegerModP(self.n + other.n)

        @typecheck
        def __sub__(self, other):
            return IntegerModP(self.n - other.n)

        @typecheck
        def __mul__(self, other):
            return IntegerModP(self.n * other.n)

        def __neg__(self):
            return IntegerModP(-self.n)

        def __pow__(self, e):
            if e < 0:
                return self.inverse() ** -e
            return IntegerModP(pow(self.n, e, self.p))

        def __eq__(self, other):
            if isinstance(other, int):
                return self.n == other % self.p
            return isinstance(other, IntegerModP) and self.n == other.n

        def __ne__(self, other):
            return not self == other

        def inverse(self):
            if self.n == 0:
                raise DivisionByZero("0 has no inverse in %s" % IntegerModP.__name__)

            return IntegerModP(prime_field_inv(self.n, self.p))

        def is_square(self):
            # Euler's criterion
            return self.n == 0 or pow(self.n, (self.p - 1) // 2, self.p) == 1

        def __bool__(self):
            return self.n != 0

        def __str__(self):
            return str(self.n)

        def __repr__(self):
            return "%d (mod %d)" % (self.n, self.p)

        def __int__(self):
            return self.n

        def __hash__(self):
            return hash((self.n, self.p))

    IntegerModP.p = p
    IntegerModP.__name__ = 'Z/%d' % (p)
    IntegerModP.englishName = 'IntegersMod%d' % (p)
    return IntegerModP
