from collections import namedtuple

from finitefield.extension import QuadraticExtension


class CurveParams(namedtuple('CurveParams', ['p', 'd', 'a', 'b', 'r'])):
   """y^2 = x^3 + ax + b over F_p[t]/(t^2 - d), searched for r-torsion.

   Nothing here is validated: p is assumed prime, d a non-residue mod p and
   the curve smooth.
   """
   __slots__ = ()

   def field(self):
      return QuadraticExtension(self.p, self.d)

   def coefficients(self):
      Fq = self.field()
      return Fq(self.a), Fq(self.b)

   def __str__(self):
      return 'y^2 = x^3 + %sx + %s over F_(%d^2), t^2 = %d' % (self.a, self.b, self.p, self.d)


class Affine(namedtuple('Affine', ['x', 'y'])):
   __slots__ = ()

   def __str__(self):
      return "(%s, %s)" % (self.x, self.y)


class _PointAtInfinity(object):
   def __str__(self):
      return "Point at infinity"

   def __repr__(self):
      return "Infinity"

   def __reduce__(self):
      return 'Infinity'


# the identity of the group; always compare against it with `is`
Infinity = _PointAtInfinity()


def lift(params, x, y):
   Fq = params.field()
   P = Affine(Fq(x), Fq(y))
   if not is_on_curve(params, P):
      raise ValueError("The point %s is not on the curve %s!" % (P, params))
   return P


def is_on_curve(params, P):
   if P is Infinity:
      return True
   a, b = params.coefficients()
   x, y = P
   return y * y == x * x * x + a * x + b


def eq(P, Q):
   return P == Q


def negate(P):
   if P is Infinity:
      return P
   return Affine(P.x, -P.y)


def add(params, P, Q):
   if P is Infinity:
      return Q
   if Q is Infinity:
      return P

   x_1, y_1 = P
   x_2, y_2 = Q

   # Q = -P, which also catches doubling a point with y = 0
   if x_1 == x_2 and y_1 == -y_2:
      return Infinity

   if (x_1, y_1) == (x_2, y_2):
      a, _ = params.coefficients()
      # slope of the tangent line
      m = (3 * x_1 * x_1 + a) / (2 * y_1)
   else:
      # slope of the secant line
      m = (y_2 - y_1) / (x_2 - x_1)

   x_3 = m * m - x_1 - x_2
   y_3 = m * (x_1 - x_3) - y_1
   return Affine(x_3, y_3)


def double(params, P):
   return add(params, P, P)


def sub(params, P, Q):
   return add(params, P, negate(Q))


def scalar_mul(params, k, P):
   """[k]P by double-and-add, most significant bit first."""
   if not isinstance(k, int):
      raise TypeError("Can't scale a point by something which isn't an int!")
   if k < 0:
      return scalar_mul(params, -k, negate(P))

   R = Infinity
   for i in reversed(range(k.bit_length())):
      R = double(params, R)
      if (k >> i) & 1:
         R = add(params, R, P)
   return R


def frobenius_point(P):
   # a and b lie in F_p, so the image stays on the curve
   if P is Infinity:
      return P
   return Affine(P.x.frobenius(), P.y.frobenius())
