#| # Quadratic extensions of a prime field
#| Elements of $F_{p^2} = F_p[t]/(t^2 - d)$ are pairs `(a, b)` standing for
#| $a + bt$, where `d` is a quadratic non-residue mod `p` so that $t^2 - d$
#| is irreducible. As with `IntegersModP`, every `(p, d)` gets its own class,
#| built once and cached.

from .modp import IntegersModP, _Modular
from .numbertype import FieldElement, DivisionByZero, memoize, typecheck


@memoize
def QuadraticExtension(p, d):
   # assume p is an odd prime and d a non-residue mod p
   Fp = IntegersModP(p)

   class ElementOfQuadraticExtension(FieldElement):
      # prime field scalars are lifted into the extension, not the reverse
      operatorPrecedence = 2

      def __init__(self, a, b=0):
         if isinstance(a, ElementOfQuadraticExtension):
            a, b = a.a, a.b
         elif isinstance(a, tuple):
            if len(a) != 2:
               raise TypeError("Expected a pair (a, b), got %r" % (a,))
            a, b = a

         self.a = Fp(a).n
         self.b = Fp(b).n
         self.field = ElementOfQuadraticExtension

      @typecheck
      def __add__(self, other):
         return Fq(self.a + other.a, self.b + other.b)

      @typecheck
      def __sub__(self, other):
         return Fq(self.a - other.a, self.b - other.b)

      @typecheck
      def __mul__(self, other):
         # t^2 = d
         return Fq(self.a * other.a + self.b * other.b * d,
                   self.a * other.b + self.b * other.a)

      def __neg__(self):
         return Fq(-self.a, -self.b)

      def __pow__(self, e):
         if e < 0:
            return self.inverse() ** -e

         result, base = Fq(1), self
         while e:
            if e & 1:
               result = result * base
            base = base * base
            e >>= 1
         return result

      def __eq__(self, other):
         if isinstance(other, int) or (isinstance(other, _Modular) and other.p == p):
            other = Fq(other)
         return isinstance(other, Fq) and (self.a, self.b) == (other.a, other.b)

      def __ne__(self, other):
         return not self == other

      def __hash__(self):
         return hash((self.a, self.b, p, d))

      def __bool__(self):
         return not self.is_zero()

      def is_zero(self):
         return self.a == 0 and self.b == 0

      def conjugate(self):
         return Fq(self.a, -self.b)

      def norm(self):
         """The norm x * conj(x) = a^2 - d b^2, an element of F_p."""
         return Fp(self.a * self.a - d * self.b * self.b)

      def inverse(self):
         """Invert via the conjugate: 1/(a + bt) = (a - bt) / (a^2 - d b^2).

         The norm is nonzero for every nonzero element because d is not a
         square mod p.
         """
         if self.is_zero():
            raise DivisionByZero("0 has no inverse in %s" % Fq.__name__)

         n_inv = self.norm().inverse().n
         return Fq(self.a * n_inv, -self.b * n_inv)

      def frobenius(self):
         """x -> x^p. Since a^p = a for a in F_p and the p-th power map is
         additive in characteristic p, (a + bt)^p = a + b t^p, and
         t^p = t * d^((p-1)/2).
         """
         return Fq(self.a, self.b * Fq.frobenius_constant)

      @classmethod
      def enumerate_all(cls):
         for a in range(p):
            for b in range(p):
               yield cls(a, b)

      def __str__(self):
         if self.b == 0:
            return str(self.a)
         if self.a == 0:
            return "%dt" % self.b
         return "%d + %dt" % (self.a, self.b)

      def __repr__(self):
         return "%d + %dt (mod %d, t^2 = %d)" % (self.a, self.b, p, d)

   Fq = ElementOfQuadraticExtension
   Fq.p = p
   Fq.d = d
   Fq.primeSubfield = Fp
   Fq.frobenius_constant = (Fp(d) ** ((p - 1) // 2)).n
   Fq.__name__ = 'F_(%d^2)' % p
   Fq.englishName = 'QuadraticExtensionOf%dBy%d' % (p, d)
   return Fq


def enumerate_field_elements(p, d):
   """All p^2 elements of F_p[t]/(t^2 - d), ordered by a, then by b.
   The first one is zero.
   """
   return list(QuadraticExtension(p, d).enumerate_all())
