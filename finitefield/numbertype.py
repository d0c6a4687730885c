# Shared plumbing for the number types in this package: a cache for the
# class factories, operand coercion, and the reflected operators.


def memoize(f):
   cache = {}

   def memoizedFunction(*args, **kwargs):
      argTuple = args + tuple(sorted(kwargs.items()))
      if argTuple not in cache:
         cache[argTuple] = f(*args, **kwargs)
      return cache[argTuple]

   memoizedFunction.cache = cache
   memoizedFunction.__name__ = f.__name__
   memoizedFunction.__doc__ = f.__doc__
   return memoizedFunction


def typecheck(f):
   """Coerce the right operand of a binary operator into the type of the
   left one, so that `x + 1` works for any field element `x`.
   """
   def newF(self, other):
      if (hasattr(other.__class__, 'operatorPrecedence') and
            other.__class__.operatorPrecedence > self.__class__.operatorPrecedence):
         return NotImplemented

      if type(self) is not type(other):
         try:
            other = self.__class__(other)
         except TypeError:
            message = 'Not able to typecast %s of type %s to type %s in function %s'
            raise TypeError(message % (other, type(other).__name__, type(self).__name__, f.__name__))

      return f(self, other)

   newF.__name__ = f.__name__
   return newF


# subclasses implement + - * and neg, typecheck their binary operators, and
# accept a single int (at least zero and one) in __init__
class DomainElement(object):
   operatorPrecedence = 1

   # reached when the left operand is an int or a lower-precedence number type
   def __radd__(self, other): return self + other
   def __rsub__(self, other): return -self + other
   def __rmul__(self, other): return self * other


# additionally require inverse() on subclasses
class FieldElement(DomainElement):
   @typecheck
   def __truediv__(self, other): return self * other.inverse()
   def __rtruediv__(self, other): return self.inverse() * other


class DivisionByZero(ZeroDivisionError):
   pass
