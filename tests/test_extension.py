import sys, os
sys.path.append(os.path.realpath(os.path.dirname(__file__)+"/.."))
import random

import pytest
from py_ecc.fields.field_elements import FQ2

from finitefield.extension import QuadraticExtension, enumerate_field_elements
from finitefield.modp import IntegersModP
from finitefield.numbertype import DivisionByZero

Fq = QuadraticExtension(5, 3)
F49 = QuadraticExtension(7, 3)


# py_ecc's generic quadratic extension, used as an independent reference:
# t^2 + 2 = 0 over F_5 is the same relation as t^2 = 3
class PyEccF25(FQ2):
    field_modulus = 5
    FQ2_MODULUS_COEFFS = (2, 0)


def as_pair(z):
    return tuple(int(c) for c in z.coeffs)


def random_triples(field, count=200, seed=0):
    rnd = random.Random(seed)
    elements = enumerate_field_elements(field.p, field.d)
    return [tuple(rnd.choice(elements) for _ in range(3)) for _ in range(count)]


def test_enumeration():
    elements = enumerate_field_elements(5, 3)
    assert len(elements) == 25
    assert len(set(elements)) == 25
    assert elements[0] == Fq(0, 0)
    assert elements[1] == Fq(0, 1)
    assert elements[5] == Fq(1, 0)
    assert elements[-1] == Fq(4, 4)

    zeros = [x for x in elements if all(x + y == y for y in elements)]
    assert zeros == [Fq(0)]

    # restartable
    assert list(Fq.enumerate_all()) == list(Fq.enumerate_all())
    assert len(enumerate_field_elements(7, 3)) == 49


def test_construction_reduces():
    assert Fq(7, -1) == Fq(2, 4)
    assert (Fq(7, -1).a, Fq(7, -1).b) == (2, 4)
    assert Fq((3, 2)) == Fq(3, 2)
    assert Fq(IntegersModP(5)(3)) == Fq(3, 0)
    assert Fq(Fq(1, 2)) == Fq(1, 2)
    assert QuadraticExtension(5, 3) is Fq


def test_field_axioms():
    for x, y, z in random_triples(Fq) + random_triples(F49):
        assert (x + y) + z == x + (y + z)
        assert x + y == y + x
        assert (x * y) * z == x * (y * z)
        assert x * y == y * x
        assert x * (y + z) == x * y + x * z
        assert x - y == x + (-y)
        assert x - x == 0


def test_inverse():
    for field in (Fq, F49):
        for x in field.enumerate_all():
            if x.is_zero():
                continue
            assert x.inverse() * x == field(1, 0)
            assert x / x == 1
            assert x.norm() == (x * x.conjugate()).a
            assert x ** -1 == x.inverse()


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        Fq(0).inverse()
    with pytest.raises(DivisionByZero):
        Fq(1, 2) / Fq(0, 0)
    with pytest.raises(ZeroDivisionError):
        Fq(1, 2) / 0


def test_mixing_fields():
    with pytest.raises(TypeError):
        Fq(1, 1) + F49(1, 1)
    assert Fq(1, 1) != F49(1, 1)
    assert Fq(2) * IntegersModP(5)(3) == Fq(1)
    assert IntegersModP(5)(3) * Fq(0, 1) == Fq(0, 3)
    assert 1 + Fq(0, 1) == Fq(1, 1)
    assert 1 - Fq(0, 1) == Fq(1, 4)


def test_agrees_with_py_ecc():
    elements = enumerate_field_elements(5, 3)
    for x in elements:
        X = PyEccF25([x.a, x.b])
        assert as_pair(X ** 5) == (x.frobenius().a, x.frobenius().b)
        assert (x ** 5) == x.frobenius()
        for y in elements:
            Y = PyEccF25([y.a, y.b])
            z = x * y
            assert as_pair(X * Y) == (z.a, z.b)


def test_frobenius():
    assert Fq.frobenius_constant == 4
    assert F49.frobenius_constant == 6
    assert Fq(2, 3).frobenius() == Fq(2, 12)

    for field in (Fq, F49):
        for x in field.enumerate_all():
            assert x.frobenius().frobenius() == x
            assert x.frobenius() == x ** field.p
            # fixes exactly the prime subfield
            assert (x.frobenius() == x) == (x.b == 0)

    for x, y, _ in random_triples(Fq):
        assert (x + y).frobenius() == x.frobenius() + y.frobenius()
        assert (x * y).frobenius() == x.frobenius() * y.frobenius()


def test_str():
    assert str(Fq(0, 0)) == "0"
    assert str(Fq(3, 0)) == "3"
    assert str(Fq(0, 1)) == "1t"
    assert str(Fq(1, 4)) == "1 + 4t"
    assert repr(Fq(1, 4)) == "1 + 4t (mod 5, t^2 = 3)"


def test_modp():
    F5 = IntegersModP(5)
    assert F5(3).inverse() == F5(2)
    assert F5(3) ** 2 == 4
    assert F5(4).is_square() and not F5(3).is_square()
    with pytest.raises(DivisionByZero):
        F5(0).inverse()
