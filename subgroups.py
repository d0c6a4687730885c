#| # Brute-force subgroup search
#| For a toy field like $F_{5^2}$ we can afford to try every pair $(x, y)$
#| and keep those on the curve. From the full point set we then filter
#| out the $r$-torsion and the group $G_2$, the eigenspace of Frobenius
#| with eigenvalue $p$, which is one of the two inputs of a pairing.
#| Everything here is $O(p^4)$ and only meant for tiny demonstration fields.

from finitefield.extension import enumerate_field_elements
from elliptic import Affine, Infinity, is_on_curve, scalar_mul, frobenius_point


def enumerate_curve_points(params):
    """
    Every point of y^2 = x^3 + ax + b over F_(p^2), x-major in field
    enumeration order, with the point at infinity last.
    """
    xs = enumerate_field_elements(params.p, params.d)
    ys = enumerate_field_elements(params.p, params.d)

    points = [Affine(x, y) for x in xs for y in ys if is_on_curve(params, Affine(x, y))]
    points.append(Infinity)
    return points


def find_r_torsion(params, points, r=None):
    """
    args:
       points   (output of enumerate_curve_points)
       r        (defaults to params.r)
    returns:
       the points P with [r]P = O, in their original order
    """
    if r is None:
        r = params.r
    return [P for P in points if scalar_mul(params, r, P) is Infinity]


def find_G2(params, points, p=None):
    """
    args:
       points   (output of enumerate_curve_points)
       p        (defaults to params.p)
    returns:
       the points P with Frobenius(P) = [p]P, in their original order
    """
    if p is None:
        p = params.p
    return [P for P in points if frobenius_point(P) == scalar_mul(params, p, P)]
