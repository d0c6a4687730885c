from ssf25 import F25
from finitefield.extension import enumerate_field_elements
from subgroups import enumerate_curve_points, find_r_torsion, find_G2


def main(params=F25):
    print('Elements of F(%d^2):' % params.p)
    for x in enumerate_field_elements(params.p, params.d):
        print(x)

    print('\nFinding all points over %s' % (params,))
    points = enumerate_curve_points(params)
    for point in points:
        print(point)

    print('\nFull %d-torsion points (%dP = O):' % (params.r, params.r))
    for point in find_r_torsion(params, points):
        print(point)

    print('\nGroup G2 points (P such that Frobenius(P) = %dP):' % params.p)
    for point in find_G2(params, points):
        print(point)


if __name__ == "__main__":
    main()
