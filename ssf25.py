from elliptic import CurveParams

# y^2 = x^3 + x + 1 over F_25 = F_5[t]/(t^2 - 3); 3 is not a square mod 5.
# The embedding degree of 3 is 2, so the full 3-torsion appears over F_25.
F25 = CurveParams(p=5, d=3, a=1, b=1, r=3)
Fq = F25.field()
