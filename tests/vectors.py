"""Shared curves and the GOST R 34.10-2001 signature example."""

from gostsign.dataclass import DomainParameters, ECPoint

# y^2 = x^3 + 4x + 20 over F_29 has 37 points, so every finite point generates the group
SMALL_CURVE = DomainParameters(p=29, a=4, b=20, q=37, x=8, y=10)

# GOST R 34.10-2001 test example (RFC 5832)
VECTOR_PRIVATE_KEY = int(
    "55441196065363246126355624130324183196576709222340016572108097750006097525544"
)
VECTOR_MESSAGE = int(
    "20798893674476452017134061561508270130637142515379653289952617252661468872421"
)
VECTOR_SIGNATURE = (
    int("29700980915817952874371204983938256990422752107994319651632687982059210933395"),
    int("574973400270084654178925310019147038455227042649098563933718999175515839552"),
)
VECTOR_PUBLIC_KEY = ECPoint(
    int("57520216126176808443631405023338071176630104906313632182896741342206604859403"),
    int("17614944419213781543809391949654080031942662045363639260709847859438286763994"),
)


def curve_points(curve: DomainParameters) -> list[ECPoint]:
    """All finite points of a (small) curve, by exhaustive search."""
    squares: dict[int, list[int]] = {}
    for y in range(curve.p):
        squares.setdefault(y * y % curve.p, []).append(y)
    points = []
    for x in range(curve.p):
        rhs = (x * x * x + curve.a * x + curve.b) % curve.p
        for y in squares.get(rhs, []):
            points.append(ECPoint(x, y))
    return points
