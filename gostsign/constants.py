from gostsign.dataclass import DomainParameters, ECPoint

POINT_INFINITY = ECPoint(None, None)

Signature = tuple[int, int]

# Degenerate (r = 0 or s = 0) attempts tolerated before sign() gives up
MAX_SIGN_ATTEMPTS = 64

# GOST R 34.10-2001 test example (RFC 5832, section 7.1)
GOST_TEST_CURVE = DomainParameters(
    p=int(
        "57896044618658097711785492504343953926634992332820282019728792003956564821041"
    ),
    a=7,
    b=int(
        "43308876546767276905765904595650931995942111794451039583252968842033849580414"
    ),
    q=int(
        "57896044618658097711785492504343953927082934583725450622380973592137631069619"
    ),
    x=2,
    y=int(
        "4018974056539037503335449422937059775635739389905545080690979365213431566280"
    ),
)

GOST_TEST_NONCE = int(
    "53854137677348463731403841147996619241504003434302020712960838528893196233395"
)
