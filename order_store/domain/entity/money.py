from decimal import Decimal, ROUND_HALF_UP


def money(x) -> Decimal:
    # хранится как Numeric(10, 2): округляем до копеек сразу в домене
    return Decimal(str(x)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
