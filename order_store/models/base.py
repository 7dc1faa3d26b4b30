from decimal import Decimal
from typing import Annotated

from sqlalchemy import Numeric, String
from sqlalchemy.orm import DeclarativeBase, mapped_column


class Base(DeclarativeBase):
    pass


strpk = Annotated[str, mapped_column(String(64), primary_key=True)]

money = Annotated[Decimal, mapped_column(Numeric(10, 2), nullable=False)]
