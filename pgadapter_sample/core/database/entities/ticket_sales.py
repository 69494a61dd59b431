"""
Ticket sale entity models.

Ticket sales use a numeric primary key drawn from ``ticket_sale_seq``. On
Spanner the sequence is bit-reversed so consecutive values do not create a
write hotspot.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import JSON, BigInteger, Column, Integer, Numeric, Sequence, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlmodel import Field, Relationship

from ..base import AbstractBaseEntity

if TYPE_CHECKING:
    from .concerts import Concert

TICKET_SALE_SEQUENCE = "ticket_sale_seq"


class TicketSale(AbstractBaseEntity, table=True):
    """Entity for ticket sales.

    Table: ticket_sales
    """

    __tablename__ = "ticket_sales"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            BigInteger().with_variant(Integer(), "sqlite"),
            Sequence(TICKET_SALE_SEQUENCE),
            primary_key=True,
        ),
    )
    concert_id: str = Field(foreign_key="concerts.id", max_length=36)
    customer_name: str = Field(max_length=200)
    price: Decimal = Field(sa_type=Numeric)
    seats: List[str] = Field(default_factory=list, sa_type=ARRAY(Text).with_variant(JSON(), "sqlite"))

    concert: Optional["Concert"] = Relationship()

    def __repr__(self) -> str:
        return f"TicketSale(id={self.id}, concert_id={self.concert_id}, customer_name={self.customer_name})"
