"""SQLAlchemy models for ledgerly database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    type = Column(String, nullable=False, default="checking")
    currency = Column(String, nullable=False, default="EUR")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship(
        "Transaction", back_populates="account", foreign_keys="Transaction.account_id"
    )


class Transaction(Base):
    """Ledger transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    amount = Column(Numeric(10, 2), nullable=False)
    type = Column(String, nullable=False)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    dest_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=True)
    category = Column(String, nullable=False, default="")
    description = Column(String, nullable=False, default="")
    date = Column(Date, nullable=False)
    is_recurring_instance = Column(Boolean, default=False, nullable=False)
    # Plain id, not a foreign key: removing a rule leaves its instances alone.
    recurring_rule_id = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        Index("idx_transactions_date", "date"),
        Index("idx_transactions_recurring", "recurring_rule_id", "date"),
        {"sqlite_autoincrement": True},
    )

    # Relationships
    account = relationship("Account", back_populates="transactions", foreign_keys=[account_id])


class RecurringRule(Base):
    """Recurring transaction rule model."""

    __tablename__ = "recurring_rules"

    id = Column(Integer, primary_key=True)
    amount = Column(Numeric(10, 2), nullable=False)
    type = Column(String, nullable=False)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    dest_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=True)
    category = Column(String, nullable=False, default="")
    description = Column(String, nullable=False, default="")
    frequency = Column(String, nullable=False)
    day_of_month = Column(Integer, nullable=True)
    day_of_week = Column(Integer, nullable=True)
    month_of_year = Column(Integer, nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    last_generated = Column(Date, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Generated transactions refer to rules by id only, so a deleted rule's
    # id must never be reused.
    __table_args__ = (
        Index("idx_recurring_rules_active", "is_active"),
        {"sqlite_autoincrement": True},
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
