"""SQLAlchemy models for the local txdash snapshot database."""

from sqlalchemy import Column, Float, Integer, String, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()


class Customer(Base):
    """Customer model."""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)
    position = Column(Integer, nullable=False, default=0)


class Transaction(Base):
    """Transaction model.

    ``customer_id`` is not a foreign key: snapshots are stored as received,
    orphans included, and the domain layer reports them.
    """

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    customer_id = Column(Integer, nullable=False, index=True)
    date = Column(String, nullable=False)
    amount = Column(Float, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
