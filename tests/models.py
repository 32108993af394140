"""Record-store tables for MarkerQL tests (shared).

Column names follow the CRM-style conventions the widget is configured with
(``Id``, ``CaseNumber``, custom ``__c`` fields), so the raw-text queries built
by MarkerQL run against them unchanged.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for test models."""
    pass


class Account(Base):
    __tablename__ = 'Account'

    Id = Column(String(18), primary_key=True)
    Name = Column(String(120), nullable=False)
    BillingStreet = Column(String(200))
    BillingCity = Column(String(80))
    BillingCountry = Column(String(80))
    NumberOfEmployees = Column(Integer)


class Case(Base):
    # 'Case' is a reserved word in SQL; queries must quote it.
    __tablename__ = 'Case'

    Id = Column(String(18), primary_key=True)
    CaseNumber = Column(String(30), nullable=False)
    Subject = Column(String(255))
    AccountId = Column(String(18), ForeignKey('Account.Id'))
    CreatedDate = Column(DateTime, nullable=False)
    Street__c = Column(String(200))
    City__c = Column(String(80))


class WorkOrder(Base):
    __tablename__ = 'WorkOrder'

    Id = Column(String(18), primary_key=True)
    WorkOrderNumber = Column(String(30), nullable=False)
    Description = Column(String(500))
    AccountId = Column(String(18), ForeignKey('Account.Id'))
    CreatedDate = Column(DateTime, nullable=False)
    Street__c = Column(String(200))
    City = Column(String(80))
    State = Column(String(80))
    PostalCode = Column(String(20))
    Country = Column(String(80))
