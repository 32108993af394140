"""Database fixtures for MarkerQL tests (shared)."""

import pytest
from datetime import datetime, timedelta
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Account, Case, WorkOrder

ACME_ID = '001x0000003DGXY'
GLOBEX_ID = '001x0000003DGZZ'
BASE_TIME = datetime(2024, 3, 1, 9, 0, 0)


async def create_accounts(session: AsyncSession):
    accounts = [
        Account(
            Id=ACME_ID,
            Name='Acme Corp',
            BillingStreet='1 Market St',
            BillingCity='San Francisco',
            BillingCountry='USA',
            NumberOfEmployees=250,
        ),
        Account(Id=GLOBEX_ID, Name='Globex', BillingCity='Springfield', NumberOfEmployees=None),
    ]
    session.add_all(accounts)
    await session.flush()
    await session.commit()
    return accounts


@pytest.fixture(scope="function")
async def sample_accounts(db_session: AsyncSession):
    return await create_accounts(db_session)


async def create_cases(session: AsyncSession):
    """Three cases on Acme created an hour apart, one on Globex."""
    cases = [
        Case(Id='500x000000001', CaseNumber='00001001', Subject='Broken pump', AccountId=ACME_ID,
             CreatedDate=BASE_TIME, Street__c='10 Pump Rd', City__c='Oakland'),
        Case(Id='500x000000002', CaseNumber='00001002', Subject='Leak', AccountId=ACME_ID,
             CreatedDate=BASE_TIME + timedelta(hours=2), Street__c='22 Valve Ave', City__c=None),
        Case(Id='500x000000003', CaseNumber='00001003', Subject='Noise', AccountId=ACME_ID,
             CreatedDate=BASE_TIME + timedelta(hours=1), Street__c=None, City__c='Berkeley'),
        Case(Id='500x000000004', CaseNumber='00001004', Subject='Other', AccountId=GLOBEX_ID,
             CreatedDate=BASE_TIME, Street__c='742 Evergreen Tce', City__c='Springfield'),
    ]
    session.add_all(cases)
    await session.flush()
    await session.commit()
    return cases


async def create_work_orders(session: AsyncSession):
    work_orders = [
        WorkOrder(Id='0WOx00000000001', WorkOrderNumber='WO-0001', Description='Install meter',
                  AccountId=ACME_ID, CreatedDate=BASE_TIME, Street__c='5 Main St', City='Austin',
                  State='TX', PostalCode='73301', Country='USA'),
        WorkOrder(Id='0WOx00000000002', WorkOrderNumber='WO-0002', Description=None,
                  AccountId=ACME_ID, CreatedDate=BASE_TIME + timedelta(days=1), Street__c='9 Elm St',
                  City='Dallas', State='TX', PostalCode='75001', Country='USA'),
    ]
    session.add_all(work_orders)
    await session.flush()
    await session.commit()
    return work_orders


@pytest.fixture(scope="function")
async def populated_db(db_session: AsyncSession):
    accounts = await create_accounts(db_session)
    cases = await create_cases(db_session)
    work_orders = await create_work_orders(db_session)
    return {'accounts': accounts, 'cases': cases, 'work_orders': work_orders}


async def seed_populated_db(session: AsyncSession):
    """Seed the demo data outside pytest (used by examples/main.py)."""
    await create_accounts(session)
    await create_cases(session)
    await create_work_orders(session)
