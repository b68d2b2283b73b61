# app/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines the functions that build, per request, the chain
session → item store → repositories → services through FastAPI Depends().
Tests replace any link of the chain with app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.database import get_db
from app.adapters.outbound.persistence.item_store import SQLAlchemyItemStore
from app.adapters.outbound.persistence.repositories import AsyncClientCRUD, AsyncPasswordCRUD
from app.adapters.outbound.security.crypto import FernetCrypto
from app.application.ports.outbound import ICrypto, IItemStore
from app.application.use_cases import AsyncClientService, AsyncPasswordService

########################################################################
# Storage
########################################################################


def get_item_store(db: AsyncSession = Depends(get_db)) -> IItemStore:
    return SQLAlchemyItemStore(
        db,
        key_attributes={
            settings.CLIENT_TABLE: AsyncClientCRUD.key_attribute,
            settings.PASSWORD_TABLE: AsyncPasswordCRUD.key_attribute,
        },
    )


def get_client_repository(store: IItemStore = Depends(get_item_store)) -> AsyncClientCRUD:
    return AsyncClientCRUD(store, settings.CLIENT_TABLE)


def get_password_repository(store: IItemStore = Depends(get_item_store)) -> AsyncPasswordCRUD:
    return AsyncPasswordCRUD(store, settings.PASSWORD_TABLE)


########################################################################
# Crypto
########################################################################

def get_crypto() -> ICrypto:
    return FernetCrypto(settings.ENCRYPTION_KEY)


########################################################################
# Services
########################################################################

def get_client_service(
        client_repository: AsyncClientCRUD = Depends(get_client_repository),
        password_repository: AsyncPasswordCRUD = Depends(get_password_repository),
        crypto: ICrypto = Depends(get_crypto),
) -> AsyncClientService:
    return AsyncClientService(client_repository, password_repository, crypto)


def get_password_service(
        password_repository: AsyncPasswordCRUD = Depends(get_password_repository),
        crypto: ICrypto = Depends(get_crypto),
) -> AsyncPasswordService:
    return AsyncPasswordService(password_repository, crypto)
