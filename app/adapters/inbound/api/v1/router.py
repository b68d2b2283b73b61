# app/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from app.adapters.inbound.api.v1.endpoints import client_endpoint, password_endpoint, security_question_endpoint

api_router = APIRouter()

# Include the endpoint routers
api_router.include_router(client_endpoint.router, prefix="/client", tags=["Client"])
api_router.include_router(password_endpoint.router, prefix="/client", tags=["Password"])
api_router.include_router(
    security_question_endpoint.router,
    prefix="/security-question-challenge",
    tags=["Security Question"],
)
