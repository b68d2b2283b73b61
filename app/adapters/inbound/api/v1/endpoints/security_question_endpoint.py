# app/adapters/inbound/api/v1/endpoints/security_question_endpoint.py

"""
Security question challenge.

The route is part of the public API surface but has no behaviour yet;
it always answers 501.
"""

from fastapi import APIRouter, Path

from app.domain.exceptions import NotImplementedException

router = APIRouter()


@router.get(
    "/{login}",
    summary="Security Question Challenge - Get the challenge for a login",
    responses={
        501: {
            "description": "Not implemented",
            "content": {
                "application/json": {
                    "example": {"statusCode": 501, "message": "Not Implemented", "errorCode": "NotImplemented"}
                }
            }
        },
    }
)
async def get_security_question_challenge(login: str = Path(..., description="Client login")):
    raise NotImplementedException()
