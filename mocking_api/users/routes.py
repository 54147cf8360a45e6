from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from mocking_api.config.dependencies import get_user_service
from mocking_api.shared.errors import UserNotFoundError
from mocking_api.users.models import GenerationConfig, User, UserPayload
from mocking_api.users.services import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[User])
async def list_users_endpoint(service: UserService = Depends(get_user_service)):
    return service.list_users()


@router.get("/config", response_model=GenerationConfig)
async def get_config_endpoint(service: UserService = Depends(get_user_service)):
    return service.generation_config()


def generation_count(count: Optional[str] = Query(default=None)) -> int:
    """Parse ``count``; missing or empty means 0, i.e. the configured default."""
    if count is None or not count.strip():
        return 0
    try:
        return int(count)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"count must be an integer, got {count!r}") from None


@router.post("/generate", response_model=List[User])
async def generate_users_endpoint(
    count: int = Depends(generation_count),
    service: UserService = Depends(get_user_service),
):
    return service.generate_users(count)


@router.get("/{user_id}", response_model=User)
async def get_user_endpoint(user_id: int, service: UserService = Depends(get_user_service)):
    user = service.get_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user_endpoint(payload: UserPayload, service: UserService = Depends(get_user_service)):
    return service.create_user(payload)


@router.put("/{user_id}", response_model=User)
async def update_user_endpoint(
    user_id: int,
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
):
    user = service.update_user(user_id, payload)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user_endpoint(user_id: int, service: UserService = Depends(get_user_service)):
    if not service.delete_user(user_id):
        raise UserNotFoundError(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
