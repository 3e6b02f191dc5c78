from __future__ import annotations

from fastapi import APIRouter, Request, Response, status

from bank_api.schemas.user import UserDto
from bank_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService nao configurado")
    return svc


@router.get("", response_model=list[UserDto])
def list_users(request: Request):
    svc = _get_user_service(request)
    return [UserDto.from_model(user) for user in svc.find_all()]


@router.get("/{user_id}", response_model=UserDto)
def get_user(user_id: int, request: Request):
    svc = _get_user_service(request)
    return UserDto.from_model(svc.find_by_id(user_id))


@router.post("", response_model=UserDto, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserDto, request: Request, response: Response):
    svc = _get_user_service(request)
    created = svc.create(payload.to_model())
    response.headers["Location"] = str(request.url_for("get_user", user_id=created.id))
    return UserDto.from_model(created)


@router.put("/{user_id}", response_model=UserDto)
def update_user(user_id: int, payload: UserDto, request: Request):
    svc = _get_user_service(request)
    return UserDto.from_model(svc.update(user_id, payload.to_model()))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, request: Request):
    svc = _get_user_service(request)
    svc.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
