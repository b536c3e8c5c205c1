from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response
from pydantic import BaseModel

from userdb.domain.users import NewUser, User
from userdb.repositories.base import CrudRepository

router = APIRouter(prefix="/users", tags=["users"])


class UserIn(BaseModel):
    name: str
    email: str


class UserOut(BaseModel):
    id: int
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserOut":
        return cls(id=user.id, name=user.name, email=user.email)


def _get_repository(request: Request) -> CrudRepository[User, int]:
    repo = getattr(getattr(request.app, "state", None), "user_repository", None)
    if not repo:
        raise RuntimeError("UserRepository nao configurado")
    return repo


@router.post("", status_code=201, response_model=UserOut)
def create_user(payload: UserIn, request: Request):
    repo = _get_repository(request)
    user = repo.save(NewUser(name=payload.name, email=payload.email))
    return UserOut.from_user(user)


@router.get("", response_model=list[UserOut])
def list_users(request: Request):
    repo = _get_repository(request)
    return [UserOut.from_user(user) for user in repo.find_all()]


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, request: Request):
    repo = _get_repository(request)
    user = repo.find_by_id(user_id)
    if not user:
        raise HTTPException(404, "User not found")
    return UserOut.from_user(user)


@router.put("/{user_id}", response_model=UserOut)
def put_user(user_id: int, payload: UserIn, request: Request):
    repo = _get_repository(request)
    user = repo.save(User(id=user_id, name=payload.name, email=payload.email))
    return UserOut.from_user(user)


@router.delete("/{user_id}", status_code=204)
def delete_user(user_id: int, request: Request):
    repo = _get_repository(request)
    repo.delete_by_id(user_id)
    return Response(status_code=204)
