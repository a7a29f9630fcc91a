# app/routes/users.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from pydantic import ValidationError

from app.crud_base import CRUDBase
from app.db import Database, get_db
from app.errors import DecodeError, NotFoundError
from app.models import MetaResponse, SuccessResponse, User, UserIn
from app.pagination import build_pagination, normalize, offset, parse_int

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)

USER_COLUMNS = ("name", "age")


def get_crud(db: Database = Depends(get_db)) -> CRUDBase:
    return CRUDBase(db, "users", USER_COLUMNS)


@router.get("", response_model=SuccessResponse[List[User]], response_model_exclude_none=True)
@router.get("/", response_model=SuccessResponse[List[User]], response_model_exclude_none=True, include_in_schema=False)
async def list_users(
    request: Request,
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    crud: CRUDBase = Depends(get_crud),
):
    page_no, page_size = normalize(
        parse_int(page), parse_int(limit), request.app.state.settings.DEFAULT_PAGE_SIZE
    )

    total = await crud.count()
    rows = await crud.list(page_size, offset(page_no, page_size))

    try:
        users = [User.model_validate(dict(row)) for row in rows]
    except ValidationError as e:
        raise DecodeError("Failed to decode users", developer_details=str(e)) from e

    meta = MetaResponse(pagination=build_pagination(page_no, page_size, total))
    return SuccessResponse[List[User]](data=users, meta=meta)


@router.get("/{user_id}", response_model=SuccessResponse[User], response_model_exclude_none=True)
async def get_user(user_id: str, crud: CRUDBase = Depends(get_crud)):
    try:
        row = await crud.get(user_id)
    except NotFoundError as e:
        raise NotFoundError("User not found", developer_details=e.developer_details) from e

    try:
        user = User.model_validate(dict(row))
    except ValidationError as e:
        raise DecodeError("Failed to decode user", developer_details=str(e)) from e
    return SuccessResponse[User](data=user)


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_user(data: UserIn, crud: CRUDBase = Depends(get_crud)):
    new_id = await crud.create(data.model_dump())
    return User(id=new_id, **data.model_dump())


@router.put("/{user_id}")
async def update_user(user_id: str, data: UserIn, crud: CRUDBase = Depends(get_crud)):
    await crud.update(user_id, data.model_dump())
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{user_id}")
async def delete_user(user_id: str, crud: CRUDBase = Depends(get_crud)):
    await crud.delete(user_id)
    return Response(status_code=status.HTTP_200_OK)
