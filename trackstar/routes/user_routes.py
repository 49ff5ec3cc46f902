from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from trackstar.auth import get_current_user
from trackstar.database import get_db
from trackstar.schemas.common import Envelope, MessageResponse
from trackstar.schemas.user_schemas import UserOut, UserRegister, UserUpdate
from trackstar.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=Envelope[UserOut], summary="Get current user profile")
def get_current_profile(user_id: str = Depends(get_current_user), db: Session = Depends(get_db)):
    user = UserService.get_by_id(db, user_id)
    return Envelope[UserOut](data=UserOut.model_validate(user))


@router.put("", response_model=Envelope[UserOut], summary="Update current user profile")
def update_current_profile(user_data: UserUpdate, user_id: str = Depends(get_current_user),
                           db: Session = Depends(get_db)):
    user = UserService.update(db, user_id, user_data.model_dump(exclude_unset=True, exclude_none=True))
    return Envelope[UserOut](data=UserOut.model_validate(user), message="User profile updated successfully")


@router.delete("", response_model=MessageResponse, summary="Deactivate current user account")
def delete_current_profile(user_id: str = Depends(get_current_user), db: Session = Depends(get_db)):
    UserService.deactivate(db, user_id)
    return MessageResponse(message="User account deactivated successfully")


@router.post(
    "/register",
    response_model=Envelope[UserOut],
    status_code=status.HTTP_201_CREATED,
    summary="Create new user (OAuth callback)",
    responses={200: {"model": Envelope[UserOut], "description": "User already registered"}},
)
def register_user(user_data: UserRegister, db: Session = Depends(get_db)):
    user, created = UserService.register(db, user_data.model_dump())
    body = Envelope[UserOut](
        data=UserOut.model_validate(user),
        message="User created successfully" if created else "User already exists",
    )
    if created:
        return body
    return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump(mode="json", by_alias=True))
