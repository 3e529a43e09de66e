from fastapi import APIRouter, Depends

from ..auth import get_current_user
from ..models import User
from ..schemas import UserOut

router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.get("/user", response_model=UserOut)
def current_user(user: User = Depends(get_current_user)):
    return user
