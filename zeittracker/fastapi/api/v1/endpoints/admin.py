"""
Admin login endpoint.

The login only reports whether the credentials are valid; it issues no
token and keeps no session.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from zeittracker.fastapi.dependencies.storage import get_store
from zeittracker.fastapi.schemas.admin import AdminLogin, AdminLoginResponse
from zeittracker.fastapi.services.time_tracking import login_admin
from zeittracker.fastapi.storage.base import EntryStore


router = APIRouter(tags=["authentication"])


@router.post(
    "/login",
    response_model=AdminLoginResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": AdminLoginResponse}},
    summary="Admin Login"
)
def login(
    admin_login: AdminLogin,
    store: EntryStore = Depends(get_store)
):
    """
    Check admin credentials.

    **Parameters:**
    - **username**: Admin username
    - **password**: Admin password

    **Returns:**
    - **success**: Whether the credentials were valid
    - **message**: Human-readable result

    **Errors:**
    - **400**: Username or password missing
    - **401**: Invalid credentials
    """
    if login_admin(store, admin_login.username, admin_login.password):
        return AdminLoginResponse(success=True, message="Login successful.")

    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=AdminLoginResponse(success=False, message="Invalid credentials.").model_dump()
    )
