"""Registration and login endpoints."""
from fastapi import APIRouter, Depends

from wanderly.api.dependencies import get_current_principal
from wanderly.api.v1.schemas.user_schemas import (
    AuthResponseSchema,
    LoginSchema,
    RegisterSchema,
    UserPublicSchema,
)
from wanderly.application.services.auth_service import AuthResult, AuthService
from wanderly.application.services.catalog_store import CatalogStore
from wanderly.core.dependencies import get_auth_service, get_catalog_store
from wanderly.core.security import Principal

router = APIRouter(prefix="/auth", tags=["auth"])


def _response(result: AuthResult) -> AuthResponseSchema:
    return AuthResponseSchema(
        user=UserPublicSchema.model_validate(result.user),
        token=result.token,
    )


# Password hashing is CPU bound, so these two run in the threadpool
@router.post("/register", response_model=AuthResponseSchema)
def register(payload: RegisterSchema, auth: AuthService = Depends(get_auth_service)):
    """Create an account and return it with a token."""
    return _response(auth.register(payload.username, payload.email, payload.password))


@router.post("/login", response_model=AuthResponseSchema)
def login(payload: LoginSchema, auth: AuthService = Depends(get_auth_service)):
    """Exchange email and password for a token."""
    return _response(auth.login(payload.email, payload.password))


@router.get("/me", response_model=UserPublicSchema)
async def me(
    principal: Principal = Depends(get_current_principal),
    store: CatalogStore = Depends(get_catalog_store),
):
    """The authenticated user."""
    return store.get_user(principal.user_id)
