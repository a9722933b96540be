"""User API routes: listing, registration, login and vendor territories."""

from fastapi import APIRouter, Depends, status

from app.infrastructure.store import Store
from app.interfaces.deps import get_store
from app.domain.schemas.auth import LoginRequest, LoginResponse, UserClientCreate, UserCreate, UserRead
from app.domain.schemas.client import ClientRead
from app.application.services.auth_service import authenticate
from app.application.services.user_service import (
    link_user_client,
    list_user_clients,
    list_users,
    register_user,
)

router = APIRouter(prefix="/usuarios", tags=["Usuarios"])


@router.get("", response_model=list[UserRead])
def list_all(store: Store = Depends(get_store)):
    return [UserRead.model_validate(u) for u in list_users(store)]


@router.post("", status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, store: Store = Depends(get_store)):
    user = register_user(store, body)
    return {
        "success": True,
        "message": "Usuario creado correctamente",
        "usuario": UserRead.model_validate(user),
    }


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, store: Store = Depends(get_store)):
    return LoginResponse(usuario=authenticate(store, body.email, body.password))


@router.get("/{user_id}/clientes", response_model=list[ClientRead])
def user_clients(user_id: int, store: Store = Depends(get_store)):
    return [ClientRead.model_validate(c) for c in list_user_clients(store, user_id)]


@router.post("/{user_id}/clientes", status_code=status.HTTP_201_CREATED)
def add_user_client(user_id: int, body: UserClientCreate, store: Store = Depends(get_store)):
    link = link_user_client(store, user_id, body.cliente_id)
    return {
        "success": True,
        "message": "Cliente asignado al usuario",
        "usuario_cliente": link.model_dump(),
    }
