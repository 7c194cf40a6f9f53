"""FastAPI endpoints for the Auth domain."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shared.auth import TOKEN_COOKIE, CurrentUser, authenticate, extract_token
from shared.security import create_access_token, hash_password, token_ttl_seconds
from shared.tokens import get_blacklist

from auth.api.schemas import AddressIn, LoginRequest, RegisterRequest
from auth.api.views import address_view, user_view
from auth.domain import logger
from auth.user.addresses import AddAddress, RemoveAddress
from auth.user.authentication import authenticate_user, find_existing_user
from auth.user.registration import RegisterUser
from auth.user.user import User

router = APIRouter(prefix="/api/auth", tags=["auth"])

any_role = authenticate(roles=("user", "seller", "admin"))


def _issue_token(response: Response, user) -> str:
    token = create_access_token(
        {
            "id": str(user.id),
            "username": user.username,
            "email": user.email.address,
            "role": user.role,
        }
    )
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        httponly=True,
        secure=True,
        max_age=token_ttl_seconds(),
    )
    return token


def _load_user(user_id: str):
    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail="No user found") from exc


@router.post("/register", status_code=201)
async def register(body: RegisterRequest, response: Response) -> dict:
    if find_existing_user(username=body.username, email=body.email) is not None:
        raise HTTPException(status_code=409, detail="User already exists!")

    user_id = current_domain.process(
        RegisterUser(
            username=body.username,
            email=body.email,
            password_hash=hash_password(body.password),
            first_name=body.full_name.first_name,
            last_name=body.full_name.last_name,
            role=body.role,
        ),
        asynchronous=False,
    )
    for address in body.addresses:
        current_domain.process(_add_address_command(user_id, address), asynchronous=False)

    user = _load_user(user_id)
    token = _issue_token(response, user)
    return {"message": "User registered sucessfully", "user": user_view(user), "token": token}


@router.post("/login")
async def login(body: LoginRequest, response: Response) -> dict:
    user = authenticate_user(body.password, username=body.username, email=body.email)
    if user is None:
        logger.info("Failed login attempt", username=body.username, email=body.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = _issue_token(response, user)
    return {"message": "login successful", "user": user_view(user), "token": token}


@router.get("/me")
async def me(current_user: CurrentUser = Depends(any_role)) -> dict:
    user = _load_user(current_user.id)
    return {"message": "User fetched sucessfully", "user": user_view(user)}


@router.get("/logout")
async def logout(request: Request, response: Response) -> dict:
    token = extract_token(request)
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized")

    get_blacklist().revoke(token, token_ttl_seconds())
    response.delete_cookie(TOKEN_COOKIE, httponly=True, secure=True)
    return {"message": "Logout Sucess"}


# --- Address book ---


def _add_address_command(user_id: str, body: AddressIn) -> AddAddress:
    return AddAddress(
        user_id=user_id,
        street=body.street,
        city=body.city,
        state=body.state,
        country=body.country,
        pincode=body.pincode,
        phone=body.phone,
        is_default=body.is_default,
    )


@router.get("/users/me/addresses")
async def list_addresses(current_user: CurrentUser = Depends(any_role)) -> dict:
    user = _load_user(current_user.id)
    return {
        "message": "Addresses fetched successfully",
        "addresses": [address_view(a) for a in user.addresses],
    }


@router.post("/users/me/addresses", status_code=201)
async def add_address(body: AddressIn, current_user: CurrentUser = Depends(any_role)) -> dict:
    _load_user(current_user.id)
    address_id = current_domain.process(_add_address_command(current_user.id, body), asynchronous=False)

    user = _load_user(current_user.id)
    return {
        "message": "Address added successfully",
        "address": address_view(user.find_address(address_id)),
    }


@router.delete("/users/me/addresses/{address_id}")
async def delete_address(address_id: str, current_user: CurrentUser = Depends(any_role)) -> dict:
    user = _load_user(current_user.id)
    if user.find_address(address_id) is None:
        raise HTTPException(status_code=404, detail="Address not found")

    current_domain.process(RemoveAddress(user_id=current_user.id, address_id=address_id), asynchronous=False)

    user = _load_user(current_user.id)
    return {
        "message": "Address deleted successfully",
        "addresses": [address_view(a) for a in user.addresses],
    }
