import logging

from fastapi import APIRouter, Depends

from tasktracker.dependencies import get_user_store, require_valid_id
from tasktracker.errors import ErrorCode, ServiceError, envelope, storage_guard
from tasktracker.schemas.user import UserCreate, UserLogin, UserOut
from tasktracker.stores.users import UserStore
from tasktracker.utils.auth import hash_password, verify_password, create_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

INVALID_LOGIN = "Invalid email or password"


def _user_payload(doc: dict) -> dict:
    return UserOut.model_validate(doc).model_dump(mode="json")


def _hash(password: str) -> str:
    try:
        return hash_password(password)
    except ValueError as e:
        raise ServiceError(ErrorCode.VALIDATION_ERROR, str(e))


@router.post("/signup")
def signup(user: UserCreate, users: UserStore = Depends(get_user_store)):
    with storage_guard("Error creating user"):
        # best-effort: two concurrent signups can both pass this check
        if users.find_by_email(user.email):
            raise ServiceError(ErrorCode.CONFLICT, "User already exists")
        created = users.create({**user.model_dump(), "password": _hash(user.password)})

    logger.info("user %s signed up", created["id"])
    return envelope("User created successfully", user=_user_payload(created))


@router.post("/login")
def login(credentials: UserLogin, users: UserStore = Depends(get_user_store)):
    with storage_guard("Error logging in user"):
        db_user = users.find_by_email(credentials.email)
    # unknown email and wrong password answer the same way
    if not db_user or not verify_password(credentials.password, db_user["password"]):
        raise ServiceError(ErrorCode.INVALID_CREDENTIALS, INVALID_LOGIN)

    token = create_token({"sub": db_user["id"]})
    return envelope("User logged in successfully", user=_user_payload(db_user), token=token)


@router.get("/getallusers")
def get_all_users(users: UserStore = Depends(get_user_store)):
    with storage_guard("Error fetching users"):
        docs = users.list_all(exclude_password=True)
    return envelope("Users fetched successfully", users=[_user_payload(d) for d in docs])


@router.get("/getuser/{id}")
def get_user(id: str, users: UserStore = Depends(get_user_store)):
    require_valid_id(id, "user")
    with storage_guard("Error getting user"):
        doc = users.find_by_id(id)
    if not doc:
        raise ServiceError(ErrorCode.NOT_FOUND, "User not found")
    return envelope("User found", user=_user_payload(doc))


@router.post("/updateuser/{id}")
def update_user(id: str, user: UserCreate, users: UserStore = Depends(get_user_store)):
    require_valid_id(id, "user")
    record = {**user.model_dump(), "password": _hash(user.password)}
    with storage_guard("Error updating user"):
        updated = users.replace_by_id(id, record)
    if not updated:
        raise ServiceError(ErrorCode.NOT_FOUND, "User not found")
    return envelope("User updated successfully")


@router.post("/deleteuser/{id}")
def delete_user(id: str, users: UserStore = Depends(get_user_store)):
    require_valid_id(id, "user")
    with storage_guard("Error deleting user"):
        removed = users.delete_by_id(id)
    if not removed:
        raise ServiceError(ErrorCode.NOT_FOUND, "User not found")
    logger.info("user %s deleted", id)
    return envelope("User deleted successfully", user=_user_payload(removed))
