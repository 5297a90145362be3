import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from taskdesk.database import get_db
from taskdesk.errors import (
    InvalidPasswordError,
    MissingFieldsError,
    NoSuchUserError,
    PasswordTooLongError,
    UserExistsError,
)
from taskdesk.models.user import User
from taskdesk.schemas.user import MessageResponse, SigninRequest, SigninResponse, SignupRequest
from taskdesk.utils.auth import PasswordTooLong, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _find_user(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()


@router.post("/signup", response_model=MessageResponse, status_code=201)
def signup(body: SignupRequest, db: Session = Depends(get_db)):
    if not body.emailid or not body.password:
        raise MissingFieldsError()

    if _find_user(db, body.emailid):
        raise UserExistsError()

    try:
        hashed = hash_password(body.password)
    except PasswordTooLong as e:
        raise PasswordTooLongError(str(e))

    new_user = User(name=body.name, email=body.emailid, password=hashed)
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race with a concurrent signup for the same email
        db.rollback()
        raise UserExistsError()

    logger.info("Created user id=%s", new_user.id)
    return {"message": "User created successfully"}


@router.post("/signin", response_model=SigninResponse)
def signin(body: SigninRequest, db: Session = Depends(get_db)):
    if not body.emailid or not body.password:
        raise MissingFieldsError()

    db_user = _find_user(db, body.emailid)
    if not db_user:
        raise NoSuchUserError()
    if not verify_password(body.password, db_user.password):
        raise InvalidPasswordError()

    return {"message": "Login successful", "user": db_user.id}
