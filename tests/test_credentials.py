"""
Tests for the Credential Store

Business Rules:
- Usernames are unique (case-sensitive)
- Passwords are stored only as bcrypt hashes
- Unknown username and wrong password fail with the same error
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from review_api.errors import DuplicateUsername, InvalidCredentials
from review_api.models import User
from review_api.services.credentials import authenticate_user, register_user


class TestRegisterUser:
    def test_register_persists_hash_not_plaintext(self, db_session: Session):
        user = register_user(db_session, "moe", "m_pw")

        assert user.id is not None
        assert user.username == "moe"
        assert user.password_hash != "m_pw"

    def test_register_generates_distinct_ids(self, db_session: Session):
        moe = register_user(db_session, "moe", "m_pw")
        lucy = register_user(db_session, "lucy", "l_pw")

        assert moe.id != lucy.id

    def test_duplicate_username_rejected(self, db_session: Session, moe: User):
        with pytest.raises(DuplicateUsername):
            register_user(db_session, "moe", "other_pw")

        count = db_session.execute(
            select(func.count()).select_from(User).where(User.username == "moe")
        ).scalar()
        assert count == 1

    def test_session_usable_after_duplicate(self, db_session: Session, moe: User):
        with pytest.raises(DuplicateUsername):
            register_user(db_session, "moe", "other_pw")

        lucy = register_user(db_session, "lucy", "l_pw")
        assert lucy.username == "lucy"

    def test_usernames_are_case_sensitive(self, db_session: Session, moe: User):
        other = register_user(db_session, "Moe", "M_pw")

        assert other.id != moe.id


class TestAuthenticateUser:
    def test_correct_password(self, db_session: Session, moe: User):
        user = authenticate_user(db_session, "moe", "m_pw")

        assert user.id == moe.id

    def test_wrong_password(self, db_session: Session, moe: User):
        with pytest.raises(InvalidCredentials):
            authenticate_user(db_session, "moe", "wrong")

    def test_unknown_username(self, db_session: Session, moe: User):
        with pytest.raises(InvalidCredentials):
            authenticate_user(db_session, "nobody", "m_pw")

    def test_unknown_and_wrong_password_are_indistinguishable(
        self, db_session: Session, moe: User
    ):
        with pytest.raises(InvalidCredentials) as unknown:
            authenticate_user(db_session, "nobody", "m_pw")
        with pytest.raises(InvalidCredentials) as wrong:
            authenticate_user(db_session, "moe", "wrong")

        assert type(unknown.value) is type(wrong.value)
        assert unknown.value.message == wrong.value.message

    def test_each_user_verifies_only_own_password(self, db_session: Session, moe: User, lucy: User):
        assert authenticate_user(db_session, "lucy", "l_pw").id == lucy.id

        with pytest.raises(InvalidCredentials):
            authenticate_user(db_session, "lucy", "m_pw")
