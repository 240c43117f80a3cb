from datetime import datetime, UTC

from tasktracker.models.user import User
from tasktracker.stores.base import Store, as_document, storage_call
from tasktracker.utils.ids import new_id

PASSWORD_FIELD = ("password",)


class UserStore(Store):
    @storage_call
    def create(self, record: dict) -> dict:
        user = User(
            id=new_id(),
            first_name=record.get("first_name"),
            last_name=record.get("last_name"),
            email=record.get("email"),
            password=record.get("password"),
            created_at=datetime.now(UTC),
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return as_document(user)

    @storage_call
    def find_by_email(self, email: str):
        """Includes the password hash; only login should need this."""
        return as_document(self.db.query(User).filter(User.email == email).first())

    @storage_call
    def find_by_id(self, user_id: str):
        return as_document(self.db.get(User, user_id), exclude=PASSWORD_FIELD)

    @storage_call
    def list_all(self, exclude_password: bool = True) -> list:
        exclude = PASSWORD_FIELD if exclude_password else ()
        users = self.db.query(User).order_by(User.created_at).all()
        return [as_document(u, exclude=exclude) for u in users]

    @storage_call
    def replace_by_id(self, user_id: str, record: dict):
        user = self.db.get(User, user_id)
        if user is None:
            return None
        self._overwrite(user, record)
        self.db.commit()
        self.db.refresh(user)
        return as_document(user, exclude=PASSWORD_FIELD)

    @storage_call
    def delete_by_id(self, user_id: str):
        user = self.db.get(User, user_id)
        if user is None:
            return None
        removed = as_document(user, exclude=PASSWORD_FIELD)
        self.db.delete(user)
        self.db.commit()
        return removed
