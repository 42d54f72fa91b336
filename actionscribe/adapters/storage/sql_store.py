"""SQLAlchemy action store — implements ActionStorePort.

The store is the single source of truth for actions and owns the one
authoritative display order: incomplete first, newest first.
"""

from datetime import datetime, timezone
from typing import List

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker
from sqlalchemy.pool import StaticPool

from actionscribe.domain.errors import Forbidden, InvalidAction, NotFound
from actionscribe.domain.models import Action
from actionscribe.ports.inbound import Identity

Base = declarative_base()


# ---------- Tables ----------

class UserRecord(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)

    actions = relationship("ActionRecord", back_populates="user")


class ActionRecord(Base):
    __tablename__ = "actions"

    id = Column(Integer, primary_key=True, index=True)
    action_id = Column(String, unique=True, index=True, nullable=False)
    text = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    user = relationship("UserRecord", back_populates="actions")


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_action(record: ActionRecord) -> Action:
    return Action(
        id=record.action_id,
        text=record.text,
        timestamp=_as_utc(record.timestamp),
        owner_id=str(record.user_id),
        completed=bool(record.completed),
    )


def make_engine(database_url: str):
    """Create an engine; in-memory SQLite shares one connection across threads."""
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url)


class SqlActionStore:
    """Relational action store keyed by owning user."""

    def __init__(self, database_url: str = "sqlite:///actionscribe.db"):
        self.engine = make_engine(database_url)
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init_db(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    # ---------- Users ----------

    def ensure_user(self, email: str) -> str:
        """Return the user's id, creating the row on first sight."""
        email = email.strip().lower()
        with self._session_factory() as db:
            user = db.query(UserRecord).filter(UserRecord.email == email).first()
            if user is None:
                user = UserRecord(email=email)
                db.add(user)
                db.commit()
                db.refresh(user)
            return str(user.id)

    def _user(self, db, identity: Identity) -> UserRecord:
        user = (
            db.query(UserRecord)
            .filter(UserRecord.email == identity.email.strip().lower())
            .first()
        )
        if user is None:
            raise NotFound("User not found")
        return user

    def owner_id(self, identity: Identity) -> str:
        with self._session_factory() as db:
            return str(self._user(db, identity).id)

    def _owned_record(self, db, identity: Identity, action_id: str) -> ActionRecord:
        user = self._user(db, identity)
        record = db.query(ActionRecord).filter(ActionRecord.action_id == action_id).first()
        if record is None:
            raise NotFound(f"Action not found: {action_id}")
        if record.user_id != user.id:
            raise Forbidden(f"Action {action_id} belongs to another user")
        return record

    # ---------- Actions ----------

    def list(self, identity: Identity) -> List[Action]:
        with self._session_factory() as db:
            user = self._user(db, identity)
            records = (
                db.query(ActionRecord)
                .filter(ActionRecord.user_id == user.id)
                .order_by(
                    ActionRecord.completed.asc(),
                    ActionRecord.timestamp.desc(),
                    ActionRecord.id.desc(),
                )
                .all()
            )
            return [_to_action(r) for r in records]

    def create(self, identity: Identity, text: str) -> Action:
        with self._session_factory() as db:
            owner = str(self._user(db, identity).id)
        return self.add(identity, Action.new(owner, text))

    def add(self, identity: Identity, action: Action) -> Action:
        """Persist an action built elsewhere (e.g. by the merger)."""
        if not action.text.strip():
            raise InvalidAction("Action text must not be empty")
        with self._session_factory() as db:
            user = self._user(db, identity)
            if action.owner_id and action.owner_id != str(user.id):
                raise Forbidden("Cannot store an action for another user")
            record = ActionRecord(
                action_id=action.id,
                text=action.text.strip(),
                timestamp=action.timestamp,
                completed=action.completed,
                user_id=user.id,
            )
            db.add(record)
            db.commit()
            db.refresh(record)
            return _to_action(record)

    def update_completion(self, identity: Identity, action_id: str, completed: bool) -> Action:
        with self._session_factory() as db:
            record = self._owned_record(db, identity, action_id)
            record.completed = bool(completed)
            db.commit()
            db.refresh(record)
            return _to_action(record)

    def delete(self, identity: Identity, action_id: str) -> None:
        with self._session_factory() as db:
            record = self._owned_record(db, identity, action_id)
            db.delete(record)
            db.commit()

