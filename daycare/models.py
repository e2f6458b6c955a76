import enum
import uuid
from datetime import datetime

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_id():
    """Generate a unique string ID used as primary key"""
    return str(uuid.uuid4())


class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    USER = "USER"
    DEMO = "DEMO"


class Gender(str, enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class CheckInStatus(str, enum.Enum):
    NOT_CHECKED_IN = "NOT_CHECKED_IN"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"


class RoleRequestStatus(str, enum.Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class NotificationType(str, enum.Enum):
    ROLE_REQUEST = "ROLE_REQUEST"
    VACCINATION = "VACCINATION"
    OTHER = "OTHER"


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=True)
    role = Column(String(20), default=Role.USER.value, nullable=False)  # ADMIN, USER, DEMO
    email_verified = Column(DateTime, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    role_requests = relationship(
        "RoleRequest", back_populates="user", foreign_keys="RoleRequest.user_id"
    )
    notification_read_states = relationship(
        "NotificationReadState", back_populates="user", cascade="all, delete-orphan"
    )


class Owner(Base):
    __tablename__ = "owners"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    mobile = Column(String(50), nullable=True)
    work_phone = Column(String(50), nullable=True)
    address = Column(Text, nullable=True)
    emergency_contact = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    canines = relationship("Canine", back_populates="owner", cascade="all, delete-orphan")
    bookings = relationship("Booking", back_populates="owner", cascade="all, delete-orphan")


class Canine(Base):
    __tablename__ = "canines"

    id = Column(String(36), primary_key=True, default=generate_id)
    owner_id = Column(
        String(36), ForeignKey("owners.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    breed = Column(String(255), nullable=False)
    date_of_birth = Column(DateTime, nullable=False)
    gender = Column(String(10), nullable=False)  # MALE, FEMALE
    color = Column(String(100), nullable=False)
    microchip_number = Column(String(100), nullable=True)
    spayed = Column(Boolean, default=False, nullable=False)
    notes = Column(Text, nullable=True)
    vet_name = Column(String(255), nullable=True)
    vet_phone = Column(String(50), nullable=True)
    vet_address = Column(Text, nullable=True)
    # Free-form questionnaires captured by the intake form
    social_skills = Column(JSON, nullable=True)
    behaviour = Column(JSON, nullable=True)
    health = Column(JSON, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    owner = relationship("Owner", back_populates="canines")
    bookings = relationship("Booking", back_populates="canine", cascade="all, delete-orphan")
    vaccinations = relationship(
        "Vaccination", back_populates="canine", cascade="all, delete-orphan"
    )


class Vaccination(Base):
    __tablename__ = "vaccinations"

    id = Column(String(36), primary_key=True, default=generate_id)
    canine_id = Column(
        String(36), ForeignKey("canines.id", ondelete="CASCADE"), nullable=False, index=True
    )
    dhpp = Column(DateTime, nullable=True)
    lepto = Column(DateTime, nullable=True)
    kc = Column(DateTime, nullable=True)
    fleaed = Column(Boolean, default=False, nullable=False)

    canine = relationship("Canine", back_populates="vaccinations")


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=generate_id)
    # Denormalized owner reference kept for query convenience
    owner_id = Column(
        String(36), ForeignKey("owners.id", ondelete="CASCADE"), nullable=False, index=True
    )
    canine_id = Column(
        String(36), ForeignKey("canines.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = Column(DateTime, nullable=False, index=True)  # Midnight UTC
    is_half_day = Column(Boolean, default=False, nullable=False)
    overnight_stay = Column(Boolean, default=False, nullable=False)
    previous_booking_date = Column(DateTime, nullable=True)
    check_in_status = Column(
        String(20), default=CheckInStatus.NOT_CHECKED_IN.value, nullable=False
    )  # NOT_CHECKED_IN, CHECKED_IN, CHECKED_OUT
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    owner = relationship("Owner", back_populates="bookings")
    canine = relationship("Canine", back_populates="bookings")


class ShopItem(Base):
    __tablename__ = "shop_items"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Integer, nullable=False)  # Minor units (cents)
    stock = Column(Integer, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())


class RoleRequest(Base):
    __tablename__ = "role_requests"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    requested_role = Column(String(20), nullable=False)
    reason = Column(Text, nullable=False)
    status = Column(
        String(20), default=RoleRequestStatus.PENDING.value, nullable=False
    )  # PENDING, ACCEPTED, REJECTED
    approved_at = Column(DateTime, nullable=True)
    rejected_at = Column(DateTime, nullable=True)
    handled_by_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="role_requests", foreign_keys=[user_id])
    handled_by = relationship("User", foreign_keys=[handled_by_id])
    notifications = relationship("Notification", back_populates="request")


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True, default=generate_id)
    type = Column(String(30), nullable=False)  # ROLE_REQUEST, VACCINATION, OTHER
    title = Column(String(255), nullable=False)
    message = Column(String(255), nullable=True)
    # "metadata" is reserved on declarative classes
    extra = Column("metadata", JSON, nullable=True)
    requested_by_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    request_id = Column(
        String(36), ForeignKey("role_requests.id", ondelete="CASCADE"), nullable=True
    )
    canine_id = Column(String(36), ForeignKey("canines.id", ondelete="SET NULL"), nullable=True)
    handled_by_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    handled_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    requested_by = relationship("User", foreign_keys=[requested_by_id])
    handled_by = relationship("User", foreign_keys=[handled_by_id])
    request = relationship("RoleRequest", back_populates="notifications")
    canine = relationship("Canine")
    read_states = relationship(
        "NotificationReadState", back_populates="notification", cascade="all, delete-orphan"
    )


class NotificationReadState(Base):
    __tablename__ = "notification_read_states"

    id = Column(String(36), primary_key=True, default=generate_id)
    notification_id = Column(
        String(36), ForeignKey("notifications.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    read = Column(Boolean, default=False, nullable=False)
    read_at = Column(DateTime, nullable=True)

    notification = relationship("Notification", back_populates="read_states")
    user = relationship("User", back_populates="notification_read_states")
