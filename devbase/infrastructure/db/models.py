"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

import uuid

from sqlalchemy import Column, DateTime, Enum as SQLEnum, ForeignKey, Index, String
from sqlalchemy.orm import relationship

from devbase.domain.models.base import utcnow
from devbase.domain.models.task import TaskStatus
from devbase.infrastructure.db.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class UserModel(Base):
    """User table"""
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(50))

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    projects = relationship("ProjectModel", back_populates="owner", passive_deletes=True)


class ProjectModel(Base):
    """Project table"""
    __tablename__ = 'projects'

    id = Column(String(36), primary_key=True, default=_new_id)
    owner_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    name = Column(String(80), nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    owner = relationship("UserModel", back_populates="projects")
    tasks = relationship("TaskModel", back_populates="project", passive_deletes=True)

    __table_args__ = (
        Index('ix_projects_owner_created', 'owner_id', 'created_at'),
    )


class TaskModel(Base):
    """Task table"""
    __tablename__ = 'tasks'

    id = Column(String(36), primary_key=True, default=_new_id)
    project_id = Column(String(36), ForeignKey('projects.id', ondelete='CASCADE'), nullable=False)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    title = Column(String(120), nullable=False)
    status = Column(
        SQLEnum(TaskStatus, name='task_status', values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=TaskStatus.TODO
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    project = relationship("ProjectModel", back_populates="tasks")

    __table_args__ = (
        Index('ix_tasks_user_created', 'user_id', 'created_at'),
        Index('ix_tasks_project', 'project_id'),
    )
