"""SQLAlchemy models for tenant companies, design configuration and CMS content. Use Alembic for migrations."""
from __future__ import annotations

from datetime import datetime
from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from models import LeaderRole

from .session import Base


class Company(Base):
    __tablename__ = "companies"

    id = Column(String, primary_key=True)
    slug = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    ticker = Column(String, nullable=True)
    tagline = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    logo_url = Column("logo_url", String, nullable=True)
    website = Column(String, nullable=True)
    primary_font_family = Column("primary_font_family", String, nullable=True)
    secondary_font_family = Column("secondary_font_family", String, nullable=True)
    market_cap = Column("market_cap", Float, nullable=True)
    employee_count = Column("employee_count", Integer, nullable=True)
    founded_year = Column("founded_year", Integer, nullable=True)
    ir_email = Column("ir_email", String, nullable=True)
    ir_phone = Column("ir_phone", String, nullable=True)
    address = Column(String, nullable=True)
    template_id = Column("template_id", String, ForeignKey("templates.id", ondelete="SET NULL"), nullable=True)
    theme_id = Column("theme_id", String, ForeignKey("themes.id", ondelete="SET NULL"), nullable=True)
    created_at = Column("created_at", DateTime, default=datetime.utcnow)
    updated_at = Column("updated_at", DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    template = relationship("Template")
    theme = relationship("Theme")
    press_releases = relationship("PressRelease", back_populates="company")
    leaders = relationship("Leader", back_populates="company")


class Template(Base):
    __tablename__ = "templates"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    layout = Column(String, nullable=False, default="esg-guardian")
    hidden_components = Column("hidden_components", JSONB, default=list)
    settings = Column(JSONB, default=dict)
    created_at = Column("created_at", DateTime, default=datetime.utcnow)
    updated_at = Column("updated_at", DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Theme(Base):
    __tablename__ = "themes"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    colors = Column(JSONB, default=dict)
    typography = Column(JSONB, default=dict)
    created_at = Column("created_at", DateTime, default=datetime.utcnow)
    updated_at = Column("updated_at", DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class PressRelease(Base):
    __tablename__ = "press_releases"

    id = Column(String, primary_key=True)
    company_id = Column("company_id", String, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    title = Column(String, nullable=False)
    summary = Column(Text, nullable=True)
    url = Column(String, nullable=True)
    published_at = Column("published_at", Date, nullable=True)
    created_at = Column("created_at", DateTime, default=datetime.utcnow)

    company = relationship("Company", back_populates="press_releases")


class Leader(Base):
    __tablename__ = "leaders"

    id = Column(String, primary_key=True)
    company_id = Column("company_id", String, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    title = Column(String, nullable=True)
    role = Column(String, nullable=False, default=LeaderRole.EXECUTIVE.value)
    bio = Column(Text, nullable=True)
    photo_url = Column("photo_url", String, nullable=True)
    sort_order = Column("sort_order", Integer, nullable=False, default=0)
    created_at = Column("created_at", DateTime, default=datetime.utcnow)

    company = relationship("Company", back_populates="leaders")
