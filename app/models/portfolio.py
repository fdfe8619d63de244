from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, JSON, ForeignKey
from app.db.session import Base
from datetime import datetime
import uuid


def generate_share_token():
    return uuid.uuid4().hex


class Portfolio(Base):
    __tablename__ = "portfolios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    userId = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    name = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    bio = Column(Text)
    email = Column(Text, nullable=False)
    phone = Column(Text)
    location = Column(Text)
    website = Column(Text)
    templateId = Column(String(50))
    skills = Column(JSON, default=list)
    projects = Column(JSON, default=list)
    experience = Column(JSON, default=list)
    education = Column(JSON, default=list)
    resumeUrl = Column(Text)
    profileImage = Column(Text)
    isPublic = Column(Boolean, default=True)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)


class PortfolioShare(Base):
    __tablename__ = "portfolio_shares"

    id = Column(Integer, primary_key=True, autoincrement=True)
    portfolioId = Column(Integer, ForeignKey("portfolios.id", ondelete="CASCADE"), nullable=False, index=True)
    token = Column(String(64), unique=True, nullable=False, default=generate_share_token)
    views = Column(Integer, default=0)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)


class Template(Base):
    __tablename__ = "templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    templateId = Column(String(100), unique=True, nullable=False, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    version = Column(String(50), nullable=False)
    category = Column(String(50), nullable=False)
    thumbnailUrl = Column(Text)
    manifestPath = Column(Text, nullable=False)
    entryFile = Column(Text, nullable=False)
    features = Column(JSON, default=list)
    isPremium = Column(Boolean, default=False)
    isActive = Column(Boolean, default=True)
    uploadedBy = Column(Integer, ForeignKey("users.id"), nullable=True)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)
    updatedAt = Column(DateTime, default=datetime.now, onupdate=datetime.now)
