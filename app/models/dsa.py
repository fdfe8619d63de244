from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, JSON
from app.db.session import Base
from datetime import datetime


class DsaProblem(Base):
    __tablename__ = "dsa_problems"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    difficulty = Column(String(50), nullable=False)
    category = Column(String(100), nullable=False)
    solution = Column(Text)
    hints = Column(JSON, default=list)
    timeComplexity = Column(Text)
    spaceComplexity = Column(Text)
    tags = Column(JSON, default=list)
    companies = Column(JSON, default=list)
    isPublished = Column(Boolean, default=True)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)


class DsaTopic(Base):
    __tablename__ = "dsa_topics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    difficulty = Column(String(50))
    problemCount = Column(Integer, default=0)
    concepts = Column(JSON, default=list)
    resources = Column(JSON, default=list)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)


class DsaCompany(Base):
    __tablename__ = "dsa_companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    logo = Column(Text)
    problemCount = Column(Integer, default=0)
    difficulty = Column(String(50))
    categories = Column(JSON, default=list)
    tips = Column(JSON, default=list)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)


class DsaSheet(Base):
    __tablename__ = "dsa_sheets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    creator = Column(Text)
    # official, public or community
    type = Column(String(50), default="public")
    problemCount = Column(Integer, default=0)
    difficulty = Column(String(50))
    topics = Column(JSON, default=list)
    learningPath = Column(Text)
    createdAt = Column(DateTime, default=datetime.now, nullable=False)
