from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from app.db.session import Base
from datetime import datetime


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(Text, nullable=False)
    role = Column(String(50), nullable=False, default="user")
    createdAt = Column(DateTime, default=datetime.now, nullable=False)


class SolvedProblem(Base):
    __tablename__ = "solved_problems"

    id = Column(Integer, primary_key=True, autoincrement=True)
    userId = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    problemId = Column(Integer, ForeignKey("dsa_problems.id"), nullable=False, index=True)
    solvedAt = Column(DateTime, default=datetime.now, nullable=False)
