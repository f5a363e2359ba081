"""
Persistence table shapes for users and BMI records.

Declared for completeness; the calculator page never reads or writes them.
"""
from sqlalchemy import REAL, Column, DateTime, Integer, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, unique=True, nullable=False)
    password = Column(Text, nullable=False)


class BMIRecord(Base):
    __tablename__ = "bmi_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    age = Column(Integer, nullable=False)
    height = Column(REAL, nullable=False)
    weight = Column(REAL, nullable=False)
    height_unit = Column(Text, nullable=False)  # 'cm' or 'ft'
    weight_unit = Column(Text, nullable=False)  # 'kg' or 'lbs'
    bmi = Column(REAL, nullable=False)
    category = Column(Text, nullable=False)
    created_at = Column(DateTime(), server_default=func.now(), nullable=False)
