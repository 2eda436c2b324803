from .base import Base
from .connection import SessionLocal, engine

__all__ = ["Base", "SessionLocal", "engine"]
