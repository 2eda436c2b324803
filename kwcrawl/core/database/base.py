# File: kwcrawl/core/database/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Registry for persisted crawl jobs. Models inherit from this."""
