"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Role(str, Enum):
    CUSTOMER = "CUSTOMER"
    PROVIDER = "PROVIDER"
    ADMIN = "ADMIN"
