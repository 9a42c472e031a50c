"""Pydantic schemas for the InnFlow API."""

from innflow.schemas.auth import *
from innflow.schemas.property import *
from innflow.schemas.booking import *
from innflow.schemas.financial import *
from innflow.schemas.admin import *
