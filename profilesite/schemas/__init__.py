"""
Profile site schemas.

Pydantic models for request validation.
"""

from profilesite.schemas.auth import *
from profilesite.schemas.content import *
from profilesite.schemas.ai import *
