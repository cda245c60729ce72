"""Typed page records used to build route tables.

The pages endpoint returns loosely shaped JSON. Each record is validated here
and either becomes a typed record or is skipped.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)


class PageRouteRecord(BaseModel):
    """Page projection used for the id -> route table."""
    
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    
    id: str = Field(alias="_id", min_length=1)
    route: Optional[str] = Field(default=None, alias="_r")
    slug: Optional[str] = None
    
    @property
    def link_key(self) -> str:
        """Symbolic ``pages://<id>`` reference for this page."""
        return f"pages://{self.id}"


class PageDataRef(BaseModel):
    """Nested ``data`` field naming the collection or singleton a page shows."""
    
    model_config = ConfigDict(extra="ignore")
    
    collection: Optional[str] = None
    singleton: Optional[str] = None


class PageSlugRecord(BaseModel):
    """Page projection used for the entity name -> route table."""
    
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    
    data: Optional[PageDataRef] = None
    route: Optional[str] = Field(default=None, alias="_r")
    type: Optional[str] = None
    
    @property
    def entity_name(self) -> Optional[str]:
        """Collection name, falling back to singleton name."""
        if self.data is None:
            return None
        if self.data.collection is not None:
            return self.data.collection
        return self.data.singleton


def parse_route_record(item: Any) -> Optional[PageRouteRecord]:
    """Validate a raw page item, returning None to skip it."""
    try:
        return PageRouteRecord.model_validate(item)
    except PydanticValidationError as e:
        logger.debug(f"Skipping page record without usable id: {e.error_count()} error(s)")
        return None


def parse_slug_record(item: Any) -> Optional[PageSlugRecord]:
    """Validate a raw page item, returning None to skip it."""
    try:
        return PageSlugRecord.model_validate(item)
    except PydanticValidationError as e:
        logger.debug(f"Skipping malformed page record: {e.error_count()} error(s)")
        return None
