"""Blog post model for fixture data."""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class BlogPost(BaseModel):
    """A published blog post as the site automation tests expect to find it.

    ``tags`` is ``None`` when the post carries no tags field at all, which is
    distinct from an empty tuple.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Human-readable headline")
    permalink_id: str = Field(..., description="URL-safe slug of the post")
    tags: Optional[Tuple[str, ...]] = Field(None, description="Tag labels in display order")

    @property
    def has_tags(self) -> bool:
        """Whether the post declares a tags field, even an empty one."""
        return self.tags is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict, omitting ``tags`` when it is absent."""
        data = self.model_dump()
        if self.has_tags:
            data["tags"] = list(self.tags)
        else:
            del data["tags"]
        return data
