from pydantic import BaseModel, Field
from typing import Optional, List, Dict


class WorkOut(BaseModel):
    id: str = Field(..., description="Numeric IMDb title id (without the tt prefix)")
    url: str


class ImageOut(BaseModel):
    thumb: Optional[str] = None
    large: Optional[str] = None


class VideoOut(BaseModel):
    page: str
    embed: str


class PersonProfile(BaseModel):
    id: str
    url: str
    name: Optional[str] = None
    name_alias: Optional[str] = None
    avatar_url: Optional[str] = None
    birthdate: Optional[str] = None
    age: Optional[int] = None
    categories: List[str] = []
    works: Dict[str, List[WorkOut]] = {}
    bio: Optional[str] = None
    images: List[ImageOut] = []
    videos: List[VideoOut] = []
    errors: Dict[str, str] = Field(default_factory=dict, description="Field -> extraction error message")


class WorksResponse(BaseModel):
    person: Dict[str, Optional[str]]
    category: str
    count: int
    items: List[WorkOut]
