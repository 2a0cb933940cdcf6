from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


class PostImage(BaseModel):
    url: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class PostAuthor(BaseModel):
    name: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class PostPayload(BaseModel):
    """Subset of the posts API response used for previews."""

    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[PostImage] = None
    created_by: Optional[PostAuthor] = Field(default=None, alias="createdBy")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("image", "created_by", mode="wrap")
    @classmethod
    def _drop_malformed_nested(
        cls, value: Any, handler: ValidatorFunctionWrapHandler
    ) -> Any:
        # unpopulated references arrive as ids or strings
        try:
            return handler(value)
        except ValidationError:
            return None


class PostPreview(BaseModel):
    title: str
    description: str
    image_url: str
    canonical_url: str
    author_name: str

    model_config = ConfigDict(frozen=True)
