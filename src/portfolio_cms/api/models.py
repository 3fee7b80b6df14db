"""Request bodies accepted by the JSON API."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# Passwords stay plain ``str`` so surrounding whitespace is part of the secret.
Text = Annotated[str, StringConstraints(strip_whitespace=True)]


class _RequestModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class LoginRequest(_RequestModel):
    username: Text | None = None
    password: str | None = None


class ChangePasswordRequest(_RequestModel):
    current_password: str | None = None
    new_password: str | None = None


class CreateUserRequest(_RequestModel):
    username: Text | None = None
    email: Text | None = None
    password: str | None = None
    role: Text | None = None


class UpdateUserRequest(_RequestModel):
    username: Text | None = None
    email: Text | None = None
    password: str | None = None
    role: Text | None = None


class CreatePhotoRequest(_RequestModel):
    title: Text | None = None
    description: Text | None = None
    category_id: int | None = None
    file_url: Text | None = None
    thumbnail_url: Text | None = None
    width: int | None = None
    height: int | None = None
    tags: list[str] = []


class UpdatePhotoRequest(_RequestModel):
    """Partial update; only fields present in the body are applied."""

    title: Text | None = None
    description: Text | None = None
    category_id: int | None = None
    file_url: Text | None = None
    thumbnail_url: Text | None = None
    width: int | None = None
    height: int | None = None
    tags: list[str] | None = None


class CategoryRequest(_RequestModel):
    name: Text | None = None
    description: Text | None = None


class CreateArticleRequest(_RequestModel):
    title: Text | None = None
    content: str | None = None
    summary: Text | None = None
    featured_image: Text | None = None
    category_id: int | None = None
    published: bool = False
    tags: list[str] = []


class UpdateArticleRequest(_RequestModel):
    """Partial update; only fields present in the body are applied."""

    title: Text | None = None
    content: str | None = None
    summary: Text | None = None
    featured_image: Text | None = None
    category_id: int | None = None
    published: bool | None = None
    tags: list[str] | None = None


class SiteSettingsRequest(_RequestModel):
    """Site settings in the camelCase shape the admin panel sends."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    site_name: Text | None = Field(default=None, alias="siteName")
    site_description: Text | None = Field(default=None, alias="siteDescription")
    contact_email: Text | None = Field(default=None, alias="contactEmail")
    logo_url: Text | None = Field(default=None, alias="logoUrl")
    primary_color: Text | None = Field(default=None, alias="primaryColor")
    secondary_color: Text | None = Field(default=None, alias="secondaryColor")
    social_media: dict[str, str] | None = Field(default=None, alias="socialMedia")
    meta_tags: dict[str, str] | None = Field(default=None, alias="metaTags")
