"""Value models for badgegen."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class BadgeUrlStrategy(StrEnum):
    """Encoding used for the badge image URL.

    See https://shields.io/badges/static-badge
    """

    DASH = "dash"
    PARAMS = "params"


class StyleParams(BaseModel):
    """Optional style modifiers layered onto either URL strategy."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    style: str | None = Field(None, description="Badge style, e.g. 'for-the-badge'")
    logo: str | None = Field(None, description="Simple Icons slug for the logo")
    logo_color: str | None = Field(
        None, alias="logoColor", description="Logo color, only sent with a logo"
    )

    def as_query(self) -> dict[str, str]:
        """Return the set fields as query params using the service's names."""
        return self.model_dump(by_alias=True, exclude_none=True)


class GenericBadgeFields(BaseModel):
    """Normalized badge content handed to a URL strategy."""

    model_config = ConfigDict(frozen=True)

    label: str = ""
    message: str
    color: str
    style_params: StyleParams = Field(default_factory=StyleParams)


class BadgeSpec(BaseModel):
    """All inputs for a generic badge, with documented defaults."""

    model_config = ConfigDict(frozen=True)

    label: str = Field("", description="Left-hand text, omitted when empty")
    message: str = Field(..., description="Right-hand text")
    color: str = Field(..., description="Message background color, e.g. 'green' or 'ff69b4'")
    is_large: bool = Field(False, description="Render with the 'for-the-badge' style")
    target: str = Field("", description="Link target wrapped around the image")
    logo: str = Field("", description="Logo name")
    logo_color: str = Field("", description="Logo color, ignored without a logo")
    only_query_params: bool = Field(
        False, description="Use the query-param API instead of the dash-based path"
    )

    @property
    def strategy(self) -> BadgeUrlStrategy:
        """URL strategy selected by ``only_query_params``."""
        return BadgeUrlStrategy.PARAMS if self.only_query_params else BadgeUrlStrategy.DASH
