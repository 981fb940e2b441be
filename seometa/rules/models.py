from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

ROBOTS_LITERALS: dict[str, tuple[str, str]] = {
    "robots_index": ("index", "noindex"),
    "robots_follow": ("follow", "nofollow"),
}


class DefaultsRules(BaseModel):
    title: str | None = None
    title_before: bool = Field(default=False, alias="titleBefore")
    separator: str = " - "
    description: str | None = None
    keywords: list[str] = Field(default_factory=list)
    # None -> current request URL, False -> no canonical, str -> fixed URL
    canonical: bool | str | None = False
    robots_index: bool | str | None = None
    robots_follow: bool | str | None = None

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    @field_validator("canonical")
    @classmethod
    def _check_canonical(cls, value: bool | str | None) -> bool | str | None:
        if value is True:
            raise ValueError("canonical must be false, null or a URL")
        return value

    @field_validator("robots_index", "robots_follow")
    @classmethod
    def _check_robots(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or isinstance(value, bool):
            return value
        if value in ROBOTS_LITERALS[info.field_name]:
            return value
        raise ValueError(f"{info.field_name} must be one of {ROBOTS_LITERALS[info.field_name]}")


class SeoRules(BaseModel):
    defaults: DefaultsRules = Field(default_factory=DefaultsRules)
    webmaster_tags: dict[str, str | None] = Field(default_factory=dict)
    add_notranslate_class: bool = False

    model_config = ConfigDict(coerce_numbers_to_str=True)
