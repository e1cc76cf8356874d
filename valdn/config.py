import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from valdn.exceptions.common_exceptions import InvalidConfigException

# Key under which per-field rule annotations are stored
# (pydantic `json_schema_extra` / dataclass `metadata`)
TAG_NAME = os.getenv("VALDN_TAG_NAME", "valdn")

# Separator between rule expressions inside one annotation, e.g. "required|min:3"
TAG_SEPARATOR = os.getenv("VALDN_TAG_SEPARATOR", "|")

# Fixed separators of the path and rule expression syntax
PATH_SEPARATOR = "."
RULE_PARAM_SEPARATOR = ":"
WILDCARD = "*"


class ValidationConfig(BaseModel):
    """Settings carried by a validation session.

    Passed explicitly to every entry point; there is no global mutable state.
    """

    model_config = ConfigDict(frozen=True)

    tag_name: str = Field(default_factory=lambda: TAG_NAME)
    tag_separator: str = Field(default_factory=lambda: TAG_SEPARATOR)

    @field_validator("tag_name")
    @classmethod
    def _check_tag_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("tag_name must not be empty")
        return value

    @field_validator("tag_separator")
    @classmethod
    def _check_tag_separator(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("tag_separator must be a single character")
        if value in (PATH_SEPARATOR, RULE_PARAM_SEPARATOR):
            raise ValueError(f"tag_separator must differ from `{PATH_SEPARATOR}` and `{RULE_PARAM_SEPARATOR}`")
        return value

    def split_rules(self, annotation: str) -> list[str]:
        return annotation.split(self.tag_separator)


def load_config(**overrides) -> ValidationConfig:
    """Build a config, reporting bad settings as a configuration error.

    Raises:
        InvalidConfigException: If a setting is rejected.
    """
    try:
        return ValidationConfig(**overrides)
    except ValidationError as e:
        raise InvalidConfigException("; ".join(err["msg"] for err in e.errors())) from e
