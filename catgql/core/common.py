import json
from typing import Type, TypeVar
from pydantic import BaseModel, ConfigDict, ValidationError
from catgql.core.logger import setup_logger

logger = setup_logger(__name__, include_location=True)


class AppBaseModel(BaseModel):
    """
    Base Pydantic model with common configuration.

    Fields are populated by either their Python name or their JSON alias, so
    models accept `picUrl` from the wire and `pic_url` from code.
    """
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


T = TypeVar("T", bound=BaseModel)


def transform(class_constructor: Type[T], arg: dict) -> T:
    """
    Validate a dict into a Pydantic model instance with error logging.

    Raises:
        ValidationError: If the data does not conform to the model.
    """
    try:
        return class_constructor.model_validate(arg)
    except ValidationError as e:
        logger.debug(
            f"{class_constructor.__name__} Validation error: "
            f"{json.dumps(e.errors(include_input=False, include_url=False), default=str)}"
        )
        raise


def describe_validation_error(error: ValidationError) -> str:
    """One-line summary of a ValidationError, e.g. `cat.colour: Input should be ...`."""
    parts = []
    for item in error.errors(include_input=False, include_url=False):
        location = ".".join(str(p) for p in item.get("loc", ())) or "body"
        parts.append(f"{location}: {item.get('msg', 'invalid value')}")
    return "; ".join(parts)
